from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides path normalization and UTF-8 text file I/O used by the CLI to
read the YAML input and persist the generated Go source.
"""

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

DEFAULT_FILE_MODE = 0o644

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str = "") -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path, or an empty string when both the
             input and the fallback are empty.
    """
    p = (path or "").strip() or fallback
    if not p:
        return ""
    return os.path.abspath(os.path.expandvars(os.path.expanduser(p)))

# -----------------------------------------------------------------------------
# FILE I/O API
# -----------------------------------------------------------------------------

def read_text_file(path: str) -> str:
    """
    Read a whole UTF-8 text file.

    Raises:
        OSError: If the file cannot be read.
    """
    with open(path, "r", encoding="utf-8") as f:
        content = f.read()
    logger.debug(f"Read {len(content)} characters from {path}")
    return content


def write_text_file(path: str, content: str, mode: int = DEFAULT_FILE_MODE) -> None:
    """
    Write text to a UTF-8 file, creating parent directories as needed.

    Args:
        path: Destination file.
        content: Text to write.
        mode: Permission bits applied to the file.

    Raises:
        OSError: If the directory or the file cannot be written.
    """
    parent = os.path.dirname(os.path.abspath(path))
    if parent:
        os.makedirs(parent, exist_ok=True)

    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(content)

    # Best-effort
    try:
        os.chmod(path, mode)
    except OSError as e:
        logger.debug(f"Could not set permissions on {path}: {e}")

    logger.debug(f"Wrote {len(content)} characters to {path}")
