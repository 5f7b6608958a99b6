from __future__ import annotations

"""
Integration tests for the CLI application controller.

Runs the CLI in-process against real files in a temporary directory and
checks exit codes, stdout/stderr and written artifacts.
"""

import json
import logging
from pathlib import Path

import pytest

from yaml2go.infra.logging import shutdown_logging
from yaml2go.infra.logging.core import _CONFIGURED_FLAG_ATTR
from yaml2go.interface.cli.app import main, run_generation

EXPECTED_CONFIG = (
    "type Config struct {\n"
    "\tServer ConfigServer `yaml:\"server\"`\n"
    "}\n"
    "\n"
    "type ConfigServer struct {\n"
    "\tHost string `yaml:\"host\"`\n"
    "\tPort int `yaml:\"port\"`\n"
    "}\n"
    "\n"
)


@pytest.fixture(autouse=True)
def isolated_logging():
    """Each CLI run installs its own handlers bound to the captured streams."""
    yield
    shutdown_logging()
    root = logging.getLogger()
    if hasattr(root, _CONFIGURED_FLAG_ATTR):
        delattr(root, _CONFIGURED_FLAG_ATTR)


@pytest.fixture
def config_yaml(tmp_path: Path) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text("server:\n  port: 80\n  host: x\n", encoding="utf-8")
    return path


def test_generates_to_stdout(config_yaml: Path, capsys) -> None:
    code = main(["-i", str(config_yaml), "--struct", "Config"])
    out = capsys.readouterr().out

    assert code == 0
    assert out == EXPECTED_CONFIG


def test_writes_output_file(config_yaml: Path, tmp_path: Path, capsys) -> None:
    target = tmp_path / "out" / "types.go"
    code = main(["-i", str(config_yaml), "-o", str(target), "--struct", "Config"])
    out = capsys.readouterr().out

    assert code == 0
    assert target.read_text(encoding="utf-8") == EXPECTED_CONFIG
    assert out.strip() == f"Generated struct written to {target}"


def test_default_struct_name_and_json_flag(tmp_path: Path, capsys) -> None:
    src = tmp_path / "in.yaml"
    src.write_text("name: x\n", encoding="utf-8")

    assert main(["-i", str(src), "--json"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("type YAMLToGoStruct struct {\n")
    assert '\tName string `yaml:"name" json:"name"`\n' in out


def test_missing_input_is_usage_error(capsys) -> None:
    assert main([]) == 2
    assert "ERROR: input file is required" in capsys.readouterr().err


def test_unreadable_input_fails(tmp_path: Path, capsys) -> None:
    assert main(["-i", str(tmp_path / "nope.yaml")]) == 1
    assert "failed to read file" in capsys.readouterr().err


@pytest.mark.parametrize("content", ["a: [1, 2\n", "- just\n- a list\n"])
def test_generation_failure_writes_nothing(tmp_path: Path, capsys, content: str) -> None:
    src = tmp_path / "bad.yaml"
    src.write_text(content, encoding="utf-8")
    target = tmp_path / "out.go"

    assert main(["-i", str(src), "-o", str(target)]) == 1
    captured = capsys.readouterr()

    assert "failed to generate go struct" in captured.err
    assert captured.out == ""
    assert not target.exists()


def test_dump_config(capsys) -> None:
    assert main(["-i", "in.yaml", "--struct", "my-root", "--dump-config"]) == 0
    conf = json.loads(capsys.readouterr().out)

    assert conf["input_path"] == "in.yaml"
    assert conf["struct_name"] == "MyRoot"
    assert conf["with_json_tag"] is False


def test_struct_name_is_used_verbatim(config_yaml: Path, tmp_path: Path) -> None:
    target = tmp_path / "out.go"
    assert main(["-i", str(config_yaml), "-o", str(target), "--struct", "config"]) == 0

    code = target.read_text(encoding="utf-8")
    assert code.startswith("type config struct {\n")
    assert "\tServer configServer `yaml:\"server\"`\n" in code
    assert "type configServer struct {\n" in code


def test_strict_rejects_invalid_struct_name(config_yaml: Path, tmp_path: Path, capsys) -> None:
    target = tmp_path / "out.go"
    code = main(["-i", str(config_yaml), "-o", str(target), "--struct", "my-root", "--strict"])

    assert code == 2
    assert "not a valid Go identifier" in capsys.readouterr().err
    assert not target.exists()


def test_run_generation_returns_result(config_yaml: Path, mock_config_dict) -> None:
    mock_config_dict["input_path"] = str(config_yaml)
    result = run_generation(mock_config_dict)

    assert result.ok
    assert result.code == EXPECTED_CONFIG
    assert result.struct_names == ["Config", "ConfigServer"]
    assert result.output_path == ""
