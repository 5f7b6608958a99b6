# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="yaml2go",
    version="0.1.0",
    description="Generate Go struct definitions from YAML documents",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["yaml2go", "yaml2go.*"]),
    install_requires=[
        "ruamel.yaml>=0.17",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'yaml2go=yaml2go.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
