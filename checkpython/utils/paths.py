from __future__ import annotations

import os
from pathlib import Path


def repo_root() -> Path:
    return Path(__file__).resolve().parents[2]


def config_dir() -> Path:
    """Return the directory holding the per-tool config files."""

    return repo_root() / "checkconfig"


def log_dir() -> Path:
    return config_dir() / "logs"


def python_bin() -> str:
    """Return the interpreter named in install hints.

    Priority:
    - PYTHON_BIN
    - python3
    """

    p = os.environ.get("PYTHON_BIN")
    if p:
        return p
    return "python3"
