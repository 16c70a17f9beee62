from __future__ import annotations

from pathlib import Path

from ..core.model import CheckStep
from ..utils.paths import config_dir, python_bin, repo_root
from .extractors import EXTRACTORS


def install_hint() -> str:
    requirements = config_dir() / "requirements-dev.txt"
    try:
        requirements = requirements.relative_to(repo_root())
    except ValueError:
        pass
    return f"{python_bin()} -m pip install -r {requirements}"


def steps(cfg_dir: Path | None = None) -> list[CheckStep]:
    """The fixed checklist, in execution order."""

    cfg = cfg_dir or config_dir()
    hint = install_hint()

    return [
        CheckStep(
            name="flake8",
            title="flake8 - style & errors",
            command=["flake8", ".", "--config", str(cfg / ".flake8")],
            extractor=EXTRACTORS["flake8"],
            install_hint=hint,
        ),
        CheckStep(
            name="mypy",
            title="mypy - type hints",
            command=["mypy", ".", "--config-file", str(cfg / "mypy.ini")],
            extractor=EXTRACTORS["mypy"],
            install_hint=hint,
        ),
        CheckStep(
            name="pydocstyle",
            title="pydocstyle - docstrings",
            command=["pydocstyle", ".", "--config", str(cfg / ".pydocstyle")],
            extractor=EXTRACTORS["pydocstyle"],
            install_hint=hint,
        ),
    ]
