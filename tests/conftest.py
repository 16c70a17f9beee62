from __future__ import annotations

import sys
from pathlib import Path

import pytest


ROOT = Path(__file__).resolve().parents[1]

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("PYTHON_BIN", raising=False)
    monkeypatch.delenv("CHECKPYTHON_DEBUG", raising=False)


@pytest.fixture
def python_step():
    """Factory for steps that run a short Python snippet instead of a real tool."""

    from checkpython.core.model import CheckStep
    from checkpython.steps.extractors import FLAKE8

    def _make(name: str, code: str, *, extractor=FLAKE8, cwd: Path | None = None) -> CheckStep:
        return CheckStep(
            name=name,
            title=f"{name} - fake",
            command=[sys.executable, "-c", code],
            extractor=extractor,
            cwd=cwd,
            install_hint="python3 -m pip install fake",
        )

    return _make
