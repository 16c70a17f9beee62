"""Strict flake8 / mypy / pydocstyle gate with per-run logs and a summary."""
