from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
from typing import Iterable

from ..steps.step_defs import steps as all_steps
from ..utils.console import ko_line
from ..utils.paths import log_dir, repo_root
from .errors import ToolNotFound
from .runner import run_all
from .summary import print_summary


logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Configure root logging unless the caller already did."""

    if logging.getLogger().handlers:
        return

    level = logging.DEBUG if os.environ.get("CHECKPYTHON_DEBUG") else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def run_checks(project_root: Path | None = None, logs: Path | None = None) -> int:
    try:
        report = run_all(all_steps(), project_root or repo_root(), logs or log_dir())
    except ToolNotFound as exc:
        ko_line(str(exc))
        if exc.install_hint:
            print(f"Install:\n  {exc.install_hint}")
        return 1

    print_summary(report)
    return report.exit_code


def main(argv: Iterable[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="checkpython",
        description="Run flake8, mypy and pydocstyle on the project and summarize (strict: any failure is KO).",
    )
    parser.parse_args(list(argv) if argv is not None else None)

    configure_logging()
    return run_checks()
