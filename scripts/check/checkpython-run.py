#!/usr/bin/env python3
"""checkpython runner (strict mode).

Runs, from the project root:
  - flake8      (style/errors)
  - mypy        (type hints)
  - pydocstyle  (docstrings)

Every check runs even when an earlier one fails. Output is shown live and
written to checkconfig/logs/<tool>_<YYYYMMDD_HHMMSS>.log; logs of the previous
run are removed first. Any failure makes the run KO (exit 1).

Usage:
  python3 scripts/check/checkpython-run.py
  PYTHON_BIN=python3.12 python3 scripts/check/checkpython-run.py
"""

from __future__ import annotations

import sys
from pathlib import Path


REPO_ROOT = Path(__file__).resolve().parents[2]

if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from checkpython.core.cli import main  # noqa: E402


if __name__ == "__main__":
    raise SystemExit(main())
