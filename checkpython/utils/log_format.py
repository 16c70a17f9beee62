from __future__ import annotations

import time
from pathlib import Path


RUN_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"


def run_timestamp(now: float | None = None) -> str:
    """Return a filename-safe timestamp such as ``20260118_134502``."""

    return time.strftime(RUN_TIMESTAMP_FORMAT, time.localtime(now))


def step_log_file(log_dir: Path, step_name: str, timestamp: str) -> Path:
    return log_dir / f"{step_name}_{timestamp}.log"
