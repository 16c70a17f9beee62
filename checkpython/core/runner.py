from __future__ import annotations

import logging
import shutil
import time
from pathlib import Path

from ..steps.extractors import count_issues
from ..utils.console import h1, ko_line, ok_line
from ..utils.log_format import run_timestamp, step_log_file
from ..utils.subproc import command_str, run_tee
from .errors import DirectoryChangeFailed, ToolNotFound
from .model import CheckStep, RunReport, StepResult, StepStatus


logger = logging.getLogger(__name__)


def require_tools(steps: list[CheckStep]) -> None:
    """Raise ToolNotFound for the first step whose tool is not on PATH."""

    seen: set[str] = set()
    for step in steps:
        if step.tool in seen:
            continue
        seen.add(step.tool)
        resolved = shutil.which(step.tool)
        if resolved is None:
            raise ToolNotFound(step.tool, step.install_hint)
        logger.debug("Resolved %s -> %s", step.tool, resolved)


def prepare_log_dir(log_dir: Path) -> None:
    """Remove logs from previous runs and recreate the directory."""

    if log_dir.exists():
        logger.debug("Purging %s", log_dir)
        shutil.rmtree(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)


def _enter(cwd: Path) -> str:
    if not cwd.is_dir():
        raise DirectoryChangeFailed(str(cwd))
    return str(cwd)


def _working_dir(step: CheckStep, project_root: Path) -> Path:
    if step.cwd is None:
        return project_root
    if step.cwd.is_absolute():
        return step.cwd
    return project_root / step.cwd


def _launch_exit_code(exc: OSError) -> int:
    # Shell conventions: 127 command not found, 126 found but not executable.
    return 127 if isinstance(exc, FileNotFoundError) else 126


def _finish(step: CheckStep, status: StepStatus, duration: float) -> None:
    if status is StepStatus.OK:
        ok_line(f"{step.name} OK ({duration:.1f}s)")
    else:
        ko_line(f"{step.name} FAILED ({duration:.1f}s)")


def run_step(step: CheckStep, *, project_root: Path, log_file: Path) -> StepResult:
    h1(step.title)
    start = time.time()

    try:
        cwd = _enter(_working_dir(step, project_root))
    except DirectoryChangeFailed as exc:
        log_file.write_text(f"{exc}\n", encoding="utf-8")
        print(exc)
        duration = time.time() - start
        _finish(step, StepStatus.DIR_CHANGE_FAILED, duration)
        return StepResult(
            name=step.name,
            log_file=log_file,
            status=StepStatus.DIR_CHANGE_FAILED,
            exit_code=exc.exit_code,
            issues=0,
            duration_s=duration,
        )

    logger.debug("Running %s in %s", command_str(step.command), cwd)
    try:
        exit_code = run_tee(step.command, cwd=cwd, log_file=log_file).exit_code
    except OSError as exc:
        message = f"{step.tool}: cannot execute: {exc}"
        log_file.write_text(f"{message}\n", encoding="utf-8")
        print(message)
        exit_code = _launch_exit_code(exc)

    duration = time.time() - start
    logger.debug("%s exited with %s after %.1fs", step.name, exit_code, duration)

    status = StepStatus.OK if exit_code == 0 else StepStatus.FAILED
    _finish(step, status, duration)

    return StepResult(
        name=step.name,
        log_file=log_file,
        status=status,
        exit_code=exit_code,
        issues=count_issues(log_file, step.extractor),
        duration_s=duration,
    )


def run_all(steps: list[CheckStep], project_root: Path, log_dir: Path) -> RunReport:
    """Run every step once, in order, whatever the earlier steps returned.

    Tool availability is checked first; a missing tool raises ToolNotFound
    before the log directory is touched.
    """

    require_tools(steps)
    prepare_log_dir(log_dir)

    report = RunReport(log_dir=log_dir, timestamp=run_timestamp())

    for step in steps:
        log_file = step_log_file(log_dir, step.name, report.timestamp)
        report.add(run_step(step, project_root=project_root, log_file=log_file))

    return report
