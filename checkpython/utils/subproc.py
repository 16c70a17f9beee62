from __future__ import annotations

import shlex
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class RunResult:
    command_str: str
    exit_code: int


def command_str(args: list[str]) -> str:
    return " ".join(shlex.quote(p) for p in args)


def run_tee(args: list[str], *, cwd: str, log_file: Path) -> RunResult:
    """Run *args* with stderr merged into stdout.

    Every output line is echoed to ``sys.stdout`` as it arrives and written to
    *log_file*. OSError from launching the command propagates.
    """

    with log_file.open("w", encoding="utf-8") as log:
        proc = subprocess.Popen(
            args,
            cwd=cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            encoding="utf-8",
            errors="replace",
            bufsize=1,
        )
        assert proc.stdout is not None
        with proc.stdout:
            for chunk in proc.stdout:
                sys.stdout.write(chunk)
                sys.stdout.flush()
                log.write(chunk)
        exit_code = proc.wait()

    return RunResult(command_str=command_str(args), exit_code=exit_code)
