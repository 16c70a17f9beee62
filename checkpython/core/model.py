from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..steps.extractors import IssueExtractor


@dataclass(frozen=True)
class CheckStep:
    name: str
    title: str
    command: list[str]  # command[0] is looked up on PATH
    extractor: IssueExtractor
    cwd: Path | None = None  # None -> project root
    install_hint: str = ""

    @property
    def tool(self) -> str:
        return self.command[0]


class StepStatus(enum.Enum):
    NOT_RUN = "not-run"
    OK = "ok"
    FAILED = "failed"
    DIR_CHANGE_FAILED = "dir-change-failed"


@dataclass(frozen=True)
class StepResult:
    name: str
    log_file: Path
    status: StepStatus
    exit_code: int | None
    issues: int = 0
    duration_s: float = 0.0

    @property
    def ok(self) -> bool:
        return self.status is StepStatus.OK

    @property
    def label(self) -> str:
        if self.status is StepStatus.OK:
            return "OK"
        if self.status is StepStatus.FAILED:
            return f"FAIL({self.exit_code})"
        if self.status is StepStatus.DIR_CHANGE_FAILED:
            return f"CHDIR-FAIL({self.exit_code})"
        return "NOT-RUN"


@dataclass
class RunReport:
    log_dir: Path
    timestamp: str
    results: list[StepResult] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return all(r.ok for r in self.results)

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1

    def add(self, result: StepResult) -> None:
        self.results.append(result)
