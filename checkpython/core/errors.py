from __future__ import annotations


class CheckError(RuntimeError):
    """Base class for orchestrator errors."""


class ToolNotFound(CheckError):
    """A required external tool is not on PATH. Fatal for the whole run."""

    def __init__(self, tool: str, install_hint: str = "") -> None:
        self.tool = tool
        self.install_hint = install_hint
        super().__init__(f"Missing tool: {tool}")


class DirectoryChangeFailed(CheckError):
    """A step's working directory could not be entered.

    Raised inside ``run_step`` only; the runner records it as a
    ``DIR_CHANGE_FAILED`` result and moves on to the next step.
    """

    exit_code = 2

    def __init__(self, cwd: str) -> None:
        self.cwd = cwd
        super().__init__(f"cannot change directory to {cwd}")
