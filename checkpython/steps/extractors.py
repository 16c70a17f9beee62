"""Best-effort issue counters for the output shapes of the supported tools.

A count is a heuristic over captured text, never an authoritative number.
Adding a tool means adding one entry to ``EXTRACTORS``.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Protocol


logger = logging.getLogger(__name__)


class IssueExtractor(Protocol):
    def count(self, text: str) -> int: ...


class LineRegexExtractor:
    """Count lines matching *pattern* (anchored per line)."""

    def __init__(self, pattern: str) -> None:
        self.pattern = re.compile(pattern, re.MULTILINE)

    def count(self, text: str) -> int:
        return sum(1 for _ in self.pattern.finditer(text))

    def __repr__(self) -> str:
        return f"LineRegexExtractor({self.pattern.pattern!r})"


# path:line:col CODE message
FLAKE8 = LineRegexExtractor(r"^[^:\n]+:[0-9]+:[0-9]+: ")

# path:line: error|note: message
MYPY = LineRegexExtractor(r"^[^:\n]+:[0-9]+: (?:error|note): ")

# something.py:line ...
PYDOCSTYLE = LineRegexExtractor(r"^[^:\n]+\.py:[0-9]+")


EXTRACTORS: dict[str, IssueExtractor] = {
    "flake8": FLAKE8,
    "mypy": MYPY,
    "pydocstyle": PYDOCSTYLE,
}


def count_issues(log_file: Path, extractor: IssueExtractor) -> int:
    """Apply *extractor* to the text of *log_file*; 0 when it cannot be read."""

    if not log_file.is_file():
        return 0
    try:
        text = log_file.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        logger.warning("Could not read %s for issue counting: %s", log_file, exc)
        return 0
    return extractor.count(text)
