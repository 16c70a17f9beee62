from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TextIO


RULE_WIDTH = 30


@dataclass(frozen=True)
class Palette:
    red: str
    green: str
    yellow: str
    bold: str
    reset: str
    ok_sym: str
    ko_sym: str


COLOR = Palette(
    red="\033[31m",
    green="\033[32m",
    yellow="\033[33m",
    bold="\033[1m",
    reset="\033[0m",
    ok_sym="✅",
    ko_sym="❌",
)

PLAIN = Palette(red="", green="", yellow="", bold="", reset="", ok_sym="OK", ko_sym="KO")


def is_tty(stream: TextIO | None = None) -> bool:
    stream = stream if stream is not None else sys.stdout
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


def palette(stream: TextIO | None = None) -> Palette:
    """Colors and emoji only when writing to a terminal."""

    return COLOR if is_tty(stream) else PLAIN


def line() -> None:
    print("=" * RULE_WIDTH)


def sep() -> None:
    print("-" * RULE_WIDTH)


def h1(title: str) -> None:
    line()
    print(title)
    line()


def kv(key: str, value: str) -> None:
    print(f"{key:<12} {value}")


def ok_line(msg: str, pal: Palette | None = None) -> None:
    pal = pal or palette()
    print(f"{pal.green}{pal.ok_sym}{pal.reset} {msg}")


def ko_line(msg: str, pal: Palette | None = None) -> None:
    pal = pal or palette()
    print(f"{pal.red}{pal.ko_sym}{pal.reset} {msg}")
