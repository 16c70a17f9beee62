from __future__ import annotations

from ..utils.console import Palette, kv, palette, sep
from .model import RunReport, StepResult


def format_status(result: StepResult, pal: Palette) -> str:
    color, sym = (pal.green, pal.ok_sym) if result.ok else (pal.red, pal.ko_sym)
    name = f"{result.name}:"
    return f"{name:<12} {color}{sym} {result.label}{pal.reset} (issues: {result.issues})"


def print_summary(report: RunReport, pal: Palette | None = None) -> None:
    pal = pal or palette()

    sep()
    print(f"{pal.bold}SUMMARY{pal.reset}")
    sep()

    for result in report.results:
        print(format_status(result, pal))

    sep()
    kv("logs:", str(report.log_dir))
    kv("last:", " ".join(f"{r.name}={r.log_file.name}" for r in report.results))
    sep()

    if report.ok:
        print(f"{pal.green}{pal.ok_sym} OK{pal.reset}")
    else:
        print(f"{pal.red}{pal.ko_sym} KO{pal.reset}")
