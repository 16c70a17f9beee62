from __future__ import annotations

import io

from checkpython.utils import console


class _Tty(io.StringIO):
    def isatty(self) -> bool:
        return True


def test_palette_plain_when_not_a_tty() -> None:
    assert console.palette(io.StringIO()) is console.PLAIN


def test_palette_colored_on_a_tty() -> None:
    assert console.palette(_Tty()) is console.COLOR


def test_closed_stream_is_not_a_tty() -> None:
    stream = io.StringIO()
    stream.close()
    assert console.is_tty(stream) is False


def test_h1_frames_title(capsys) -> None:
    console.h1("flake8 - style & errors")

    out = capsys.readouterr().out.splitlines()
    assert out == ["=" * 30, "flake8 - style & errors", "=" * 30]


def test_ok_and_ko_lines_plain(capsys) -> None:
    console.ok_line("mypy OK", console.PLAIN)
    console.ko_line("mypy FAILED", console.PLAIN)

    assert capsys.readouterr().out.splitlines() == ["OK mypy OK", "KO mypy FAILED"]
