from __future__ import annotations

import logging
from pathlib import Path

import pytest

import checkpython.core.cli as cli
from checkpython.core.model import CheckStep
from checkpython.steps.extractors import FLAKE8


@pytest.fixture
def sandbox(tmp_path: Path, monkeypatch):
    monkeypatch.setattr(cli, "repo_root", lambda: tmp_path)
    monkeypatch.setattr(cli, "log_dir", lambda: tmp_path / "logs")
    return tmp_path


def test_main_exit_zero_when_all_steps_pass(sandbox: Path, monkeypatch, python_step, capsys) -> None:
    monkeypatch.setattr(cli, "all_steps", lambda: [python_step("flake8", "print('ok')")])

    assert cli.main([]) == 0

    out = capsys.readouterr().out
    assert "SUMMARY" in out
    assert out.rstrip().endswith("OK OK")
    assert len(list((sandbox / "logs").iterdir())) == 1


def test_main_exit_one_when_a_step_fails(sandbox: Path, monkeypatch, python_step, capsys) -> None:
    monkeypatch.setattr(
        cli,
        "all_steps",
        lambda: [
            python_step("flake8", "print('ok')"),
            python_step("mypy", "print('a.py:1:2: E1 bad')\nraise SystemExit(1)"),
            python_step("pydocstyle", "print('ok')"),
        ],
    )

    assert cli.main([]) == 1

    out = capsys.readouterr().out
    assert "mypy:        KO FAIL(1) (issues: 1)" in out
    assert "pydocstyle:  OK OK (issues: 0)" in out
    assert out.rstrip().endswith("KO KO")


def test_main_reports_missing_tool_with_install_hint(sandbox: Path, monkeypatch, capsys) -> None:
    ghost = CheckStep(
        name="flake8",
        title="flake8",
        command=["checkpython-no-such-tool-xyz", "."],
        extractor=FLAKE8,
        install_hint="python3 -m pip install -r checkconfig/requirements-dev.txt",
    )
    monkeypatch.setattr(cli, "all_steps", lambda: [ghost])

    assert cli.main([]) == 1

    out = capsys.readouterr().out
    assert "Missing tool: checkpython-no-such-tool-xyz" in out
    assert "python3 -m pip install -r checkconfig/requirements-dev.txt" in out
    assert "SUMMARY" not in out
    assert not (sandbox / "logs").exists()


def test_main_rejects_unknown_flags(sandbox: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--fast"])
    assert excinfo.value.code == 2


def test_configure_logging_noops_when_handlers_exist(monkeypatch) -> None:
    root_logger = logging.getLogger()
    dummy = logging.NullHandler()
    root_logger.addHandler(dummy)

    called = {"basic": 0}
    monkeypatch.setattr(
        cli.logging,
        "basicConfig",
        lambda **_k: called.__setitem__("basic", called["basic"] + 1),
    )

    try:
        cli.configure_logging()
        assert called["basic"] == 0
    finally:
        root_logger.removeHandler(dummy)


@pytest.mark.parametrize(("debug", "level"), [("1", logging.DEBUG), (None, logging.INFO)])
def test_configure_logging_level_follows_env(monkeypatch, debug, level) -> None:
    if debug is not None:
        monkeypatch.setenv("CHECKPYTHON_DEBUG", debug)

    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    root_logger.handlers = []

    captured = {}
    monkeypatch.setattr(cli.logging, "basicConfig", lambda **kwargs: captured.update(kwargs))

    try:
        cli.configure_logging()

        assert captured["level"] == level
        assert "%(levelname)s" in captured["format"]
    finally:
        root_logger.handlers = saved_handlers


def test_launcher_script_exists_and_targets_cli() -> None:
    script = Path(__file__).resolve().parents[1] / "scripts" / "check" / "checkpython-run.py"
    text = script.read_text(encoding="utf-8")

    assert "from checkpython.core.cli import main" in text
