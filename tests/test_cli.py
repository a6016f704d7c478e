import logging
import subprocess
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT))

from fibbench import cli, cpu_task  # noqa: E402


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    pkg_logger = logging.getLogger("fibbench")
    for h in list(pkg_logger.handlers):
        pkg_logger.removeHandler(h)


def test_main_prints_two_lines(monkeypatch, capsys):
    monkeypatch.setattr(cpu_task, "fib", lambda n: 102334155)
    assert cli.main() == 0
    out = capsys.readouterr().out
    lines = out.splitlines()
    assert len(lines) == 2
    assert lines[0] == "102334155"
    assert lines[1].isdigit()
    assert int(lines[1]) >= 0


def test_logs_stay_off_stdout(monkeypatch, capsys):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setattr(cpu_task, "fib", lambda n: 1)
    cli.main()
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["1", "0"]
    assert "fib(40)" in captured.err


@pytest.mark.slow
def test_module_entry_point():
    completed = subprocess.run(
        [sys.executable, "-m", "fibbench"],
        capture_output=True, text=True, cwd=ROOT
    )
    assert completed.returncode == 0
    lines = completed.stdout.splitlines()
    assert lines[0] == "102334155"
    assert len(lines) == 2
    assert int(lines[1]) >= 0
