import io
import types

import pytest
from rich.console import Console

from studytrack.cli import contact as contact_cli


def _console():
    return Console(file=io.StringIO(), width=200, color_system=None)


def _args(name, email, *message):
    return types.SimpleNamespace(subcommand="check", name=name, email=email, message=list(message))


def test_check_accepts_long_message():
    console = _console()
    words = [f"w{i}" for i in range(22)]
    contact_cli._cmd_check(_args("Jane", "a@b.co", *words), console=console)
    assert "OK: 22 words (minimum 20)" in console.file.getvalue()


def test_check_reports_short_message():
    console = _console()
    with pytest.raises(SystemExit) as excinfo:
        contact_cli._cmd_check(_args("Jane", "a@b.co", "too", "short"), console=console)
    assert excinfo.value.code == 1
    output = console.file.getvalue()
    assert "Message too short" in output
    assert "Current: 2 words" in output


def test_check_reads_stdin(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(" ".join(["word"] * 20)))
    console = _console()
    contact_cli._cmd_check(_args("Jane", "a@b.co", "-"), console=console)
    assert "OK: 20 words" in console.file.getvalue()
