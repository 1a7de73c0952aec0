import io
import json
import types

import pytest
from rich.console import Console

from studytrack.cli import assistant as assistant_cli


def _console():
    return Console(file=io.StringIO(), width=200, color_system=None)


def _args(*message, action=None, topic=None, json_out=False):
    return types.SimpleNamespace(
        subcommand="ask",
        message=list(message),
        action=action,
        topic=topic,
        role="student",
        json=json_out,
    )


def test_ask_renders_reply_and_links():
    console = _console()
    assistant_cli._cmd_ask(_args("help", "me", "revise", "my", "notes"), console=console)
    output = console.file.getvalue()
    assert "I can help you with your studies!" in output
    assert "Effective Study Techniques" in output


def test_ask_youtube_prints_four_links(capsys):
    assistant_cli._cmd_ask(_args("videos", action="youtube", topic="calculus", json_out=True))
    payload = json.loads(capsys.readouterr().out)
    assert len(payload["links"]) == 4
    assert all("calculus" in link["url"] for link in payload["links"])


def test_ask_default_reply_has_no_links_table():
    console = _console()
    assistant_cli._cmd_ask(_args("what", "time", "is", "it"), console=console)
    output = console.file.getvalue()
    assert "What would you like help with today?" in output
    assert "Links" not in output


def test_ask_blank_message_exits():
    with pytest.raises(SystemExit, match="Message is required"):
        assistant_cli._cmd_ask(_args("   "))


def test_read_message_from_stdin(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("study plan\n"))
    assert assistant_cli._read_message(["-"]) == "study plan"


def test_unknown_subcommand_exits():
    with pytest.raises(SystemExit):
        assistant_cli.dispatch(types.SimpleNamespace(subcommand="nope"))
