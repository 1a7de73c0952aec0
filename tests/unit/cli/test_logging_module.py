import argparse
import types
from pathlib import Path
import logging
from unittest.mock import MagicMock

from studytrack.cli import logging as logging_cli


def test_register_subcommands_parses_set_level():
    parser = argparse.ArgumentParser()
    subparsers = parser.add_subparsers(dest="subcommand", required=True)
    logging_cli.register_subcommands(subparsers)
    args = parser.parse_args(["set-level", "DEBUG"])
    assert args.subcommand == "set-level"
    assert args.level == "DEBUG"


def test_register_subcommands_parses_show_level():
    parser = argparse.ArgumentParser()
    subparsers = parser.add_subparsers(dest="subcommand", required=True)
    logging_cli.register_subcommands(subparsers)
    args = parser.parse_args(["show-level"])
    assert args.subcommand == "show-level"


def test_dispatch_set_level_persists_and_reconfigures(monkeypatch, tmp_path, capsys):
    config_file = tmp_path / "logging.json"
    monkeypatch.setenv("STUDYTRACK_LOG_CONFIG", str(config_file))
    reset_mock = MagicMock()
    get_mock = MagicMock()
    monkeypatch.setattr(logging_cli, "reset_logger", reset_mock)
    monkeypatch.setattr(logging_cli, "get_logger", get_mock)

    logging_cli.dispatch(types.SimpleNamespace(subcommand="set-level", level="WARNING"))

    reset_mock.assert_called_once_with()
    assert get_mock.call_args.kwargs["level"] == logging.WARNING
    assert '"log_level": "WARNING"' in config_file.read_text()
    assert str(config_file) in capsys.readouterr().out


def test_dispatch_show_path_prints_resolved_path(monkeypatch, capsys):
    expected = Path("/tmp/studytrack-test.log")
    monkeypatch.setattr(logging_cli, "_resolve_log_file", lambda: expected)
    logging_cli.dispatch(types.SimpleNamespace(subcommand="show-path"))
    assert capsys.readouterr().out.strip() == str(expected.resolve())


def test_dispatch_show_level_prints_configured_level(monkeypatch, capsys):
    monkeypatch.setattr(logging_cli, "get_logger", MagicMock())
    monkeypatch.setattr(logging_cli, "get_configured_level", lambda: "WARNING")
    logging_cli.dispatch(types.SimpleNamespace(subcommand="show-level"))
    assert capsys.readouterr().out.strip() == "WARNING"
