import argparse
import logging
import types
from pathlib import Path
from unittest.mock import MagicMock

from eigix.cli import logging as logging_cli


def test_register_subcommands_parses_set_level():
    parser = argparse.ArgumentParser()
    subparsers = parser.add_subparsers(dest="subcommand", required=True)
    logging_cli.register_subcommands(subparsers)
    args = parser.parse_args(["set-level", "DEBUG"])
    assert args.subcommand == "set-level"
    assert args.level == "DEBUG"


def test_dispatch_set_level_persists_and_reconfigures(monkeypatch, capsys):
    save_mock = MagicMock(return_value=Path("/tmp/eigix-logging.json"))
    reset_mock = MagicMock()
    get_mock = MagicMock()
    monkeypatch.setattr(logging_cli, "save_log_level", save_mock)
    monkeypatch.setattr(logging_cli, "reset_logger", reset_mock)
    monkeypatch.setattr(logging_cli, "get_logger", get_mock)

    logging_cli.dispatch(types.SimpleNamespace(subcommand="set-level", level="INFO"))

    save_mock.assert_called_once_with("INFO")
    reset_mock.assert_called_once_with()
    assert get_mock.call_args.kwargs["level"] == logging.INFO
    assert "INFO saved to" in capsys.readouterr().out


def test_dispatch_show_path_prints_resolved_path(monkeypatch, capsys):
    expected = Path("/tmp/eigix-test.log")
    monkeypatch.setattr(logging_cli, "log_file_path", lambda: expected)
    logging_cli.dispatch(types.SimpleNamespace(subcommand="show-path"))
    assert capsys.readouterr().out.strip() == str(expected.resolve())


def test_dispatch_show_level_prints_configured_level(monkeypatch, capsys):
    monkeypatch.setattr(logging_cli, "get_configured_level", lambda: "WARNING")
    logging_cli.dispatch(types.SimpleNamespace(subcommand="show-level"))
    assert capsys.readouterr().out.strip() == "WARNING"


def test_dispatch_unknown_subcommand_logs_error(monkeypatch):
    logger = MagicMock()
    monkeypatch.setattr(logging_cli, "get_logger", lambda name: logger)
    logging_cli.dispatch(types.SimpleNamespace(subcommand="rotate"))
    logger.error.assert_called_once_with("No handler for subcommand: %s", "rotate")
