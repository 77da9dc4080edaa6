"""``eigix logging``: persist and inspect the package logging level."""

import logging

from eigix.logging import get_configured_level, get_logger, log_file_path, reset_logger
from eigix.logging.config import save_log_level

LEVEL_NAMES = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def register_subcommands(subparsers):
    """Add ``set-level``, ``show-path`` and ``show-level`` to ``subparsers``."""

    set_level = subparsers.add_parser("set-level", help="Persist the logging level")
    set_level.add_argument("level", choices=LEVEL_NAMES, help="Logging level to use")
    subparsers.add_parser("show-path", help="Show the log file location")
    subparsers.add_parser("show-level", help="Show the configured logging level")


def set_level(args):
    # handlers are rebuilt so the new level applies to this process too
    level_name = args.level.upper()
    path = save_log_level(level_name)
    reset_logger()
    get_logger(level=getattr(logging, level_name))
    print(f"{level_name} saved to {path}")


def show_path(args):
    print(log_file_path().resolve())


def show_level(args):
    print(get_configured_level())


HANDLERS = {
    "set-level": set_level,
    "show-path": show_path,
    "show-level": show_level,
}


def dispatch(args):
    handler = HANDLERS.get(args.subcommand)
    if handler is None:
        get_logger(__name__).error("No handler for subcommand: %s", args.subcommand)
        return
    handler(args)
