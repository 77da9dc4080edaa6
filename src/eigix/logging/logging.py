"""Named loggers for eigix, configured once per name.

Each logger writes to ``eigix.log`` under ``$EIGIX_LOG_DIR`` (default
``~/.eigix/logs``) and optionally to stderr. When no level is given the level
saved by ``eigix logging set-level`` applies.
"""

import logging
import os
import sys
from pathlib import Path

from eigix.logging.config import load_log_level

LOG_FILE_NAME = "eigix.log"
DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"

# names of loggers that already carry our handlers
_CONFIGURED = set()


def log_dir_path(log_dir=None):
    if log_dir is not None:
        return Path(log_dir)
    return Path(os.environ.get("EIGIX_LOG_DIR", Path.home() / ".eigix" / "logs"))


def log_file_path(log_file=None, log_dir=None):
    """Return the log file used when ``get_logger`` gets the same arguments."""

    if log_file is not None:
        return Path(log_file)
    return log_dir_path(log_dir) / LOG_FILE_NAME


def _attach_handlers(logger, file_path, console, formatter, filemode, encoding):
    file_path.parent.mkdir(parents=True, exist_ok=True)
    handlers = [logging.FileHandler(file_path, mode=filemode, encoding=encoding)]
    if console:
        handlers.append(logging.StreamHandler(sys.stderr))
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)


def get_logger(
    name="eigix",
    level=None,
    log_file=None,
    log_dir=None,
    console=True,
    filemode="a",
    fmt=DEFAULT_FORMAT,
    datefmt=DEFAULT_DATEFMT,
    encoding="utf-8",
    propagate=False,
):
    """Return the logger called ``name``, configuring it on first use.

    Parameters
    ----------
    name : str
        Logger name, usually ``__name__`` of the calling module.
    level : int, optional
        Level for the logger. Defaults to the persisted level, else INFO.
    log_file, log_dir : path-like, optional
        Override the log file, or the directory holding ``eigix.log``.
    console : bool
        Also log to stderr.

    Later calls for an already configured name return the logger unchanged;
    call :func:`reset_logger` first to apply new settings.
    """

    logger = logging.getLogger(name)
    if name in _CONFIGURED:
        return logger

    if level is None:
        level = load_log_level()
    if level is None:
        level = logging.INFO
    logger.setLevel(level)
    logger.propagate = propagate
    _attach_handlers(
        logger,
        log_file_path(log_file, log_dir),
        console,
        logging.Formatter(fmt=fmt, datefmt=datefmt),
        filemode,
        encoding,
    )
    _CONFIGURED.add(name)
    return logger


def reset_logger(name=None):
    """Reset configured loggers so they can be reconfigured.

    Parameters
    ----------
    name : str, optional
        Name of the logger to reset. If omitted, all loggers configured by
        :func:`get_logger` are reset.

    Examples
    --------
    >>> logger = get_logger("demo", level=logging.DEBUG, console=False)
    >>> reset_logger("demo")
    >>> logging.getLogger("demo").handlers
    []
    """

    names = list(_CONFIGURED) if name is None else [name]
    for n in names:
        logger = logging.getLogger(n)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        _CONFIGURED.discard(n)


def get_configured_level(name="eigix"):
    """Return the configured logging level name for ``name``."""

    level = logging.getLogger(name).getEffectiveLevel()
    return logging.getLevelName(level)
