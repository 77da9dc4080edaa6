"""Persisted logging settings.

The settings live in a small JSON document whose location is resolved from
``EIGIX_LOG_CONFIG``, then ``EIGIX_CONFIG_DIR/logging.json``, then
``~/.eigix/logging.json``.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

PathArg = Optional[os.PathLike[str] | str]


class LoggingSettings(BaseModel):
    """Settings understood by :func:`eigix.logging.get_logger`."""

    model_config = ConfigDict(extra="allow")

    log_level: str | None = None

    @field_validator("log_level", mode="before")
    @classmethod
    def _coerce_level(cls, value):
        if value is None:
            return None
        name, _ = normalize_level(value)
        return name

    def level_number(self) -> int | None:
        if self.log_level is None:
            return None
        return normalize_level(self.log_level)[1]


def config_path(config_file: PathArg = None) -> Path:
    """Return the path to the logging settings file."""

    if config_file is not None:
        return Path(config_file)
    raw = os.environ.get("EIGIX_LOG_CONFIG")
    if raw and raw.strip():
        return Path(raw).expanduser()
    raw = os.environ.get("EIGIX_CONFIG_DIR")
    if raw and raw.strip():
        return Path(raw).expanduser() / "logging.json"
    return Path.home() / ".eigix" / "logging.json"


def normalize_level(level: str | int) -> tuple[str, int]:
    """Coerce a logging level into a ``(name, number)`` pair.

    Raises
    ------
    ValueError
        If the level is neither a known level name nor an integer.
    """

    if isinstance(level, bool):
        raise ValueError(f"Unknown logging level: {level!r}")
    if isinstance(level, int):
        name = logging.getLevelName(level)
        if not isinstance(name, str) or name.startswith("Level "):
            name = str(level)
        return name, level

    text = str(level).strip().upper()
    if text.isdigit():
        return normalize_level(int(text))
    candidate = logging.getLevelName(text)
    if isinstance(candidate, int):
        return text, candidate
    raise ValueError(f"Unknown logging level: {level!r}")


def load_settings(config_file: PathArg = None) -> LoggingSettings:
    """Read the settings file.

    A missing, unreadable or malformed file yields default settings rather
    than an error so that logging never prevents the library from importing.
    """

    path = config_path(config_file)
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except (OSError, json.JSONDecodeError):
        return LoggingSettings()
    if not isinstance(data, dict):
        return LoggingSettings()
    try:
        return LoggingSettings.model_validate(data)
    except ValidationError:
        return LoggingSettings()


def save_settings(settings: LoggingSettings, config_file: PathArg = None) -> Path:
    path = config_path(config_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(settings.model_dump(exclude_none=True), handle, indent=2, sort_keys=True)
        handle.write("\n")
    return path


def load_log_level(config_file: PathArg = None) -> Optional[int]:
    """Return the persisted level as a number, if one was saved."""

    return load_settings(config_file).level_number()


def save_log_level(level: str | int, config_file: PathArg = None) -> Path:
    """Persist ``level`` and return the settings path.

    Other keys already present in the file are preserved.
    """

    settings = load_settings(config_file)
    updated = settings.model_copy(update={"log_level": normalize_level(level)[0]})
    return save_settings(updated, config_file)


__all__ = [
    "LoggingSettings",
    "config_path",
    "load_log_level",
    "load_settings",
    "normalize_level",
    "save_log_level",
    "save_settings",
]
