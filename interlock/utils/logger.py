"""Logging setup for the crossword generator and its CLI."""

from __future__ import annotations

import logging
from typing import Optional, Union


LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"

# Loggers of third-party libraries that only matter when debugging.
_QUIET_LOGGERS = ("urllib3",)


def parse_level(value: Union[int, str]) -> int:
    """Turn a ``--log-level`` value into a numeric logging level.

    Accepts level names in any case (``debug``, ``WARNING``) or a plain
    number. Anything else raises ``ValueError``.
    """

    if isinstance(value, int):
        return value
    text = value.strip()
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level {value!r}")
    return level


def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    """Configure root logging with a sensible formatter.

    Grid generation is a single quick pass, so most of its chatter lives at
    DEBUG; INFO carries one summary line per generated puzzle plus store
    activity. HTTP client logs stay at WARNING unless DEBUG is requested.
    """

    numeric = parse_level(level)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(numeric)
    quiet_level = numeric if numeric <= logging.DEBUG else max(numeric, logging.WARNING)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(quiet_level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a namespaced logger, configuring defaults if needed."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or "interlock")
