"""Process-wide logging setup."""

from __future__ import annotations

import logging

from publisher.core.config import LoggingSettings

_QUIET_LOGGERS = ("httpx", "httpcore", "PIL")


def configure_logging(settings: LoggingSettings) -> None:
    level = logging.getLevelName(settings.level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(level=level, format=settings.format)
    logging.getLogger("publisher").setLevel(level)

    # Library chatter stays at WARNING unless we are debugging.
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if level <= logging.DEBUG else logging.WARNING)
