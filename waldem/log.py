"""The engine's core logger and the client application's logger."""

from __future__ import annotations

import logging
import sys

CORE_LOGGER_NAME = "WALDEM"
CLIENT_LOGGER_NAME = "APP"

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

_PATTERN = "[%(asctime)s] %(name)s: %(message)s"
_DATE_FORMAT = "%H:%M:%S"
_RESET = "\033[0m"

_handlers: dict[str, logging.Handler] = {}


class _ColorFormatter(logging.Formatter):
    """Formatter that colours the whole line by level on terminals."""

    _COLORS = {
        TRACE: "\033[37m",
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33;1m",
        logging.ERROR: "\033[31;1m",
        logging.CRITICAL: "\033[1;41m",
    }

    def __init__(self, use_color: bool) -> None:
        super().__init__(_PATTERN, datefmt=_DATE_FORMAT)
        self._use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        color = self._COLORS.get(record.levelno) if self._use_color else None
        return f"{color}{text}{_RESET}" if color else text


def _setup(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    previous = _handlers.pop(name, None)
    if previous is not None:
        logger.removeHandler(previous)

    stream = sys.stdout
    isatty = getattr(stream, "isatty", None)
    handler = logging.StreamHandler(stream)
    handler.setFormatter(_ColorFormatter(bool(isatty and isatty())))
    logger.addHandler(handler)
    logger.setLevel(TRACE)
    logger.propagate = False
    _handlers[name] = handler
    return logger


def init() -> None:
    """Set up both loggers to write every level to standard output."""
    _setup(CORE_LOGGER_NAME)
    _setup(CLIENT_LOGGER_NAME)


def core_logger() -> logging.Logger:
    """The engine's own logger."""
    return logging.getLogger(CORE_LOGGER_NAME)


def client_logger() -> logging.Logger:
    """The logger for code built on the engine."""
    return logging.getLogger(CLIENT_LOGGER_NAME)