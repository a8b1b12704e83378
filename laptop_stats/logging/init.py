from __future__ import annotations

import logging
import sys

"""Logging initialization with labeled prefixes.

Every line written by the tool is prefixed with one of INFO|WARN|ERROR|SUMMARY
so that the output can be grepped by scripts. Module loggers created with
``logging.getLogger(__name__)`` inside the ``laptop_stats`` package are children
of the application logger and share its handler.
"""

__all__ = [
    "APP_LOGGER_NAME",
    "SUMMARY_LEVEL",
    "LabeledFormatter",
    "setup_logging",
    "get_logger",
    "set_debug",
    "log_summary",
    "reset_logging",
]

APP_LOGGER_NAME = "laptop_stats"

# Custom SUMMARY level (between INFO=20 and WARNING=30)
SUMMARY_LEVEL = 25

_logger: logging.Logger | None = None


class LabeledFormatter(logging.Formatter):
    """Formatter rendering ``<LABEL> <message>``.

    With ``show_source`` (debug mode) records from package modules carry the
    module path, e.g. ``WARN [table.parser] failed to parse row 3: ...``.
    """

    LEVEL_LABELS = {
        logging.DEBUG: "DEBUG",
        logging.INFO: "INFO",
        logging.WARNING: "WARN",
        logging.ERROR: "ERROR",
        logging.CRITICAL: "CRITICAL",
        SUMMARY_LEVEL: "SUMMARY",
    }

    def __init__(self, show_source: bool = False) -> None:
        super().__init__()
        self.show_source = show_source

    def format(self, record: logging.LogRecord) -> str:
        label = self.LEVEL_LABELS.get(record.levelno, record.levelname)
        prefix = f"{APP_LOGGER_NAME}."
        if self.show_source and record.name.startswith(prefix):
            label = f"{label} [{record.name.removeprefix(prefix)}]"
        return f"{label} {record.getMessage()}"


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Configure the ``laptop_stats`` logger once and return it.

    Module loggers (``laptop_stats.table.parser`` etc.) propagate into its
    single stdout handler; the logger itself does not propagate to root.
    """
    global _logger

    if _logger is not None:
        return _logger

    logging.addLevelName(SUMMARY_LEVEL, "SUMMARY")

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(LabeledFormatter())

    logger = logging.getLogger(APP_LOGGER_NAME)
    logger.handlers[:] = [handler]
    logger.setLevel(level)
    logger.propagate = False

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    """Return the application logger, configuring it on first use."""
    if _logger is None:
        return setup_logging()
    return _logger


def set_debug(logger: logging.Logger) -> None:
    """Lower the logger to DEBUG and tag lines with their source module."""
    for h in logger.handlers:
        h.setLevel(logging.DEBUG)
        h.setFormatter(LabeledFormatter(show_source=True))
    logger.setLevel(logging.DEBUG)


def log_summary(message: str) -> None:
    """Log a message at SUMMARY level."""
    get_logger().log(SUMMARY_LEVEL, message)


def reset_logging() -> None:
    """Reset the global logger state. Mainly for testing purposes."""
    global _logger
    if _logger is not None:
        for handler in _logger.handlers[:]:
            _logger.removeHandler(handler)
        _logger.propagate = True
        _logger.setLevel(logging.NOTSET)
    _logger = None
