"""Logging setup for wikinav.

Records about a single topic carry a ``topic`` attribute (see
:func:`topic_logger`); handlers installed by :func:`configure_logging` render
it as a ``<topic>: `` prefix so warnings from a large build say which
directory they came from.
"""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "wikinav"

_CONSOLE_FORMAT = "[wikinav] %(levelname)s %(topic_prefix)s%(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(topic_prefix)s%(message)s"


class TopicContextFilter(logging.Filter):
    """Derive ``topic_prefix`` from an optional ``topic`` record attribute."""

    def filter(self, record: logging.LogRecord) -> bool:
        topic = getattr(record, "topic", None)
        record.topic_prefix = f"{topic}: " if topic else ""
        return True


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the wikinav hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def topic_logger(logger: logging.Logger, topic_path: str) -> logging.LoggerAdapter:
    """Wrap ``logger`` so every record is tagged with ``topic_path``."""
    return logging.LoggerAdapter(logger, {"topic": topic_path})


def _level_for(verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def configure_logging(
    *, verbose: bool = False, quiet: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Install console and optional file handlers on the wikinav logger.

    ``verbose`` wins over ``quiet``. The file sink always records at DEBUG
    so a quiet console run still leaves a full trace behind.
    """
    console_level = _level_for(verbose, quiet)
    logger = logging.getLogger(_LOGGER_NAME)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    context = TopicContextFilter()

    console = logging.StreamHandler()
    console.setLevel(console_level)
    console.addFilter(context)
    console.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(console)

    logger_level = console_level
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        sink = logging.FileHandler(log_file, encoding="utf-8")
        sink.setLevel(logging.DEBUG)
        sink.addFilter(context)
        sink.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(sink)
        logger_level = logging.DEBUG

    logger.setLevel(logger_level)
    return logger


__all__ = ["TopicContextFilter", "configure_logging", "get_logger", "topic_logger"]
