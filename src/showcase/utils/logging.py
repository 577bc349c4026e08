"""Logging for Showcase.

Every record carries a ``source`` field naming the site it concerns
(``github``, ``boardgamegeek``, ``cults3d``), or ``-`` for records that
are not tied to one source. Bind a source with ``source_logger``.
"""

import logging
import sys
from pathlib import Path
from typing import Literal

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

ROOT_LOGGER = "showcase"
NO_SOURCE = "-"

CONSOLE_FORMAT = "%(levelname)s [%(source)s] %(message)s"
FILE_FORMAT = "%(asctime)s %(name)s %(levelname)s [%(source)s] %(message)s"


class SourceContextFilter(logging.Filter):
    """Default the ``source`` field so both formats always resolve."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "source"):
            record.source = NO_SOURCE
        return True


def _handler(handler: logging.Handler, level: LogLevel | int, fmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    # Handler-level, so records propagated from child loggers are covered too
    handler.addFilter(SourceContextFilter())
    return handler


def setup_logging(
    level: LogLevel = "INFO",
    log_file: Path | None = None,
    console_level: LogLevel = "WARNING",
) -> logging.Logger:
    """Install the stderr handler and an optional file handler.

    Calling it again replaces the handlers from the previous call.

    Args:
        level: Level of the ``showcase`` logger
        log_file: Also write every record to this file
        console_level: Level for stderr (WARNING keeps the rich output clean)

    Returns:
        The ``showcase`` logger
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    for old in logger.handlers[:]:
        logger.removeHandler(old)
        old.close()

    logger.addHandler(_handler(logging.StreamHandler(sys.stderr), console_level, CONSOLE_FORMAT))

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.addHandler(
            _handler(logging.FileHandler(log_file, encoding="utf-8"), logging.DEBUG, FILE_FORMAT)
        )

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``showcase`` namespace."""
    if name == ROOT_LOGGER or name.startswith(f"{ROOT_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def source_logger(logger: logging.Logger, source: str) -> logging.LoggerAdapter:
    """Wrap ``logger`` so its records are tagged with ``source``.

    Example:
        >>> log = source_logger(get_logger(__name__), "github")
        >>> log.debug("%d blocks", 3)  # DEBUG [github] 3 blocks
    """
    return logging.LoggerAdapter(logger, {"source": source})
