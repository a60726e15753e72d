"""Structured logging for Kurva.

Every module logs through a child of the ``kurva`` logger
(``kurva.parser``, ``kurva.ranges`` ...), so one ``setup_logging`` call
from the CLI controls the whole package. Library users who never call it
get the standard library's default: warnings and above on stderr.
"""

import logging
import sys
from datetime import datetime
from typing import Optional

ROOT_LOGGER = "kurva"


class StructuredFormatter(logging.Formatter):
    """One line per record: ISO timestamp, level, logger name and message.

    Tracebacks and stack traces follow on the next lines. The rendered
    traceback is cached on the record so several handlers format it once.
    """

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).isoformat()
        message = f"{timestamp} [{record.levelname}] {record.name}: {record.getMessage()}"
        if record.exc_info and not record.exc_text:
            record.exc_text = self.formatException(record.exc_info)
        if record.exc_text:
            message = f"{message}\n{record.exc_text}"
        if record.stack_info:
            message = f"{message}\n{self.formatStack(record.stack_info)}"
        return message


def setup_logging(
    level: str = "WARNING", log_file: Optional[str] = None
) -> logging.Logger:
    """Attach structured handlers to the ``kurva`` logger.

    Args:
        level: Logging level name; unknown names fall back to WARNING
        log_file: Also append records to this file

    Returns:
        The ``kurva`` logger
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    # repeated calls (tests, embedding) must not stack handlers
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return ``kurva.<name>``, or the ``kurva`` logger itself."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}" if name else ROOT_LOGGER)
