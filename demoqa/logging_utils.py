"""
Logging setup for the framework.

Modules log through ``logging.getLogger(__name__)``; this module only wires
handlers onto the ``demoqa`` logger so every framework line shares one format.
"""

import logging
import sys
from pathlib import Path
from typing import Dict, Optional, TextIO, Union

from demoqa.exceptions import FrameworkError

LOGGER_NAME = "demoqa"
LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(threadName)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ANSI_RESET = "\u001b[0m"
LEVEL_COLORS: Dict[int, str] = {
    logging.INFO: "\u001b[32m",  # green
    logging.WARNING: "\u001b[33m",  # yellow
    logging.ERROR: "\u001b[31m",  # red
    logging.CRITICAL: "\u001b[31m",
}

_HANDLER_MARKER = "_demoqa_handler"


class ColorFormatter(logging.Formatter):
    """Formatter that colours the whole line by level."""

    def __init__(self, use_color: bool = True) -> None:
        super().__init__(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = LEVEL_COLORS.get(record.levelno)
        if not self.use_color or color is None:
            return message
        return f"{color}{message}{ANSI_RESET}"


def _stream_is_tty(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def configure_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Attach the console (and optional file) handler to the framework logger.

    Calling this again replaces the handlers installed by a previous call, so
    repeated configuration never duplicates log lines.

    Args:
        level: Logging level name or number
        log_file: Optional path of a plain-text log file
        stream: Console stream, stderr by default

    Returns:
        The configured framework logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)

    remove_handlers()

    console_stream = stream if stream is not None else sys.stderr
    console = logging.StreamHandler(console_stream)
    console.setFormatter(ColorFormatter(use_color=_stream_is_tty(console_stream)))
    setattr(console, _HANDLER_MARKER, True)
    logger.addHandler(console)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        setattr(file_handler, _HANDLER_MARKER, True)
        logger.addHandler(file_handler)

    return logger


def remove_handlers() -> None:
    """Detach and close the handlers installed by ``configure_logging``."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            logger.removeHandler(handler)
            handler.close()


def log_framework_error(logger: logging.Logger, error: FrameworkError) -> None:
    """Emit the structured one-line summary of a framework error."""
    logger.error(
        "component=%s error_code=%s message=%s timestamp=%d",
        error.component,
        error.error_code,
        error.message,
        error.timestamp,
    )
