"""
Logging configuration for glitch-sync.

Log records are rendered as GitHub Actions workflow commands on stdout by
default, so a CI runner picks up debug and error lines natively. A Rich
console handler is available for local runs, and an optional log file
captures everything in a parseable format.
"""

import logging
import sys
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO

from glitch_sync.utils.commands import format_command


class WorkflowCommandHandler(logging.StreamHandler):
    """
    Stream handler that writes records as workflow commands.

    DEBUG -> ``::debug::``, INFO -> plain line, WARNING -> ``::warning::``,
    ERROR and above -> ``::error::``.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        super().__init__(stream if stream is not None else sys.stdout)

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.levelno >= logging.ERROR:
            return format_command("error", message)
        if record.levelno >= logging.WARNING:
            return format_command("warning", message)
        if record.levelno >= logging.INFO:
            return message
        return format_command("debug", message)


class FileFormatter(logging.Formatter):
    """Formatter for file logs - clean and parseable."""

    def __init__(self) -> None:
        super().__init__(fmt="%(asctime)s [%(levelname)-8s] %(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S")


# Shorter secrets are left unmasked
MIN_MASKED_LENGTH = 4


class SecretMaskingFilter(logging.Filter):
    """Replace a secret value with ``***`` in every record passing through."""

    def __init__(self, secret: str) -> None:
        super().__init__()
        self.secret = secret

    def filter(self, record: logging.LogRecord) -> bool:
        if len(self.secret) >= MIN_MASKED_LENGTH:
            message = record.getMessage()
            if self.secret in message:
                record.msg = message.replace(self.secret, "***")
                record.args = None
        return True


# Map string level names to logging constants
LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

CONSOLE_TYPES = ("actions", "rich")


def _parse_level(level: str | int | None, default: int) -> int:
    """
    Parse logging level from string or int.

    Args:
        level: Logging level as string (DEBUG, INFO, etc.) or int
        default: Level used when ``level`` is missing or unknown

    Returns:
        Logging level constant
    """
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        return LEVEL_MAP.get(level.upper(), default)
    return default


def setup_logging(
    level: str | int | None = None,
    log_file: str | Path | None = None,
    console_type: str = "actions",
    stream: TextIO | None = None,
    file_mode: str = "a",
) -> logging.Logger:
    """
    Setup logging configuration for glitch-sync.

    Args:
        level: Logging level (default: DEBUG for "actions", INFO for "rich")
        log_file: Optional file path to also write logs to
        console_type: "actions" for workflow commands on stdout, "rich" for a
                      Rich console handler on stderr
        stream: Stream for the "actions" handler (default: sys.stdout at call time)
        file_mode: 'a' to append to the log file, 'w' to overwrite

    Returns:
        The package logger
    """
    if console_type not in CONSOLE_TYPES:
        raise ValueError(f"Unknown console type '{console_type}', expected one of {', '.join(CONSOLE_TYPES)}")

    logger = logging.getLogger("glitch_sync")

    # Remove existing handlers to avoid duplicates on repeated setup
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        if isinstance(handler, logging.FileHandler):
            handler.close()

    default_level = logging.DEBUG if console_type == "actions" else logging.INFO
    level_int = _parse_level(level, default_level)
    logger.setLevel(level_int)

    if console_type == "rich":
        from rich.console import Console
        from rich.logging import RichHandler

        console_handler: logging.Handler = RichHandler(
            console=Console(stderr=True),
            level=level_int,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
            log_time_format="[%X]",
        )
    else:
        console_handler = WorkflowCommandHandler(stream)
        console_handler.setLevel(level_int)
    logger.addHandler(console_handler)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode=file_mode, encoding="utf-8")
        # File captures everything the logger lets through
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(FileFormatter())
        logger.addHandler(file_handler)

    logger.propagate = True
    return logger


@contextmanager
def masked_secret(secret: str) -> Iterator[SecretMaskingFilter]:
    """
    Mask ``secret`` in every record emitted by the package loggers.

    The filter sits on the package handlers and is removed on exit, so
    nothing carries over between runs.
    """
    masking = SecretMaskingFilter(secret)
    handlers = list(logging.getLogger("glitch_sync").handlers)
    for handler in handlers:
        handler.addFilter(masking)
    try:
        yield masking
    finally:
        for handler in handlers:
            handler.removeFilter(masking)


# Track if logging has been set up to avoid duplicate setup
_logging_setup_done = False
_logging_setup_lock = threading.Lock()


def _auto_setup_logging() -> None:
    """Install the default workflow command handler if nothing is configured yet."""
    global _logging_setup_done

    package_logger = logging.getLogger("glitch_sync")
    if package_logger.handlers:
        _logging_setup_done = True
        return

    if _logging_setup_done:
        return

    with _logging_setup_lock:
        if _logging_setup_done or package_logger.handlers:
            _logging_setup_done = True
            return
        setup_logging()
        _logging_setup_done = True


def get_logger(name: str = "glitch_sync") -> logging.Logger:
    """
    Get a logger instance.

    Automatically installs the default workflow command handler the first
    time a logger is requested, so library callers get CI-formatted output
    without an explicit setup_logging call.

    Args:
        name: Logger name (default: "glitch_sync")

    Returns:
        Logger instance
    """
    _auto_setup_logging()

    logger = logging.getLogger(name)
    logger.propagate = True
    return logger
