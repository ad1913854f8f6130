"""
Centralized logging configuration with structured JSON output.

Provides:
- JSON structured logging for log aggregation
- Human-readable console logging with structured attributes appended
- Automatic context injection (timestamp, module, level)
- File output support

Structured attributes travel on the record as ``extra_fields`` (see
log_with_context). Both formatters render them, so a build info record reads
the same whether it ends up in a JSON file or on a terminal.

Usage:
    from versioninfo.core.logging_config import get_logger, log_with_context

    logger = get_logger(__name__)
    log_with_context(logger, "info", "Build Info", version="4.2.1", modules=["enterprise"])
"""

import json
import logging
import sys
from datetime import UTC, datetime
from pathlib import Path
from typing import Any


class JSONFormatter(logging.Formatter):
    """
    Format log records as JSON for structured logging.

    Structured attributes are merged into the top-level object in the order
    they were supplied.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON string"""
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "extra_fields"):
            log_data.update(record.extra_fields)

        return json.dumps(log_data, default=str)


class ContextFormatter(logging.Formatter):
    """
    Human-readable formatter for console output.

    Includes color coding for log levels (when supported) and appends
    structured attributes as ``key=value`` pairs.
    """

    # ANSI color codes
    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with color coding and structured attributes"""
        levelname = record.levelname
        if sys.stderr.isatty():  # Only use colors if outputting to terminal
            color = self.COLORS.get(levelname, "")
            record.levelname = f"{color}{levelname}{self.RESET}"

        try:
            formatted = super().format(record)
        finally:
            record.levelname = levelname

        extra_fields = getattr(record, "extra_fields", None)
        if extra_fields:
            rendered = " ".join(f"{key}={json.dumps(value, default=str)}" for key, value in extra_fields.items())
            formatted = f"{formatted} | {rendered}"

        return formatted


def setup_logging(
    level: str = "INFO",
    log_file: Path | None = None,
    json_output: bool = False,
) -> None:
    """
    Configure application-wide logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for log output (always JSON)
        json_output: If True, use JSON formatter on the console

    Example:
        # Development (human-readable console)
        setup_logging(level="DEBUG")

        # Production (JSON to file)
        setup_logging(level="INFO", log_file=Path("logs/versioninfo.log"), json_output=True)
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)

    if json_output:
        console_handler.setFormatter(JSONFormatter())
    else:
        console_handler.setFormatter(
            ContextFormatter(
                fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )

    root_logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(JSONFormatter())

        root_logger.addHandler(file_handler)


def setup_logging_from_config() -> None:
    """
    Configure logging from VERSIONINFO_LOG_* settings.

    Raises:
        ConfigurationError: If the logging settings are invalid
    """
    from versioninfo.core.config import get_config

    logging_config = get_config().get_logging_config()
    setup_logging(
        level=logging_config.level,
        log_file=logging_config.log_file,
        json_output=logging_config.json_output,
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for the specified module.

    Args:
        name: Module name (use __name__ in calling module)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def log_with_context(logger: logging.Logger, level: str, message: str, **context: Any) -> None:
    """
    Log message with structured attributes.

    Attributes keep the order they are passed in.

    Args:
        logger: Logger instance
        level: Log level (debug, info, warning, error, critical)
        message: Log message
        **context: Structured attributes (key-value pairs)

    Example:
        log_with_context(logger, "info", "Target operating system minimum version", targetMinOS="Windows 7")
    """
    log_func = getattr(logger, level.lower())
    log_func(message, extra={"extra_fields": context})


def flush_handlers() -> None:
    """Flush every handler attached to the root logger."""
    for handler in logging.getLogger().handlers:
        handler.flush()


# Default configuration (can be overridden by calling setup_logging)
if not logging.getLogger().handlers:
    setup_logging(level="INFO", json_output=False)
