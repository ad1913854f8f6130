#!/usr/bin/env python3
"""
Structured failure logging for the loader

Two outcomes for a caught failure:
- log_and_return_default(): recoverable input, log a WARNING and carry on with a default
- log_and_raise(): unusable input, log an ERROR with the traceback and raise

Both attach the same structured fields (error_type, exception_class, context)
so JSON log output can be filtered by failing operation.
"""

import logging
from typing import Any, NoReturn


def _failure_fields(error: Exception, context: dict[str, Any], error_type: str) -> dict[str, Any]:
    return {
        "error_type": error_type,
        "exception_class": type(error).__name__,
        "context": context,
    }


def log_and_return_default(
    logger: logging.Logger,
    error: Exception,
    context: dict[str, Any],
    default_value: Any = None,
    error_type: str = "Operation",
) -> Any:
    """
    Log a recoverable failure and hand back ``default_value``.

    Args:
        logger: Logger of the calling module
        error: The caught exception
        context: Input that failed, e.g. {"version": "nightly"}
        default_value: Value the caller continues with
        error_type: Name of the failing operation, used as the message prefix

    Returns:
        default_value, unchanged

    Example:
        >>> log_and_return_default(logger, ValueError("no X.Y.Z"), {"version": "nightly"}, (0, 0, 0), "Version parsing")
        (0, 0, 0)
    """
    fields = _failure_fields(error, context, error_type)
    fields["default_value"] = str(default_value)
    logger.warning(f"{error_type} failed, using {default_value!r}: {error}", extra=fields)
    return default_value


def log_and_raise(
    logger: logging.Logger,
    error: Exception,
    context: dict[str, Any],
    error_type: str = "Operation",
) -> NoReturn:
    """
    Log an unrecoverable failure with the active traceback, then raise ``error``.

    Call it from an ``except`` block to keep the original exception in the
    log record; ``error`` is usually a ConfigurationError wrapping it.

    Raises:
        The given exception
    """
    logger.error(
        f"{error_type} failed: {error}",
        exc_info=True,
        extra=_failure_fields(error, context, error_type),
    )
    raise error
