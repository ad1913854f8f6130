"""
Fatal termination

fatal() is the one code path in the package that does not return. It logs a
CRITICAL record, reports it to Sentry when configured, flushes both, and ends
the process with os._exit. Nothing is raised, so no caller can catch and
continue.
"""

import os
from typing import Any, NoReturn

from versioninfo.core import observability
from versioninfo.core.logging_config import flush_handlers, get_logger, log_with_context
from versioninfo.domain.constants import exit_codes

logger = get_logger(__name__)


def fatal(message: str, exit_code: int = exit_codes.FATAL, **context: Any) -> NoReturn:
    """
    Emit a diagnostic and terminate the process immediately.

    Args:
        message: Diagnostic message
        exit_code: Process exit status
        **context: Structured attributes for the log record
    """
    log_with_context(logger, "critical", message, **context)
    observability.capture_fatal(message, context=context)
    observability.flush()
    flush_handlers()
    os._exit(exit_code)
