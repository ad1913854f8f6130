"""
Observability Module - Error tracking for fatal conditions

Provides optional Sentry error tracking so that a process terminating on a
fatal configuration error leaves a trace outside its own log.

Usage:
    from versioninfo.core.observability import setup_observability

    setup_observability(environment="production")  # reads SENTRY_DSN
"""

from typing import Any

from versioninfo.core.logging_config import get_logger

logger = get_logger(__name__)

# Optional imports (gracefully handle if not installed)
try:
    import sentry_sdk
    from sentry_sdk.integrations.logging import LoggingIntegration

    SENTRY_AVAILABLE = True
except ImportError:
    SENTRY_AVAILABLE = False


class ObservabilityConfig:
    """
    Configuration for observability features.

    Attributes:
        sentry_dsn: Sentry Data Source Name for error tracking
        environment: Environment name (development, staging, production)
        enable_sentry: Whether Sentry error tracking is active
    """

    def __init__(
        self,
        sentry_dsn: str | None = None,
        environment: str = "development",
        enable_sentry: bool = False,
    ):
        self.sentry_dsn = sentry_dsn
        self.environment = environment
        self.enable_sentry = bool(enable_sentry and SENTRY_AVAILABLE and sentry_dsn)

        if enable_sentry and sentry_dsn and not SENTRY_AVAILABLE:
            logger.warning("Sentry requested but SDK not installed. Install with: pip install sentry-sdk")


# Global config instance
_observability_config: ObservabilityConfig | None = None


def setup_observability(
    sentry_dsn: str | None = None,
    environment: str = "development",
    enable_sentry: bool = True,
) -> ObservabilityConfig:
    """
    Initialize error tracking.

    Args:
        sentry_dsn: Sentry DSN (or set SENTRY_DSN env var)
        environment: Environment name (development, staging, production)
        enable_sentry: Enable Sentry error tracking

    Returns:
        The active ObservabilityConfig
    """
    global _observability_config

    from versioninfo.core.config import get_config

    sentry_dsn = sentry_dsn or get_config().get_optional_env("SENTRY_DSN")

    _observability_config = ObservabilityConfig(
        sentry_dsn=sentry_dsn,
        environment=environment,
        enable_sentry=enable_sentry,
    )

    if _observability_config.enable_sentry:
        sentry_sdk.init(
            dsn=sentry_dsn,
            environment=environment,
            integrations=[LoggingIntegration(level=None, event_level="CRITICAL")],
        )
        logger.info("Sentry error tracking initialized", extra={"environment": environment})
    else:
        logger.debug("Sentry error tracking disabled")

    return _observability_config


def capture_fatal(message: str, context: dict[str, Any] | None = None) -> None:
    """
    Report a fatal condition to Sentry, when configured.

    Args:
        message: Diagnostic message
        context: Tags attached to the event
    """
    if not (_observability_config and _observability_config.enable_sentry):
        return

    with sentry_sdk.push_scope() as scope:
        for key, value in (context or {}).items():
            scope.set_tag(key, value)
        sentry_sdk.capture_message(message, level="fatal")


def flush(timeout: float = 2.0) -> None:
    """
    Block until queued Sentry events are sent or timeout elapses.

    Args:
        timeout: Maximum seconds to wait
    """
    if _observability_config and _observability_config.enable_sentry:
        sentry_sdk.flush(timeout=timeout)
