"""
Process-wide version info registry

Holds the single active VersionInfoProvider. Register it once during startup,
before any concurrent reader exists; reads take no lock.

Usage:
    from versioninfo.core.registry import NotEnabledAction, enable, instance

    enable(my_provider)                              # at startup
    info = instance()                                # terminates if nothing was enabled
    info = instance(NotEnabledAction.FALLBACK)       # sentinel values instead
"""

import threading
from enum import Enum

from versioninfo.core.logging_config import get_logger
from versioninfo.core.termination import fatal
from versioninfo.domain.fallback import FallbackVersionInfo
from versioninfo.domain.provider import VersionInfoProvider

logger = get_logger(__name__)


class NotEnabledAction(Enum):
    """
    What instance() does when no provider has been enabled.

    Attributes:
        FALLBACK: Return the shared FallbackVersionInfo
        FATAL: Log and terminate the process
    """

    FALLBACK = "fallback"
    FATAL = "fatal"


# Active provider, set once by enable()
_global_version_info: VersionInfoProvider | None = None

# Created on first fallback use and shared for the process lifetime
_fallback_version_info: FallbackVersionInfo | None = None
_fallback_lock = threading.Lock()


def enable(provider: VersionInfoProvider) -> None:
    """
    Install ``provider`` as the active provider.

    Replaces any previously enabled provider. Call during initialization only;
    this is not synchronized with concurrent instance() calls.

    Args:
        provider: Provider to install; the registry keeps a reference and never copies it
    """
    global _global_version_info

    if _global_version_info is not None and _global_version_info is not provider:
        logger.debug(
            "Replacing enabled version info provider",
            extra={"previous": type(_global_version_info).__name__, "provider": type(provider).__name__},
        )

    _global_version_info = provider


def is_enabled() -> bool:
    """Whether a provider has been enabled."""
    return _global_version_info is not None


def _fallback_instance() -> FallbackVersionInfo:
    global _fallback_version_info
    if _fallback_version_info is not None:
        return _fallback_version_info

    with _fallback_lock:
        # Re-check: another thread may have created it while we waited
        if _fallback_version_info is None:
            _fallback_version_info = FallbackVersionInfo()
    return _fallback_version_info


def instance(action: NotEnabledAction = NotEnabledAction.FATAL) -> VersionInfoProvider:
    """
    Get the active provider.

    Args:
        action: Behaviour when no provider has been enabled

    Returns:
        The enabled provider, or the shared fallback for NotEnabledAction.FALLBACK

    Note:
        With NotEnabledAction.FATAL and no enabled provider the process is
        terminated and this function does not return.
    """
    if _global_version_info is not None:
        return _global_version_info

    if action is NotEnabledAction.FALLBACK:
        return _fallback_instance()

    fatal("Terminating because valid version info has not been configured")
