"""
Core Infrastructure - Registry, Configuration, Logging, Fatal termination

Usage:
    from versioninfo.core import NotEnabledAction, enable, get_logger, instance

    enable(provider)
    info = instance(NotEnabledAction.FALLBACK)
"""

from .config import ConfigurationError, LoggingConfig, VersionInfoConfig, get_config, validate_config_on_startup
from .loader import enable_from_environment, load_version_info
from .logging_config import get_logger, log_with_context, setup_logging, setup_logging_from_config
from .registry import NotEnabledAction, enable, instance, is_enabled
from .termination import fatal

__all__ = [
    # Registry
    "NotEnabledAction",
    "enable",
    "instance",
    "is_enabled",
    "fatal",
    # Loading
    "load_version_info",
    "enable_from_environment",
    # Configuration
    "get_config",
    "validate_config_on_startup",
    "ConfigurationError",
    "LoggingConfig",
    "VersionInfoConfig",
    # Logging
    "get_logger",
    "log_with_context",
    "setup_logging",
    "setup_logging_from_config",
]
