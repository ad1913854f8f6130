"""
versioninfo - Process-wide version information registry and reporter

A host registers one VersionInfoProvider at startup; every other component
asks the registry for it and formats it through the reporters.

Usage:
    from versioninfo import NotEnabledAction, StaticVersionInfo, append_build_info, enable, instance

    enable(StaticVersionInfo(major=4, minor=2, patch=1, display_version="4.2.1"))

    info = instance(NotEnabledAction.FALLBACK)
    report = append_build_info(info)
    info.log_build_info()
"""

from .core.config import ConfigurationError
from .core.loader import enable_from_environment, load_version_info
from .core.registry import NotEnabledAction, enable, instance, is_enabled
from .domain import BuildInfoField, BuildTarget, FallbackVersionInfo, StaticVersionInfo, VersionInfoProvider
from .reports import (
    append_build_info,
    log_build_info,
    log_target_min_os,
    make_version_string,
    router_version,
    shell_version,
    storage_version,
)
from .utils.version_compare import is_same_major_minor, parse_major_minor

__version__ = "1.0.0"

__all__ = [
    # Registry
    "NotEnabledAction",
    "enable",
    "instance",
    "is_enabled",
    "enable_from_environment",
    "load_version_info",
    "ConfigurationError",
    # Providers
    "VersionInfoProvider",
    "BuildInfoField",
    "FallbackVersionInfo",
    "StaticVersionInfo",
    "BuildTarget",
    # Reports
    "append_build_info",
    "log_build_info",
    "log_target_min_os",
    "make_version_string",
    "shell_version",
    "router_version",
    "storage_version",
    # Comparison
    "is_same_major_minor",
    "parse_major_minor",
]
