"""
Build Info Reports

Turns a provider's metadata into the two outbound views:
- append_build_info(): ordered structured report for diagnostic consumers
- log_build_info(): one structured "Build Info" log record

Report keys, in order: version, gitVersion, targetMinOS (windows targets only),
modules, allocator, javascriptEngine, sysInfo, versionArray, openssl,
buildEnvironment, bits, debug, maxBsonObjectSize. Consumers look fields up by
name, so names and order are stable.

Usage:
    from versioninfo.core.registry import NotEnabledAction, instance
    from versioninfo.reports.build_info import append_build_info, log_build_info

    info = instance(NotEnabledAction.FALLBACK)
    report = append_build_info(info)
    log_build_info(info)
"""

import logging
from typing import Any

from versioninfo.core.logging_config import get_logger, log_with_context
from versioninfo.domain.build_target import BuildTarget
from versioninfo.domain.constants import build_report_limits, tls_providers
from versioninfo.domain.provider import BuildInfoField, VersionInfoProvider

default_logger = get_logger(__name__)


def _resolve_target(target: BuildTarget | None) -> BuildTarget:
    if target is not None:
        return target

    from versioninfo.core.config import get_config

    return get_config().get_build_target()


def openssl_version(target: BuildTarget | None = None, prefix: str = "", suffix: str = "") -> str:
    """
    Describe the running OpenSSL library.

    Args:
        target: Build target (defaults to the configured one)
        prefix: Text placed before the version
        suffix: Text placed after the version

    Returns:
        prefix + running version + suffix, or "" when the TLS backend is not OpenSSL
    """
    target = _resolve_target(target)
    if not target.uses_openssl:
        return ""
    return f"{prefix}{target.tls_running_version}{suffix}"


def tls_info(target: BuildTarget) -> dict[str, str]:
    """
    Build the ``openssl`` sub-document for a build target.

    Args:
        target: Build target

    Returns:
        {"running": ..., "compiled": ...}; non-OpenSSL backends report "running" only
    """
    if target.tls_provider == tls_providers.OPENSSL:
        return {"running": openssl_version(target), "compiled": target.tls_compiled_version}
    if target.tls_provider == tls_providers.WINDOWS:
        return {"running": tls_providers.WINDOWS_LABEL}
    if target.tls_provider == tls_providers.APPLE:
        return {"running": tls_providers.APPLE_LABEL}
    return {"running": tls_providers.DISABLED_LABEL, "compiled": tls_providers.DISABLED_LABEL}


def build_environment(provider: VersionInfoProvider) -> dict[str, str]:
    """
    Build facts flagged for the report, in provider order. Empty values are kept.
    """
    return {field.key: field.value for field in provider.build_info() if field.in_build_info}


def _in_log_environment(field: BuildInfoField) -> bool:
    return field.in_build_info and bool(field.value)


def _format_environment_entry(field: BuildInfoField) -> dict[str, str]:
    return {field.key: field.value}


def log_environment(provider: VersionInfoProvider) -> list[dict[str, str]]:
    """
    Build facts for the log record: flagged, non-empty, one single-key dict each.

    Differs from build_environment() only by dropping empty values.
    """
    return list(map(_format_environment_entry, filter(_in_log_environment, provider.build_info())))


def append_build_info(
    provider: VersionInfoProvider,
    result: dict[str, Any] | None = None,
    target: BuildTarget | None = None,
) -> dict[str, Any]:
    """
    Append the structured build report to ``result``.

    Args:
        provider: Source of version metadata
        result: Document to append to (a new dict when omitted)
        target: Build target (defaults to the configured one)

    Returns:
        ``result`` with the report fields appended

    Example:
        >>> report = append_build_info(info, target=BuildTarget(os_family="linux"))
        >>> report["versionArray"]
        [1, 2, 3, 4]
    """
    target = _resolve_target(target)
    if result is None:
        result = {}

    result["version"] = provider.version()
    result["gitVersion"] = provider.git_version()
    if target.reports_target_min_os:
        result["targetMinOS"] = provider.target_min_os()
    result["modules"] = provider.modules()
    result["allocator"] = provider.allocator()
    result["javascriptEngine"] = provider.js_engine()
    result["sysInfo"] = build_report_limits.SYS_INFO
    result["versionArray"] = provider.version_array()
    result["openssl"] = tls_info(target)
    result["buildEnvironment"] = build_environment(provider)
    result["bits"] = target.bits
    result["debug"] = target.debug
    result["maxBsonObjectSize"] = build_report_limits.MAX_BSON_OBJECT_SIZE

    return result


def log_build_info(
    provider: VersionInfoProvider,
    logger: logging.Logger | None = None,
    target: BuildTarget | None = None,
) -> None:
    """
    Emit one "Build Info" record.

    Attributes: version, gitVersion, openSSLVersion (OpenSSL targets only),
    allocator, modules, environment.

    Args:
        provider: Source of version metadata
        logger: Destination logger (defaults to this module's logger)
        target: Build target (defaults to the configured one)
    """
    target = _resolve_target(target)
    logger = logger or default_logger

    attrs: dict[str, Any] = {
        "version": provider.version(),
        "gitVersion": provider.git_version(),
    }
    if target.uses_openssl:
        attrs["openSSLVersion"] = openssl_version(target)
    attrs["allocator"] = provider.allocator()
    attrs["modules"] = provider.modules()
    attrs["environment"] = log_environment(provider)

    log_with_context(logger, "info", "Build Info", **attrs)


def log_target_min_os(provider: VersionInfoProvider, logger: logging.Logger | None = None) -> None:
    """
    Emit one record carrying the minimum target operating system.

    Args:
        provider: Source of version metadata
        logger: Destination logger (defaults to this module's logger)
    """
    logger = logger or default_logger
    log_with_context(
        logger,
        "info",
        "Target operating system minimum version",
        targetMinOS=provider.target_min_os(),
    )
