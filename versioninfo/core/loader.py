"""
Version info loader

Builds a StaticVersionInfo from a JSON build manifest and VERSIONINFO_*
environment variables, for hosts that do not ship their own provider.

Manifest format:
    {
        "version": "4.2.1-rc0",
        "gitVersion": "3f1c2a9",
        "modules": ["enterprise"],
        "allocator": "tcmalloc",
        "javascriptEngine": "mozjs",
        "targetMinOS": "Windows 7/Windows Server 2008 R2",
        "versionArray": [4, 2, 1, 0],
        "buildEnvironment": [
            {"key": "cc", "value": "gcc 12.2", "inBuildInfo": true}
        ]
    }

Environment variables override manifest values:
    VERSIONINFO_VERSION, VERSIONINFO_GIT_VERSION, VERSIONINFO_MODULES (comma-separated),
    VERSIONINFO_ALLOCATOR, VERSIONINFO_JS_ENGINE, VERSIONINFO_TARGET_MIN_OS

versionArray is optional; when given, its first three entries must match a
parseable "version". VERSIONINFO_VERSION discards the manifest versionArray and
extra, and the components are parsed from the overriding version.

Usage:
    from versioninfo.core.loader import enable_from_environment

    info = enable_from_environment()
"""

import json
from pathlib import Path
from typing import Any

from versioninfo.core.config import ConfigurationError, get_config
from versioninfo.core.logging_config import get_logger
from versioninfo.core.registry import enable
from versioninfo.domain.constants import fallback_sentinels
from versioninfo.domain.provider import BuildInfoField
from versioninfo.domain.static_provider import StaticVersionInfo
from versioninfo.utils.error_handling import log_and_raise, log_and_return_default
from versioninfo.utils.version_compare import parse_version_components

logger = get_logger(__name__)

ENV_OVERRIDES = {
    "version": "VERSIONINFO_VERSION",
    "gitVersion": "VERSIONINFO_GIT_VERSION",
    "modules": "VERSIONINFO_MODULES",
    "allocator": "VERSIONINFO_ALLOCATOR",
    "javascriptEngine": "VERSIONINFO_JS_ENGINE",
    "targetMinOS": "VERSIONINFO_TARGET_MIN_OS",
}


def read_manifest(path: Path) -> dict[str, Any]:
    """
    Read a JSON build manifest.

    Args:
        path: Manifest file

    Returns:
        Manifest contents

    Raises:
        ConfigurationError: If the file cannot be read or is not a JSON object
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        log_and_raise(
            logger,
            ConfigurationError(f"Cannot read build manifest {path}: {e}"),
            context={"manifest": str(path)},
            error_type="Manifest loading",
        )

    if not isinstance(data, dict):
        raise ConfigurationError(f"Build manifest must be a JSON object: {path}")

    return data


def _env_overrides() -> dict[str, Any]:
    config = get_config()
    overrides: dict[str, Any] = {}

    for key, env_name in ENV_OVERRIDES.items():
        value = config.get_optional_env(env_name)
        if value is None:
            continue
        if key == "modules":
            overrides[key] = [name.strip() for name in value.split(",") if name.strip()]
        else:
            overrides[key] = value

    return overrides


def _version_components(version: str) -> tuple[int, int, int]:
    components = parse_version_components(version)
    if components is None:
        raise ValueError(f"version does not start with MAJOR.MINOR.PATCH: {version!r}")
    return components


def _is_component(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _version_array(data: dict[str, Any]) -> list[int]:
    version = data.get("version")
    raw = data.get("versionArray")

    if raw is not None:
        if not isinstance(raw, list) or len(raw) != 4 or not all(map(_is_component, raw)):
            raise ConfigurationError(f"versionArray must be a list of 4 integers, got {raw!r}")
        declared = parse_version_components(version)
        if declared is not None and tuple(raw[:3]) != declared:
            raise ConfigurationError(f"versionArray {raw} disagrees with version {version!r}")
        return raw

    extra = data.get("extra", 0)
    if not _is_component(extra):
        raise ConfigurationError(f"extra must be an integer, got {extra!r}")

    # No version at all is the normal env-only case; keep the sentinel zeros quietly
    if version is None:
        return [0, 0, 0, extra]

    try:
        major, minor, patch = _version_components(version)
    except ValueError as e:
        major, minor, patch = log_and_return_default(
            logger,
            e,
            context={"version": version},
            default_value=(0, 0, 0),
            error_type="Version parsing",
        )
    return [major, minor, patch, extra]


def _module_names(raw: Any) -> tuple[str, ...]:
    if not isinstance(raw, list) or not all(isinstance(name, str) for name in raw):
        raise ConfigurationError(f"modules must be a list of strings, got {raw!r}")
    return tuple(raw)


def _build_fields(entries: Any) -> list[BuildInfoField]:
    if not isinstance(entries, list):
        raise ConfigurationError(f"buildEnvironment must be a list, got {type(entries).__name__}")

    fields = []
    for entry in entries:
        if not isinstance(entry, dict) or "key" not in entry:
            raise ConfigurationError(f"buildEnvironment entries need a 'key': {entry!r}")
        in_build_info = entry.get("inBuildInfo", True)
        if not isinstance(in_build_info, bool):
            raise ConfigurationError(f"inBuildInfo must be true or false, got {in_build_info!r} for {entry['key']!r}")
        fields.append(
            BuildInfoField(
                key=str(entry["key"]),
                value=str(entry.get("value", "")),
                in_build_info=in_build_info,
            )
        )
    return fields


def load_version_info(manifest_path: Path | None = None) -> StaticVersionInfo:
    """
    Build a provider from the manifest and environment.

    Args:
        manifest_path: Manifest file (defaults to VERSIONINFO_MANIFEST, may be unset)

    Returns:
        StaticVersionInfo with unspecified fields left at their sentinels

    Raises:
        ConfigurationError: If the manifest or overrides are invalid
    """
    if manifest_path is None:
        manifest_path = get_config().get_manifest_path()

    data = read_manifest(manifest_path) if manifest_path else {}
    overrides = _env_overrides()
    if "version" in overrides:
        # The overriding version also replaces the manifest components
        data.pop("versionArray", None)
        data.pop("extra", None)
    data.update(overrides)

    try:
        major, minor, patch, extra = _version_array(data)
        info = StaticVersionInfo(
            major=major,
            minor=minor,
            patch=patch,
            extra=extra,
            display_version=str(data.get("version", fallback_sentinels.UNKNOWN)),
            git_revision=str(data.get("gitVersion", fallback_sentinels.NO_GIT_VERSION)),
            module_names=_module_names(data.get("modules", [])),
            allocator_name=str(data.get("allocator", fallback_sentinels.UNKNOWN)),
            js_engine_name=str(data.get("javascriptEngine", fallback_sentinels.UNKNOWN)),
            min_os=str(data.get("targetMinOS", fallback_sentinels.UNKNOWN)),
            build_fields=tuple(_build_fields(data.get("buildEnvironment", []))),
        )
    except (TypeError, ValueError) as e:
        log_and_raise(
            logger,
            ConfigurationError(f"Invalid version info: {e}"),
            context={"manifest": str(manifest_path) if manifest_path else None},
            error_type="Version info loading",
        )

    logger.info(
        "Loaded version info",
        extra={"version": info.version(), "manifest": str(manifest_path) if manifest_path else None},
    )
    return info


def enable_from_environment(manifest_path: Path | None = None) -> StaticVersionInfo:
    """
    Load a provider with load_version_info() and enable it.

    Returns:
        The enabled provider
    """
    info = load_version_info(manifest_path)
    enable(info)
    return info
