"""
Version Info Configuration Management

Provides centralized, validated configuration for logging, build target
overrides and the build manifest location.
Replaces scattered os.getenv() calls with strict validation and fail-fast behavior.

Usage:
    from versioninfo.core.config import get_config

    config = get_config()
    target = config.get_build_target()
    print(target.tls_provider)

Environment:
    VERSIONINFO_LOG_LEVEL     Root log level (default INFO)
    VERSIONINFO_LOG_JSON      JSON console output (default false)
    VERSIONINFO_LOG_FILE      Optional JSON log file
    VERSIONINFO_TARGET_OS     Override detected OS family
    VERSIONINFO_TLS_PROVIDER  Override detected TLS backend
    VERSIONINFO_DEBUG_BUILD   Override detected debug flag
    VERSIONINFO_MANIFEST      Path to a JSON build manifest
    SENTRY_DSN                Enables Sentry for fatal reports

Raises:
    ConfigurationError: If configuration is invalid
"""

import os
from dataclasses import dataclass, replace
from pathlib import Path

from dotenv import load_dotenv

from versioninfo.domain.build_target import BuildTarget

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
TRUE_VALUES = {"1", "true", "t", "yes", "y", "on"}
FALSE_VALUES = {"0", "false", "f", "no", "n", "off", ""}


class ConfigurationError(Exception):
    """Raised when configuration is missing or invalid."""

    pass


def parse_bool(name: str, raw: str) -> bool:
    """
    Parse a boolean environment value.

    Raises:
        ConfigurationError: If the value is not a recognized boolean
    """
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean (true/false), got {raw!r}")


@dataclass
class LoggingConfig:
    """
    Validated logging configuration.
    """

    level: str = "INFO"
    json_output: bool = False
    log_file: Path | None = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self):
        """
        Validate logging configuration.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        self.level = self.level.upper()
        if self.level not in VALID_LOG_LEVELS:
            raise ConfigurationError(
                f"VERSIONINFO_LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}: {self.level}"
            )


class VersionInfoConfig:
    """
    Centralized configuration manager.

    Loads and validates configuration from environment variables.
    Provides fail-fast behavior to catch configuration issues early.
    """

    def __init__(self):
        """Initialize configuration (loads .env file)."""
        load_dotenv()

    def get_optional_env(self, name: str, default: str | None = None) -> str | None:
        """
        Get an optional environment value, treating blank values as unset.

        Args:
            name: Environment variable name
            default: Value returned when unset

        Returns:
            The stripped value, or default
        """
        value = os.getenv(name)
        if value is None or not value.strip():
            return default
        return value.strip()

    def get_logging_config(self) -> LoggingConfig:
        """
        Get validated logging configuration.

        Returns:
            LoggingConfig: Validated configuration

        Raises:
            ConfigurationError: If configuration is invalid
        """
        level = self.get_optional_env("VERSIONINFO_LOG_LEVEL", "INFO")
        json_output = parse_bool("VERSIONINFO_LOG_JSON", os.getenv("VERSIONINFO_LOG_JSON", "false"))
        log_file = self.get_optional_env("VERSIONINFO_LOG_FILE")

        return LoggingConfig(
            level=level or "INFO",
            json_output=json_output,
            log_file=Path(log_file) if log_file else None,
        )

    def get_build_target(self) -> BuildTarget:
        """
        Get the build target, detected from the interpreter with env overrides applied.

        Returns:
            BuildTarget: Validated build target

        Raises:
            ConfigurationError: If an override is invalid (e.g. unknown TLS provider)
        """
        target = BuildTarget.detect()
        overrides: dict[str, object] = {}

        os_family = self.get_optional_env("VERSIONINFO_TARGET_OS")
        if os_family:
            overrides["os_family"] = os_family.lower()

        tls_provider = self.get_optional_env("VERSIONINFO_TLS_PROVIDER")
        if tls_provider:
            overrides["tls_provider"] = tls_provider.lower()

        debug = self.get_optional_env("VERSIONINFO_DEBUG_BUILD")
        if debug is not None:
            overrides["debug"] = parse_bool("VERSIONINFO_DEBUG_BUILD", debug)

        if not overrides:
            return target

        try:
            return replace(target, **overrides)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e

    def get_manifest_path(self) -> Path | None:
        """
        Get the build manifest path, if configured.

        Returns:
            Path to the manifest, or None

        Raises:
            ConfigurationError: If the configured manifest does not exist
        """
        manifest = self.get_optional_env("VERSIONINFO_MANIFEST")
        if not manifest:
            return None

        path = Path(manifest)
        if not path.is_file():
            raise ConfigurationError(f"VERSIONINFO_MANIFEST does not point to a file: {manifest}")
        return path


# Convenience function for getting configuration
_config_instance: VersionInfoConfig | None = None


def get_config() -> VersionInfoConfig:
    """
    Get the global configuration instance (singleton pattern).

    Returns:
        VersionInfoConfig: The configuration manager
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = VersionInfoConfig()
    return _config_instance


def validate_config_on_startup(required_sections: list[str]) -> None:
    """
    Validate required configuration at application startup.

    Args:
        required_sections: Sections to validate ('logging', 'build_target', 'manifest')

    Raises:
        ConfigurationError: If any required configuration is invalid
        ValueError: If a section name is unknown

    Example:
        if __name__ == '__main__':
            validate_config_on_startup(['logging', 'build_target'])
    """
    config = get_config()

    for section in required_sections:
        if section == "logging":
            config.get_logging_config()
        elif section == "build_target":
            config.get_build_target()
        elif section == "manifest":
            config.get_manifest_path()
        else:
            raise ValueError(f"Unknown configuration section: {section}")
