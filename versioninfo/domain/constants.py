#!/usr/bin/env python3
"""
Version Info Constants

Centralized constants for fallback sentinels, build report limits, TLS backends,
front-end names, and process exit codes.
Provides type-safe, immutable values shared by providers, the registry and the reporters.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FallbackSentinels:
    """
    Sentinel values reported when no provider has been configured.

    Attributes:
        UNKNOWN: Placeholder for version, allocator, script engine and target OS ("unknown")
        NO_GIT_VERSION: Placeholder revision identifier ("none")
        VERSION_COMPONENT: Value of every version integer (0)

    Example:
        >>> sentinels = fallback_sentinels
        >>> print(sentinels.NO_GIT_VERSION)
        none
    """

    UNKNOWN: str = "unknown"
    """Placeholder for version, allocator, script engine and target OS"""

    NO_GIT_VERSION: str = "none"
    """Placeholder revision identifier"""

    VERSION_COMPONENT: int = 0
    """Value of major, minor, patch and extra"""


@dataclass(frozen=True)
class BuildReportLimits:
    """
    Fixed values emitted in the structured build report.

    Attributes:
        MAX_BSON_OBJECT_SIZE: Maximum user document size in bytes (16 MiB)
        SYS_INFO: Value of the legacy ``sysInfo`` field ("deprecated")
        TARGET_MIN_OS_FAMILY: OS family for which ``targetMinOS`` is reported ("windows")

    Example:
        >>> limits = build_report_limits
        >>> print(limits.MAX_BSON_OBJECT_SIZE)
        16777216
    """

    MAX_BSON_OBJECT_SIZE: int = 16 * 1024 * 1024
    """Maximum user document size in bytes"""

    SYS_INFO: str = "deprecated"
    """Legacy field kept for wire compatibility"""

    TARGET_MIN_OS_FAMILY: str = "windows"
    """OS family for which targetMinOS is reported"""


@dataclass(frozen=True)
class TLSProviders:
    """
    Supported TLS backends and their report labels.

    Attributes:
        OPENSSL: OpenSSL backend identifier
        WINDOWS: Windows SChannel backend identifier
        APPLE: Apple Secure Transport backend identifier
        NONE: TLS support disabled
        WINDOWS_LABEL: ``openssl.running`` value for the Windows backend
        APPLE_LABEL: ``openssl.running`` value for the Apple backend
        DISABLED_LABEL: ``openssl.running``/``openssl.compiled`` value without TLS
    """

    OPENSSL: str = "openssl"
    WINDOWS: str = "windows"
    APPLE: str = "apple"
    NONE: str = "none"

    WINDOWS_LABEL: str = "Windows SChannel"
    APPLE_LABEL: str = "Apple Secure Transport"
    DISABLED_LABEL: str = "disabled"

    @property
    def supported(self) -> tuple[str, ...]:
        """All recognized backend identifiers"""
        return (self.OPENSSL, self.WINDOWS, self.APPLE, self.NONE)


@dataclass(frozen=True)
class FrontEndNames:
    """
    Binary names used in ``"<name> v<version>"`` banners.

    Attributes:
        SHELL: Interactive shell banner prefix
        ROUTER: Router-tier process banner prefix
        STORAGE: Storage-tier process banner prefix

    Example:
        >>> print(front_end_names.STORAGE)
        db version
    """

    SHELL: str = "shell version"
    ROUTER: str = "router version"
    STORAGE: str = "db version"


@dataclass(frozen=True)
class ExitCodes:
    """
    Process exit codes.

    Attributes:
        FATAL: Exit code used when the process terminates on a fatal configuration error (14)
    """

    FATAL: int = 14
    """Abrupt termination after a fatal diagnostic"""


# Keys of the structured build report, in emission order
BUILD_INFO_KEYS: tuple[str, ...] = (
    "version",
    "gitVersion",
    "targetMinOS",
    "modules",
    "allocator",
    "javascriptEngine",
    "sysInfo",
    "versionArray",
    "openssl",
    "buildEnvironment",
    "bits",
    "debug",
    "maxBsonObjectSize",
)


# Singleton instances for easy import
fallback_sentinels = FallbackSentinels()
build_report_limits = BuildReportLimits()
tls_providers = TLSProviders()
front_end_names = FrontEndNames()
exit_codes = ExitCodes()
