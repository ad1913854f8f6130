"""
Build target description

BuildTarget captures the platform facts a build report describes: OS family,
TLS backend and its versions, pointer width and whether the interpreter is a
debug build. Reporters take a BuildTarget so both sides of platform-dependent
fields can be produced on any host.
"""

import struct
import sys
from dataclasses import dataclass

from versioninfo.domain.constants import build_report_limits, tls_providers


def _detect_os_family() -> str:
    if sys.platform.startswith("win"):
        return "windows"
    if sys.platform == "darwin":
        return "darwin"
    if sys.platform.startswith("linux"):
        return "linux"
    return sys.platform


def _format_openssl_version_info(version_info: tuple[int, ...]) -> str:
    """
    Render an OpenSSL version tuple (major, minor, fix, patch, status) as text.

    OpenSSL 1.x encodes the patch as a letter suffix ("1.1.1w"); 3.x does not.
    """
    major, minor, fix, patch = version_info[:4]
    letter = chr(ord("a") + patch - 1) if major < 3 and patch else ""
    return f"OpenSSL {major}.{minor}.{fix}{letter}"


@dataclass(frozen=True)
class BuildTarget:
    """
    Platform facts for the running binary.

    Attributes:
        os_family: "windows", "linux", "darwin", ...
        tls_provider: One of openssl, windows, apple, none
        tls_running_version: Version text of the TLS library in use
        tls_compiled_version: Version text of the TLS library the binary was built against
        bits: Pointer width in bits (32 or 64)
        debug: Whether this is a debug build

    Example:
        >>> target = BuildTarget(os_family="windows", tls_provider="windows")
        >>> target.reports_target_min_os
        True
    """

    os_family: str = "linux"
    tls_provider: str = tls_providers.NONE
    tls_running_version: str = ""
    tls_compiled_version: str = ""
    bits: int = 64
    debug: bool = False

    def __post_init__(self) -> None:
        """
        Reject unknown TLS backends and impossible pointer widths.

        Raises:
            ValueError: If tls_provider is not a supported backend or bits is not 32/64
        """
        if self.tls_provider not in tls_providers.supported:
            raise ValueError(
                f"Unknown TLS provider: {self.tls_provider!r}. " f"Expected one of {', '.join(tls_providers.supported)}"
            )
        if self.bits not in (32, 64):
            raise ValueError(f"bits must be 32 or 64, got {self.bits}")

    @property
    def reports_target_min_os(self) -> bool:
        """Whether targetMinOS is meaningful on this OS family"""
        return self.os_family == build_report_limits.TARGET_MIN_OS_FAMILY

    @property
    def uses_openssl(self) -> bool:
        return self.tls_provider == tls_providers.OPENSSL

    @classmethod
    def detect(cls) -> "BuildTarget":
        """
        Describe the running interpreter.

        The TLS backend is OpenSSL whenever the ``ssl`` module can be imported,
        which is the case for CPython on every platform; otherwise TLS is disabled.

        The running version is the linked library's full version text. The
        compiled version comes from the headers ``_ssl`` was built against
        (``ssl._OPENSSL_API_VERSION``) and carries no build date. Interpreters
        without that attribute report the running text for both.

        Returns:
            BuildTarget for the current process
        """
        try:
            import ssl
        except ImportError:
            tls_provider = tls_providers.NONE
            running = compiled = ""
        else:
            tls_provider = tls_providers.OPENSSL
            running = ssl.OPENSSL_VERSION
            api_version = getattr(ssl, "_OPENSSL_API_VERSION", None)
            compiled = _format_openssl_version_info(api_version) if api_version else running

        return cls(
            os_family=_detect_os_family(),
            tls_provider=tls_provider,
            tls_running_version=running,
            tls_compiled_version=compiled,
            bits=struct.calcsize("P") * 8,
            # Only debug CPython builds expose the refcount hook
            debug=hasattr(sys, "gettotalrefcount"),
        )
