"""
Domain Models - Version metadata providers and build targets

This package contains the types shared by the registry and the reporters:
    - provider: BuildInfoField, VersionInfoProvider
    - fallback: FallbackVersionInfo
    - static_provider: StaticVersionInfo
    - build_target: BuildTarget

Usage:
    from versioninfo.domain import StaticVersionInfo

    info = StaticVersionInfo(major=4, minor=2, patch=1, display_version="4.2.1")
    if info.is_same_major_version("4.2.0"):
        print("compatible")
"""

from .build_target import BuildTarget
from .fallback import FallbackVersionInfo
from .provider import BuildInfoField, VersionInfoProvider
from .static_provider import StaticVersionInfo

__all__ = [
    # Capability
    "BuildInfoField",
    "VersionInfoProvider",
    # Providers
    "FallbackVersionInfo",
    "StaticVersionInfo",
    # Platform
    "BuildTarget",
]
