"""
Fallback provider returning sentinel values.

Used by the registry when no provider has been enabled and the caller asked
for best-effort behaviour.
"""

from versioninfo.domain.constants import fallback_sentinels
from versioninfo.domain.provider import BuildInfoField, VersionInfoProvider


class FallbackVersionInfo(VersionInfoProvider):
    """Provider whose every field is a fixed sentinel ("unknown", "none", 0)."""

    def major_version(self) -> int:
        return fallback_sentinels.VERSION_COMPONENT

    def minor_version(self) -> int:
        return fallback_sentinels.VERSION_COMPONENT

    def patch_version(self) -> int:
        return fallback_sentinels.VERSION_COMPONENT

    def extra_version(self) -> int:
        return fallback_sentinels.VERSION_COMPONENT

    def version(self) -> str:
        return fallback_sentinels.UNKNOWN

    def git_version(self) -> str:
        return fallback_sentinels.NO_GIT_VERSION

    def modules(self) -> list[str]:
        return [fallback_sentinels.UNKNOWN]

    def allocator(self) -> str:
        return fallback_sentinels.UNKNOWN

    def js_engine(self) -> str:
        return fallback_sentinels.UNKNOWN

    def target_min_os(self) -> str:
        return fallback_sentinels.UNKNOWN

    def build_info(self) -> list[BuildInfoField]:
        return []

    def __repr__(self) -> str:
        return "FallbackVersionInfo()"
