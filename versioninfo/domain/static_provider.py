"""
Static version info provider

A concrete provider backed by explicit values. Hosts that compute their build
metadata elsewhere (CI variables, a generated manifest) can wrap the result in
StaticVersionInfo and register it.

Usage:
    from versioninfo import StaticVersionInfo, enable

    enable(StaticVersionInfo(major=4, minor=2, patch=1, display_version="4.2.1"))
"""

from dataclasses import dataclass, field

from versioninfo.domain.constants import fallback_sentinels
from versioninfo.domain.provider import BuildInfoField, VersionInfoProvider


@dataclass(frozen=True)
class StaticVersionInfo(VersionInfoProvider):
    """
    Immutable provider holding fixed build metadata.

    Attributes:
        major: Major version component
        minor: Minor version component
        patch: Patch version component
        extra: Extra version component (release candidate or build counter)
        display_version: Human version string, e.g. "4.2.1-rc0"
        git_revision: VCS revision identifier
        module_names: Optional compiled-in components
        allocator_name: Memory allocator name
        js_engine_name: Embedded script engine name
        min_os: Minimum target operating system
        build_fields: Build environment facts in display order

    Example:
        >>> info = StaticVersionInfo(major=1, minor=2, patch=3, extra=4, display_version="1.2.3")
        >>> info.version_array()
        [1, 2, 3, 4]
    """

    major: int = 0
    minor: int = 0
    patch: int = 0
    extra: int = 0
    display_version: str = fallback_sentinels.UNKNOWN
    git_revision: str = fallback_sentinels.NO_GIT_VERSION
    module_names: tuple[str, ...] = ()
    allocator_name: str = fallback_sentinels.UNKNOWN
    js_engine_name: str = fallback_sentinels.UNKNOWN
    min_os: str = fallback_sentinels.UNKNOWN
    build_fields: tuple[BuildInfoField, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """
        Validate version components and freeze sequence fields.

        Raises:
            TypeError: If a version component is not an int, module_names is a bare str
                or holds non-str names, or a build field is not a BuildInfoField
            ValueError: If a version component is negative
        """
        for name in ("major", "minor", "patch", "extra"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be int, got {type(value)}")
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

        # A bare string is iterable and would split into characters
        if isinstance(self.module_names, str):
            raise TypeError(f"module_names must be a sequence of str, got str {self.module_names!r}")
        for module_name in self.module_names:
            if not isinstance(module_name, str):
                raise TypeError(f"module_names must contain str, got {type(module_name)}")

        for build_field in self.build_fields:
            if not isinstance(build_field, BuildInfoField):
                raise TypeError(f"build_fields must contain BuildInfoField, got {type(build_field)}")

        # Accept lists from callers but store tuples
        object.__setattr__(self, "module_names", tuple(self.module_names))
        object.__setattr__(self, "build_fields", tuple(self.build_fields))

    def major_version(self) -> int:
        return self.major

    def minor_version(self) -> int:
        return self.minor

    def patch_version(self) -> int:
        return self.patch

    def extra_version(self) -> int:
        return self.extra

    def version(self) -> str:
        return self.display_version

    def git_version(self) -> str:
        return self.git_revision

    def modules(self) -> list[str]:
        return list(self.module_names)

    def allocator(self) -> str:
        return self.allocator_name

    def js_engine(self) -> str:
        return self.js_engine_name

    def target_min_os(self) -> str:
        return self.min_os

    def build_info(self) -> list[BuildInfoField]:
        return list(self.build_fields)
