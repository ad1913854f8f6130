"""
Version info provider capability

Defines the contract every source of build metadata satisfies:
    - BuildInfoField: one labeled build/environment fact
    - VersionInfoProvider: abstract provider with shared reporting helpers

Concrete providers only implement the accessors. Comparison, report building
and logging are inherited, so every provider serializes the same way.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from logging import Logger
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from versioninfo.domain.build_target import BuildTarget


@dataclass(frozen=True)
class BuildInfoField:
    """
    A compiler or build-environment fact.

    Attributes:
        key: Field name (e.g. "cc", "ccflags")
        value: Field value, may be empty
        in_build_info: Whether the field belongs in the structured build report

    Example:
        >>> field = BuildInfoField("cc", "gcc 12.2", True)
        >>> field.in_build_info
        True
    """

    key: str
    value: str
    in_build_info: bool = True


class VersionInfoProvider(ABC):
    """
    Base class for version metadata providers.

    Subclasses must implement the accessors below. Values are expected to stay
    constant for the lifetime of the provider.
    """

    @abstractmethod
    def major_version(self) -> int:
        pass

    @abstractmethod
    def minor_version(self) -> int:
        pass

    @abstractmethod
    def patch_version(self) -> int:
        pass

    @abstractmethod
    def extra_version(self) -> int:
        pass

    @abstractmethod
    def version(self) -> str:
        """Display version, e.g. "4.2.1-rc0" """
        pass

    @abstractmethod
    def git_version(self) -> str:
        pass

    @abstractmethod
    def modules(self) -> list[str]:
        pass

    @abstractmethod
    def allocator(self) -> str:
        pass

    @abstractmethod
    def js_engine(self) -> str:
        pass

    @abstractmethod
    def target_min_os(self) -> str:
        pass

    @abstractmethod
    def build_info(self) -> list[BuildInfoField]:
        """Build facts in display order"""
        pass

    def version_array(self) -> list[int]:
        """
        Get the four version components in ordering-key order.

        Returns:
            [major, minor, patch, extra]
        """
        return [self.major_version(), self.minor_version(), self.patch_version(), self.extra_version()]

    def is_same_major_version(self, other_version: str) -> bool:
        """
        Check whether ``other_version`` shares this provider's major.minor.

        Args:
            other_version: Version string such as "4.2.1"

        Returns:
            True on a major/minor match, False otherwise (including unparseable input)
        """
        from versioninfo.utils.version_compare import is_same_major_minor

        return is_same_major_minor(self, other_version)

    def make_version_string(self, binary_name: str) -> str:
        from versioninfo.reports.front_end import make_version_string

        return make_version_string(self, binary_name)

    def append_build_info(
        self, result: dict[str, Any] | None = None, target: "BuildTarget | None" = None
    ) -> dict[str, Any]:
        """
        Append the structured build report to ``result``.

        See :func:`versioninfo.reports.build_info.append_build_info`.
        """
        from versioninfo.reports.build_info import append_build_info

        return append_build_info(self, result=result, target=target)

    def openssl_version(self, prefix: str = "", suffix: str = "", target: "BuildTarget | None" = None) -> str:
        from versioninfo.reports.build_info import openssl_version

        return openssl_version(target, prefix=prefix, suffix=suffix)

    def log_build_info(self, logger: Logger | None = None, target: "BuildTarget | None" = None) -> None:
        from versioninfo.reports.build_info import log_build_info

        log_build_info(self, logger=logger, target=target)

    def log_target_min_os(self, logger: Logger | None = None) -> None:
        from versioninfo.reports.build_info import log_target_min_os

        log_target_min_os(self, logger=logger)
