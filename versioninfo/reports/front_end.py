"""
Front-end version banners

Usage:
    from versioninfo.reports.front_end import shell_version

    print(shell_version(info))  # "shell version v4.2.1"
"""

from versioninfo.domain.constants import front_end_names
from versioninfo.domain.provider import VersionInfoProvider


def make_version_string(provider: VersionInfoProvider, binary_name: str) -> str:
    """Return "<binary_name> v<version>"."""
    return f"{binary_name} v{provider.version()}"


def shell_version(provider: VersionInfoProvider) -> str:
    return make_version_string(provider, front_end_names.SHELL)


def router_version(provider: VersionInfoProvider) -> str:
    return make_version_string(provider, front_end_names.ROUTER)


def storage_version(provider: VersionInfoProvider) -> str:
    return make_version_string(provider, front_end_names.STORAGE)
