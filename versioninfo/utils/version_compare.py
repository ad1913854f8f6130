#!/usr/bin/env python3
"""
Version String Comparison

Extracts major.minor from arbitrary version strings and compares them with a
provider's own version. Unparseable input is a negative result, never an error.

The pattern is anchored at the start and requires a dot after the minor
component, so "4.2.1" and "4.2.x" parse but "4.2" and "v4.2.1" do not.
"""

import re
from typing import Any

from versioninfo.domain.provider import VersionInfoProvider

MAJOR_MINOR_PATTERN = re.compile(r"^(\d+)\.(\d+)\.", re.ASCII)
VERSION_COMPONENTS_PATTERN = re.compile(r"^(\d+)\.(\d+)\.(\d+)", re.ASCII)


def parse_major_minor(version: Any) -> tuple[int, int] | None:
    """
    Extract (major, minor) from the start of a version string.

    Args:
        version: Version string, e.g. "4.2.1-rc0"

    Returns:
        (major, minor), or None if the string does not start with "<digits>.<digits>."

    Example:
        >>> parse_major_minor("4.2.1")
        (4, 2)
        >>> parse_major_minor("4.2") is None
        True
    """
    if not isinstance(version, str):
        return None

    match = MAJOR_MINOR_PATTERN.match(version)
    if match is None:
        return None

    return int(match.group(1)), int(match.group(2))


def parse_version_components(version: Any) -> tuple[int, int, int] | None:
    """
    Extract (major, minor, patch) from the start of a version string.

    Args:
        version: Version string, e.g. "4.2.1-rc0"

    Returns:
        (major, minor, patch), or None if the string does not start with "X.Y.Z"
    """
    if not isinstance(version, str):
        return None

    match = VERSION_COMPONENTS_PATTERN.match(version)
    if match is None:
        return None

    return int(match.group(1)), int(match.group(2)), int(match.group(3))


def is_same_major_minor(provider: VersionInfoProvider, other_version: Any) -> bool:
    """
    Check whether ``other_version`` has the provider's major and minor version.

    Patch and extra components are ignored.

    Args:
        provider: Provider to compare against
        other_version: Version string to parse

    Returns:
        True if major and minor both match, False otherwise or when unparseable
    """
    parsed = parse_major_minor(other_version)
    if parsed is None:
        return False

    major, minor = parsed
    return major == provider.major_version() and minor == provider.minor_version()
