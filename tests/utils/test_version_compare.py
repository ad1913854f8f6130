"""
Tests for version string comparison
"""

import pytest

from versioninfo.domain.static_provider import StaticVersionInfo
from versioninfo.utils.version_compare import (
    is_same_major_minor,
    parse_major_minor,
    parse_version_components,
)


@pytest.fixture
def provider_4_2():
    """Provider for version 4.2.7"""
    return StaticVersionInfo(major=4, minor=2, patch=7, display_version="4.2.7")


class TestParseMajorMinor:
    """Tests for parse_major_minor()"""

    @pytest.mark.parametrize(
        "version,expected",
        [
            ("4.2.1", (4, 2)),
            ("10.0.0-rc1", (10, 0)),
            ("4.2.", (4, 2)),
            ("4.2.x", (4, 2)),
            ("04.02.1", (4, 2)),
        ],
    )
    def test_parses(self, version, expected):
        assert parse_major_minor(version) == expected

    @pytest.mark.parametrize("version", ["4.2", "10.0", "garbage", "", "v4.2.1", " 4.2.1", "4..1", None, 42])
    def test_rejects(self, version):
        assert parse_major_minor(version) is None

    @pytest.mark.parametrize("version", ["\u0664.\u0662.1", "\uff14.\uff12.1", "4.\u0662.1"])
    def test_rejects_non_ascii_digits(self, version):
        assert parse_major_minor(version) is None


class TestParseVersionComponents:
    """Tests for parse_version_components()"""

    def test_parses(self):
        assert parse_version_components("4.2.1-rc0") == (4, 2, 1)

    def test_rejects_two_components(self):
        assert parse_version_components("4.2") is None

    def test_rejects_non_ascii_digits(self):
        assert parse_version_components("4.2.\u0661") is None


class TestIsSameMajorMinor:
    """Tests for is_same_major_minor()"""

    def test_same_major_minor(self, provider_4_2):
        assert is_same_major_minor(provider_4_2, "4.2.1") is True

    def test_patch_and_suffix_ignored(self, provider_4_2):
        assert is_same_major_minor(provider_4_2, "4.2.0-rc3") is True

    def test_different_minor(self, provider_4_2):
        assert is_same_major_minor(provider_4_2, "4.3.0") is False

    def test_different_major(self, provider_4_2):
        assert is_same_major_minor(provider_4_2, "5.2.0") is False

    def test_garbage(self, provider_4_2):
        assert is_same_major_minor(provider_4_2, "garbage") is False

    def test_missing_trailing_dot(self, provider_4_2):
        """A bare "major.minor" does not parse and is not a match"""
        assert is_same_major_minor(provider_4_2, "4.2") is False

    def test_non_string(self, provider_4_2):
        assert is_same_major_minor(provider_4_2, None) is False

    def test_provider_method(self, provider_4_2):
        assert provider_4_2.is_same_major_version("4.2.9") is True
        assert provider_4_2.is_same_major_version("4.20.0") is False
