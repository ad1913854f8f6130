"""
Pytest configuration and shared fixtures

Provides common fixtures for providers, build targets and isolated registry state.
"""

import pytest

from versioninfo.core import config as config_module
from versioninfo.core import registry as registry_module
from versioninfo.domain.build_target import BuildTarget
from versioninfo.domain.provider import BuildInfoField
from versioninfo.domain.static_provider import StaticVersionInfo

# ===== Registry Isolation =====


@pytest.fixture(autouse=True)
def isolated_registry(monkeypatch):
    """Start every test with no enabled provider and no fallback instance"""
    monkeypatch.setattr(registry_module, "_global_version_info", None)
    monkeypatch.setattr(registry_module, "_fallback_version_info", None)


@pytest.fixture
def fresh_config(monkeypatch):
    """Drop the cached configuration so env changes are picked up"""
    monkeypatch.setattr(config_module, "_config_instance", None)
    for name in (
        "VERSIONINFO_LOG_LEVEL",
        "VERSIONINFO_LOG_JSON",
        "VERSIONINFO_LOG_FILE",
        "VERSIONINFO_TARGET_OS",
        "VERSIONINFO_TLS_PROVIDER",
        "VERSIONINFO_DEBUG_BUILD",
        "VERSIONINFO_MANIFEST",
        "VERSIONINFO_VERSION",
        "VERSIONINFO_GIT_VERSION",
        "VERSIONINFO_MODULES",
        "VERSIONINFO_ALLOCATOR",
        "VERSIONINFO_JS_ENGINE",
        "VERSIONINFO_TARGET_MIN_OS",
        "SENTRY_DSN",
    ):
        monkeypatch.delenv(name, raising=False)
    return config_module


# ===== Domain Fixtures =====


@pytest.fixture
def sample_build_fields():
    """Build fields mixing reported, unreported and empty entries"""
    return [
        BuildInfoField("distmod", "ubuntu2204", True),
        BuildInfoField("cc", "gcc 12.2", True),
        BuildInfoField("ccflags", "", True),
        BuildInfoField("secret_path", "/opt/build", False),
        BuildInfoField("target_arch", "x86_64", True),
    ]


@pytest.fixture
def sample_provider(sample_build_fields):
    """Provide a StaticVersionInfo for version 1.2.3 with extra 4"""
    return StaticVersionInfo(
        major=1,
        minor=2,
        patch=3,
        extra=4,
        display_version="1.2.3-rc4",
        git_revision="3f1c2a9e",
        module_names=("enterprise", "ldap"),
        allocator_name="tcmalloc",
        js_engine_name="mozjs",
        min_os="Windows 7/Windows Server 2008 R2",
        build_fields=tuple(sample_build_fields),
    )


@pytest.fixture
def linux_openssl_target():
    """Linux build linked against OpenSSL"""
    return BuildTarget(
        os_family="linux",
        tls_provider="openssl",
        tls_running_version="OpenSSL 3.0.2 15 Mar 2022",
        tls_compiled_version="OpenSSL 3.0.2 15 Mar 2022",
        bits=64,
        debug=False,
    )


@pytest.fixture
def windows_target():
    """Windows build using SChannel"""
    return BuildTarget(os_family="windows", tls_provider="windows", bits=64, debug=True)
