"""
Reports - Structured build report, build info log records and version banners
"""

from .build_info import (
    append_build_info,
    build_environment,
    log_build_info,
    log_environment,
    log_target_min_os,
    openssl_version,
)
from .front_end import make_version_string, router_version, shell_version, storage_version

__all__ = [
    # Build info
    "append_build_info",
    "build_environment",
    "log_environment",
    "log_build_info",
    "log_target_min_os",
    "openssl_version",
    # Banners
    "make_version_string",
    "shell_version",
    "router_version",
    "storage_version",
]
