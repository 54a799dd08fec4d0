"""Hosts file path resolution.

Resolves the platform's name-resolution override file. Uses environment
variables when available, falls back to conventional defaults.

Environment variables:
    HOSTSYNC_HOSTS_FILE — hosts file to manage (default: platform hosts file)
    HOSTSYNC_BACKUP_DIR — where backups go (default: beside the hosts file)
    HOSTSYNC_CONFIG — YAML config file (default: none)
"""

from __future__ import annotations

import os
import platform
from pathlib import Path

_POSIX_HOSTS = Path("/etc/hosts")
_WINDOWS_HOSTS_SUBPATH = Path("System32") / "drivers" / "etc" / "hosts"


def default_hosts_path(system: str | None = None) -> Path:
    """Return the conventional hosts file location for the given platform."""
    system = system or platform.system()
    if system == "Windows":
        root = os.environ.get("SystemRoot", r"C:\Windows")
        return Path(root) / _WINDOWS_HOSTS_SUBPATH
    return _POSIX_HOSTS


def hosts_path() -> Path:
    """Return the hosts file to manage."""
    env = os.environ.get("HOSTSYNC_HOSTS_FILE")
    if env:
        return Path(env).expanduser()
    return default_hosts_path()


def backup_dir() -> Path | None:
    """Return the configured backup directory, or None for 'beside the target'."""
    env = os.environ.get("HOSTSYNC_BACKUP_DIR")
    return Path(env).expanduser() if env else None


def config_path() -> Path | None:
    """Return the config file named by HOSTSYNC_CONFIG, if any."""
    env = os.environ.get("HOSTSYNC_CONFIG")
    return Path(env).expanduser() if env else None
