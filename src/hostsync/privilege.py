"""Elevated-privilege check, run before any network or file work."""

from __future__ import annotations

import ctypes
import os
import platform

from hostsync.errors import PrivilegeError


def is_privileged() -> bool:
    """Return True when running as root (POSIX) or as an administrator (Windows)."""
    if platform.system() == "Windows":
        try:
            return bool(ctypes.windll.shell32.IsUserAnAdmin())
        except (AttributeError, OSError):
            return False
    if hasattr(os, "geteuid"):
        return os.geteuid() == 0
    return False


def require_privilege() -> None:
    """Raise PrivilegeError unless the process may write the hosts file."""
    if is_privileged():
        return
    if platform.system() == "Windows":
        hint = "Run it from an elevated (Administrator) prompt."
    else:
        hint = "Run it as root (e.g., using sudo)."
    raise PrivilegeError(f"This command must be run with administrative privileges. {hint}")
