"""Error kinds raised by the synchronizer.

Each kind maps to the step that aborted the run. All of them are terminal:
the caller reports them and stops, nothing is retried.
"""

from __future__ import annotations

from pathlib import Path


class HostSyncError(Exception):
    """Base class for every abort path of a sync run."""

    step = "sync"

    def __str__(self) -> str:
        return self.args[0] if self.args else self.step


class PrivilegeError(HostSyncError):
    step = "privilege"


class FetchError(HostSyncError):
    step = "fetch"

    def __init__(self, message: str, url: str = ""):
        super().__init__(message)
        self.url = url


class MalformedSourceError(HostSyncError):
    step = "extract"


class TargetMalformedError(HostSyncError):
    step = "target"


class BackupError(HostSyncError):
    step = "backup"


class WriteError(HostSyncError):
    step = "commit"

    def __init__(self, message: str, backup: Path | None = None):
        if backup is not None:
            message = f"{message}. Restore manually from the backup: {backup}"
        super().__init__(message)
        self.backup = backup
