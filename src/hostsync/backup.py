"""Timestamped backups of the hosts file.

Backups are named ``<name>.bak_<YYYYmmdd_HHMMSS>`` and live beside the
hosts file unless a backup directory is configured. They are never
removed by hostsync.
"""

from __future__ import annotations

import shutil
from datetime import datetime
from pathlib import Path

from hostsync.errors import BackupError
from hostsync.writer import atomic_write, read_text

TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"


def backup_path_for(
    target: Path,
    when: datetime | None = None,
    backup_dir: Path | None = None,
) -> Path:
    """Return a fresh backup path for ``target``.

    Two runs within the same second get ``_1``, ``_2``, ... appended so an
    earlier backup is never overwritten.
    """
    when = when or datetime.now()
    directory = Path(backup_dir) if backup_dir else target.parent
    base = f"{target.name}.bak_{when.strftime(TIMESTAMP_FORMAT)}"
    candidate = directory / base
    n = 1
    while candidate.exists():
        candidate = directory / f"{base}_{n}"
        n += 1
    return candidate


def create_backup(
    target: Path,
    when: datetime | None = None,
    backup_dir: Path | None = None,
) -> Path:
    """Copy ``target`` to a new timestamped backup and return its path.

    Raises:
        BackupError: The copy could not be made.
    """
    dest = backup_path_for(target, when, backup_dir)
    try:
        dest.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(target, dest)
    except OSError as e:
        raise BackupError(f"Failed to create backup file {dest}: {e}") from e
    return dest


def list_backups(target: Path, backup_dir: Path | None = None) -> list[Path]:
    """List existing backups of ``target``, oldest first."""
    directory = Path(backup_dir) if backup_dir else target.parent
    if not directory.is_dir():
        return []
    prefix = f"{target.name}.bak_"
    found = [p for p in directory.iterdir() if p.is_file() and p.name.startswith(prefix)]
    return sorted(found, key=lambda p: (p.name[len(prefix):], p.stat().st_mtime))


def restore_backup(backup: Path, target: Path) -> None:
    """Put the contents of ``backup`` back in place of ``target``.

    Raises:
        BackupError: The backup does not exist or cannot be read.
        WriteError: The target could not be replaced.
    """
    try:
        content = read_text(backup)
    except OSError as e:
        raise BackupError(f"Cannot read backup {backup}: {e}") from e
    atomic_write(target, content, backup=backup)
