"""Hosts block sync — brings the marked block in the hosts file up to date.

The sync process:
1. Check privileges (skipped for dry runs)
2. Fetch the remote hosts file
3. Extract the marked block from it
4. Read the local hosts file and splice the block in (replace or append)
5. Back up the local hosts file
6. Atomically replace the local hosts file

Any failure aborts the run before the hosts file is touched. Only a failed
commit can happen after the backup, and its error names the backup.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Callable

from hostsync.backup import create_backup
from hostsync.block import extract_block, read_block, splice_block
from hostsync.config import Settings
from hostsync.errors import TargetMalformedError
from hostsync.fetch import fetch_remote
from hostsync.privilege import require_privilege
from hostsync.writer import atomic_write, read_text


@dataclass
class SyncResult:
    """Result of a hosts sync run."""

    hosts_file: Path
    action: str = ""
    changed: bool = False
    backup: Path | None = None
    block_lines: int = 0
    dry_run: bool = False
    details: list[str] = field(default_factory=list)

    def summary(self) -> str:
        lines = []
        lines.append("Hosts Sync Results")
        lines.append("─" * 40)
        lines.append(f"  Hosts file: {self.hosts_file}")
        lines.append(f"  Action:     {self.action}")
        lines.append(f"  Changed:    {'yes' if self.changed else 'no'}")
        lines.append(f"  Block:      {self.block_lines} lines")
        if self.backup:
            lines.append(f"  Backup:     {self.backup}")
        if self.dry_run:
            lines.append("\n[DRY RUN] No files were modified.")
        return "\n".join(lines)

    def to_dict(self) -> dict:
        return {
            "hosts_file": str(self.hosts_file),
            "action": self.action,
            "changed": self.changed,
            "backup": str(self.backup) if self.backup else None,
            "block_lines": self.block_lines,
            "dry_run": self.dry_run,
        }


def _read_target(path: Path) -> str:
    try:
        return read_text(path)
    except OSError as e:
        raise TargetMalformedError(f"Failed to read the hosts file ({path}): {e}") from e


def sync_hosts(
    settings: Settings,
    dry_run: bool = False,
    fetcher: Callable[..., str] | None = None,
    privilege_check: Callable[[], None] | None = None,
    now: datetime | None = None,
) -> SyncResult:
    """Run one full sync of the marked block.

    Args:
        settings: Resolved settings (URL, hosts file, markers, timeouts).
        dry_run: Compute the new content but take no backup and write nothing.
        fetcher: Called as ``fetcher(url, connect_timeout=, total_timeout=)``.
            Defaults to fetch_remote.
        privilege_check: Raises PrivilegeError when not allowed to write.
            Defaults to require_privilege.
        now: Timestamp for the backup name. Defaults to the current time.

    Returns:
        SyncResult describing what was (or would be) done.

    Raises:
        HostSyncError: One of its subclasses, naming the step that failed.
    """
    fetcher = fetcher or fetch_remote
    privilege_check = privilege_check or require_privilege

    target = Path(settings.hosts_file)
    result = SyncResult(hosts_file=target, dry_run=dry_run)

    if not dry_run:
        privilege_check()

    result.details.append(f"Downloading hosts content from {settings.url}...")
    remote = fetcher(
        settings.url,
        connect_timeout=settings.connect_timeout,
        total_timeout=settings.total_timeout,
    )
    result.details.append("Download successful.")

    block = extract_block(remote, settings.start_marker, settings.end_marker)
    result.block_lines = block.count("\n")
    result.details.append(f"Block extracted successfully ({result.block_lines} lines).")

    current = _read_target(target)
    new_content, action = splice_block(
        current, block, settings.start_marker, settings.end_marker,
    )
    result.action = action
    result.changed = new_content != current
    if action == "replaced":
        result.details.append("Existing block found in the hosts file. Replacing it.")
    else:
        result.details.append("Block not found in the hosts file. Appending it.")

    if dry_run:
        return result

    result.backup = create_backup(target, when=now, backup_dir=settings.backup_dir)
    result.details.append(f"Backed up current hosts file to {result.backup}.")

    atomic_write(target, new_content, backup=result.backup)
    result.details.append(f"Hosts file {target} updated successfully.")
    return result


def read_local_block(settings: Settings) -> str | None:
    """Return the block currently in the hosts file, or None if absent."""
    current = _read_target(Path(settings.hosts_file))
    return read_block(current, settings.start_marker, settings.end_marker)
