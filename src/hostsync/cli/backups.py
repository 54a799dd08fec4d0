"""Backup CLI commands."""

import argparse
from datetime import datetime
from pathlib import Path

from hostsync.backup import list_backups, restore_backup
from hostsync.cli.sync import report_error
from hostsync.config import load_settings
from hostsync.errors import HostSyncError
from hostsync.privilege import require_privilege


def cmd_backups_list(args: argparse.Namespace) -> int:
    try:
        settings = load_settings(
            args.config, hosts_file=args.hosts_file, backup_dir=args.backup_dir,
        )
    except (ValueError, OSError) as e:
        return report_error(e)

    backups = list_backups(Path(settings.hosts_file), settings.backup_dir)
    if not backups:
        print(f"No backups of {settings.hosts_file}")
        return 0

    print(f"Backups of {settings.hosts_file}")
    print("─" * 40)
    for p in backups:
        stamp = datetime.fromtimestamp(p.stat().st_mtime).strftime("%Y-%m-%d %H:%M:%S")
        print(f"  {stamp}  {p.stat().st_size:>8}  {p}")
    print(f"\n  {len(backups)} backup(s)")
    return 0


def cmd_backups_restore(args: argparse.Namespace) -> int:
    try:
        require_privilege()
        settings = load_settings(args.config, hosts_file=args.hosts_file)
        restore_backup(Path(args.backup).expanduser(), Path(settings.hosts_file))
    except (HostSyncError, ValueError, OSError) as e:
        return report_error(e)

    print(f"Restored {settings.hosts_file} from {args.backup}")
    return 0
