"""Sync CLI commands."""

import argparse
import sys

from hostsync.config import load_settings
from hostsync.errors import HostSyncError
from hostsync.privilege import require_privilege


def report_error(e: Exception) -> int:
    """Print a one-line failure reason to stderr and return the exit code."""
    step = getattr(e, "step", "config")
    print(f"ERROR: [{step}] {e}", file=sys.stderr)
    return 1


def cmd_sync(args: argparse.Namespace) -> int:
    from hostsync.sync import sync_hosts

    try:
        # before the config file is read
        if not args.dry_run:
            require_privilege()
        settings = load_settings(
            args.config,
            url=args.url,
            hosts_file=args.hosts_file,
            backup_dir=args.backup_dir,
        )
        result = sync_hosts(settings, dry_run=args.dry_run)
    except (HostSyncError, ValueError, OSError) as e:
        return report_error(e)

    if not args.quiet:
        for line in result.details:
            print(f"[INFO] {line}")
        print()
    print(result.summary())
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    from hostsync.sync import read_local_block

    try:
        settings = load_settings(args.config, hosts_file=args.hosts_file)
        block = read_local_block(settings)
    except (HostSyncError, ValueError, OSError) as e:
        return report_error(e)

    if block is None:
        print(f"No managed block in {settings.hosts_file}")
        return 1
    sys.stdout.write(block)
    return 0
