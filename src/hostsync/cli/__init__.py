"""Unified CLI for hostsync.

Usage:
    hostsync sync [--url U] [--hosts-file F] [--backup-dir D] [--dry-run] [--quiet]
    hostsync show [--hosts-file F]
    hostsync backups list [--hosts-file F] [--backup-dir D]
    hostsync backups restore <backup> [--hosts-file F]
"""

import argparse
import sys

from hostsync import __version__
from hostsync.cli.backups import cmd_backups_list, cmd_backups_restore
from hostsync.cli.sync import cmd_show, cmd_sync


def _add_target_args(p: argparse.ArgumentParser, backups: bool = True) -> None:
    p.add_argument(
        "--hosts-file", default=None,
        help="Hosts file to manage (default: platform hosts file)",
    )
    if backups:
        p.add_argument(
            "--backup-dir", default=None,
            help="Directory for backups (default: beside the hosts file)",
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hostsync",
        description="Sync a marked block of hosts entries from a remote source",
    )
    parser.add_argument(
        "--config", default=None,
        help="Path to a YAML config file (default: $HOSTSYNC_CONFIG)",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    sub = parser.add_subparsers(dest="command")

    # sync
    sync = sub.add_parser("sync", help="Fetch the remote block and update the hosts file")
    sync.add_argument("--url", default=None, help="Remote hosts file URL")
    _add_target_args(sync)
    sync.add_argument(
        "--dry-run", action="store_true",
        help="Report changes without writing",
    )
    sync.add_argument(
        "--quiet", action="store_true",
        help="Only print errors and the summary",
    )

    # show
    show = sub.add_parser("show", help="Print the block currently in the hosts file")
    _add_target_args(show, backups=False)

    # backups
    bak = sub.add_parser("backups", help="Backup operations")
    bak_sub = bak.add_subparsers(dest="subcommand")
    bak_ls = bak_sub.add_parser("list", help="List backups of the hosts file")
    _add_target_args(bak_ls)
    bak_restore = bak_sub.add_parser("restore", help="Restore the hosts file from a backup")
    bak_restore.add_argument("backup", help="Backup file to restore")
    _add_target_args(bak_restore, backups=False)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    dispatch = {
        ("sync", ""): cmd_sync,
        ("show", ""): cmd_show,
        ("backups", "list"): cmd_backups_list,
        ("backups", "restore"): cmd_backups_restore,
    }

    subcommand: str | None = getattr(args, "subcommand", None)
    handler = dispatch.get((args.command, subcommand or ""))
    if handler:
        return handler(args)

    parser.parse_args([args.command, "--help"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
