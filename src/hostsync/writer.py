"""Atomic replacement of the hosts file."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from hostsync.errors import WriteError

ENCODING = "utf-8"
# Undecodable bytes round-trip unchanged through read_text/atomic_write
ERRORS = "surrogateescape"


def read_text(path: Path) -> str:
    """Read a file without newline translation."""
    with open(path, encoding=ENCODING, errors=ERRORS, newline="") as f:
        return f.read()


def atomic_write(path: Path | str, content: str, backup: Path | None = None) -> None:
    """Replace ``path`` with ``content`` via a temp file and rename.

    The original file's mode (and owner, where permitted) is carried over.
    Concurrent readers see either the old or the new file, never a mix.
    A symlinked path is written through: the link stays, its target changes.

    Raises:
        WriteError: The temp file could not be written or renamed. The
            message names ``backup`` when one was taken.
    """
    target = Path(path).resolve()
    tmp_name = None
    try:
        st = target.stat() if target.exists() else None
        fd, tmp_name = tempfile.mkstemp(
            dir=str(target.parent), prefix=f".{target.name}.", suffix=".tmp",
        )
        with os.fdopen(fd, "wb") as tmp:
            tmp.write(content.encode(ENCODING, errors=ERRORS))
            tmp.flush()
            os.fsync(tmp.fileno())
        if st is not None:
            os.chmod(tmp_name, st.st_mode & 0o7777)
            if hasattr(os, "chown"):
                try:
                    os.chown(tmp_name, st.st_uid, st.st_gid)
                except PermissionError:
                    pass  # not root: keep our own ownership
        os.replace(tmp_name, target)
        tmp_name = None
    except OSError as e:
        raise WriteError(f"Failed to write updated content to {target}: {e}", backup=backup) from e
    finally:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
