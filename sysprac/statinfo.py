"""Describe a file's metadata."""

from __future__ import annotations

import os
import stat
import sys
import time

_TYPES = {
    stat.S_IFBLK: "block device",
    stat.S_IFCHR: "character device",
    stat.S_IFDIR: "directory",
    stat.S_IFIFO: "FIFO/pipe",
    stat.S_IFLNK: "symbolic link",
    stat.S_IFREG: "regular file",
    stat.S_IFSOCK: "socket",
}


def file_type(mode: int) -> str:
    """Name the file type encoded in *mode*."""
    return _TYPES.get(stat.S_IFMT(mode), "unknown?")


def describe(path: str) -> str:
    """Return a multi-line report on the file at *path* (symlinks followed)."""
    st = os.stat(path)
    lines = [
        f"File type:                {file_type(st.st_mode)}",
        f"I-node number:            {st.st_ino}",
        f"Mode:                     {st.st_mode:o} (octal)",
        f"Link count:               {st.st_nlink}",
        f"Ownership:                UID={st.st_uid}    GID={st.st_gid}",
        f"Preferred I/O block size: {st.st_blksize} bytes",
        f"File size:                {st.st_size} bytes",
        f"Blocks allocated:         {st.st_blocks}",
        f"Last status change:       {time.ctime(st.st_ctime)}",
        f"Last file access:         {time.ctime(st.st_atime)}",
        f"Last file modification:   {time.ctime(st.st_mtime)}",
    ]
    return "\n".join(lines) + "\n"


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: stat <pathname>", file=sys.stderr)
        return 1
    try:
        report = describe(args[0])
    except OSError as exc:
        print(f"stat: {exc.strerror}", file=sys.stderr)
        return 1
    sys.stdout.write(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())