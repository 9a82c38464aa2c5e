"""List a file or the entries of a directory, optionally with their metadata."""

from __future__ import annotations

import os
import stat
import sys
import time
from typing import Iterator


def format_stat(st: os.stat_result) -> str:
    """Render mode, links, owner, group, size and modification time as a prefix."""
    modified = time.strftime("%b %d %H:%M", time.localtime(st.st_mtime))
    return (
        f"{st.st_mode:4o}  {st.st_nlink:3d}  {st.st_uid:3d}  {st.st_gid:3d}  "
        f"{st.st_size:4d}  {modified}  "
    )


def _entries(path: str) -> Iterator[str]:
    yield "."
    yield ".."
    with os.scandir(path) as entries:
        for entry in entries:
            yield entry.name


def list_path(path: str, long_format: bool = False) -> Iterator[str]:
    """Yield one output line per entry of *path*, or one line for a non-directory."""
    info = os.stat(path)
    if not stat.S_ISDIR(info.st_mode):
        yield (format_stat(info) if long_format else "") + path
        return
    for name in _entries(path):
        if long_format:
            yield format_stat(os.stat(path + "/" + name)) + name
        else:
            yield name


def _parse(args: list[str]) -> tuple[bool, str]:
    """Scan for -l the way getopt does with unknown options ignored."""
    listing = False
    pathname = "."
    remaining = iter(args)
    for arg in remaining:
        if arg == "--":
            break
        if not arg.startswith("-") or arg == "-":
            continue
        flags = arg[1:]
        position = flags.find("l")
        if position == -1:
            continue
        listing = True
        value = flags[position + 1:] or next(remaining, None)
        if value is not None:
            pathname = value
    return listing, pathname


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    listing, pathname = _parse(args)
    if not listing and args:
        pathname = args[0]
    try:
        for line in list_path(pathname, listing):
            print(line)
    except OSError as exc:
        print(f"myls: {exc.filename}: {exc.strerror}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())