"""Print the last lines of a file."""

from __future__ import annotations

import errno
import re
import sys

_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def _atoi(text: str) -> int:
    match = _INT.match(text)
    return int(match.group(1)) if match else 0


def tail_bytes(data: bytes, count: int) -> bytes:
    """Return the tail of *data* holding its last *count* lines.

    The scan runs backwards from the final byte and stops after passing
    *count* + 1 newlines, so a final line without a newline counts as
    sharing a line with the one before it.
    """
    if count < 0:
        raise ValueError("line count must not be negative")
    if not data:
        raise OSError(errno.EINVAL, "Invalid argument")
    remaining = count + 1
    position = len(data) - 1
    offset = position
    while remaining > 0:
        byte = data[position]
        position += 1
        if byte == 0x0A:
            remaining -= 1
        if position - 2 < 0:
            offset = -1
            break
        position -= 2
        offset = position
    if offset > 0 or remaining == 0:
        position += 2
    else:
        position = 0
    return data[position:]


def tail_file(path: str, count: int) -> bytes:
    """Return the last *count* lines of the file at *path*."""
    with open(path, "rb") as handle:
        return tail_bytes(handle.read(), count)


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2 or len(args[0]) <= 1 or not args[0].startswith("-"):
        print("Usage: mytail -<offset> <filename>", file=sys.stderr)
        return 1
    count = -_atoi(args[0])
    try:
        result = tail_file(args[1], count)
    except OSError as exc:
        print(f"mytail: {exc.strerror}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"mytail: {exc}", file=sys.stderr)
        return 1
    sys.stdout.flush()
    sys.stdout.buffer.write(result)
    sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())