"""Run-length compression: each run is a 4-byte little-endian count and the byte."""

from __future__ import annotations

import struct
import sys
from functools import partial
from typing import Iterable, Iterator

_RECORD = struct.Struct("<iB")
_CHUNK = 65536


def encode_runs(chunks: Iterable[bytes]) -> Iterator[tuple[int, int]]:
    """Yield (count, byte) runs; runs continue across chunk boundaries."""
    current = None
    count = 0
    for chunk in chunks:
        for byte in chunk:
            if byte == current:
                count += 1
            else:
                if current is not None:
                    yield count, current
                current, count = byte, 1
    if current is not None:
        yield count, current


def compress(chunks: Iterable[bytes]) -> bytes:
    """Compress a sequence of byte chunks as one stream."""
    return b"".join(_RECORD.pack(count, byte) for count, byte in encode_runs(chunks))


def decompress(data: bytes) -> bytes:
    """Expand compressed records; an incomplete trailing record is ignored."""
    usable = len(data) - len(data) % _RECORD.size
    return b"".join(
        bytes([byte]) * count
        for count, byte in _RECORD.iter_unpack(data[:usable])
    )


def _read_files(paths: Iterable[str]) -> Iterator[bytes]:
    for path in paths:
        with open(path, "rb") as handle:
            yield from iter(partial(handle.read, _CHUNK), b"")


def wzip_main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("wzip: file1 [file2 ...]")
        return 1
    sys.stdout.flush()
    out = sys.stdout.buffer
    try:
        for count, byte in encode_runs(_read_files(args)):
            out.write(_RECORD.pack(count, byte))
    except OSError:
        out.flush()
        print("wzip: cannot open file")
        return 1
    out.flush()
    return 0


def wunzip_main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("wunzip: file1 [file2 ...]")
        return 1
    sys.stdout.flush()
    out = sys.stdout.buffer
    for path in args:
        try:
            with open(path, "rb") as handle:
                data = handle.read()
        except OSError:
            out.flush()
            print("wunzip: cannot open file")
            return 1
        out.write(decompress(data))
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(wzip_main())