"""Checksums over files: digit XOR, Fletcher, CRC-16 and per-block XOR."""

from __future__ import annotations

import os
import sys
import time
from typing import Sequence

POLY = 0x1021
BLOCK_SIZE = 4096


class ChecksumMismatch(ValueError):
    """A block's running XOR does not match its stored checksum."""

    def __init__(self, block: int):
        super().__init__(f"checksum mismatch in block {block}")
        self.block = block


def _c_remainder(value: int, modulus: int) -> int:
    remainder = abs(value) % modulus
    return -remainder if value < 0 else remainder


def _signed(byte: int) -> int:
    return byte - 256 if byte >= 128 else byte


def digit_xor(data: bytes) -> int:
    """XOR of every byte's offset from '0', skipping newlines, as an unsigned byte."""
    result = 0
    for byte in data:
        if byte != 0x0A:
            result ^= (byte - 0x30) & 0xFF
    return result


def fletcher(data: bytes) -> tuple[int, int]:
    """Fletcher sums (mod 255) of each byte's offset from '0', skipping newlines."""
    a = b = 0
    for byte in data:
        if byte != 0x0A:
            a = _c_remainder(_signed(byte) - 0x30 + a, 255)
            b = _c_remainder(a + b, 255)
    return a, b


def _shift(crc: int, bit: bool) -> int:
    carry = crc & 0x8000
    crc = (crc << 1) & 0xFFFF
    if bit:
        crc += 1
    if carry:
        crc ^= POLY
    return crc


def crc16(data: bytes) -> int:
    """CRC-16 with polynomial 0x1021, register 0xFFFF, message augmented by 16 zero bits."""
    crc = 0xFFFF
    for byte in data:
        for bit in range(7, -1, -1):
            crc = _shift(crc, bool(byte >> bit & 1))
    for _ in range(16):
        crc = _shift(crc, False)
    return crc


def _running_xors(data: bytes, block_size: int):
    view = memoryview(data)
    value = 0
    for start in range(0, len(data), block_size):
        for byte in view[start:start + block_size]:
            value ^= byte
        yield value


def block_xors(data: bytes, block_size: int = BLOCK_SIZE) -> bytes:
    """Running XOR of all bytes so far, one value per block."""
    if block_size <= 0:
        raise ValueError("block size must be positive")
    return bytes(_running_xors(data, block_size))


def verify_block_xors(data: bytes, checksums: Sequence[int], block_size: int = BLOCK_SIZE) -> int:
    """Check *data* against stored running XORs; return the number of blocks checked.

    When the checksums run out, the last one read (initially 0) is reused.
    """
    if block_size <= 0:
        raise ValueError("block size must be positive")
    stored = iter(checksums)
    expected = 0
    checked = 0
    for index, value in enumerate(_running_xors(data, block_size)):
        expected = next(stored, expected)
        if value != expected:
            raise ChecksumMismatch(index)
        checked += 1
    return checked


def _args(argv) -> list[str]:
    return sys.argv[1:] if argv is None else list(argv)


def _report(call: str, exc: OSError) -> int:
    print(f"{call}: {exc.strerror or exc}", file=sys.stderr)
    return 1


def _timed_digest(argv, prog: str, compute, render) -> int:
    args = _args(argv)
    if len(args) != 1:
        print(f"Usage: {prog} [filepath]", file=sys.stderr)
        return 1
    started = time.time()
    try:
        with open(args[0], "rb") as handle:
            data = handle.read()
    except OSError as exc:
        return _report("open", exc)
    print(render(compute(data)))
    print(f"time(seconds): {time.time() - started:f}")
    return 0


def xor_main(argv=None) -> int:
    return _timed_digest(argv, "check-xor", digit_xor, lambda v: f"XOR-based checksum: {v}")


def fletcher_main(argv=None) -> int:
    return _timed_digest(
        argv, "check-fletcher", fletcher, lambda v: f"Fletcher checksum: {v[0]}, {v[1]}"
    )


def crc_main(argv=None) -> int:
    return _timed_digest(argv, "crc", crc16, lambda v: f"16-bit CRC: 0x{v:X}")


def create_csum_main(argv=None) -> int:
    args = _args(argv)
    if len(args) != 2:
        print("Usage: create-csum [filepath] [checksum output file path]", file=sys.stderr)
        return 1
    try:
        with open(args[0], "rb") as handle:
            data = handle.read()
    except OSError as exc:
        return _report("open", exc)
    try:
        fd = os.open(args[1], os.O_WRONLY | os.O_CREAT, 0o644)
    except OSError as exc:
        return _report("open", exc)
    with os.fdopen(fd, "wb") as out:
        out.write(block_xors(data))
    return 0


def check_csum_main(argv=None) -> int:
    args = _args(argv)
    if len(args) != 2:
        print("Usage: check-csum [filepath] [checksum output file path]", file=sys.stderr)
        return 1
    try:
        with open(args[0], "rb") as handle:
            data = handle.read()
        with open(args[1], "rb") as handle:
            checksums = handle.read()
    except OSError as exc:
        return _report("open", exc)
    try:
        verify_block_xors(data, checksums)
    except ChecksumMismatch:
        print("The file is corrupted!")
        return 1
    print("The file is fine.")
    return 0


if __name__ == "__main__":
    sys.exit(crc_main())