"""
Table-driven reflected CRC engine.

A variant is fully described by its width, its reversed-form generator
polynomial, its initial register value and the value XORed into the register
after the last byte. CRC16 (ARC) and CRC32 (ISO-HDLC) are two instances of
the same algorithm.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from .constants import (
    CRC16_NAME,
    CRC16_WIDTH,
    CRC16_POLY,
    CRC16_INIT,
    CRC16_XOROUT,
    CRC32_NAME,
    CRC32_WIDTH,
    CRC32_POLY,
    CRC32_INIT,
    CRC32_XOROUT,
    SUPPORTED_WIDTHS,
    TABLE_SIZE,
)
from .errors import UnsupportedWidthError


Table = Tuple[int, ...]


def build_table(width: int, polynomial: int) -> Table:
    """Build the 256-entry lookup table for a reflected CRC.

    Args:
        width: Register width in bits (16 or 32).
        polynomial: Generator polynomial in reversed (LSB-first) form.

    Returns:
        An immutable tuple mapping each byte value to its CRC contribution.

    Raises:
        UnsupportedWidthError: If the width is not supported or the polynomial
            does not fit in it.
    """
    if width not in SUPPORTED_WIDTHS:
        raise UnsupportedWidthError(f"Unsupported CRC width: {width}")
    mask = (1 << width) - 1
    if polynomial < 0 or polynomial > mask:
        raise UnsupportedWidthError(f"Polynomial 0x{polynomial:X} does not fit in {width} bits")

    tbl = []
    for n in range(TABLE_SIZE):
        c = n
        for _ in range(8):
            if c & 1:
                c = (c >> 1) ^ polynomial
            else:
                c >>= 1
        tbl.append(c & mask)
    return tuple(tbl)


def update(table: Table, crc: int, byte: int) -> int:
    """Advance a running CRC by one byte."""
    return (crc >> 8) ^ table[(crc ^ byte) & 0xFF]


def update_bytes(table: Table, crc: int, data) -> int:
    """Advance a running CRC over every byte of a bytes-like object, in order."""
    for b in data:
        crc = (crc >> 8) ^ table[(crc ^ b) & 0xFF]
    return crc


@dataclass(frozen=True)
class CrcVariant:
    name: str
    width: int
    polynomial: int
    initial: int
    final_xor: int
    table: Table = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # Built once per variant; every session using this variant shares it read-only.
        object.__setattr__(self, "table", build_table(self.width, self.polynomial))

    @property
    def mask(self) -> int:
        return (1 << self.width) - 1

    @property
    def digits(self) -> int:
        return self.width // 4

    def new(self) -> int:
        return self.initial

    def update(self, crc: int, data) -> int:
        return update_bytes(self.table, crc, data)

    def finalize(self, crc: int) -> int:
        return (crc ^ self.final_xor) & self.mask

    def compute(self, data) -> int:
        return self.finalize(self.update(self.new(), data))

    def format(self, value: int) -> str:
        return f"{value:0{self.digits}X}"


CRC16 = CrcVariant(CRC16_NAME, CRC16_WIDTH, CRC16_POLY, CRC16_INIT, CRC16_XOROUT)
CRC32 = CrcVariant(CRC32_NAME, CRC32_WIDTH, CRC32_POLY, CRC32_INIT, CRC32_XOROUT)

# Display and processing order
VARIANTS = {v.name: v for v in (CRC16, CRC32)}


def crc16(data: bytes, crc: int = 0) -> int:
    """Calculate the CRC-16/ARC value for the provided input bytes.

    Pass a previous result as ``crc`` to continue over more data.
    """
    return CRC16.finalize(CRC16.update(crc & CRC16.mask, data))


def crc32(data: bytes, crc: int = 0) -> int:
    """Calculate the CRC-32 value for the provided input bytes.

    Pass a previous (finalized) result as ``crc`` to continue over more data,
    as with ``zlib.crc32``.
    """
    c = (crc ^ CRC32.final_xor) & CRC32.mask
    return CRC32.finalize(CRC32.update(c, data))
