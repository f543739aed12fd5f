"""
crcsum: CRC16 (ARC) and CRC32 (ISO-HDLC) checksums over files.

Features:

- Table-driven, byte-at-a-time reflected CRC engine built from the generator polynomial.
- CRC16 and CRC32 are two instances of one generic variant description.
- Per-file checksum sessions that report unreadable files instead of aborting the run.
- A small CLI (`crcsum [-a|--16|--32] FILE...`) with text and JSON output.
"""

__version__ = "0.1"

__all__ = [
    "constants",
    "crc",
    "session",
    "report",
    "cli",
]

# Programmatic API: crcsum.crc (build_table/update, CRC16/CRC32, crc16()/crc32())
# and crcsum.session (checksum_file/checksum_files).
