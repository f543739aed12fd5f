from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Sequence

from .constants import BLOCK_SIZE
from .crc import CrcVariant, VARIANTS
from .errors import DuplicateVariantError, SessionClosedError


@dataclass
class FileResult:
    path: str
    values: Dict[str, int] = field(default_factory=dict)
    error: Optional[str] = None
    read_failed: bool = False  # opened, then failed mid-stream
    variants: List[CrcVariant] = field(default_factory=list, repr=False, compare=False)

    @property
    def ok(self) -> bool:
        return self.error is None


class ChecksumSession:
    """Running CRC state(s) for one byte stream.

    Holds one register per active variant and feeds every consumed byte
    through each of them. Variants are kept in the canonical CRC16, CRC32
    order regardless of the order they were given in. Results are keyed by
    variant name, so names must be unique within a session.
    """

    def __init__(self, variants: Iterable[CrcVariant]):
        wanted = list(variants)
        known = [v for v in VARIANTS.values() if v in wanted]
        extra = [v for v in wanted if v not in known]
        self.variants: List[CrcVariant] = []
        for v in known + extra:
            if v in self.variants:
                continue
            if any(o.name == v.name for o in self.variants):
                raise DuplicateVariantError(f"Two different variants are named {v.name!r}")
            self.variants.append(v)
        self._state: Dict[str, int] = {v.name: v.new() for v in self.variants}
        self.bytes_read = 0
        self.finalized = False

    def feed(self, data) -> None:
        if self.finalized:
            raise SessionClosedError("Session already finalized")
        for v in self.variants:
            self._state[v.name] = v.update(self._state[v.name], data)
        self.bytes_read += len(data)

    def finalize(self) -> Dict[str, int]:
        self.finalized = True
        return {v.name: v.finalize(self._state[v.name]) for v in self.variants}


def _describe_os_error(exc: OSError) -> str:
    return exc.strerror or str(exc)


def checksum_file(path: str, variants: Sequence[CrcVariant], *, block_size: int = BLOCK_SIZE) -> FileResult:
    """Compute the active CRC variants over a file's contents.

    An unreadable file yields a FileResult with ``error`` set instead of raising;
    ``read_failed`` tells a failed read apart from a failed open. The file is
    closed on both paths.
    """
    session = ChecksumSession(variants)
    try:
        f = open(path, "rb")
    except OSError as exc:
        return FileResult(path=path, error=_describe_os_error(exc), variants=session.variants)
    with f:
        buffer = memoryview(bytearray(block_size))
        try:
            while True:
                read_size = f.readinto(buffer)
                if not read_size:
                    break
                session.feed(buffer[:read_size])
        except OSError as exc:
            return FileResult(path=path, error=_describe_os_error(exc), read_failed=True, variants=session.variants)
    return FileResult(path=path, values=session.finalize(), variants=session.variants)


def checksum_files(paths: Iterable[str], variants: Sequence[CrcVariant], *, block_size: int = BLOCK_SIZE) -> Iterator[FileResult]:
    """Yield one FileResult per path, in the order given."""
    for p in paths:
        yield checksum_file(p, variants, block_size=block_size)
