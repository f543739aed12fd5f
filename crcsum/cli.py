from __future__ import annotations

import sys
import argparse

from typing import List, Sequence

from crcsum import __version__
from crcsum.crc import CRC16, CRC32, CrcVariant
from crcsum.errors import CrcsumError
from crcsum.report import format_result, results_to_json
from crcsum.session import FileResult, checksum_files


def select_variants(*, do16: bool = False, do32: bool = False) -> List[CrcVariant]:
    """Map the variant flags to the CRC variants to compute.

    No flag at all means CRC32 only.
    """
    if not do16 and not do32:
        do32 = True
    selected: List[CrcVariant] = []
    if do16:
        selected.append(CRC16)
    if do32:
        selected.append(CRC32)
    return selected


def cmd_checksum(paths: Sequence[str], variants: Sequence[CrcVariant], *, as_json: bool = False, quiet: bool = False) -> bool:
    """Checksum each file and print its result.

    Args:
        paths: Files to read, processed and reported in the given order.
        variants: Active CRC variants; their tables are reused for every file.
        as_json: When True, print a single JSON summary instead of paragraphs.
        quiet: Suppress paragraphs for files that were read successfully.

    Returns:
        True when every file could be read, False otherwise. Unreadable files
        are reported, never raised. `main` always exits 0 after a completed
        run; the flag is for programmatic callers.
    """
    results: List[FileResult] = []
    first = True
    for r in checksum_files(paths, variants):
        results.append(r)
        if as_json or (quiet and r.ok):
            continue
        if not first:
            print()
        print(format_result(r), flush=True)
        first = False
    if as_json:
        print(results_to_json(results))
    return all(r.ok for r in results)


def main(argv: List[str] | None = None):
    ap = argparse.ArgumentParser(
        prog="crcsum",
        description="Compute CRC16 (ARC) and/or CRC32 (ISO-HDLC) checksums of files",
        epilog="Without a variant flag only CRC32 is computed. Flags may appear anywhere among the files.",
    )
    ap.add_argument("files", metavar="FILE", nargs="+", help="File(s) to checksum")
    ap.add_argument("-a", dest="all", action="store_true", help="Compute both CRC16 and CRC32")
    ap.add_argument("--16", dest="do16", action="store_true", help="Compute CRC16 (ARC, poly 0xA001 reflected)")
    ap.add_argument("--32", dest="do32", action="store_true", help="Compute CRC32 (ISO-HDLC, poly 0xEDB88320 reflected)")
    ap.add_argument("--json", action="store_true", help="Emit JSON result summary")
    ap.add_argument("--quiet", help="only report files that could not be read", action="store_true")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    args = ap.parse_intermixed_args(argv)
    variants = select_variants(do16=args.all or args.do16, do32=args.all or args.do32)
    try:
        # Unreadable files are reported per file and do not change the exit status.
        cmd_checksum(args.files, variants, as_json=args.json, quiet=args.quiet)
    except (CrcsumError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
