from __future__ import annotations

import json as _json
from typing import Any, Dict, List, Sequence

from .crc import VARIANTS, CrcVariant
from .session import FileResult


def format_error(result: FileResult) -> str:
    verb = "read" if result.read_failed else "open"
    line = f'Cannot {verb} file "{result.path}"'
    if result.error:
        line += f": {result.error}"
    return line


def _format_value(result: FileResult, name: str, value: int) -> str:
    by_name: Dict[str, CrcVariant] = {v.name: v for v in result.variants}
    v = by_name.get(name) or VARIANTS.get(name)
    return v.format(value) if v is not None else f"{value:X}"


def format_result(result: FileResult) -> str:
    """Render one file as a paragraph: path, blank line, one line per variant.

    Example:
        data.bin

        CRC16 - BB3D
        CRC32 - CBF43926
    """
    if not result.ok:
        return format_error(result)
    lines = [result.path, ""]
    for name, value in result.values.items():
        lines.append(f"{name} - {_format_value(result, name, value)}")
    return "\n".join(lines)


def result_to_dict(result: FileResult) -> Dict[str, Any]:
    d: Dict[str, Any] = {"path": result.path}
    if not result.ok:
        d["error"] = result.error
        return d
    for name, value in result.values.items():
        d[name.lower()] = _format_value(result, name, value)
    return d


def results_to_json(results: Sequence[FileResult]) -> str:
    items: List[Dict[str, Any]] = [result_to_dict(r) for r in results]
    failed = sum(1 for r in results if not r.ok)
    return _json.dumps({"results": items, "ok": len(results) - failed, "failed": failed})
