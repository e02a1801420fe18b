from __future__ import annotations

"""
RenderOutput serialization: JSON array of strings or newline-joined text.
"""

import json
from pathlib import Path
from typing import Literal, Sequence

OutputFormat = Literal["json", "text"]


def to_json(rows: Sequence[str], indent: int | None = 2) -> str:
    """JSON array of row strings; braille characters are written as-is."""
    return json.dumps(list(rows), ensure_ascii=False, indent=indent)


def to_text(rows: Sequence[str]) -> str:
    """One row per line, trailing newline."""
    return "".join(f"{row}\n" for row in rows)


def serialize(rows: Sequence[str], fmt: OutputFormat) -> str:
    if fmt == "json":
        return to_json(rows) + "\n"
    if fmt == "text":
        return to_text(rows)
    raise ValueError(f"unknown output format: {fmt!r}")


def write_output(path: Path, rows: Sequence[str], fmt: OutputFormat) -> Path:
    """Write rows to `path` as UTF-8 and return the path."""
    path = Path(path)
    path.write_text(serialize(rows, fmt), encoding="utf-8")
    return path


__all__ = ["OutputFormat", "to_json", "to_text", "serialize", "write_output"]
