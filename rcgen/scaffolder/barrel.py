"""Barrel (parent ``index``) file maintenance."""

from __future__ import annotations

from pathlib import Path

from .templates import BARREL_EXPORT_TEMPLATE, format_template


def barrel_path_for(target_path: Path, is_ts: bool) -> Path:
    """Return ``<target>/index.ts`` or ``<target>/index.js``."""
    return Path(target_path) / f"index.{'ts' if is_ts else 'js'}"


def export_line(identifier: str) -> str:
    return format_template(BARREL_EXPORT_TEMPLATE, identifier)


def append_export(barrel_path: Path, identifier: str) -> Path:
    """Add a default re-export of *identifier* to the barrel file.

    A missing file is created holding exactly the export line.  Otherwise the
    line is appended, on its own line; existing content is never rewritten
    and duplicates are not filtered.

    Returns:
        The barrel path.
    """
    barrel_path = Path(barrel_path)
    line = export_line(identifier)

    if not barrel_path.exists():
        barrel_path.write_text(line, encoding="utf-8")
        return barrel_path

    with barrel_path.open("rb") as fh:
        fh.seek(0, 2)
        size = fh.tell()
        needs_newline = False
        if size:
            fh.seek(-1, 2)
            needs_newline = fh.read(1) != b"\n"

    with barrel_path.open("a", encoding="utf-8") as fh:
        if needs_newline:
            fh.write("\n")
        fh.write(line)
    return barrel_path
