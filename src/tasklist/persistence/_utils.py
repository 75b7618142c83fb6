"""Shared persistence utilities."""

import json
from pathlib import Path
from typing import Any


def sanitize_filename(name: str) -> str:
    """Sanitize a string for use as a filename.

    Replaces any character that isn't alphanumeric, hyphen, or underscore with underscore.
    """
    return "".join(c if c.isalnum() or c in "-_" else "_" for c in name)


def dump_json(data: Any, indent: int = 2) -> str:
    """Serialize data deterministically.

    Same input always yields the same text, so an unchanged store saves
    byte-identical documents.
    """
    return json.dumps(data, indent=indent, ensure_ascii=False) + "\n"


def atomic_write_text(path: Path, content: str) -> None:
    """Write text to a file atomically.

    Writes to a temporary file first, then renames to the target path.
    The temporary file is removed if either step fails.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    try:
        tmp_path.write_text(content, encoding="utf-8")
        tmp_path.replace(path)
    except Exception:
        tmp_path.unlink(missing_ok=True)
        raise
