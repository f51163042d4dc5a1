"""File-level read helpers."""

from __future__ import annotations

from pathlib import Path


def read_text_file(path: Path) -> str:
    """Read UTF-8 text, dropping a leading byte-order mark."""
    return path.read_text(encoding="utf-8").lstrip("\ufeff")
