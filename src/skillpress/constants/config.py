"""Workspace configuration filename and accepted keys."""

from __future__ import annotations

CONFIG_FILENAME: str = "skillpress.yaml"

CONFIG_STRING_KEYS: tuple[str, ...] = (
    "output_filename",
    "descriptor_filename",
    "metadata_filename",
)
CONFIG_LIST_KEYS: tuple[str, ...] = (
    "content_dirs",
    "fragment_suffixes",
    "excluded_files",
    "excluded_dirs",
)
CONFIG_ALLOWED_KEYS: frozenset[str] = frozenset((*CONFIG_STRING_KEYS, *CONFIG_LIST_KEYS))
