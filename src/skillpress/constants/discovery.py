"""Constants for skill discovery and fragment selection."""

from __future__ import annotations

SKILL_MARKDOWN_FILENAME: str = "SKILL.md"
METADATA_FILENAME: str = "metadata.json"
OUTPUT_FILENAME: str = "AGENTS.md"

# Ordered by preference: the first directory that exists wins.
CONTENT_DIR_NAMES: tuple[str, ...] = ("rules", "references")

FRAGMENT_SUFFIXES: tuple[str, ...] = (".md",)
FRAGMENT_PRIVATE_PREFIX: str = "_"
EXCLUDED_FRAGMENT_FILES: tuple[str, ...] = ("README.md",)

EXCLUDED_SKILL_DIRS: tuple[str, ...] = ("reference",)
HIDDEN_DIR_PREFIX: str = "."
