"""Config data model for Skillpress builds."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from skillpress.constants.discovery import (
    CONTENT_DIR_NAMES,
    EXCLUDED_FRAGMENT_FILES,
    EXCLUDED_SKILL_DIRS,
    FRAGMENT_PRIVATE_PREFIX,
    FRAGMENT_SUFFIXES,
    HIDDEN_DIR_PREFIX,
    METADATA_FILENAME,
    OUTPUT_FILENAME,
    SKILL_MARKDOWN_FILENAME,
)


@dataclass(frozen=True)
class SkillpressConfig:
    """Resolved workspace config."""

    output_filename: str = OUTPUT_FILENAME
    descriptor_filename: str = SKILL_MARKDOWN_FILENAME
    metadata_filename: str = METADATA_FILENAME
    content_dirs: tuple[str, ...] = CONTENT_DIR_NAMES
    fragment_suffixes: tuple[str, ...] = FRAGMENT_SUFFIXES
    excluded_files: tuple[str, ...] = EXCLUDED_FRAGMENT_FILES
    excluded_dirs: tuple[str, ...] = EXCLUDED_SKILL_DIRS

    def is_skill_dir_candidate(self, path: Path) -> bool:
        """Return True if *path* names a directory that may hold a skill."""
        name = path.name
        return not name.startswith(HIDDEN_DIR_PREFIX) and name not in self.excluded_dirs

    def is_eligible_fragment(self, path: Path) -> bool:
        """Return True if *path* is a fragment file that belongs in the document."""
        name = path.name
        if name.startswith(FRAGMENT_PRIVATE_PREFIX) or name in self.excluded_files:
            return False
        return any(name.endswith(suffix) for suffix in self.fragment_suffixes)

    def fragment_identifier(self, path: Path) -> str:
        """Strip the matching fragment suffix from a file name."""
        name = path.name
        for suffix in self.fragment_suffixes:
            if name.endswith(suffix):
                return name[: -len(suffix)]
        return path.stem
