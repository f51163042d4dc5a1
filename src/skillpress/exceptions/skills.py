"""Exceptions raised while scanning a workspace and loading skills."""

from __future__ import annotations

from pathlib import Path

from skillpress.exceptions.base import SkillpressError


class ScanError(SkillpressError):
    """Raised when the workspace root cannot be enumerated."""


class SkillSkippedError(SkillpressError):
    """Raised when a skill has nothing to build and should be skipped."""

    def __init__(self, skill: str, reason: str) -> None:
        super().__init__(f"Skipping {skill}: {reason}")
        self.skill = skill
        self.reason = reason


class MissingContentDirectoryError(SkillSkippedError):
    """Raised when none of the content directories exist under a skill."""

    def __init__(self, skill: str, candidates: tuple[str, ...]) -> None:
        listed = " or ".join(f"{name}/" for name in candidates)
        super().__init__(skill, f"no {listed} directory")


class NoEligibleFragmentsError(SkillSkippedError):
    """Raised when the content directory has no eligible fragment files."""

    def __init__(self, skill: str, content_dir: Path) -> None:
        super().__init__(skill, f"no markdown files found in {content_dir.name}/")


class FragmentReadError(SkillpressError):
    """Raised when a single fragment file cannot be read."""

    def __init__(self, path: Path, cause: Exception) -> None:
        super().__init__(f"Error reading {path.name}: {cause}")
        self.path = path
        self.cause = cause
