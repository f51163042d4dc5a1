"""Parsing-related exceptions."""

from __future__ import annotations

from skillpress.exceptions.base import SkillpressError


class SkillParseError(SkillpressError, ValueError):
    """Raised when a SKILL.md frontmatter block cannot be parsed."""
