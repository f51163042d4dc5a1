"""Configuration-related exceptions."""

from __future__ import annotations

from skillpress.exceptions.base import SkillpressError


class ConfigError(SkillpressError, ValueError):
    """Raised when workspace configuration is invalid."""
