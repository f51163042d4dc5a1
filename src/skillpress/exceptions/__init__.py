"""Shared exception hierarchy for Skillpress."""

from __future__ import annotations

from .base import SkillpressError
from .config import ConfigError
from .parsing import SkillParseError
from .skills import (
    FragmentReadError,
    MissingContentDirectoryError,
    NoEligibleFragmentsError,
    ScanError,
    SkillSkippedError,
)

__all__ = [
    "ConfigError",
    "FragmentReadError",
    "MissingContentDirectoryError",
    "NoEligibleFragmentsError",
    "ScanError",
    "SkillParseError",
    "SkillSkippedError",
    "SkillpressError",
]
