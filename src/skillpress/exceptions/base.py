"""Base exception for Skillpress."""

from __future__ import annotations


class SkillpressError(Exception):
    """Base class for all errors raised by Skillpress."""
