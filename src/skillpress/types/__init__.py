"""Shared type aliases for Skillpress."""

from .common import BuildStatus

__all__ = ["BuildStatus"]
