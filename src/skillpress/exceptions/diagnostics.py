"""Structured diagnostics reported by lenient metadata and fragment loading."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Diagnostic:
    """A single recoverable problem with stable code and location context."""

    code: str
    path: str
    field: str
    message: str

    def format(self) -> str:
        """Format as a human-readable single-line message."""
        location = f"{self.path}:{self.field}" if self.field else self.path
        return f"[{self.code}] {location} {self.message}"
