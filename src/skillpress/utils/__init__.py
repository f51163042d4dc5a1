"""Shared utility helpers."""

from __future__ import annotations

from .dates import default_date_label
from .naming import derive_anchor, derive_title

__all__ = ["default_date_label", "derive_anchor", "derive_title"]
