"""Publish date labels for document headers."""

from __future__ import annotations

from datetime import date

from skillpress.constants.assembly import DATE_LABEL_FORMAT


def default_date_label(today: date) -> str:
    """Format a build date the way document headers show it, e.g. ``October 2026``."""
    return today.strftime(DATE_LABEL_FORMAT)
