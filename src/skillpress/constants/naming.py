"""Regex patterns and markers for titles, anchors and frontmatter."""

from __future__ import annotations

import re

ANCHOR_UNSAFE_PATTERN: re.Pattern[str] = re.compile(r"[^A-Za-z0-9_-]")
WORD_START_PATTERN: re.Pattern[str] = re.compile(r"(^|\s)(\S)")
LEADING_HEADING_PATTERN: re.Pattern[str] = re.compile(r"^#\s")
TITLE_HEADING_PREFIX: str = "# "

FRONTMATTER_DELIMITER: str = "---"
FRONTMATTER_ALT_DELIMITER: str = "..."
