"""Constants for output writing and stdout formatting."""

from __future__ import annotations

OUTPUT_TEMP_PREFIX: str = ".tmp-"
OUTPUT_TEMP_SUFFIX: str = ".md"

ANSI_RED: str = "\033[31m"
ANSI_GREEN: str = "\033[32m"
ANSI_YELLOW: str = "\033[33m"
ANSI_RESET: str = "\033[0m"

STATUS_COLORS: dict[str, str] = {
    "built": ANSI_GREEN,
    "skipped": ANSI_YELLOW,
    "failed": ANSI_RED,
}
