"""Branding constants for CLI help and terminal output."""

from __future__ import annotations

BRAND_NAME: str = "SKILLPRESS"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ SKILLPRESS",
    "     // AGENTS.md builder for skill folders",
)
BUILD_SUMMARY_TITLE: str = "Build summary"
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} skill document builder"))
