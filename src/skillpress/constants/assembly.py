"""Constants for document assembly and metadata defaults."""

from __future__ import annotations

DEFAULT_VERSION: str = "1.0.0"
DEFAULT_ABSTRACT_TEMPLATE: str = "Comprehensive guide for {title}, designed for AI agents and LLMs."
DATE_LABEL_FORMAT: str = "%B %Y"

NOTE_TEMPLATE_LINES: tuple[str, ...] = (
    "> **Note:**  ",
    "> This document is mainly for agents and LLMs to follow when maintaining,  ",
    "> generating, or refactoring {subject}. Humans  ",
    "> may also find it useful, but guidance here is optimized for automation  ",
    "> and consistency by AI-assisted workflows.",
)

SECTION_SEPARATOR: str = "---"
ABSTRACT_HEADING: str = "## Abstract"
TOC_HEADING: str = "## Table of Contents"
REFERENCES_HEADING: str = "## References"
