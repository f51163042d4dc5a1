"""Parser for SKILL.md descriptors with YAML frontmatter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import yaml

from skillpress.constants.naming import (
    FRONTMATTER_ALT_DELIMITER,
    FRONTMATTER_DELIMITER,
    TITLE_HEADING_PREFIX,
)
from skillpress.exceptions import SkillParseError


@dataclass(frozen=True)
class SkillDescriptor:
    """Identity fields read from a SKILL.md file."""

    name: str | None
    title: str | None
    frontmatter: dict[str, Any] | None = None


def parse_skill_descriptor(text: str, *, source: str = "SKILL.md") -> SkillDescriptor:
    """Parse descriptor text into its declared name, display title and frontmatter.

    Raises :class:`SkillParseError` when a frontmatter block is present but is
    unterminated or not a YAML mapping. The title is still recoverable in that
    case through :func:`extract_title`.
    """
    lines = text.splitlines()
    frontmatter: dict[str, Any] | None = None
    body_start = 0

    if lines and lines[0].strip() == FRONTMATTER_DELIMITER:
        frontmatter_end = _find_frontmatter_end(lines)
        if frontmatter_end is None:
            raise SkillParseError(f"Unterminated frontmatter block in {source}")

        frontmatter_text = "\n".join(lines[1:frontmatter_end])
        try:
            payload = yaml.safe_load(frontmatter_text) if frontmatter_text.strip() else None
        except yaml.YAMLError as exc:
            raise SkillParseError(f"Failed to parse frontmatter in {source}: {exc}") from exc

        if payload is not None and not isinstance(payload, dict):
            raise SkillParseError(f"Frontmatter in {source} must be a YAML mapping")
        frontmatter = payload
        body_start = frontmatter_end + 1

    name: str | None = None
    if frontmatter is not None:
        declared = frontmatter.get("name")
        if isinstance(declared, str) and declared.strip():
            name = declared.strip()

    return SkillDescriptor(name=name, title=_first_heading(lines[body_start:]), frontmatter=frontmatter)


def extract_title(text: str) -> str | None:
    """Return the first ``# `` heading outside any ``---`` delimited block.

    Used on descriptors whose frontmatter could not be parsed, where the block
    boundaries are only known from the delimiter lines themselves.
    """
    in_frontmatter = False
    for line in text.splitlines():
        if line.strip() == FRONTMATTER_DELIMITER:
            in_frontmatter = not in_frontmatter
            continue
        if not in_frontmatter and line.startswith(TITLE_HEADING_PREFIX):
            title = line[len(TITLE_HEADING_PREFIX) :].strip()
            if title:
                return title
    return None


def _first_heading(lines: list[str]) -> str | None:
    for line in lines:
        if line.startswith(TITLE_HEADING_PREFIX):
            title = line[len(TITLE_HEADING_PREFIX) :].strip()
            if title:
                return title
    return None


def _find_frontmatter_end(lines: list[str]) -> int | None:
    for index in range(1, len(lines)):
        if lines[index].strip() in {FRONTMATTER_DELIMITER, FRONTMATTER_ALT_DELIMITER}:
            return index
    return None
