"""Assemble one skill document from its config and ordered fragments.

Everything here is a pure function of its arguments: no filesystem access and
no clock reads. Callers resolve dates and read files before calling in.
"""

from __future__ import annotations

from collections.abc import Iterable

from skillpress.constants.assembly import (
    ABSTRACT_HEADING,
    NOTE_TEMPLATE_LINES,
    REFERENCES_HEADING,
    SECTION_SEPARATOR,
    TOC_HEADING,
)
from skillpress.constants.naming import LEADING_HEADING_PATTERN
from skillpress.model import Fragment, SkillConfig
from skillpress.utils import derive_anchor, derive_title


def assemble(config: SkillConfig, fragments: Iterable[Fragment]) -> str:
    """Build the combined markdown document for one skill.

    Fragments are ordered by identifier before rendering, and that order is
    used for both the table of contents and the numbered section headers.
    """
    ordered = sorted(fragments, key=lambda fragment: fragment.identifier)

    parts: list[str] = [
        _render_title_block(config),
        render_note(config.title),
        f"{SECTION_SEPARATOR}\n\n",
        f"{ABSTRACT_HEADING}\n\n{config.abstract}\n\n",
        f"{SECTION_SEPARATOR}\n\n",
        _render_toc(ordered),
        f"\n{SECTION_SEPARATOR}\n\n",
    ]
    for index, fragment in enumerate(ordered, start=1):
        parts.append(_render_section(index, fragment))
    if config.references:
        parts.append(_render_references(config.references))
    return "".join(parts)


def render_note(title: str) -> str:
    """Render the fixed note block addressed to automated readers."""
    lines = [line.format(subject=title.lower()) for line in NOTE_TEMPLATE_LINES]
    return "\n".join(lines) + "\n\n"


def strip_leading_heading(body: str) -> str:
    """Drop the fragment's own top-level heading, if it opens the body, and trim.

    Only ``\\n`` separates lines here, so ``\\r\\n`` endings and any other
    control characters in the body come through unchanged.
    """
    lines = body.split("\n")
    for index, line in enumerate(lines):
        if not line.strip():
            continue
        if LEADING_HEADING_PATTERN.match(line):
            del lines[index]
        break
    return "\n".join(lines).strip()


def _render_title_block(config: SkillConfig) -> str:
    return (
        f"# {config.title}\n\n"
        f"**Version {config.version}**  \n"
        f"{config.organization}  \n"
        f"{config.date}\n\n"
    )


def _render_toc(fragments: list[Fragment]) -> str:
    lines = [f"{TOC_HEADING}\n\n"]
    for index, fragment in enumerate(fragments, start=1):
        lines.append(f"{index}. [{derive_title(fragment.identifier)}](#{derive_anchor(fragment.identifier)})\n")
    return "".join(lines)


def _render_section(index: int, fragment: Fragment) -> str:
    body = strip_leading_heading(fragment.body)
    return f"## {index}. {derive_title(fragment.identifier)}\n\n{body}\n\n{SECTION_SEPARATOR}\n\n"


def _render_references(references: tuple[str, ...]) -> str:
    lines = [f"{REFERENCES_HEADING}\n\n"]
    for index, reference in enumerate(references, start=1):
        lines.append(f"{index}. [{reference}]({reference})\n")
    return "".join(lines)
