"""Tests for SKILL.md descriptor parsing."""

from __future__ import annotations

from pathlib import Path

import pytest

from skillpress.exceptions import SkillParseError
from skillpress.parsers import extract_title, parse_skill_descriptor


def test_parse_descriptor_reads_name_and_title(basic_workspace_root: Path) -> None:
    text = (basic_workspace_root / "react-best-practices" / "SKILL.md").read_text(encoding="utf-8")

    descriptor = parse_skill_descriptor(text)

    assert descriptor.name == "react-best-practices"
    assert descriptor.title == "React Best Practices"
    assert isinstance(descriptor.frontmatter, dict)
    assert descriptor.frontmatter["description"].startswith("Performance")


def test_parse_descriptor_without_frontmatter() -> None:
    descriptor = parse_skill_descriptor("# Composition Patterns\n\nBody\n")

    assert descriptor.name is None
    assert descriptor.title == "Composition Patterns"
    assert descriptor.frontmatter is None


def test_parse_descriptor_allows_empty_frontmatter() -> None:
    descriptor = parse_skill_descriptor("---\n---\n# Title\n")

    assert descriptor.frontmatter is None
    assert descriptor.title == "Title"


def test_parse_descriptor_blank_name_is_ignored() -> None:
    descriptor = parse_skill_descriptor("---\nname: '  '\n---\n# Title\n")

    assert descriptor.name is None


def test_parse_descriptor_dot_terminated_frontmatter_keeps_title() -> None:
    descriptor = parse_skill_descriptor("---\nname: x\n...\n\n# Title\n")

    assert descriptor.name == "x"
    assert descriptor.title == "Title"
    assert descriptor.frontmatter == {"name": "x"}


def test_parse_descriptor_horizontal_rule_in_body_does_not_hide_title() -> None:
    descriptor = parse_skill_descriptor("Intro\n\n---\n\n# After Rule\n")

    assert descriptor.title == "After Rule"


@pytest.mark.parametrize(
    "text",
    [
        pytest.param("---\nname: [broken\n---\n# Broken\n", id="invalid-yaml"),
        pytest.param("---\nname: missing-end\n# Broken\n", id="unterminated"),
        pytest.param("---\n- a\n- b\n---\n# List\n", id="not-mapping"),
    ],
)
def test_parse_descriptor_raises_for_malformed_frontmatter(text: str) -> None:
    with pytest.raises(SkillParseError):
        parse_skill_descriptor(text)


def test_extract_title_skips_headings_inside_frontmatter() -> None:
    text = "---\nname: x\n# not a title\n---\n\n# Real Title\n"

    assert extract_title(text) == "Real Title"


def test_extract_title_ignores_lower_level_headings() -> None:
    assert extract_title("## Section\n### Sub\n") is None


def test_extract_title_returns_first_h1() -> None:
    assert extract_title("intro\n# First\n# Second\n") == "First"
