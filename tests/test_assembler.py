"""Tests for single-skill document assembly."""

from __future__ import annotations

import re
from datetime import date

import pytest

from skillpress.assembly import assemble, render_note, strip_leading_heading
from skillpress.model import Fragment, SkillConfig
from skillpress.utils import default_date_label, derive_anchor

TOC_ENTRY_PATTERN = re.compile(r"^(\d+)\. \[(.+)\]\(#(.+)\)$", re.MULTILINE)
SECTION_HEADER_PATTERN = re.compile(r"^## (\d+)\. (.+)$", re.MULTILINE)


def _config(**overrides: object) -> SkillConfig:
    values: dict[str, object] = {
        "title": "Demo Skill",
        "version": "2.0.0",
        "organization": "Acme",
        "date": "March 2026",
        "abstract": "A demo.",
        "references": (),
    }
    values.update(overrides)
    return SkillConfig(**values)  # type: ignore[arg-type]


def test_assemble_end_to_end_demo_skill() -> None:
    fragments = [
        Fragment(identifier="usage", body="Usage text"),
        Fragment(identifier="intro", body="# Intro\nHello"),
    ]

    document = assemble(_config(), fragments)

    assert document.startswith("# Demo Skill\n\n**Version 2.0.0**  \nAcme  \nMarch 2026\n\n")
    assert "## Abstract\n\nA demo.\n\n" in document
    toc_intro = document.index("1. [Intro](#intro)")
    toc_usage = document.index("2. [Usage](#usage)")
    section_intro = document.index("## 1. Intro\n\nHello")
    section_usage = document.index("## 2. Usage\n\nUsage text")
    assert toc_intro < toc_usage < section_intro < section_usage
    assert "# Intro" not in document.replace("## 1. Intro", "")
    assert "## References" not in document


def test_assemble_exact_layout() -> None:
    document = assemble(
        _config(references=("https://x",)),
        [Fragment(identifier="getting-started", body="# Getting Started\n\nRun it.\n")],
    )

    expected = (
        "# Demo Skill\n\n"
        "**Version 2.0.0**  \n"
        "Acme  \n"
        "March 2026\n\n"
        + render_note("Demo Skill")
        + "---\n\n"
        "## Abstract\n\n"
        "A demo.\n\n"
        "---\n\n"
        "## Table of Contents\n\n"
        "1. [Getting Started](#getting-started)\n"
        "\n---\n\n"
        "## 1. Getting Started\n\n"
        "Run it.\n\n"
        "---\n\n"
        "## References\n\n"
        "1. [https://x](https://x)\n"
    )
    assert document == expected


@pytest.mark.parametrize("count", [1, 2, 5, 12])
def test_toc_entries_match_section_headers(count: int) -> None:
    identifiers = [f"rule-{index:02d}" for index in reversed(range(count))]
    fragments = [Fragment(identifier=identifier, body=f"Body {identifier}") for identifier in identifiers]

    document = assemble(_config(), fragments)

    toc = TOC_ENTRY_PATTERN.findall(document)
    sections = SECTION_HEADER_PATTERN.findall(document)
    assert len(toc) == len(sections) == count
    for position, ((toc_index, toc_title, toc_anchor), (section_index, section_title)) in enumerate(
        zip(toc, sections), start=1
    ):
        assert int(toc_index) == int(section_index) == position
        assert toc_title == section_title
        assert toc_anchor == derive_anchor(sorted(identifiers)[position - 1])


def test_assemble_sorts_fragments_by_identifier() -> None:
    fragments = [
        Fragment(identifier="b-second", body="B"),
        Fragment(identifier="a-first", body="A"),
        Fragment(identifier="c-third", body="C"),
    ]

    document = assemble(_config(), fragments)

    headers = SECTION_HEADER_PATTERN.findall(document)
    assert [title for _, title in headers] == ["A First", "B Second", "C Third"]


def test_assemble_with_no_fragments() -> None:
    document = assemble(_config(), [])

    assert "# Demo Skill" in document
    assert "**Version 2.0.0**" in document
    assert "## Abstract\n\nA demo." in document
    assert "## Table of Contents\n\n\n---\n\n" in document
    assert SECTION_HEADER_PATTERN.findall(document) == []
    assert TOC_ENTRY_PATTERN.findall(document) == []


def test_assemble_is_idempotent() -> None:
    config = _config(references=("https://a", "https://b"))
    fragments = (
        Fragment(identifier="one", body="# One\nFirst"),
        Fragment(identifier="two", body="Second"),
    )

    assert assemble(config, fragments) == assemble(config, fragments)


def test_assemble_does_not_mutate_fragment_order() -> None:
    fragments = [Fragment(identifier="z", body="Z"), Fragment(identifier="a", body="A")]

    assemble(_config(), fragments)

    assert [fragment.identifier for fragment in fragments] == ["z", "a"]


def test_references_section_omitted_when_empty() -> None:
    document = assemble(_config(references=()), [Fragment(identifier="x", body="X")])

    assert "## References" not in document


def test_references_section_lists_numbered_links() -> None:
    document = assemble(_config(references=("https://x",)), [])

    assert document.count("## References") == 1
    assert document.endswith("## References\n\n1. [https://x](https://x)\n")


def test_note_uses_lowercase_title() -> None:
    note = render_note("React Best Practices")

    assert note.startswith("> **Note:**  \n")
    assert "generating, or refactoring react best practices. Humans" in note


@pytest.mark.parametrize(
    ("body", "expected"),
    [
        pytest.param("# Some Title\n\nBody text", "Body text", id="leading-h1"),
        pytest.param("\n\n# Some Title\nBody text\n", "Body text", id="blank-lines-before-h1"),
        # Only a heading that opens the body is dropped; a later H1 is section content.
        pytest.param("Body text\n\n# Later Heading\nMore", "Body text\n\n# Later Heading\nMore", id="h1-not-leading"),
        pytest.param("## Subheading\nBody", "## Subheading\nBody", id="h2-kept"),
        pytest.param("# One\n# Two\nBody", "# Two\nBody", id="only-first-removed"),
        pytest.param("#hashtag\nBody", "#hashtag\nBody", id="no-space-not-heading"),
        pytest.param("", "", id="empty"),
    ],
)
def test_strip_leading_heading(body: str, expected: str) -> None:
    assert strip_leading_heading(body) == expected


def test_strip_leading_heading_keeps_line_endings_and_control_characters() -> None:
    body = "Row one\r\nRow two\x0cpage two same para\x1e\x85 end"

    assert strip_leading_heading(body) == body


def test_strip_leading_heading_removes_crlf_heading_only() -> None:
    assert strip_leading_heading("# A\r\nx\x0cy\r\nz") == "x\x0cy\r\nz"


def test_assemble_keeps_fragment_body_verbatim() -> None:
    document = assemble(_config(), [Fragment(identifier="a", body="# A\nx\x0cy\r\nz")])

    assert "## 1. A\n\nx\x0cy\r\nz\n\n---\n\n" in document


def test_assemble_title_only_config_uses_defaults() -> None:
    config = SkillConfig(title="Demo Skill")

    document = assemble(config, [])

    assert config.abstract == "Comprehensive guide for Demo Skill, designed for AI agents and LLMs."
    assert config.organization == "Demo Skill"
    assert config.date == default_date_label(date.today())
    assert "**Version 1.0.0**  \nDemo Skill  \n" in document
    assert "## Abstract\n\nComprehensive guide for Demo Skill, designed for AI agents and LLMs.\n\n" in document


def test_explicit_config_values_are_not_replaced() -> None:
    config = SkillConfig(title="T", organization="Acme", date="March 2026", abstract="A demo.")

    assert (config.organization, config.date, config.abstract) == ("Acme", "March 2026", "A demo.")
