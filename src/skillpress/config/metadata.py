"""Lenient per-skill metadata parsing.

``metadata.json`` is optional input written by hand, so nothing here raises:
each unusable value falls back to its default and is reported as a
:class:`Diagnostic` instead.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from skillpress.constants.assembly import DEFAULT_ABSTRACT_TEMPLATE, DEFAULT_VERSION
from skillpress.exceptions.diagnostics import Diagnostic
from skillpress.io import load_json_file
from skillpress.model import SkillConfig

logger = logging.getLogger(__name__)

_TEXT_FIELDS: tuple[str, ...] = ("version", "organization", "date", "abstract")


def parse_config(
    raw: object,
    *,
    skill_name: str,
    title: str,
    date_label: str,
    source: str = "metadata.json",
) -> tuple[SkillConfig, list[Diagnostic]]:
    """Merge raw metadata over defaults, returning the config and any diagnostics.

    ``raw`` is the decoded JSON document, or ``None`` when there is none.
    """
    defaults = {
        "version": DEFAULT_VERSION,
        "organization": skill_name,
        "date": date_label,
        "abstract": DEFAULT_ABSTRACT_TEMPLATE.format(title=title),
    }
    diagnostics: list[Diagnostic] = []

    if raw is None:
        return _build(title, defaults, ()), diagnostics
    if not isinstance(raw, dict):
        diagnostics.append(
            Diagnostic(
                code="METADATA_NOT_OBJECT",
                path=source,
                field="",
                message=f"expected a JSON object, got {type(raw).__name__}; using defaults",
            )
        )
        return _build(title, defaults, ()), diagnostics

    values = dict(defaults)
    for key in _TEXT_FIELDS:
        if key not in raw or raw[key] is None:
            continue
        text = _coerce_text(raw[key])
        if text is None:
            diagnostics.append(
                Diagnostic(
                    code="METADATA_FIELD_TYPE",
                    path=source,
                    field=key,
                    message=f"expected a string, got {type(raw[key]).__name__}; using default",
                )
            )
            continue
        if text:
            values[key] = text

    references = _parse_references(raw.get("references"), source, diagnostics)
    return _build(title, values, references), diagnostics


def load_skill_config(
    path: Path,
    *,
    skill_name: str,
    title: str,
    date_label: str,
) -> tuple[SkillConfig, list[Diagnostic]]:
    """Read ``metadata.json`` at *path* if present and parse it leniently."""
    if not path.is_file():
        return parse_config(None, skill_name=skill_name, title=title, date_label=date_label, source=path.name)

    try:
        raw = load_json_file(path)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.debug("Unparseable metadata at %s: %s", path, exc)
        config, diagnostics = parse_config(
            None, skill_name=skill_name, title=title, date_label=date_label, source=path.name
        )
        diagnostics.insert(
            0,
            Diagnostic(
                code="METADATA_UNREADABLE",
                path=path.name,
                field="",
                message=f"cannot parse metadata ({exc}); using defaults",
            ),
        )
        return config, diagnostics

    return parse_config(raw, skill_name=skill_name, title=title, date_label=date_label, source=path.name)


def _build(title: str, values: dict[str, str], references: tuple[str, ...]) -> SkillConfig:
    return SkillConfig(
        title=title,
        version=values["version"],
        organization=values["organization"],
        date=values["date"],
        abstract=values["abstract"],
        references=references,
    )


def _coerce_text(value: object) -> str | None:
    # bool is an int subclass but "True" is never a meaningful version label.
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return None


def _parse_references(value: object, source: str, diagnostics: list[Diagnostic]) -> tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, list):
        diagnostics.append(
            Diagnostic(
                code="METADATA_FIELD_TYPE",
                path=source,
                field="references",
                message=f"expected a list of strings, got {type(value).__name__}; ignoring",
            )
        )
        return ()

    references: list[str] = []
    for position, item in enumerate(value):
        if isinstance(item, str) and item.strip():
            references.append(item.strip())
            continue
        diagnostics.append(
            Diagnostic(
                code="METADATA_REFERENCE_INVALID",
                path=source,
                field=f"references[{position}]",
                message="reference must be a non-empty string; dropped",
            )
        )
    return tuple(references)
