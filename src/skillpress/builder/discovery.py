"""Skill directory discovery and descriptor identity resolution."""

from __future__ import annotations

import logging
from pathlib import Path

from skillpress.config import SkillpressConfig
from skillpress.exceptions import ScanError, SkillParseError
from skillpress.io import read_text_file
from skillpress.model import SkillSource
from skillpress.parsers import extract_title, parse_skill_descriptor

logger = logging.getLogger(__name__)


def discover_skills(root: Path, config: SkillpressConfig) -> list[SkillSource]:
    """List every skill directory directly under *root*, sorted by directory name.

    Raises :class:`ScanError` when the root itself cannot be enumerated.
    """
    if not root.is_dir():
        raise ScanError(f"Workspace root does not exist or is not a directory: {root}")

    try:
        entries = sorted(root.iterdir(), key=lambda path: path.name)
    except OSError as exc:
        raise ScanError(f"Cannot list workspace root {root}: {exc}") from exc

    skills: list[SkillSource] = []
    for entry in entries:
        if not entry.is_dir() or not config.is_skill_dir_candidate(entry):
            continue
        skills.append(resolve_skill_source(entry, config))
    return skills


def resolve_skill_source(directory: Path, config: SkillpressConfig) -> SkillSource:
    """Read the skill's descriptor to find its identifier and display title.

    A missing, unreadable or malformed descriptor never fails discovery; the
    directory name stands in for whatever could not be read.
    """
    descriptor_path = directory / config.descriptor_filename
    if not descriptor_path.is_file():
        return SkillSource(name=directory.name, directory=directory, title=directory.name)

    try:
        text = read_text_file(descriptor_path)
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Cannot read %s: %s", descriptor_path, exc)
        return SkillSource(name=directory.name, directory=directory, title=directory.name)

    try:
        descriptor = parse_skill_descriptor(text, source=str(descriptor_path))
        name = descriptor.name or directory.name
        title = descriptor.title
    except SkillParseError as exc:
        logger.warning("%s; using directory name", exc)
        name = directory.name
        title = extract_title(text)

    return SkillSource(name=name, directory=directory, title=title or name)


def select_skills(skills: list[SkillSource], wanted: tuple[str, ...]) -> list[SkillSource]:
    """Keep only skills whose identifier or directory name is in *wanted*."""
    if not wanted:
        return skills

    wanted_set = set(wanted)
    selected = [skill for skill in skills if skill.name in wanted_set or skill.directory.name in wanted_set]
    matched = {skill.name for skill in selected} | {skill.directory.name for skill in selected}
    for missing in sorted(wanted_set - matched):
        logger.warning("Requested skill not found: %s", missing)
    return selected
