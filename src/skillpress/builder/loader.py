"""Load one skill's metadata and fragments from disk."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from skillpress.config import SkillpressConfig, load_skill_config
from skillpress.exceptions import FragmentReadError, MissingContentDirectoryError, NoEligibleFragmentsError
from skillpress.exceptions.diagnostics import Diagnostic
from skillpress.io import read_text_file
from skillpress.model import Fragment, SkillConfig, SkillSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadedSkill:
    """Everything the assembler needs for one skill, plus what went wrong reading it."""

    source: SkillSource
    config: SkillConfig
    fragments: tuple[Fragment, ...]
    content_dir: Path
    diagnostics: tuple[Diagnostic, ...] = ()


def find_content_dir(skill: SkillSource, config: SkillpressConfig) -> Path:
    """Return the first configured content directory present under the skill."""
    for name in config.content_dirs:
        candidate = skill.directory / name
        if candidate.is_dir():
            return candidate
    raise MissingContentDirectoryError(skill.name, config.content_dirs)


def list_fragment_paths(content_dir: Path, config: SkillpressConfig) -> list[Path]:
    """Return eligible fragment files in *content_dir*, sorted by file name."""
    paths = [path for path in content_dir.iterdir() if path.is_file() and config.is_eligible_fragment(path)]
    return sorted(paths, key=lambda path: path.name)


def read_fragment(path: Path, identifier: str) -> Fragment:
    """Read one fragment file, wrapping I/O and decode failures in :class:`FragmentReadError`."""
    try:
        body = read_text_file(path)
    except (OSError, UnicodeDecodeError) as exc:
        raise FragmentReadError(path, exc) from exc
    return Fragment(identifier=identifier, body=body, source=path)


def load_skill(skill: SkillSource, config: SkillpressConfig, *, date_label: str) -> LoadedSkill:
    """Load metadata and every readable fragment for *skill*.

    Raises a :class:`SkillSkippedError` subclass when there is nothing to
    build. Fragments that fail to read are left out and reported as
    diagnostics, so the remaining sections stay contiguously numbered.
    """
    content_dir = find_content_dir(skill, config)
    fragment_paths = list_fragment_paths(content_dir, config)
    if not fragment_paths:
        raise NoEligibleFragmentsError(skill.name, content_dir)

    skill_config, config_diagnostics = load_skill_config(
        skill.directory / config.metadata_filename,
        skill_name=skill.name,
        title=skill.title,
        date_label=date_label,
    )
    diagnostics = list(config_diagnostics)
    for diagnostic in config_diagnostics:
        logger.warning("%s: %s", skill.name, diagnostic.format())

    fragments: list[Fragment] = []
    for path in fragment_paths:
        try:
            fragments.append(read_fragment(path, config.fragment_identifier(path)))
        except FragmentReadError as exc:
            logger.error("  %s", exc)
            diagnostics.append(
                Diagnostic(
                    code="FRAGMENT_UNREADABLE",
                    path=f"{content_dir.name}/{path.name}",
                    field="",
                    message=str(exc.cause),
                )
            )
            continue
        logger.debug("  Processed %s", path.name)

    return LoadedSkill(
        source=skill,
        config=skill_config,
        fragments=tuple(fragments),
        content_dir=content_dir,
        diagnostics=tuple(diagnostics),
    )
