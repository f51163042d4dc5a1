"""Dataclasses for skills, fragments, and build outcomes."""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from pathlib import Path

from skillpress.constants.assembly import DEFAULT_ABSTRACT_TEMPLATE, DEFAULT_VERSION
from skillpress.exceptions.diagnostics import Diagnostic
from skillpress.types import BuildStatus
from skillpress.utils.dates import default_date_label


@dataclass(frozen=True)
class SkillConfig:
    """Resolved metadata used to render one skill document.

    Empty optional text fields get their defaults here, so a title alone is
    enough to render a document.
    """

    title: str
    version: str = DEFAULT_VERSION
    organization: str = ""
    date: str = ""
    abstract: str = ""
    references: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.organization:
            object.__setattr__(self, "organization", self.title)
        if not self.date:
            object.__setattr__(self, "date", default_date_label(datetime.date.today()))
        if not self.abstract:
            object.__setattr__(self, "abstract", DEFAULT_ABSTRACT_TEMPLATE.format(title=self.title))


@dataclass(frozen=True)
class Fragment:
    """One markdown file contributing one numbered section."""

    identifier: str
    body: str
    source: Path | None = None


@dataclass(frozen=True)
class SkillSource:
    """A discovered skill directory and the identity read from its descriptor."""

    name: str
    directory: Path
    title: str


@dataclass(frozen=True)
class SkillBuild:
    """Outcome of building a single skill."""

    name: str
    status: BuildStatus
    output_path: Path | None = None
    fragment_count: int = 0
    reason: str = ""
    diagnostics: tuple[Diagnostic, ...] = ()


@dataclass(frozen=True)
class BuildResult:
    """Aggregate outcome of one workspace build."""

    root: Path
    skills: tuple[SkillBuild, ...]
    duration_seconds: float = 0.0
    dry_run: bool = False

    @property
    def built(self) -> tuple[SkillBuild, ...]:
        """Skills whose document was assembled."""
        return tuple(skill for skill in self.skills if skill.status == "built")

    @property
    def skipped(self) -> tuple[SkillBuild, ...]:
        """Skills skipped for missing or empty content."""
        return tuple(skill for skill in self.skills if skill.status == "skipped")

    @property
    def failed(self) -> tuple[SkillBuild, ...]:
        """Skills that hit an unexpected error."""
        return tuple(skill for skill in self.skills if skill.status == "failed")


@dataclass(frozen=True)
class SkillListing:
    """Discovery view of a skill: where its content lives and how much there is."""

    name: str
    directory: Path
    title: str
    content_dir: Path | None
    fragment_count: int
