"""End-to-end build orchestration for Skillpress.

``build_workspace`` is the primary entry point: it discovers skills, builds
each one in turn and contains per-skill failures so one broken skill never
aborts the run.
"""

from __future__ import annotations

import logging
import time
from datetime import date
from pathlib import Path

from skillpress.assembly import assemble
from skillpress.builder.discovery import discover_skills, select_skills
from skillpress.builder.loader import find_content_dir, list_fragment_paths, load_skill
from skillpress.config import SkillpressConfig, load_config
from skillpress.constants.reporting import OUTPUT_TEMP_PREFIX, OUTPUT_TEMP_SUFFIX
from skillpress.exceptions import MissingContentDirectoryError, SkillSkippedError
from skillpress.io import write_text_atomic
from skillpress.model import BuildResult, SkillBuild, SkillListing, SkillSource
from skillpress.utils import default_date_label

logger = logging.getLogger(__name__)


def build_workspace(
    *,
    root: Path,
    config_path: Path | None = None,
    skills: tuple[str, ...] = (),
    date_label: str | None = None,
    dry_run: bool = False,
) -> BuildResult:
    """Build the output document for every skill under *root*.

    ``date_label`` pins the default publish date; when omitted it is derived
    from today's date once for the whole run.
    """
    started_at = time.perf_counter()
    root = root.resolve()
    config = load_config(root, config_path)
    resolved_date = date_label if date_label is not None else default_date_label(date.today())

    logger.info("Building %s for all skills in %s", config.output_filename, root)
    sources = select_skills(discover_skills(root, config), skills)
    if not sources:
        logger.info("No skills found")

    outcomes = [build_skill(source, config, date_label=resolved_date, dry_run=dry_run) for source in sources]

    built = sum(1 for outcome in outcomes if outcome.status == "built")
    logger.info("Build complete: %d skill(s) built", built)
    return BuildResult(
        root=root,
        skills=tuple(outcomes),
        duration_seconds=time.perf_counter() - started_at,
        dry_run=dry_run,
    )


def build_skill(
    source: SkillSource,
    config: SkillpressConfig,
    *,
    date_label: str,
    dry_run: bool = False,
) -> SkillBuild:
    """Build one skill, turning skips and I/O failures into a recorded outcome."""
    try:
        loaded = load_skill(source, config, date_label=date_label)
    except SkillSkippedError as exc:
        logger.warning("%s", exc)
        return SkillBuild(name=source.name, status="skipped", reason=exc.reason)
    except OSError as exc:
        logger.error("Failed to load %s: %s", source.name, exc)
        return SkillBuild(name=source.name, status="failed", reason=str(exc))

    logger.info("Building %s...", source.name)
    document = assemble(loaded.config, loaded.fragments)
    output_path = source.directory / config.output_filename

    if not dry_run:
        try:
            write_text_atomic(
                path=output_path,
                content=document,
                temp_prefix=OUTPUT_TEMP_PREFIX,
                temp_suffix=OUTPUT_TEMP_SUFFIX,
            )
        except OSError as exc:
            logger.error("Failed to write %s: %s", output_path, exc)
            return SkillBuild(
                name=source.name,
                status="failed",
                reason=str(exc),
                diagnostics=loaded.diagnostics,
            )
        logger.info("  Built %s successfully", config.output_filename)

    return SkillBuild(
        name=source.name,
        status="built",
        output_path=output_path,
        fragment_count=len(loaded.fragments),
        diagnostics=loaded.diagnostics,
    )


def describe_workspace(*, root: Path, config_path: Path | None = None) -> list[SkillListing]:
    """Report each discovered skill with its content directory and fragment count."""
    root = root.resolve()
    config = load_config(root, config_path)

    listings: list[SkillListing] = []
    for source in discover_skills(root, config):
        try:
            content_dir: Path | None = find_content_dir(source, config)
        except MissingContentDirectoryError:
            content_dir = None

        fragment_count = 0
        if content_dir is not None:
            try:
                fragment_count = len(list_fragment_paths(content_dir, config))
            except OSError as exc:
                logger.warning("Cannot list %s: %s", content_dir, exc)

        listings.append(
            SkillListing(
                name=source.name,
                directory=source.directory,
                title=source.title,
                content_dir=content_dir,
                fragment_count=fragment_count,
            )
        )
    return listings
