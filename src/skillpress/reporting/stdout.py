"""Human-readable stdout summary of a workspace build."""

from __future__ import annotations

from skillpress.constants.branding import ASCII_LOGO_LINES, BUILD_SUMMARY_TITLE
from skillpress.constants.reporting import ANSI_RESET, STATUS_COLORS
from skillpress.model import BuildResult, SkillBuild, SkillListing


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


def _color_status(status: str, width: int) -> str:
    padded = f"{status:<{width}}"
    color = STATUS_COLORS.get(status, "")
    return _colorize(padded, color) if color else padded


class BuildReporter:
    """Formats build results as a compact terminal summary."""

    def __init__(self, result: BuildResult, *, color: bool = True, verbose: bool = False) -> None:
        """Initialise the reporter."""
        self._result = result
        self._color = color
        self._verbose = verbose

    def render(self) -> str:
        """Render the full stdout report as a single string."""
        sections = [self._render_header(), self._render_skills()]
        return "\n".join(section for section in sections if section)

    def _render_header(self) -> str:
        r = self._result
        sep = "  " + "─" * 38
        mode = " (dry run)" if r.dry_run else ""
        lines = [
            "",
            f"  {ASCII_LOGO_LINES[0]}",
            f"  {ASCII_LOGO_LINES[1]}",
            f"  {BUILD_SUMMARY_TITLE}{mode}",
            sep,
            "",
            f"  Root        {r.root}",
            (
                f"  Skills      {len(r.skills)} found / {len(r.built)} built / "
                f"{len(r.skipped)} skipped / {len(r.failed)} failed"
            ),
            f"  Duration    {r.duration_seconds:.3f}s",
            "",
        ]
        return "\n".join(lines)

    def _render_skills(self) -> str:
        if not self._result.skills:
            return ""

        w_name = max(len(skill.name) for skill in self._result.skills)
        w_status = max(len(status) for status in STATUS_COLORS)
        lines = ["  Skills"]
        for skill in self._result.skills:
            status = _color_status(skill.status, w_status) if self._color else f"{skill.status:<{w_status}}"
            lines.append(f"  {skill.name:<{w_name}}  {status}  {self._detail(skill)}".rstrip())
            if self._verbose:
                lines.extend(f"      {diagnostic.format()}" for diagnostic in skill.diagnostics)
        return "\n".join(lines)

    @staticmethod
    def _detail(skill: SkillBuild) -> str:
        if skill.status == "built":
            noun = "section" if skill.fragment_count == 1 else "sections"
            return f"{skill.fragment_count} {noun}"
        return skill.reason


def render_listing(listings: list[SkillListing]) -> str:
    """Render the ``list`` subcommand output, one skill per line."""
    if not listings:
        return "No skills found"

    w_name = max(len(listing.name) for listing in listings)
    lines = []
    for listing in listings:
        where = f"{listing.content_dir.name}/" if listing.content_dir is not None else "-"
        lines.append(f"{listing.name:<{w_name}}  {where:<12} {listing.fragment_count:>3}  {listing.title}")
    return "\n".join(lines)
