"""CLI entrypoint for the Skillpress builder."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from skillpress import __version__
from skillpress.builder import build_workspace, describe_workspace
from skillpress.constants.branding import CLI_DESCRIPTION
from skillpress.exceptions import ConfigError, ScanError, SkillpressError
from skillpress.reporting import BuildReporter, render_listing


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="skillpress",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    build = subparsers.add_parser("build", help="Build AGENTS.md for every skill in a workspace")
    build.add_argument("-r", "--root", type=Path, default=Path("."), help="Workspace root path (default: .)")
    build.add_argument("-c", "--config", type=Path, help="Explicit config file")
    build.add_argument(
        "-s",
        "--skill",
        action="append",
        default=[],
        help="Only build this skill, by name or directory (repeat flag for multiple values)",
    )
    build.add_argument("--date", default=None, help="Publish date label for skills without one, e.g. 'January 2026'")
    build.add_argument("-n", "--dry-run", action="store_true", help="Assemble documents without writing them")
    build.add_argument("--no-stdout", action="store_true", help="Silence the summary on stdout")
    build.add_argument("--no-color", action="store_true", help="Disable colored output")
    verbosity = build.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log per-file progress and diagnostics")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors")

    listing = subparsers.add_parser("list", help="List discovered skills and their content directories")
    listing.add_argument("-r", "--root", type=Path, default=Path("."), help="Workspace root path (default: .)")
    listing.add_argument("-c", "--config", type=Path, help="Explicit config file")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=_log_level(args), format="%(levelname)s %(message)s")

    if args.command == "list":
        return _handle_list(args)

    if args.command != "build":
        parser.error(f"Unsupported command: {args.command}")

    try:
        result = build_workspace(
            root=args.root,
            config_path=args.config,
            skills=tuple(args.skill),
            date_label=args.date,
            dry_run=args.dry_run,
        )
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except SkillpressError as exc:
        print(f"Build failed: {exc}", file=sys.stderr)
        return 1

    if not args.no_stdout:
        use_color = not args.no_color and sys.stdout.isatty()
        reporter = BuildReporter(result, color=use_color, verbose=args.verbose)
        print(reporter.render())

    return 0


def _handle_list(args: argparse.Namespace) -> int:
    """Print discovered skills without building anything."""
    try:
        listings = describe_workspace(root=args.root, config_path=args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except ScanError as exc:
        print(f"Scan failed: {exc}", file=sys.stderr)
        return 1

    print(render_listing(listings))
    return 0


def _log_level(args: argparse.Namespace) -> int:
    if getattr(args, "verbose", False):
        return logging.DEBUG
    if getattr(args, "quiet", False):
        return logging.WARNING
    return logging.INFO


if __name__ == "__main__":
    raise SystemExit(main())
