"""Command-line entry point for projc.

Usage::

    projc                 # scaffold the current directory
    projc widget          # scaffold ./widget as project "widget"
    python -m projc widget --quiet
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from projc import __version__
from projc.config import Config
from projc.errors import InvalidArgumentError, PathResolutionError
from projc.scaffolder import ProjectContext, ProjectGenerator, resolve
from projc.utils import print_banner, print_fatal, print_summary_table


class _ArgumentParser(argparse.ArgumentParser):
    """``ArgumentParser`` that raises instead of exiting with status 2."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise InvalidArgumentError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="projc",
        usage="%(prog)s [options] [PATH]",
        description=(
            "Create lib/, src/, test/ and include/ in PATH (default: the current "
            "directory), seed them with C files named after the project, and "
            "write a Makefile and Makefile.win."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  projc              project named after the current directory\n"
            "  projc widget       scaffold ./widget as project 'widget'\n"
        ),
    )
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="PATH",
        help="Existing directory to scaffold; its text is used as the project name",
    )
    parser.add_argument(
        "--max-path",
        type=int,
        default=None,
        help="Override the platform path-length limit",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        default=None,
        help="Only report failures and the final summary",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def _build_config(args: argparse.Namespace) -> Config:
    try:
        config = Config.from_env()
        overrides = {}
        if args.max_path is not None:
            overrides["max_path"] = args.max_path
        if args.quiet is not None:
            overrides["quiet"] = args.quiet
        return Config.model_validate({**config.model_dump(), **overrides})
    except ValueError as exc:
        raise InvalidArgumentError(f"invalid configuration: {exc}") from exc


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point for ``projc``.

    Returns:
        ``0`` once the target is resolved (even if some artifacts could not be
        created), ``1`` if the arguments or the path are invalid.
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
        config = _build_config(args)
        root, project_name = resolve(args.paths, max_path=config.max_path)
        context = ProjectContext.create(root, project_name)
    except InvalidArgumentError as exc:
        parser.print_usage(sys.stderr)
        print_fatal(f"Error: {exc}")
        return 1
    except PathResolutionError as exc:
        print_fatal(f"Error: {exc}")
        return 1

    if not config.quiet:
        print_banner(f"projc: {context.project_name} in {context.root}")

    report = ProjectGenerator(
        context,
        max_path=config.max_path,
        quiet=config.quiet,
    ).generate()

    if config.show_summary:
        print_summary_table(report.as_table(), title=f"Scaffold: {context.project_name}")
    if not report.ok:
        print_fatal(
            f"{len(report.failed)} artifact(s) could not be created; "
            "fix the cause and re-run to fill in the gaps."
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
