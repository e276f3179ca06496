"""Command-line entry point for netai-scaffold.

Usage::

    netai-scaffold
    netai-scaffold --root ~/work --name my-network-ai
    netai-scaffold --dry-run
    python -m netai_scaffold.cli --force
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from pydantic import ValidationError
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from netai_scaffold.config import ScaffoldConfig
from netai_scaffold.scaffolder import Manifest, ScaffoldError, Scaffolder, build_default_manifest
from netai_scaffold.scaffolder.manifest import DEFAULT_PROJECT_NAME, NEXT_STEPS
from netai_scaffold.utils import (
    console,
    format_duration,
    print_error,
    print_header,
    print_report_table,
    print_success,
    print_summary_table,
    print_warning,
)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="netai-scaffold",
        description="Create the Network AI Platform project skeleton",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Existing files are overwritten (templated files) or truncated\n"
            "(placeholders) only when --force is given.\n\n"
            "Examples:\n"
            "  netai-scaffold\n"
            "  netai-scaffold --root ~/work --name my-platform\n"
            "  netai-scaffold --dry-run\n"
        ),
    )
    parser.add_argument(
        "--root", "-r",
        default=".",
        help="Directory in which the project folder is created (default: .)",
    )
    parser.add_argument(
        "--name", "-n",
        default=DEFAULT_PROJECT_NAME,
        help=f"Project folder name (default: {DEFAULT_PROJECT_NAME})",
    )
    parser.add_argument(
        "--force", "-f",
        action="store_true",
        help="Overwrite or truncate files that already exist",
    )
    parser.add_argument(
        "--fail-fast",
        action="store_true",
        help="Stop at the first failing entry instead of continuing",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print what would be created and exit",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only print the final summary",
    )
    return parser


def _print_plan(config: ScaffoldConfig, scaffolder: Scaffolder, manifest: Manifest) -> None:
    table = Table(title=f"Plan: {config.project_root}", header_style="bold cyan")
    table.add_column("Kind", style="dim", no_wrap=True)
    table.add_column("Path")
    table.add_column("On disk", no_wrap=True)

    for entry, exists in scaffolder.plan(config.project_root, manifest):
        if not exists:
            state = "[green]new[/green]"
        elif entry.is_directory:
            state = "[dim]exists[/dim]"
        else:
            state = "[yellow]overwrite[/yellow]"
        table.add_row(entry.kind.value, escape(entry.relative_path), state)

    console.print(table)


def _print_next_steps(config: ScaffoldConfig) -> None:
    steps = [f"cd {config.project_name}", *NEXT_STEPS]
    body = "\n".join(f"{i}. {escape(step)}" for i, step in enumerate(steps, start=1))
    console.print(Panel(body, title="Next steps", border_style="cyan", expand=False))


def run(config: ScaffoldConfig) -> int:
    """Execute one scaffold run and return the process exit code."""
    manifest = build_default_manifest()
    scaffolder = Scaffolder(fail_fast=config.fail_fast)

    try:
        if config.dry_run:
            _print_plan(config, scaffolder, manifest)
            return EXIT_OK
        conflicts = scaffolder.find_conflicts(config.project_root, manifest)
    except ScaffoldError as exc:
        print_error(f"{exc.kind.value}: {escape(str(exc))}")
        print_error(f"Cannot inspect {config.project_root}; nothing was created.")
        return EXIT_FAILED

    if conflicts and not config.force:
        print_error(
            f"{len(conflicts)} file(s) already exist under {config.project_root} "
            "and would be overwritten:"
        )
        for path in conflicts:
            console.print(f"  - {escape(path)}")
        print_warning("Re-run with --force to replace them.")
        return EXIT_USAGE

    if not config.quiet:
        print_header("Setting up Network AI Platform project structure")
        if conflicts:
            print_warning(f"Overwriting {len(conflicts)} existing file(s).")

    report = asyncio.run(scaffolder.scaffold(config.project_root, manifest))

    if not config.quiet:
        print_report_table(report)
        counts = report.counts()
        print_summary_table(
            {
                "Project root": str(report.root),
                "Entries": str(len(report.results)),
                **{status.replace("_", " ").capitalize(): str(n) for status, n in counts.items()},
                "Elapsed": format_duration(report.elapsed),
            },
            title="Scaffold summary",
        )

    if not report.ok:
        for result in report.failed:
            print_error(f"{result.error.kind.value}: {escape(str(result.error))}")
        if report.skipped:
            print_warning(f"Skipped {len(report.skipped)} entries after the first failure.")
        print_error(f"Scaffolding incomplete: {len(report.failed)} failed.")
        return EXIT_FAILED

    print_success(f"Project structure created at {report.root}")
    if not config.quiet:
        _print_next_steps(config)
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for ``netai-scaffold``."""
    args = build_parser().parse_args(argv)

    try:
        config = ScaffoldConfig.from_args(args)
    except ValidationError as exc:
        for err in exc.errors():
            print_error(f"Error: {err['msg']}")
        return EXIT_USAGE

    return run(config)


if __name__ == "__main__":
    sys.exit(main())
