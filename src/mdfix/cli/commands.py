"""CLI command implementations"""

from importlib import metadata
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdfix.config import Settings, load_config
from mdfix.core.batch import BatchReport, FileStatus, fix_paths
from mdfix.logging import configure_logging


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _echo_report(report: BatchReport, check: bool) -> None:
    """Print per-file status and a summary line."""
    for r in report.results:
        if r.status == FileStatus.error:
            typer.echo(f"Error: {r.path}: {r.error}", err=True)
        elif r.status == FileStatus.changed and r.written:
            typer.echo(f"Fixed: {r.path}")
        elif r.status == FileStatus.changed:
            typer.echo(f"Would fix: {r.path} (+{r.added} -{r.deleted})")
        if r.diff:
            typer.echo(r.diff, nl=False)

    processed = len(report.results)
    if not processed:
        typer.echo("No markdown files processed.")
    elif check:
        typer.echo(f"{report.changed} of {processed} files would be reformatted.")
    else:
        typer.echo(f"Fixed {report.written} of {processed} files processed.")


def fix_cmd(
    paths: Annotated[Optional[list[Path]], typer.Argument(help="Files or directories (default: current directory)")] = None,
    headings: Annotated[Optional[bool], typer.Option("--headings/--no-headings", help="Normalize heading levels")] = None,
    lists: Annotated[Optional[bool], typer.Option("--lists/--no-lists", help="Renumber ordered lists")] = None,
    spacing: Annotated[Optional[bool], typer.Option("--spacing/--no-spacing", help="Reconcile blank lines")] = None,
    heading_levels: Annotated[bool, typer.Option("--heading-levels", help="Fix heading levels only")] = False,
    list_numbering: Annotated[bool, typer.Option("--list-numbering", help="Fix list numbering only")] = False,
    check: Annotated[bool, typer.Option("--check", help="Report files that would change; write nothing")] = False,
    diff: Annotated[bool, typer.Option("--diff", help="Print unified diffs; write nothing")] = False,
    as_json: Annotated[bool, typer.Option("--json", help="Print the batch report as JSON")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
    ):
    """Reformat markdown files in place: headings, ordered lists, blank lines."""
    configure_logging(verbose=verbose)
    if heading_levels and list_numbering:
        _fail("--heading-levels and --list-numbering are mutually exclusive")

    overrides = {"fix_headings": headings, "fix_lists": lists, "fix_spacing": spacing}
    if heading_levels or list_numbering:
        overrides = {
            "fix_headings": heading_levels, "fix_lists": list_numbering,
            "fix_spacing": False, "promote_notices": False,
        }
    settings = _settings(overrides=overrides)

    dry_run = check or diff
    report = fix_paths(paths or [Path(".")], settings, write=not dry_run, with_diff=diff)

    if as_json:
        typer.echo(report.model_dump_json(indent=2))
    else:
        _echo_report(report, dry_run)

    if report.errors or (check and report.changed):
        raise typer.Exit(1)


def version_cmd():
    """Print the installed mdfix version."""
    try:
        version = metadata.version("mdfix")
    except metadata.PackageNotFoundError:
        version = "unknown"
    typer.echo(f"mdfix {version}")
