"""
Objects Checker CLI.

Checks an objects file for duplicate ids and names, id sequence gaps and
naming convention problems, and lists the objects it contains.
"""

from __future__ import annotations

import json

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from objects_checker.config import get_settings
from objects_checker.loader import CatalogLoadError, load_catalog
from objects_checker.log import configure_logging
from objects_checker.models.catalog import Catalog, list_objects
from objects_checker.validators import Severity, ValidationReport, validation_engine

EXIT_OK = 0
EXIT_FINDINGS = 1
EXIT_LOAD_FAILED = 2

SEVERITY_STYLES = {
    Severity.ERROR: "red",
    Severity.WARNING: "yellow",
}


def _console() -> Console:
    return Console(no_color=not get_settings().COLOR, highlight=False, emoji=False, soft_wrap=True)


def _load_or_exit(console: Console, path: str | None) -> Catalog:
    objects_file = path or get_settings().OBJECTS_FILE
    try:
        return load_catalog(objects_file)
    except CatalogLoadError as e:
        console.print(f"[bold red]{escape(str(e))}[/bold red]")
        raise SystemExit(EXIT_LOAD_FAILED) from e


@click.group()
@click.option("--log-level", default=None, help="Log level (default: LOG_LEVEL)")
def cli(log_level: str | None) -> None:
    """Objects file checker."""
    configure_logging(level=log_level)


@cli.command("check")
@click.argument("path", required=False)
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON.")
@click.option("--strict", is_flag=True, help="Fail on warnings as well as errors.")
def check_cmd(path: str | None, as_json: bool, strict: bool) -> None:
    """Validate an objects file (default: OBJECTS_FILE)."""
    console = _console()

    if not as_json:
        console.print("[bold white]Objects file checking started...[/bold white]\n")

    catalog = _load_or_exit(console, path)
    report = validation_engine.validate(catalog)

    if as_json:
        click.echo(json.dumps(report.model_dump(mode="json"), indent=2))
    else:
        _print_report(console, report)

    failed = report.summary.error_count > 0 or (strict and report.summary.warning_count > 0)
    raise SystemExit(EXIT_FINDINGS if failed else EXIT_OK)


@cli.command("list")
@click.argument("path", required=False)
@click.option(
    "--sort",
    "sort_by",
    type=click.Choice(["id", "name", "class"]),
    default="id",
    show_default=True,
    help="Column to sort by.",
)
@click.option("--desc", is_flag=True, help="Sort in descending order.")
@click.option("--json", "as_json", is_flag=True, help="Print the objects as JSON.")
def list_cmd(path: str | None, sort_by: str, desc: bool, as_json: bool) -> None:
    """List the objects in an objects file."""
    console = _console()
    catalog = _load_or_exit(console, path)
    rows = list_objects(catalog, sort_by=sort_by, descending=desc)

    if as_json:
        click.echo(json.dumps([row.model_dump() for row in rows], indent=2))
        return

    table = Table(title=f"{len(rows)} objects in {catalog.class_count} classes")
    table.add_column("Id", justify="right")
    table.add_column("Name")
    table.add_column("Class")
    table.add_column("Tags")
    for row in rows:
        table.add_row(str(row.id), escape(row.name), escape(row.class_name), escape(row.tags))
    console.print(table)


def _print_report(console: Console, report: ValidationReport) -> None:
    """Print findings grouped by check, then the totals line."""
    for result in report.checks:
        console.print(f"\n[grey70]Running test '{result.check}'...[/grey70]")
        for finding in report.findings_for(result.check):
            style = SEVERITY_STYLES[finding.severity]
            console.print(f"[{style}]- {escape(finding.message)}[/{style}]")
        if result.passed:
            console.print("[green]No problems found[/green]")
        console.print("[grey70]...finished[/grey70]")

    summary = report.summary
    console.print(
        f"\n\n[bold white]Checking finished with {summary.error_count} error(s) and "
        f"{summary.warning_count} warning(s) ({summary.class_count} classes and "
        f"{summary.object_count} objects checked)[/bold white]"
    )


if __name__ == "__main__":
    cli()
