"""Noosphere CLI — validate the registry against its entry schemas."""

import sys

import click
from rich.console import Console
from rich.markup import escape

from noosphere import __version__
from noosphere.registry.models import EntryResult, ValidationReport

console = Console(soft_wrap=True, highlight=False, emoji=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False, emoji=False)

RULE = "━" * 40


@click.command()
@click.version_option(version=__version__)
def main():
    """Validate the Noosphere registry.

    Reads ./schemas/container-schema.json, ./schemas/verifier-schema.json
    and ./registry.json, checks every container and verifier entry, and
    exits non-zero if any entry is invalid.
    """
    from noosphere.registry.loader import load_inputs
    from noosphere.validation.schema_validator import validate_registry

    # Load errors are not caught: a broken input aborts the run.
    container_schema, verifier_schema, registry = load_inputs()
    report = validate_registry(registry, container_schema, verifier_schema)

    _print_report(report)

    if not report.is_valid:
        console.print("\n[bold red]❌ Validation failed![/]\n")
        sys.exit(1)

    console.print("\n[bold green]✅ All entries are valid![/]")
    for line in report.summary().splitlines():
        console.print(f"   {escape(line)}")
    console.print()


def _print_report(report: ValidationReport):
    console.print("[bold blue]🔍 Validating Noosphere Registry[/]\n")
    console.print(RULE)

    console.print("\n[bold]📦 Validating Containers...[/]\n")
    for result in report.containers:
        _print_entry(result, "Container")

    console.print("\n[bold]🔐 Validating Verifiers...[/]\n")
    for result in report.verifiers:
        _print_entry(result, "Verifier")

    console.print(f"\n{RULE}")


def _print_entry(result: EntryResult, label: str):
    if result.passed:
        console.print(f"  [green]✅[/] {escape(result.name)} ({escape(result.short_key)})")
        return

    err_console.print(f"  [red]❌ {label} {escape(result.key)} is invalid:[/]")
    for issue in result.errors:
        err_console.print(f"       [red]x[/] {escape(str(issue))}")


if __name__ == "__main__":
    main()
