"""
Main CLI entry point for queryorder.

Lets a developer check how a directive resolves against a field whitelist
without standing up a service:

    queryorder parse "created,DESC" -f name=user_name -f created=date_created
"""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from queryorder import __version__
from queryorder.exceptions import (
    EXIT_CODE_GENERAL_ERROR,
    EXIT_CODE_INVALID_ARGS,
    EXIT_CODE_SUCCESS,
    FieldConfigurationError,
    MalformedOrderDirective,
)
from queryorder.order import Field, FieldSet, OrderBy, parse

console = Console()

app = typer.Typer(
    name="queryorder",
    help="Validate ordering directives against a field whitelist",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def _parse_field_option(option: str) -> Field:
    """Turn a ``NAME=STORAGE`` option into a Field."""
    name, sep, storage = option.partition("=")
    if not sep:
        raise FieldConfigurationError("expected NAME=STORAGE", field_name=option)
    return Field(name.strip(), storage.strip())


@app.command()
def version() -> None:
    """Show version information."""
    console.print(
        Panel(
            f"[bold blue]queryorder[/bold blue] v{__version__}",
            title="Version",
            border_style="blue",
        )
    )


@app.command("parse")
def parse_command(
    directive: str = typer.Argument(
        ..., help="Directive as a caller would send it, e.g. 'name,DESC'"
    ),
    field: list[str] = typer.Option(
        ...,
        "--field",
        "-f",
        help="Sortable field as NAME=STORAGE (repeatable)",
    ),
    default: str = typer.Option(
        "",
        "--default",
        "-d",
        help="Default ordering as 'field[,DIRECTION]' (default: first field, ASC)",
    ),
) -> None:
    """Parse DIRECTIVE and show the ordering fragment it renders to."""
    try:
        fields = FieldSet(*(_parse_field_option(option) for option in field))
    except FieldConfigurationError as e:
        console.print(f"[red]Invalid field definition:[/red] {escape(e.message)}")
        raise typer.Exit(code=EXIT_CODE_INVALID_ARGS)

    fallback = OrderBy(fields.lookup(fields.names[0]))
    try:
        default_order = parse(default, fields, fallback, param="--default")
        order = parse(directive, fields, default_order)
    except MalformedOrderDirective as e:
        console.print(
            f"[red]Rejected {escape(e.details['field'])}:[/red] "
            f"{escape(repr(e.raw_value))} ({e.reason})"
        )
        raise typer.Exit(code=EXIT_CODE_INVALID_ARGS)

    table = Table(title="Ordering", show_header=True, header_style="bold blue")
    table.add_column("Field", style="cyan")
    table.add_column("Storage", style="white")
    table.add_column("Direction", style="green")
    table.add_row(order.field.name, order.field.storage, order.direction.token)
    console.print(table)
    console.print(f"[bold]Fragment:[/bold] {escape(order.render())}")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    show_version: bool = typer.Option(
        False, "--version", "-v", help="Show version and exit"
    ),
) -> None:
    """
    queryorder - Validate ordering directives against a field whitelist.
    """
    if show_version:
        console.print(f"queryorder v{__version__}")
        raise typer.Exit(code=EXIT_CODE_SUCCESS)

    if ctx.invoked_subcommand is None:
        console.print("[yellow]Use 'queryorder --help' for available commands[/yellow]")
        raise typer.Exit(code=EXIT_CODE_GENERAL_ERROR)


if __name__ == "__main__":
    app()
