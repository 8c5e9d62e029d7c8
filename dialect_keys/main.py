"""dialect-keys - Main entry point."""

import json
import logging

import typer
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from .config import settings
from .dialects import DIALECTS, Dialect, get_dialect
from .errors import DialectKeysError
from .introspection import classify_row

app = typer.Typer(
    name="dialect-keys",
    help="Build constraint introspection queries and classify their result rows",
    add_completion=False,
)

console = Console()


def _fail(error: Exception) -> None:
    console.print(f"[red]Error: {error}[/red]")
    raise typer.Exit(1)


@app.command()
def config():
    """Show current configuration."""
    console.print("[bold]Current Configuration[/bold]")
    console.print(f"  Default Dialect: {settings.default_dialect}")
    console.print(f"  Default Schema: {settings.default_schema}")
    console.print(f"  Log Level: {settings.log_level}")


@app.command("dialects")
def list_dialects():
    """List supported dialects and what each can classify."""
    table_display = Table(title="Supported dialects")
    table_display.add_column("Dialect", style="cyan")
    table_display.add_column("Descriptor", style="green")
    table_display.add_column("Capabilities")

    for dialect in Dialect:
        descriptor = DIALECTS[dialect]
        label = descriptor.__class__.__name__
        if descriptor.name != dialect.value:
            label = f"{label} (alias of {descriptor.name})"
        caps = ", ".join(sorted(descriptor.capabilities)) or "primary_key only"
        table_display.add_row(dialect.value, label, caps)

    console.print(table_display)


@app.command("query")
def show_query(
    table: str = typer.Argument(..., help="Table to introspect"),
    dialect: str = typer.Option(settings.default_dialect, "--dialect", "-d", help="Target dialect"),
    schema: str = typer.Option(settings.default_schema, "--schema", "-s", help="Schema name"),
    raw: bool = typer.Option(False, "--raw", help="Print plain SQL without highlighting"),
):
    """Print the constraint query for a table."""
    try:
        sql = get_dialect(dialect).get_foreign_keys_query(table, schema)
    except DialectKeysError as e:
        _fail(e)

    if raw:
        typer.echo(sql)
    else:
        console.print(Syntax(sql, "sql", theme="monokai", word_wrap=True))


@app.command("tables")
def show_tables(
    dialect: str = typer.Option(settings.default_dialect, "--dialect", "-d", help="Target dialect"),
    schema: str = typer.Option(settings.default_schema, "--schema", "-s", help="Schema name"),
):
    """Print the table-listing query for a schema."""
    try:
        sql = get_dialect(dialect).show_tables_query(schema)
    except DialectKeysError as e:
        _fail(e)

    typer.echo(sql)


@app.command("classify")
def classify(
    rows_file: str = typer.Argument(..., help="JSON file holding an array of result rows"),
    dialect: str = typer.Option(settings.default_dialect, "--dialect", "-d", help="Dialect the rows came from"),
    as_json: bool = typer.Option(False, "--json", help="Emit classifications as JSON"),
):
    """Classify rows previously returned by a constraint query."""
    try:
        descriptor = get_dialect(dialect)
    except DialectKeysError as e:
        _fail(e)

    try:
        with open(rows_file) as f:
            rows = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        _fail(e)

    if not isinstance(rows, list):
        _fail(ValueError(f"{rows_file} must contain a JSON array of rows"))

    results = [classify_row(descriptor, row) for row in rows]

    if as_json:
        typer.echo(json.dumps([r.to_dict() for r in results], indent=2, default=str))
        return

    table_display = Table(title=f"{descriptor.name} constraint rows")
    table_display.add_column("#", justify="right")
    table_display.add_column("Constraint", style="cyan")
    table_display.add_column("Column", style="green")
    table_display.add_column("Kinds")

    for index, result in enumerate(results):
        row = result.row if isinstance(result.row, dict) else {}
        table_display.add_row(
            str(index),
            str(row.get("constraint_name", "")),
            str(row.get("source_column", row.get("from", ""))),
            ", ".join(result.kinds) or "-",
        )

    console.print(table_display)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """
    dialect-keys - constraint introspection queries for SQLite, MySQL/MariaDB,
    PostgreSQL and SQL Server.

    Examples:

        dialect-keys query users --dialect postgres

        dialect-keys tables --schema app

        dialect-keys classify rows.json --dialect mysql
    """
    level = "DEBUG" if verbose else settings.log_level.upper()
    logging.basicConfig(level=level)


if __name__ == "__main__":
    app()
