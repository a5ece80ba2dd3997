"""sql2godb - Main entry point."""

import logging
import typer
from rich.console import Console

from . import __version__
from .commands.generate import generate
from .config import settings

app = typer.Typer(
    name="sql2godb",
    help="SQL to Go code generator",
    add_completion=False,
)

app.command()(generate)

console = Console()


@app.command()
def config():
    """Show current configuration."""
    console.print("[bold]Current Configuration[/bold]")
    console.print(f"  Query timeout: {settings.query_timeout_seconds}s")
    console.print(f"  DB handle type: {settings.db_handle_type}")
    console.print(f"  Package: {settings.package_name or 'Not set'}")
    console.print(f"  Strict identifier check: {'Yes' if settings.strict_identifier else 'No'}")
    console.print(f"  Log level: {settings.log_level}")


@app.command()
def version():
    """Show version."""
    console.print(f"sql2godb {__version__}", highlight=False)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
):
    """
    sql2godb - generate Go structs and pgx CRUD functions from SQL.

    Reads CREATE TABLE blocks and writes, for each table, a struct plus
    Create, Get, Update and Delete functions.

    Examples:

        sql2godb generate -i schema.sql -o data.go

        sql2godb generate --package data < schema.sql
    """
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level.upper(), logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


if __name__ == "__main__":
    app()
