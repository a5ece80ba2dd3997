"""Generate command - converts CREATE TABLE blocks to Go code."""

import sys
import typer
from pathlib import Path
from typing import Optional
from rich.console import Console
from rich.markup import escape

from ..config import settings
from ..converter import convert
from ..errors import ParseError, Sql2GoDBError

console = Console(stderr=True)


def generate(
    input_file: Optional[Path] = typer.Option(None, "--input", "-i", help="Input file path (default: stdin)"),
    output_file: Optional[Path] = typer.Option(None, "--output", "-o", help="Output file path (default: stdout)"),
    package: Optional[str] = typer.Option(None, "--package", "-p", help="Write a Go package clause first"),
    strict: Optional[bool] = typer.Option(None, "--strict/--no-strict", help="Reject tables without an 'id' column"),
):
    """Generate Go structs and CRUD functions from CREATE TABLE blocks.

    If no input or output file is given, stdin and stdout are used.

    Examples:

        sql2godb generate -i schema.sql -o data.go --package data

        cat schema.sql | sql2godb generate
    """
    package_name = package or settings.package_name
    strict_mode = settings.strict_identifier if strict is None else strict

    try:
        source = input_file.open(encoding="utf-8") if input_file else sys.stdin
    except OSError as e:
        console.print(f"[red]Cannot open input file: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    try:
        sink = output_file.open("w", encoding="utf-8") if output_file else sys.stdout
    except OSError as e:
        console.print(f"[red]Cannot open output file: {escape(str(e))}[/red]")
        if input_file:
            source.close()
        raise typer.Exit(1)

    try:
        convert(
            source,
            sink,
            package_name=package_name,
            strict=strict_mode,
            timeout_seconds=settings.query_timeout_seconds,
            db_type=settings.db_handle_type,
        )
    except UnicodeDecodeError as e:
        console.print(f"[red]Cannot read input: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    except ParseError as e:
        console.print(f"[red]Invalid input: {escape(e.get_user_friendly_message())}[/red]")
        raise typer.Exit(1)
    except Sql2GoDBError as e:
        console.print(f"[red]Error: {escape(e.message)}[/red]")
        raise typer.Exit(1)
    finally:
        if input_file:
            source.close()
        if output_file:
            sink.close()
        else:
            sink.flush()
