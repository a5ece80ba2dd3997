"""Streaming conversion of table definitions into Go source."""

import io
import logging
from typing import Iterable, Optional, TextIO

from .golang import GoCodeGenerator
from .golang.generator import DEFAULT_DB_TYPE, DEFAULT_TIMEOUT_SECONDS
from .parsers import parse_lines
from .schema import build_table_model

logger = logging.getLogger(__name__)


def convert(
    lines: Iterable[str],
    output: TextIO,
    package_name: Optional[str] = None,
    strict: bool = False,
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS,
    db_type: str = DEFAULT_DB_TYPE,
) -> int:
    """Convert table definitions to Go code, writing each table as it closes.

    Tables already written stay written if a later line is malformed.

    Args:
        lines: Input lines
        output: Text sink for the generated code
        package_name: If set, a package clause is written first
        strict: Reject tables without an id column
        timeout_seconds: Timeout used in every generated function
        db_type: Go type of the database handle parameter

    Returns:
        Number of tables converted

    Raises:
        ParseError: On malformed input
        MissingIdentifierError: In strict mode, for a table without an id column
    """
    if package_name:
        output.write(f"package {package_name}\n\n")

    count = 0
    for block in parse_lines(lines):
        logger.debug("Converting table %s from line %s", block.table_name, block.line_number)
        table = build_table_model(block.table_name, block.columns)
        generator = GoCodeGenerator(
            table,
            timeout_seconds=timeout_seconds,
            db_type=db_type,
            strict=strict,
        )
        output.write(generator.render())
        count += 1

    logger.debug("Converted %d tables", count)
    return count


def convert_text(text: str, **kwargs) -> str:
    """Convert a string of table definitions and return the Go code."""
    buffer = io.StringIO()
    convert(text.splitlines(), buffer, **kwargs)
    return buffer.getvalue()
