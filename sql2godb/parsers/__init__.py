"""Input parsers for table-definition files."""

from .ddl_parser import (
    ParserState,
    TableBlock,
    scan_line,
    parse_lines,
    parse_stream,
    parse_text,
    parse_file,
)

__all__ = [
    "ParserState",
    "TableBlock",
    "scan_line",
    "parse_lines",
    "parse_stream",
    "parse_text",
    "parse_file",
]
