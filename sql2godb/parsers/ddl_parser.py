"""Line scanner for CREATE TABLE blocks.

Recognizes a deliberately small dialect:

    -- comment
    CREATE TABLE users (
    id bigserial
    name text
    );

Each closed block is emitted as a TableBlock of raw (name, type) pairs.
Scanner state is an immutable ParserState value threaded through
scan_line, so nothing is carried between calls except what is returned.
"""

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, TextIO, Tuple

from ..errors import MalformedColumnError, MalformedCreateError

logger = logging.getLogger(__name__)

CREATE_KEYWORD = "CREATE"
BLOCK_END = ");"
COMMENT_PREFIX = "-"

# Table-level constraint lines inside a block, not columns
CONSTRAINT_KEYWORDS = {"PRIMARY", "UNIQUE", "CONSTRAINT", "FOREIGN", "CHECK"}


@dataclass(frozen=True)
class TableBlock:
    """A closed CREATE TABLE block."""
    table_name: str
    columns: Tuple[Tuple[str, str], ...] = ()
    line_number: Optional[int] = None


@dataclass(frozen=True)
class ParserState:
    """Scanner state between lines."""
    table_name: Optional[str] = None
    columns: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)
    start_line: Optional[int] = None

    @property
    def in_block(self) -> bool:
        return self.table_name is not None

    def open_block(self, table_name: str, line_number: int) -> "ParserState":
        return ParserState(table_name=table_name, start_line=line_number)

    def add_column(self, name: str, sql_type: str) -> "ParserState":
        return replace(self, columns=self.columns + ((name, sql_type),))

    def close_block(self) -> Tuple["ParserState", TableBlock]:
        block = TableBlock(
            table_name=self.table_name or "",
            columns=self.columns,
            line_number=self.start_line,
        )
        return ParserState(), block


def _strip_trailing_comma(token: str) -> str:
    if token.endswith(","):
        return token[:-1]
    return token


def scan_line(
    state: ParserState,
    line: str,
    line_number: int = 0,
) -> Tuple[ParserState, Optional[TableBlock]]:
    """Process one input line.

    Args:
        state: State after the previous line
        line: Raw input line
        line_number: 1-based line number, used in error reports

    Returns:
        Tuple of (new state, TableBlock if this line closed a block)

    Raises:
        MalformedColumnError: If a column line inside a block has fewer than two words
        MalformedCreateError: If a CREATE line has no table name
    """
    stripped = line.strip()
    if not stripped or stripped.startswith(COMMENT_PREFIX):
        return state, None

    words = stripped.split()

    if words[0] == CREATE_KEYWORD:
        if len(words) < 2:
            raise MalformedCreateError(line_number=line_number, line=line)
        if state.in_block:
            logger.warning(
                "Table %s opened on line %s was never closed, discarding it",
                state.table_name, state.start_line,
            )
        return state.open_block(words[-2], line_number), None

    if words[0] == BLOCK_END:
        if not state.in_block:
            return state, None
        return state.close_block()

    if not state.in_block:
        return state, None

    if words[0] in CONSTRAINT_KEYWORDS:
        return state, None

    if len(words) < 2:
        raise MalformedColumnError(line_number=line_number, line=line)

    return state.add_column(words[0], _strip_trailing_comma(words[1])), None


def parse_lines(lines: Iterable[str]) -> Iterator[TableBlock]:
    """Yield a TableBlock for every closed block in the input lines."""
    state = ParserState()
    for line_number, line in enumerate(lines, start=1):
        state, block = scan_line(state, line, line_number)
        if block is not None:
            logger.debug(
                "Closed table %s with %d columns", block.table_name, len(block.columns)
            )
            yield block

    if state.in_block:
        logger.warning(
            "Input ended inside table %s opened on line %s, discarding it",
            state.table_name, state.start_line,
        )


def parse_stream(stream: TextIO) -> Iterator[TableBlock]:
    """Yield table blocks read from an open text stream."""
    return parse_lines(stream)


def parse_text(text: str) -> List[TableBlock]:
    """Parse all table blocks from a string."""
    return list(parse_lines(text.splitlines()))


def parse_file(path: str) -> List[TableBlock]:
    """Parse all table blocks from a file."""
    with Path(path).open(encoding="utf-8") as f:
        return list(parse_stream(f))
