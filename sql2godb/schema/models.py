"""Schema data models for table code generation."""

from dataclasses import dataclass, field
from typing import List, Optional

# Primary key column name and the Go field name it maps to
IDENTIFIER_COLUMN = "id"
IDENTIFIER_FIELD = IDENTIFIER_COLUMN.upper()

VERSION_COLUMN = "version"
VERSION_FIELD = "Version"

# Bookkeeping columns managed by the database, in raw and mapped spelling
RESERVED_NAMES = frozenset({
    "id", "ID",
    "version", "Version",
    "create_time", "CreateTime",
    "edit_time", "EditTime",
})


def is_reserved(name: str) -> bool:
    """Check whether a raw or mapped column name is a bookkeeping column."""
    return name in RESERVED_NAMES


@dataclass(frozen=True)
class ColumnMapping:
    """A SQL column together with its Go field name and type."""
    raw_name: str
    raw_type: str
    field_name: str
    field_type: str

    @property
    def is_identifier(self) -> bool:
        return self.field_name == IDENTIFIER_FIELD

    @property
    def is_reserved(self) -> bool:
        """True if either spelling of the column is a bookkeeping name."""
        return is_reserved(self.raw_name) or is_reserved(self.field_name)


@dataclass
class TableModel:
    """Represents one CREATE TABLE block ready for code generation."""
    source_table_name: str
    generated_type_name: str
    ordered_columns: List[ColumnMapping] = field(default_factory=list)

    def identifier_type(self) -> str:
        """Get the Go type of the identifier column, or "" if there is none."""
        column = self.get_identifier_column()
        return column.field_type if column else ""

    def get_identifier_column(self) -> Optional[ColumnMapping]:
        """Find the identifier column."""
        for column in self.ordered_columns:
            if column.is_identifier:
                return column
        return None

    def has_identifier(self) -> bool:
        return self.get_identifier_column() is not None

    def get_writable_columns(self) -> List[ColumnMapping]:
        """Get the columns bound as parameters on insert and update, in order."""
        return [col for col in self.ordered_columns if not col.is_reserved]
