"""Schema model for sql2godb.

This module turns raw SQL column declarations into mapped Go fields
and aggregates them into per-table models.
"""

from .models import ColumnMapping, TableModel, RESERVED_NAMES, is_reserved
from .type_mappers import TypeMapper, PostgresGoTypeMapper
from .builder import build_table_model, map_column

__all__ = [
    # Data models
    "ColumnMapping",
    "TableModel",
    "RESERVED_NAMES",
    "is_reserved",
    # Type mappers
    "TypeMapper",
    "PostgresGoTypeMapper",
    # Construction
    "build_table_model",
    "map_column",
]
