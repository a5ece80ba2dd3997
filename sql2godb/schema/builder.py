"""Builds table models from raw column declarations."""

import logging
from typing import Iterable, Optional, Tuple

from .models import ColumnMapping, TableModel, IDENTIFIER_COLUMN, IDENTIFIER_FIELD
from .naming import strip_plural, to_pascal_case, uppercase_id
from .type_mappers import PostgresGoTypeMapper, TypeMapper

logger = logging.getLogger(__name__)

_default_mapper = PostgresGoTypeMapper()


def to_field_name(raw_name: str) -> str:
    """Convert a SQL column name to a Go field name."""
    if raw_name == IDENTIFIER_COLUMN:
        return IDENTIFIER_FIELD
    return uppercase_id(to_pascal_case(raw_name))


def map_column(
    raw_name: str,
    raw_type: str,
    type_mapper: Optional[TypeMapper] = None,
) -> ColumnMapping:
    """Map one raw column declaration to its Go field name and type.

    Never fails: unknown type tokens pass through unchanged.
    """
    mapper = type_mapper or _default_mapper
    return ColumnMapping(
        raw_name=raw_name,
        raw_type=raw_type,
        field_name=to_field_name(raw_name),
        field_type=mapper.to_go_type(raw_type),
    )


def to_type_name(raw_table_name: str) -> str:
    """Convert a (plural) table name to a Go type name, e.g. users -> User."""
    return to_pascal_case(strip_plural(raw_table_name))


def build_table_model(
    raw_table_name: str,
    columns: Iterable[Tuple[str, str]],
    type_mapper: Optional[TypeMapper] = None,
) -> TableModel:
    """Build a TableModel from a table name and ordered (name, type) pairs.

    Args:
        raw_table_name: Table name as written in the CREATE line
        columns: Ordered (raw_name, raw_type) pairs
        type_mapper: Optional type mapper, defaults to PostgreSQL -> Go

    Returns:
        TableModel with every column mapped, in declaration order
    """
    mapped = [map_column(name, sql_type, type_mapper) for name, sql_type in columns]
    model = TableModel(
        source_table_name=raw_table_name,
        generated_type_name=to_type_name(raw_table_name),
        ordered_columns=mapped,
    )
    logger.debug(
        "Built model %s for table %s with %d columns",
        model.generated_type_name, raw_table_name, len(mapped),
    )
    return model
