"""SQL to Go type mapping strategies."""

from abc import ABC, abstractmethod
from typing import Dict


class TypeMapper(ABC):
    """Abstract base class for SQL type mapping."""

    @abstractmethod
    def to_go_type(self, sql_type: str) -> str:
        """Convert a raw SQL type token to a Go type name."""
        pass


class PostgresGoTypeMapper(TypeMapper):
    """Type mapper for PostgreSQL column types read by pgx.

    Lookup is on the exact raw token. Unknown tokens are returned as-is,
    which is how ``bool`` columns end up as Go ``bool``.
    """

    TYPE_MAP: Dict[str, str] = {
        "bigserial": "int64",
        "bigint": "int64",
        "int": "int32",
        "text": "string",
        "timestamp(0)": "time.Time",
        "uuid": "pgxuuid.uuid",
        "float": "float32",
    }

    def to_go_type(self, sql_type: str) -> str:
        """Convert a PostgreSQL type token to a Go type."""
        return self.TYPE_MAP.get(sql_type, sql_type)
