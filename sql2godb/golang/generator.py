"""Go code generator for pgx-backed CRUD access."""

import logging
from typing import Dict, List

from ..errors import MissingIdentifierError
from ..schema.models import TableModel, IDENTIFIER_COLUMN, IDENTIFIER_FIELD, VERSION_COLUMN, VERSION_FIELD
from ..schema.naming import to_camel_case

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 3
DEFAULT_DB_TYPE = "DB"

# Order in which artifacts are written for each table
ARTIFACT_ORDER = ["struct", "create", "get", "update", "delete"]


class GoCodeGenerator:
    """Generates a Go struct and CRUD functions for one table.

    Every generator method is independent and returns the Go source for
    one artifact, terminated by a newline.
    """

    def __init__(
        self,
        table: TableModel,
        timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS,
        db_type: str = DEFAULT_DB_TYPE,
        strict: bool = False,
    ):
        self.table = table
        self.timeout_seconds = timeout_seconds
        self.db_type = db_type
        self.strict = strict
        self.type_name = table.generated_type_name
        self.var_name = to_camel_case(table.generated_type_name)

    def generate_struct(self) -> str:
        """Generate the struct with one db-tagged field per column."""
        lines = [f"type {self.type_name} struct {{"]
        for col in self.table.ordered_columns:
            lines.append(f'\t{col.field_name} {col.field_type} `db:"{col.raw_name}"`')
        lines.append("}")
        return "\n".join(lines) + "\n"

    def generate_create(self) -> str:
        """Generate CreateX, inserting all non-reserved columns."""
        columns = self.table.get_writable_columns()
        column_list = ", ".join(col.raw_name for col in columns)
        placeholders = ", ".join(f"${i}" for i in range(1, len(columns) + 1))

        lines = [f"func Create{self.type_name}({self.var_name} *{self.type_name}, db {self.db_type}) error {{"]
        lines.append(f"\tq := `INSERT INTO {self.table.source_table_name} ({column_list})")
        lines.append(f"VALUES ({placeholders})")
        lines.append(f"RETURNING {IDENTIFIER_COLUMN}, {VERSION_COLUMN}`")
        lines.append("")
        lines.extend(self._context_lines())

        args = [self._field_ref(col.field_name) for col in columns]
        scan = [f"&{self._field_ref(IDENTIFIER_FIELD)}", f"&{self._field_ref(VERSION_FIELD)}"]
        lines.append(f"\terr := db.QueryRow({self._call_args(args)}).Scan({', '.join(scan)})")
        lines.append("")
        lines.extend(self._return_err_lines())
        lines.append("")
        lines.append("\treturn nil")
        lines.append("}")
        return "\n".join(lines) + "\n"

    def generate_get(self) -> str:
        """Generate GetX, fetching one row by identifier."""
        lines = [
            f"func Get{self.type_name}({self._id_param()}, db {self.db_type}) (*{self.type_name}, error) {{"
        ]
        lines.append(
            f"\tq := `SELECT * FROM {self.table.source_table_name} WHERE {IDENTIFIER_COLUMN} = $1`"
        )
        lines.append("")
        lines.extend(self._context_lines())
        lines.append("\trows, err := db.Query(ctx, q, id)")
        lines.extend(self._return_err_lines(with_value=True))
        lines.append("")
        lines.append(
            f"\t{self.var_name}, err := pgx.CollectOneRow(rows, pgx.RowToStructByName[{self.type_name}])"
        )
        lines.extend(self._return_err_lines(with_value=True))
        lines.append("")
        lines.append(f"\treturn &{self.var_name}, nil")
        lines.append("}")
        return "\n".join(lines) + "\n"

    def generate_update(self) -> str:
        """Generate UpdateX with optimistic locking on the version column.

        The WHERE clause matches both the identifier and the version the
        caller last read; the new version is scanned back into the record.
        """
        columns = self.table.get_writable_columns()
        assignments = [f"{col.raw_name} = ${i}" for i, col in enumerate(columns, start=1)]
        assignments.append(f"{VERSION_COLUMN} = {VERSION_COLUMN} + 1")
        id_param = len(columns) + 1
        version_param = len(columns) + 2

        lines = [f"func Update{self.type_name}({self.var_name} *{self.type_name}, db {self.db_type}) error {{"]
        lines.append(f"\tq := `UPDATE {self.table.source_table_name}")
        lines.append(f"SET {', '.join(assignments)}")
        lines.append(
            f"WHERE {IDENTIFIER_COLUMN} = ${id_param} AND {VERSION_COLUMN} = ${version_param}"
        )
        lines.append(f"RETURNING {VERSION_COLUMN}`")
        lines.append("")
        lines.extend(self._context_lines())

        args = [self._field_ref(col.field_name) for col in columns]
        args.append(self._field_ref(IDENTIFIER_FIELD))
        args.append(self._field_ref(VERSION_FIELD))
        lines.append(
            f"\terr := db.QueryRow({self._call_args(args)}).Scan(&{self._field_ref(VERSION_FIELD)})"
        )
        lines.append("")
        lines.extend(self._return_err_lines())
        lines.append("")
        lines.append("\treturn nil")
        lines.append("}")
        return "\n".join(lines) + "\n"

    def generate_delete(self) -> str:
        """Generate DeleteX, reporting pgx.ErrNoRows when nothing was deleted."""
        lines = [f"func Delete{self.type_name}({self._id_param()}, db {self.db_type}) error {{"]
        lines.append(
            f"\tq := `DELETE FROM {self.table.source_table_name} WHERE {IDENTIFIER_COLUMN} = $1`"
        )
        lines.append("")
        lines.extend(self._context_lines())
        lines.append("\tresult, err := db.Exec(ctx, q, id)")
        lines.extend(self._return_err_lines())
        lines.append("")
        lines.append("\trowsAffected := result.RowsAffected()")
        lines.append("")
        lines.append("\tif rowsAffected == 0 {")
        lines.append("\t\treturn pgx.ErrNoRows")
        lines.append("\t}")
        lines.append("")
        lines.append("\treturn nil")
        lines.append("}")
        return "\n".join(lines) + "\n"

    def generate_all(self) -> Dict[str, str]:
        """Generate all artifacts for the table.

        Returns:
            Dictionary with keys struct, create, get, update, delete (in that order)

        Raises:
            MissingIdentifierError: In strict mode, if the table has no id column
        """
        if not self.table.has_identifier():
            if self.strict:
                raise MissingIdentifierError(self.table.source_table_name)
            logger.warning(
                "Table %s has no '%s' column; Get%s and Delete%s will have an empty id type",
                self.table.source_table_name, IDENTIFIER_COLUMN, self.type_name, self.type_name,
            )

        artifacts = {
            "struct": self.generate_struct(),
            "create": self.generate_create(),
            "get": self.generate_get(),
            "update": self.generate_update(),
            "delete": self.generate_delete(),
        }
        logger.debug("Generated %d artifacts for %s", len(artifacts), self.type_name)
        return artifacts

    def render(self) -> str:
        """Render all artifacts as one text block, each followed by a blank line."""
        artifacts = self.generate_all()
        return "".join(artifacts[key] + "\n" for key in ARTIFACT_ORDER)

    def _field_ref(self, field_name: str) -> str:
        return f"{self.var_name}.{field_name}"

    def _id_param(self) -> str:
        # An empty id type still renders as valid Go ("id, db DB")
        return " ".join(part for part in ["id", self.table.identifier_type()] if part)

    @staticmethod
    def _call_args(args: List[str]) -> str:
        return ", ".join(["ctx", "q"] + args)

    def _context_lines(self) -> List[str]:
        return [
            f"\tctx, cancel := context.WithTimeout(context.Background(), time.Second*{self.timeout_seconds})",
            "\tdefer cancel()",
            "",
        ]

    @staticmethod
    def _return_err_lines(with_value: bool = False) -> List[str]:
        ret = "return nil, err" if with_value else "return err"
        return [
            "\tif err != nil {",
            f"\t\t{ret}",
            "\t}",
        ]
