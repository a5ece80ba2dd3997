"""End-to-end tests for converting table definitions to Go code."""

import io
import logging

import pytest

from sql2godb.converter import convert, convert_text
from sql2godb.errors import MalformedColumnError, MissingIdentifierError


class TestConvert:
    """Test the streaming conversion."""

    def test_users_example(self, users_ddl):
        """The users table produces User and its four functions."""
        code = convert_text(users_ddl)

        assert code.startswith(
            "type User struct {\n"
            '\tID int64 `db:"id"`\n'
            '\tName string `db:"name"`\n'
            '\tVersion int32 `db:"version"`\n'
            "}\n\n"
            "func CreateUser(user *User, db DB) error {\n"
            "\tq := `INSERT INTO users (name)\n"
            "VALUES ($1)\n"
            "RETURNING id, version`\n"
        )
        positions = [code.index(f"func {op}User(") for op in ("Create", "Get", "Update", "Delete")]
        assert positions == sorted(positions)
        assert code.endswith("}\n\n")

    def test_reserved_columns_never_bound(self):
        """Only name is bound on insert and update."""
        code = convert_text(
            "CREATE TABLE users (\n"
            "id bigserial\n"
            "version int\n"
            "create_time timestamp(0)\n"
            "edit_time timestamp(0)\n"
            "name text\n"
            ");\n"
        )
        assert "INSERT INTO users (name)\nVALUES ($1)\n" in code
        assert "SET name = $1, version = version + 1\nWHERE id = $2 AND version = $3\n" in code

    def test_multiple_tables(self, schema_ddl):
        """Each table is converted independently."""
        output = io.StringIO()
        count = convert(schema_ddl.splitlines(), output)
        code = output.getvalue()

        assert count == 2
        assert "type User struct {" in code
        assert "type Post struct {" in code
        assert '\tIsAdmin bool `db:"is_admin"`' in code
        assert '\tUserID int64 `db:"user_id"`' in code
        assert '\tScore float32 `db:"score"`' in code
        assert "INSERT INTO users (email, is_admin)" in code
        assert "INSERT INTO posts (user_id, body, score)" in code

    def test_package_clause(self, users_ddl):
        """A package clause is written first when requested."""
        code = convert_text(users_ddl, package_name="data")
        assert code.startswith("package data\n\ntype User struct {\n")

    def test_no_package_clause_by_default(self, users_ddl):
        """Without a package name only the artifacts are written."""
        assert convert_text(users_ddl).startswith("type User struct {")

    def test_empty_input(self):
        """No blocks, no output."""
        assert convert_text("-- nothing here\n\n") == ""

    def test_empty_block(self):
        """A block closing immediately still renders all five artifacts."""
        code = convert_text("CREATE TABLE users (\n);\n")
        assert code.startswith("type User struct {\n}\n\n")
        assert code.count("func ") == 4

    def test_earlier_tables_are_kept_on_error(self):
        """Output already written for earlier tables stays written."""
        output = io.StringIO()
        lines = [
            "CREATE TABLE users (", "id bigserial", "name text", ");",
            "CREATE TABLE posts (", "oops", ");",
        ]
        with pytest.raises(MalformedColumnError):
            convert(lines, output)
        assert "type User struct {" in output.getvalue()
        assert "Post" not in output.getvalue()

    def test_strict_mode(self):
        """Strict mode rejects a table without an id column."""
        with pytest.raises(MissingIdentifierError):
            convert_text("CREATE TABLE tags (\nlabel text\n);\n", strict=True)

    def test_options_passed_through(self, users_ddl):
        """Timeout and db type reach the generated code."""
        code = convert_text(users_ddl, timeout_seconds=5, db_type="Querier")
        assert "time.Second*5)" in code
        assert "func DeleteUser(id int64, db Querier) error {" in code

    def test_debug_log_names_start_line(self, caplog, users_ddl):
        """Each converted table is logged with the line its block opened on."""
        with caplog.at_level(logging.DEBUG, logger="sql2godb.converter"):
            convert_text("-- header\n" + users_ddl)
        assert "Converting table users from line 2" in caplog.text
