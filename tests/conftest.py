"""Shared pytest fixtures for sql2godb tests."""

import pytest

from sql2godb.schema import build_table_model


@pytest.fixture
def users_ddl():
    """Minimal users table definition."""
    return """CREATE TABLE users (
id bigserial
name text
version int
);
"""


@pytest.fixture
def users_table():
    """Table model for the minimal users table."""
    return build_table_model(
        "users",
        [("id", "bigserial"), ("name", "text"), ("version", "int")],
    )


@pytest.fixture
def accounts_table():
    """Table model with every bookkeeping column and two writable columns."""
    return build_table_model(
        "user_accounts",
        [
            ("id", "uuid"),
            ("email", "text"),
            ("version", "int"),
            ("create_time", "timestamp(0)"),
            ("edit_time", "timestamp(0)"),
            ("owner_id", "bigint"),
        ],
    )


@pytest.fixture
def no_id_table():
    """Table model without an identifier column."""
    return build_table_model("tags", [("label", "text"), ("version", "int")])


@pytest.fixture
def empty_table():
    """Table model with no columns."""
    return build_table_model("users", [])


@pytest.fixture
def schema_ddl():
    """A realistic schema file with comments, constraints and two tables."""
    return """-- users and their posts

CREATE TABLE users (
    id bigserial PRIMARY KEY,
    email text NOT NULL,
    is_admin bool NOT NULL,
    version int NOT NULL,
    create_time timestamp(0) NOT NULL,
    edit_time timestamp(0) NOT NULL
);

CREATE TABLE posts (
    id bigserial,
    user_id bigint NOT NULL,
    body text,
    score float,
    version int,
    UNIQUE (user_id, body)
);
"""
