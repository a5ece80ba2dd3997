"""sql2godb - generate Go structs and pgx CRUD functions from CREATE TABLE blocks."""

__version__ = "0.1.3"
