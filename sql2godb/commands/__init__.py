"""CLI commands for sql2godb."""
