"""Go code generation module for sql2godb.

Renders a struct and pgx-style Create/Get/Update/Delete functions
for each table model.
"""

from .generator import GoCodeGenerator, ARTIFACT_ORDER

__all__ = [
    "GoCodeGenerator",
    "ARTIFACT_ORDER",
]
