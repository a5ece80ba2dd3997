"""Error types for sql2godb."""

from typing import Optional, Dict, Any


class Sql2GoDBError(Exception):
    """Base exception for sql2godb errors."""

    def __init__(self, message: str, code: str = "SQL2GODB_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ParseError(Sql2GoDBError):
    """Error reading the table-definition input."""

    def __init__(
        self,
        message: str,
        line_number: Optional[int] = None,
        line: Optional[str] = None,
        code: str = "PARSE_ERROR",
    ):
        super().__init__(
            message,
            code=code,
            details={"line_number": line_number, "line": line},
        )
        self.line_number = line_number
        self.line = line

    def get_formatted_location(self) -> str:
        """Return a location string like 'line 4'."""
        if self.line_number is None:
            return ""
        return f"line {self.line_number}"

    def get_user_friendly_message(self) -> str:
        """Return the message with location and offending line."""
        location = self.get_formatted_location()
        if not location:
            return self.message
        if self.line:
            return f"{self.message} at {location}: {self.line!r}"
        return f"{self.message} at {location}"


class MalformedColumnError(ParseError):
    """A column line inside a table block has fewer than two words."""

    def __init__(self, line_number: Optional[int] = None, line: Optional[str] = None):
        super().__init__(
            "Column definition needs a name and a type",
            line_number=line_number,
            line=line,
            code="MALFORMED_COLUMN",
        )


class MalformedCreateError(ParseError):
    """A CREATE line does not carry a table name."""

    def __init__(self, line_number: Optional[int] = None, line: Optional[str] = None):
        super().__init__(
            "CREATE line has no table name",
            line_number=line_number,
            line=line,
            code="MALFORMED_CREATE",
        )


class GenerationError(Sql2GoDBError):
    """Error during Go code generation."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        code: str = "GENERATION_ERROR",
    ):
        super().__init__(message, code=code, details=details)


class MissingIdentifierError(GenerationError):
    """Table has no identifier column (raised only in strict mode)."""

    def __init__(self, table_name: str):
        super().__init__(
            f"Table has no 'id' column: {table_name}",
            details={"table_name": table_name},
            code="MISSING_IDENTIFIER",
        )
        self.table_name = table_name
