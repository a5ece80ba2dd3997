"""Name conversion helpers for turning SQL identifiers into Go identifiers."""

import re
from typing import List

# Word boundaries: separators, lower/digit to upper, the end of an acronym
# (HTTPStatus), and letter/digit transitions (sha256sum)
_WORD_BOUNDARY = re.compile(
    r"[_\-\s]+"
    r"|(?<=[a-z0-9])(?=[A-Z])"
    r"|(?<=[A-Z])(?=[A-Z][a-z])"
    r"|(?<=[a-zA-Z])(?=\d)"
    r"|(?<=\d)(?=[a-zA-Z])"
)


def split_words(name: str) -> List[str]:
    """Split an identifier into its words."""
    return [word for word in _WORD_BOUNDARY.split(name) if word]


def to_pascal_case(name: str) -> str:
    """Convert snake_case (or camelCase) to PascalCase.

    Each word gets an upper-case first letter and lower-case remainder,
    so ``user_name`` and ``userName`` both become ``UserName``.
    """
    return "".join(word.capitalize() for word in split_words(name))


def to_camel_case(name: str) -> str:
    """Convert an identifier to camelCase (``UserAccount`` -> ``userAccount``)."""
    words = split_words(name)
    if not words:
        return ""
    return words[0].lower() + "".join(word.capitalize() for word in words[1:])


def strip_plural(name: str) -> str:
    """Remove a single trailing ``s`` if present."""
    if name.endswith("s"):
        return name[:-1]
    return name


def uppercase_id(name: str) -> str:
    """Rewrite every literal ``Id`` substring to ``ID``.

    This is a plain substring replacement, so ``Identity`` becomes
    ``IDentity`` as well as ``UserId`` becoming ``UserID``.
    """
    return name.replace("Id", "ID")
