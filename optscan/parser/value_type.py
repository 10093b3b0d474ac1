# Optscan Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ValueType`, the enum of value type tags an `Option` may declare.

The parser core never interprets a value type; it only carries the tag so that
collaborators (typed lookups on `ParseResult`, help rendering) can act on it.
Each member is tied to the punctuation code used by the pattern grammar.

Exports:
    - ValueType: Enum of value type tags.
    - VALUE_CODES: Mapping of pattern punctuation to `ValueType`.
    - REQUIRED_CODE: Pattern character that marks an option required.

Example:
    ValueType("string")      → ValueType.STRING
    ValueType("str")         → ValueType.STRING (via alias)
    ValueType.from_code(":") → ValueType.STRING
"""
from __future__ import annotations

from enum import Enum


class ValueType(Enum):
    """
    Declared type of the values bound to an option.

    Members:
        OBJECT: An instance of a named class (`@`).
        STRING: Plain text (`:`).
        NUMBER: An integer or floating point number (`%`).
        CLASS: A named class (`+`).
        DATE: A date or datetime (`#`).
        EXISTING_FILE: A path that must already exist (`<`).
        FILE: A path (`>`).
        FILES: Several paths (`*`).
        URL: A URL (`/`).

    Aliases:
        - "str" → "string"
        - "path" → "file"
        - "uri" → "url"
        - "number" also accepts "int" and "float"
    """

    OBJECT = "object"
    STRING = "string"
    NUMBER = "number"
    CLASS = "class"
    DATE = "date"
    EXISTING_FILE = "existing_file"
    FILE = "file"
    FILES = "files"
    URL = "url"

    @classmethod
    def from_code(cls, code: str) -> ValueType | None:
        """Return the value type for a pattern code, or None for other characters."""
        return VALUE_CODES.get(code)

    @property
    def code(self) -> str:
        """Pattern punctuation for this value type."""
        return next(code for code, value in VALUE_CODES.items() if value is self)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "str": "string",
            "int": "number",
            "float": "number",
            "path": "file",
            "uri": "url",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ValueType:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        return self.value


VALUE_CODES: dict[str, ValueType] = {
    "@": ValueType.OBJECT,
    ":": ValueType.STRING,
    "%": ValueType.NUMBER,
    "+": ValueType.CLASS,
    "#": ValueType.DATE,
    "<": ValueType.EXISTING_FILE,
    ">": ValueType.FILE,
    "*": ValueType.FILES,
    "/": ValueType.URL,
}

REQUIRED_CODE = "!"
