# Optscan Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by the optscan option parser.

Errors fall in two families: construction-time problems raised while a catalogue
is being assembled, and parse-time problems raised while a token sequence is
scanned. Every parse-time error aborts the parse call; there is no partial result.

All exceptions inherit from `OptScanError`, the base exception for the package.

Exception Hierarchy:
- OptScanError
    ├── CatalogueError
    │     ├── DuplicateNameError
    │     └── IllegalOptionError
    ├── ParseError
    │     ├── UnrecognizedOptionError
    │     ├── MissingArgumentError
    │     ├── MissingRequiredOptionsError
    │     ├── AlreadySelectedError
    │     └── UnknownPropertyError
    └── ValueBindingError
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from optscan.parser.option import Option
    from optscan.parser.option_group import OptionGroup


class OptScanError(Exception):
    """Base exception for the optscan package."""


class CatalogueError(OptScanError):
    """Exception raised while an option catalogue is being built."""


class DuplicateNameError(CatalogueError):
    """Exception raised when an option name is registered twice."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Option name '{name}' is already registered")


class IllegalOptionError(CatalogueError):
    """Exception raised when an option definition is malformed."""


class ValueBindingError(OptScanError):
    """Exception raised when a value cannot be bound to an option."""


class ParseError(OptScanError):
    """Base exception for failures while parsing a token sequence."""


class UnrecognizedOptionError(ParseError):
    """Exception raised when a dash-prefixed token matches no catalogued option."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Unrecognized option: {token}")


class MissingArgumentError(ParseError):
    """Exception raised when an option requiring a value received none."""

    def __init__(self, option: Option) -> None:
        self.option = option
        super().__init__(f"Missing argument for option: {option.key}")


class MissingRequiredOptionsError(ParseError):
    """Exception raised when required options or groups were never supplied.

    All outstanding requirements are reported together.
    """

    def __init__(self, keys: list[Any]) -> None:
        self.keys: list[str | OptionGroup] = list(keys)
        plural = "s" if len(self.keys) > 1 else ""
        missing = ", ".join(str(key) for key in self.keys)
        super().__init__(f"Missing required option{plural}: {missing}")


class AlreadySelectedError(ParseError):
    """Exception raised when two options of one exclusive group are supplied."""

    def __init__(self, group: OptionGroup, previous: str, attempted: Option) -> None:
        self.group = group
        self.previous = previous
        self.attempted = attempted
        super().__init__(
            f"The option '{attempted.key}' was specified but an option from this "
            f"group has already been selected: '{previous}'"
        )


class UnknownPropertyError(ParseError):
    """Exception raised when a default map key names no catalogued option."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Default property '{key}' does not name a known option")
