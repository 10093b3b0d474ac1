# Optscan Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Option` dataclass describing one recognized command-line flag.

An `Option` is identified by its short name, its long name, or both. Its `key`
(short name when present, else long name) is the identifier used for required
option bookkeeping and for lookups on a `ParseResult`.

Key Attributes:
- `short_name`: Name used after a single dash (e.g. `v` for `-v`)
- `long_name`: Name used after a double dash (e.g. `verbose` for `--verbose`)
- `arity`: Number of values consumed per match (`NO_ARGS`, a positive count, or `UNLIMITED`)
- `optional_arg`: Whether the value may be omitted even though `arity` > 0
- `value_separator`: Character splitting one bound token into several values (e.g. `=`)
- `value_type`: Opaque `ValueType` tag consumed by collaborators
- `values`: Values bound during a single parse

The catalogued instance is never mutated by the parser: the engine binds values to
a fresh copy obtained via `Option.copy()`.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace

from optscan.exceptions import IllegalOptionError, ValueBindingError
from optscan.parser.value_type import ValueType

NO_ARGS = 0
UNLIMITED = -1

_FORBIDDEN_NAME_CHARS = ("=", "-")
_NAME_PUNCTUATION = ("_", "$")


def _is_name_char(char: str) -> bool:
    return char.isalnum() or char in _NAME_PUNCTUATION


def validate_short_name(name: str) -> None:
    """Raise `IllegalOptionError` unless `name` is a legal short option name."""
    if len(name) == 1:
        # one character may be any punctuation except the dash prefix and "="
        if name.isspace() or name in _FORBIDDEN_NAME_CHARS:
            raise IllegalOptionError(f"Illegal option name {name!r}")
        return
    for char in name:
        if not _is_name_char(char):
            raise IllegalOptionError(
                f"Option name '{name}' contains illegal character '{char}'"
            )


def validate_long_name(name: str) -> None:
    """Raise `IllegalOptionError` unless `name` is a legal long option name."""
    if name.startswith("-"):
        raise IllegalOptionError(f"Long option name '{name}' must not start with '-'")
    for char in name:
        if char.isspace() or char == "=":
            raise IllegalOptionError(
                f"Long option name '{name}' contains illegal character {char!r}"
            )


@dataclass(eq=False)
class Option:
    """
    Represents a recognized command-line option.

    Attributes:
        short_name (str): Single-dash name, may be empty.
        long_name (str): Double-dash name, may be empty.
        description (str): Help text, opaque to the parser.
        required (bool): True if the option must be supplied.
        arity (int): Values consumed per match: `NO_ARGS`, a positive count, or `UNLIMITED`.
        optional_arg (bool): True if the value may be omitted.
        value_separator (str | None): Character splitting a bound token into several values.
        value_type (ValueType | None): Declared value type tag.
        values (list[str]): Values bound during the current parse.
    """

    short_name: str = ""
    long_name: str = ""
    description: str = ""
    required: bool = False
    arity: int = NO_ARGS
    optional_arg: bool = False
    value_separator: str | None = None
    value_type: ValueType | None = None
    values: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.short_name = self.short_name or ""
        self.long_name = self.long_name or ""
        if not self.short_name and not self.long_name:
            raise IllegalOptionError("An option needs a short name or a long name")
        if self.short_name:
            validate_short_name(self.short_name)
        if self.long_name:
            validate_long_name(self.long_name)
        if self.arity < 0 and self.arity != UNLIMITED:
            raise IllegalOptionError(
                f"Invalid arity {self.arity} for option '{self.key}'"
            )
        if self.value_separator is not None and len(self.value_separator) != 1:
            raise IllegalOptionError(
                f"Value separator for option '{self.key}' must be a single character"
            )
        if self.value_type is not None and not isinstance(self.value_type, ValueType):
            self.value_type = ValueType(self.value_type)

    @property
    def key(self) -> str:
        """Canonical identifier: the short name if present, else the long name."""
        return self.short_name or self.long_name

    @property
    def names(self) -> tuple[str, ...]:
        """All names this option answers to."""
        return tuple(name for name in (self.short_name, self.long_name) if name)

    @property
    def has_arg(self) -> bool:
        """True if the option takes at least one value."""
        return self.arity > 0 or self.arity == UNLIMITED

    @property
    def has_args(self) -> bool:
        """True if the option takes more than one value."""
        return self.arity > 1 or self.arity == UNLIMITED

    @property
    def is_full(self) -> bool:
        """True once no further value can be bound."""
        if self.arity == UNLIMITED:
            return False
        return len(self.values) >= self.arity

    def add_value(self, value: str) -> None:
        """
        Bind `value` to this option.

        When a value separator is configured the text is split on it, stopping one
        short of the arity so the last piece keeps any further separators.

        Raises:
            ValueBindingError: If the option takes no value or is already full.
        """
        if not self.has_arg:
            raise ValueBindingError(f"Option '{self.key}' does not take a value")
        if self.is_full:
            raise ValueBindingError(f"Option '{self.key}' cannot take more values")
        if self.value_separator is not None:
            separator = self.value_separator
            while separator in value:
                if self.arity != UNLIMITED and len(self.values) == self.arity - 1:
                    break
                head, value = value.split(separator, 1)
                self._append(head)
        self._append(value)

    def _append(self, value: str) -> None:
        if self.is_full:
            raise ValueBindingError(f"Option '{self.key}' cannot take more values")
        self.values.append(value)

    def clear_values(self) -> None:
        """Forget every bound value."""
        self.values.clear()

    def copy(self) -> Option:
        """Return an independent copy of this option with no bound values."""
        return replace(self, values=[])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return False
        return (
            self.short_name == other.short_name and self.long_name == other.long_name
        )

    def __hash__(self) -> int:
        return hash((self.short_name, self.long_name))

    def __str__(self) -> str:
        flags = []
        if self.short_name:
            flags.append(f"-{self.short_name}")
        if self.long_name:
            flags.append(f"--{self.long_name}")
        names = ", ".join(flags)
        if self.values:
            return f"Option({names}, values={self.values})"
        return f"Option({names})"
