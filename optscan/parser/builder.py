# Optscan Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Fluent construction helper for `Option` instances.

Example Usage:
    option = (
        OptionBuilder()
        .with_long_name("output")
        .has_arg()
        .is_required()
        .with_type(ValueType.FILE)
        .with_description("Where to write the report")
        .create("o")
    )

The builder resets itself after every `create()` call, whether the option was
created or rejected, so settings never leak from one option into the next.
"""
from __future__ import annotations

from typing import Any

from optscan.exceptions import IllegalOptionError
from optscan.parser.option import NO_ARGS, UNLIMITED, Option
from optscan.parser.value_type import ValueType


class OptionBuilder:
    """Accumulates option settings and produces an `Option` on `create()`."""

    def __init__(self) -> None:
        self._reset()

    def _reset(self) -> None:
        self._long_name: str = ""
        self._description: str = ""
        self._required: bool = False
        self._arity: int = NO_ARGS
        self._optional_arg: bool = False
        self._value_separator: str | None = None
        self._value_type: ValueType | None = None

    def with_long_name(self, long_name: str) -> OptionBuilder:
        self._long_name = long_name
        return self

    def with_description(self, description: str) -> OptionBuilder:
        self._description = description
        return self

    def is_required(self, required: bool = True) -> OptionBuilder:
        self._required = required
        return self

    def has_arg(self, has_arg: bool = True) -> OptionBuilder:
        """The option takes exactly one value (or none when `has_arg` is False)."""
        self._arity = 1 if has_arg else NO_ARGS
        return self

    def has_args(self, count: int = UNLIMITED) -> OptionBuilder:
        """The option takes `count` values, unlimited by default."""
        self._arity = count
        return self

    def has_optional_arg(self) -> OptionBuilder:
        self._arity = 1
        self._optional_arg = True
        return self

    def has_optional_args(self, count: int = UNLIMITED) -> OptionBuilder:
        self._arity = count
        self._optional_arg = True
        return self

    def with_value_separator(self, separator: str = "=") -> OptionBuilder:
        self._value_separator = separator
        return self

    def with_type(self, value_type: ValueType | str | Any) -> OptionBuilder:
        if value_type is not None and not isinstance(value_type, ValueType):
            try:
                value_type = ValueType(value_type)
            except ValueError as error:
                raise IllegalOptionError(str(error)) from error
        self._value_type = value_type
        return self

    def create(self, short_name: str | None = None) -> Option:
        """
        Build the option from the accumulated settings and reset the builder.

        Args:
            short_name (str | None): Single-dash name; may be omitted when a long
                name was configured.

        Raises:
            IllegalOptionError: If no name was given or a name is illegal.
        """
        try:
            if not short_name and not self._long_name:
                raise IllegalOptionError("Must specify a short name or a long name")
            return Option(
                short_name=short_name or "",
                long_name=self._long_name,
                description=self._description,
                required=self._required,
                arity=self._arity,
                optional_arg=self._optional_arg,
                value_separator=self._value_separator,
                value_type=self._value_type,
            )
        finally:
            self._reset()
