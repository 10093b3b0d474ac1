# Optscan Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ParseResult`, the structured outcome of a successful parse.

A result holds the matched options (each a session-local copy carrying its bound
values) in match order, and the positional arguments in input order. Options can
be looked up by short or long name, with or without leading dashes.

The engine keeps no reference to a result once it is returned.
"""
from __future__ import annotations

from typing import Any, Iterator

from optscan.exceptions import ParseError
from optscan.parser.option import UNLIMITED, Option
from optscan.parser.utils import coerce_value, strip_leading_hyphens


class ParseResult:
    """Matched options and remaining positional arguments of one parse."""

    def __init__(self) -> None:
        self._options: dict[str, Option] = {}
        self._args: list[str] = []

    def add_option(self, option: Option) -> None:
        """
        Record a matched option, replacing any earlier match of the same key.

        Options of unlimited arity accumulate the values of earlier matches.
        """
        prior = self._options.get(option.key)
        if prior is not None and option.arity == UNLIMITED:
            option.values[:0] = prior.values
        self._options[option.key] = option

    def add_arg(self, arg: str) -> None:
        self._args.append(arg)

    def get_option(self, name: str) -> Option | None:
        """Return the matched option answering to `name`, if any."""
        name = strip_leading_hyphens(name)
        if name in self._options:
            return self._options[name]
        return next(
            (option for option in self._options.values() if name in option.names),
            None,
        )

    def has_option(self, name: str) -> bool:
        return self.get_option(name) is not None

    def get_values(self, name: str) -> list[str]:
        """Return every value bound to `name` (empty if absent or valueless)."""
        option = self.get_option(name)
        if option is None:
            return []
        return list(option.values)

    def get_value(self, name: str, default: str | None = None) -> str | None:
        """Return the first value bound to `name`, or `default`."""
        values = self.get_values(name)
        return values[0] if values else default

    def get_parsed_value(self, name: str) -> Any:
        """
        Return the first value of `name` converted to the option's declared type.

        Raises:
            ParseError: If the value cannot be converted.
        """
        option = self.get_option(name)
        if option is None or not option.values:
            return None
        try:
            return coerce_value(option.values[0], option.value_type)
        except ValueError as error:
            raise ParseError(f"Invalid value for '{option.key}': {error}") from error

    def get_properties(self, name: str) -> dict[str, str]:
        """
        Return the values of `name` read as key/value pairs.

        Intended for value-separator options such as `-Dkey=value`. A trailing key
        without a value maps to "true".
        """
        values = self.get_values(name)
        properties: dict[str, str] = {}
        for index in range(0, len(values), 2):
            pair = values[index : index + 2]
            properties[pair[0]] = pair[1] if len(pair) == 2 else "true"
        return properties

    @property
    def options(self) -> list[Option]:
        return list(self._options.values())

    @property
    def args(self) -> list[str]:
        return list(self._args)

    def as_dict(self) -> dict[str, list[str]]:
        """Return the matched option keys mapped to their bound values."""
        return {key: list(option.values) for key, option in self._options.items()}

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has_option(name)

    def __iter__(self) -> Iterator[Option]:
        return iter(self.options)

    def __len__(self) -> int:
        return len(self._options)

    def __str__(self) -> str:
        return f"ParseResult(options={self.as_dict()}, args={self._args})"

    def __repr__(self) -> str:
        return str(self)
