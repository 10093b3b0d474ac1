# Optscan Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements the parse engine: the left-to-right scan that turns an
atomic token sequence into a `ParseResult`.

A parse runs in four steps:
1. The chosen `Dialect` flattens the raw arguments into atomic tokens.
2. Each token is classified. Catalogued options bind following tokens greedily as
   values; everything else becomes a positional argument. The first `--` (and, with
   `stop_at_non_option`, the first non-option) switches to eat-the-rest mode, in
   which every remaining token is positional.
3. Entries of the default map fill in options that were not supplied.
4. Required options and required groups that are still unsatisfied are reported
   together in one `MissingRequiredOptionsError`.

The caller's catalogue is never mutated. Each matched option is bound on a fresh
copy, and group selections live in a per-parse `GroupRegistry`, so one catalogue
can be reused across sequential parses. Concurrent parses against a catalogue that
is being modified are not supported.

Example Usage:
    catalogue = compile_catalogue("vp:!f/")
    result = parse(catalogue, ["-p", "hello", "-f", "http://x"])
    result.get_value("p")  # 'hello'

    parser = OptionParser(Dialect.POSIX)
    result = parser.parse(catalogue, ["-vp", "hello"], defaults={"f": "http://y"})
"""
from __future__ import annotations

from typing import Mapping, Sequence

from optscan.exceptions import (
    MissingArgumentError,
    MissingRequiredOptionsError,
    UnknownPropertyError,
    UnrecognizedOptionError,
    ValueBindingError,
)
from optscan.logger import logger
from optscan.parser.catalogue import OptionCatalogue
from optscan.parser.dialect import END_OF_OPTIONS, SINGLE_DASH, Dialect
from optscan.parser.option import Option
from optscan.parser.option_group import OptionGroup
from optscan.parser.result import ParseResult
from optscan.parser.utils import strip_quotes

AFFIRMATIVE_VALUES = ("yes", "true", "1")


class _ParseSession:
    """State of a single parse: token cursor, open requirements and the result."""

    def __init__(
        self,
        catalogue: OptionCatalogue,
        tokens: list[str],
        stop_at_non_option: bool,
    ) -> None:
        self.catalogue = catalogue
        self.stop_at_non_option = stop_at_non_option
        self.required: list[str | OptionGroup] = catalogue.finalize_for_parse()
        self.groups = catalogue.new_group_registry()
        self.result = ParseResult()
        self.eat_the_rest = False
        self._tokens = tokens
        self._position = 0

    def _has_next(self) -> bool:
        return self._position < len(self._tokens)

    def _next(self) -> str:
        token = self._tokens[self._position]
        self._position += 1
        return token

    def _rewind(self) -> None:
        self._position -= 1

    def _is_option_token(self, token: str) -> bool:
        return token.startswith("-") and self.catalogue.has_option(token)

    def scan(self) -> None:
        while self._has_next():
            token = self._next()

            if self.eat_the_rest:
                if token != END_OF_OPTIONS:
                    self.result.add_arg(token)
            elif token == END_OF_OPTIONS:
                self.eat_the_rest = True
            elif token == SINGLE_DASH:
                if self.stop_at_non_option:
                    self.eat_the_rest = True
                else:
                    self.result.add_arg(token)
            elif token.startswith("-"):
                if self.catalogue.has_option(token):
                    self._process_option(token)
                elif self.stop_at_non_option:
                    self.result.add_arg(token)
                    self.eat_the_rest = True
                else:
                    raise UnrecognizedOptionError(token)
            else:
                self.result.add_arg(token)
                if self.stop_at_non_option:
                    self.eat_the_rest = True

    def _satisfy(self, requirement: str | OptionGroup) -> None:
        if requirement in self.required:
            self.required.remove(requirement)

    def _process_option(self, token: str) -> None:
        catalogued = self.catalogue.lookup(token)
        assert catalogued is not None, "option token should be catalogued"
        option = catalogued.copy()
        logger.debug("Matched option '%s' from token '%s'", option.key, token)

        if option.required:
            self._satisfy(option.key)

        group = self.groups.select(option)
        if group is not None and group.required:
            self._satisfy(group)

        if option.has_arg:
            self._process_values(option)

        self.result.add_option(option)

    def _process_values(self, option: Option) -> None:
        while self._has_next():
            token = self._next()
            if token == END_OF_OPTIONS or self._is_option_token(token):
                self._rewind()
                break
            try:
                option.add_value(strip_quotes(token))
            except ValueBindingError:
                self._rewind()
                break

        if not option.values and not option.optional_arg:
            raise MissingArgumentError(option)

    def apply_defaults(self, defaults: Mapping[str, str] | None) -> None:
        if not defaults:
            return
        for key, raw_value in defaults.items():
            if self.result.has_option(key):
                continue
            catalogued = self.catalogue.lookup(key)
            if catalogued is None:
                raise UnknownPropertyError(key)
            option = catalogued.copy()
            value = str(raw_value)

            if option.has_arg:
                # binding to a fresh copy never overflows; this is still the one place
                # a binding failure is ignored rather than raised.
                try:
                    option.add_value(value)
                except ValueBindingError as error:
                    logger.debug("Ignoring default for '%s': %s", key, error)
            elif value.lower() not in AFFIRMATIVE_VALUES:
                logger.debug(
                    "Default '%s=%s' is not affirmative; skipping remaining defaults",
                    key,
                    value,
                )
                break

            logger.debug("Applied default for '%s'", option.key)
            self.result.add_option(option)

    def check_required(self) -> None:
        if self.required:
            raise MissingRequiredOptionsError(self.required)


class OptionParser:
    """
    Parses argument lists against an `OptionCatalogue` using one `Dialect`.

    Args:
        dialect (Dialect | str): Flattening strategy, `Dialect.BASIC` by default.
    """

    def __init__(self, dialect: Dialect | str = Dialect.BASIC) -> None:
        self.dialect: Dialect = Dialect(dialect)

    def parse(
        self,
        catalogue: OptionCatalogue,
        arguments: Sequence[str] | None = None,
        defaults: Mapping[str, str] | None = None,
        stop_at_non_option: bool = False,
    ) -> ParseResult:
        """
        Parse `arguments` against `catalogue`.

        Args:
            catalogue (OptionCatalogue): Recognized options.
            arguments (Sequence[str] | None): Raw argument strings.
            defaults (Mapping[str, str] | None): Fallback values keyed by option name.
            stop_at_non_option (bool): Treat everything from the first non-option
                token onwards as positional arguments.

        Returns:
            ParseResult: Matched options and positional arguments.

        Raises:
            ParseError: On the first problem found; no partial result is returned.
        """
        tokens = self.dialect.flatten(catalogue, list(arguments or []), stop_at_non_option)
        session = _ParseSession(catalogue, tokens, stop_at_non_option)
        session.scan()
        session.apply_defaults(defaults)
        session.check_required()
        logger.debug("Parsed %s", session.result)
        return session.result

    def __str__(self) -> str:
        return f"OptionParser(dialect={self.dialect})"

    def __repr__(self) -> str:
        return str(self)


def parse(
    catalogue: OptionCatalogue,
    arguments: Sequence[str] | None = None,
    defaults: Mapping[str, str] | None = None,
    stop_at_non_option: bool = False,
    dialect: Dialect | str = Dialect.BASIC,
) -> ParseResult:
    """Parse `arguments` against `catalogue` with the given `dialect`."""
    return OptionParser(dialect).parse(catalogue, arguments, defaults, stop_at_non_option)
