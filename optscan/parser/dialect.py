# Optscan Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Dialect`, the flattening strategy that normalizes raw arguments into the
atomic token sequence consumed by the parse engine.

Every dialect preserves token order, leaves a bare `-` alone, passes the first
`--` through unchanged and copies everything after it verbatim. Every dialect also
splits `--name=value` / `-o=value` into `--name`, `value` when the name before the
`=` is catalogued, and `-ovalue` into `-o`, `value` when `-o` takes a value.

Dialects:
- BASIC: Only the normalizations above. With `stop_at_non_option`, the first token
  that is neither an option nor a value the engine will bind to the preceding
  option ends flattening; the rest is copied verbatim.
- POSIX: Also bursts bundled short flags (`-abc` → `-a -b -c`); the last flag of a
  bundle may take the remainder as its value (`-abvalue` → `-a -b value`). A bundle
  with an unrecognized character is passed through whole. With
  `stop_at_non_option`, the first non-option token ends flattening and is preceded
  by an inserted `--`.
- GNU: Long-option style. Splits `-Dkey=value` into `-D`, `key=value` whenever
  `-D` is catalogued. With `stop_at_non_option`, only an unrecognized dash token
  ends flattening; plain words do not.

Example:
    Dialect.POSIX.flatten(catalogue, ["-vf", "out.txt", "--level=3"])
    # ['-v', '-f', 'out.txt', '--level', '3']
"""
from __future__ import annotations

from enum import Enum
from typing import Callable, Sequence

from optscan.logger import logger
from optscan.parser.catalogue import OptionCatalogue
from optscan.parser.option import UNLIMITED, Option

END_OF_OPTIONS = "--"
SINGLE_DASH = "-"


def _split_assignment(catalogue: OptionCatalogue, token: str) -> list[str] | None:
    """Split `--name=value` / `-o=value` when `name` is catalogued."""
    name, separator, value = token.partition("=")
    if separator and catalogue.has_option(name):
        return [name, value]
    return None


def _split_attached(catalogue: OptionCatalogue, token: str) -> list[str] | None:
    """Split `-ovalue` when `-o` is catalogued and takes a value."""
    if token.startswith("--") or len(token) <= 2:
        return None
    option = catalogue.lookup(token[:2])
    if option is not None and option.has_arg:
        return [token[:2], token[2:]]
    return None


def _value_slots(option: Option | None) -> float:
    """Number of values the engine will still bind greedily to `option`."""
    if option is None or not option.has_arg:
        return 0
    if option.arity == UNLIMITED:
        return float("inf")
    return option.arity


def _values_in(option: Option, token: str) -> int:
    """Number of values `token` fills once split on the option's separator."""
    if option.value_separator is None:
        return 1
    return token.count(option.value_separator) + 1


def _flatten_basic(
    catalogue: OptionCatalogue, arguments: Sequence[str], stop_at_non_option: bool
) -> list[str]:
    tokens: list[str] = []
    current: Option | None = None
    slots: float = 0
    eat_the_rest = False
    for token in arguments:
        if eat_the_rest:
            tokens.append(token)
            continue
        if token == END_OF_OPTIONS:
            eat_the_rest = True
            tokens.append(token)
            continue

        pieces = None
        if token.startswith("-") and token != SINGLE_DASH:
            if catalogue.has_option(token):
                pieces = [token]
            else:
                pieces = _split_assignment(catalogue, token) or _split_attached(
                    catalogue, token
                )

        if pieces is not None:
            current = catalogue.lookup(pieces[0])
            slots = _value_slots(current)
            for value in pieces[1:]:
                slots -= _values_in(current, value)
            tokens.extend(pieces)
        elif current is not None and slots > 0:
            # bound as a value by the engine, not a non-option
            slots -= _values_in(current, token)
            tokens.append(token)
        else:
            eat_the_rest = stop_at_non_option
            tokens.append(token)
    return tokens


def _flatten_gnu(
    catalogue: OptionCatalogue, arguments: Sequence[str], stop_at_non_option: bool
) -> list[str]:
    tokens: list[str] = []
    eat_the_rest = False
    for token in arguments:
        if eat_the_rest:
            tokens.append(token)
        elif token == END_OF_OPTIONS:
            eat_the_rest = True
            tokens.append(token)
        elif token == SINGLE_DASH or not token.startswith("-"):
            tokens.append(token)
        elif catalogue.has_option(token):
            tokens.append(token)
        elif split := _split_assignment(catalogue, token):
            tokens.extend(split)
        elif not token.startswith("--") and catalogue.has_option(token[:2]):
            # property style: -Dkey=value
            tokens.extend([token[:2], token[2:]])
        else:
            eat_the_rest = stop_at_non_option
            tokens.append(token)
    return tokens


def _burst(
    catalogue: OptionCatalogue, token: str
) -> tuple[list[str], Option] | None:
    """Expand `-abc` into single flags; None if any character is unrecognized."""
    pieces: list[str] = []
    last: Option | None = None
    for index, char in enumerate(token[1:], start=1):
        option = catalogue.lookup(char)
        if option is None:
            return None
        pieces.append(f"-{char}")
        last = option
        remainder = token[index + 1 :]
        if option.has_arg and remainder:
            pieces.append(remainder)
            break
    assert last is not None, "bundle should not be empty"
    return pieces, last


def _flatten_posix(
    catalogue: OptionCatalogue, arguments: Sequence[str], stop_at_non_option: bool
) -> list[str]:
    tokens: list[str] = []
    current: Option | None = None
    eat_the_rest = False

    def add_non_option(value: str) -> None:
        nonlocal eat_the_rest
        if stop_at_non_option and (current is None or not current.has_arg):
            eat_the_rest = True
            tokens.append(END_OF_OPTIONS)
        tokens.append(value)

    for token in arguments:
        if eat_the_rest:
            tokens.append(token)
        elif token == END_OF_OPTIONS:
            eat_the_rest = True
            tokens.append(token)
        elif token.startswith("--"):
            name, separator, value = token.partition("=")
            option = catalogue.lookup(name)
            if option is None:
                add_non_option(token)
            else:
                current = option
                tokens.append(name)
                if separator:
                    tokens.append(value)
        elif token == SINGLE_DASH:
            tokens.append(token)
        elif token.startswith("-"):
            option = catalogue.lookup(token)
            if option is not None:
                current = option
                tokens.append(token)
            elif len(token) == 2:
                eat_the_rest = stop_at_non_option
                tokens.append(token)
            elif split := _split_assignment(catalogue, token):
                current = catalogue.lookup(split[0])
                tokens.extend(split)
            elif burst := _burst(catalogue, token):
                pieces, current = burst
                tokens.extend(pieces)
            else:
                logger.debug("Passing through unrecognized bundle '%s'", token)
                if stop_at_non_option:
                    add_non_option(token)
                else:
                    tokens.append(token)
        else:
            add_non_option(token)
    return tokens


class Dialect(Enum):
    """
    Flattening strategy applied to raw arguments before scanning.

    Members:
        BASIC: Minimal normalization.
        POSIX: Short-flag bundling.
        GNU: Long-option style with property-style short options.

    Aliases:
        - "long" → "gnu"
        - "bundling" → "posix"
    """

    BASIC = "basic"
    POSIX = "posix"
    GNU = "gnu"

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "long": "gnu",
            "bundling": "posix",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> Dialect:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def flatten(
        self,
        catalogue: OptionCatalogue,
        arguments: Sequence[str],
        stop_at_non_option: bool = False,
    ) -> list[str]:
        """Return the atomic token sequence for `arguments`."""
        tokens = _FLATTENERS[self](catalogue, arguments, stop_at_non_option)
        logger.debug("Flattened %s with %s dialect to %s", arguments, self, tokens)
        return tokens

    def __str__(self) -> str:
        return self.value


_FLATTENERS: dict[
    Dialect, Callable[[OptionCatalogue, Sequence[str], bool], list[str]]
] = {
    Dialect.BASIC: _flatten_basic,
    Dialect.POSIX: _flatten_posix,
    Dialect.GNU: _flatten_gnu,
}


def flatten(
    dialect: Dialect | str,
    catalogue: OptionCatalogue,
    arguments: Sequence[str],
    stop_at_non_option: bool = False,
) -> list[str]:
    """Flatten `arguments` with `dialect` (a `Dialect` or its name)."""
    return Dialect(dialect).flatten(catalogue, arguments, stop_at_non_option)
