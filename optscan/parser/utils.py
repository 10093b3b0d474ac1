# Optscan Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Token helpers and value coercion utilities for optscan parsing.

The token helpers are used by the parser core. Value coercion is a collaborator
concern: the core binds raw strings only, and `ParseResult.get_parsed_value()`
converts them on demand according to the option's declared `ValueType`.

Functions:
- strip_leading_hyphens: Remove the `-` or `--` prefix from a token.
- strip_quotes: Remove one layer of matching surrounding quotes.
- import_class: Resolve a dotted path (or builtin name) to a class.
- coerce_number: Convert text to an int, or a float when it contains a '.'.
- coerce_value: Convert text according to a `ValueType`.
"""
import builtins
import importlib
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

from dateutil import parser as date_parser

from optscan.logger import logger
from optscan.parser.value_type import ValueType

QUOTE_CHARS = ('"', "'")


def strip_leading_hyphens(token: str) -> str:
    """Return `token` without its leading `--` or `-`."""
    if token.startswith("--"):
        return token[2:]
    if token.startswith("-"):
        return token[1:]
    return token


def strip_quotes(token: str) -> str:
    """Remove one layer of matching leading and trailing quote characters."""
    if len(token) >= 2 and token[0] in QUOTE_CHARS and token[0] == token[-1]:
        return token[1:-1]
    return token


def import_class(dotted_path: str) -> type:
    """
    Resolve `dotted_path` (e.g. 'collections.OrderedDict' or 'dict') to a class.

    Raises:
        ValueError: If the module or attribute cannot be found, or is not a class.
    """
    module_path, _, attr = dotted_path.rpartition(".")
    if module_path:
        try:
            module = importlib.import_module(module_path)
        except ImportError as error:
            raise ValueError(f"Could not import module '{module_path}'") from error
    else:
        module = builtins
    target = getattr(module, attr, None)
    if not isinstance(target, type):
        raise ValueError(f"'{dotted_path}' does not name a class")
    return target


def coerce_number(value: str) -> int | float:
    """
    Convert `value` to a number.

    Returns a float when the text contains a '.', else an int.
    """
    text = value.strip()
    try:
        if "." in text:
            return float(text)
        return int(text)
    except ValueError:
        raise ValueError(f"'{value}' is not a valid number") from None


def coerce_url(value: str) -> str:
    parsed = urlparse(value)
    if not parsed.scheme or not (parsed.netloc or parsed.path):
        raise ValueError(f"'{value}' is not a valid URL")
    return value


def coerce_value(value: str, value_type: ValueType | None) -> Any:
    """
    Convert the string `value` according to `value_type`.

    Args:
        value (str): The bound option value.
        value_type (ValueType | None): Declared type; None behaves as STRING.

    Returns:
        Any: The converted value.

    Raises:
        ValueError: If the conversion fails or the type is unsupported.
    """
    if value_type is None or value_type is ValueType.STRING:
        return value
    if value_type is ValueType.NUMBER:
        return coerce_number(value)
    if value_type is ValueType.CLASS:
        return import_class(value)
    if value_type is ValueType.OBJECT:
        cls = import_class(value)
        try:
            return cls()
        except Exception as error:
            raise ValueError(f"Could not instantiate '{value}': {error}") from error
    if value_type is ValueType.DATE:
        try:
            return date_parser.parse(value)
        except (ValueError, OverflowError) as error:
            raise ValueError(f"Value '{value}' could not be parsed as a date") from error
    if value_type is ValueType.FILE:
        return Path(value)
    if value_type is ValueType.EXISTING_FILE:
        path = Path(value)
        if not path.exists():
            raise ValueError(f"File '{value}' does not exist")
        return path
    if value_type is ValueType.URL:
        return coerce_url(value)
    logger.debug("No conversion available for value type %s", value_type)
    raise ValueError(f"Values of type '{value_type}' are not supported")
