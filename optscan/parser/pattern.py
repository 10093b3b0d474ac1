# Optscan Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Compiles a terse pattern string into an `OptionCatalogue`.

Each plain character of the pattern declares a single-character option. A type
code directly after it gives the option one value of that type; `!` marks it
required.

    a    -a flag
    b@   -b <object>      (instance of the named class)
    c>   -c <file>
    d+   -d <class>
    e%   -e <number>
    f/   -f <url>
    g:   -g <string>
    h#   -h <date>
    i<   -i <existing file>
    j*   -j <files>

Example:
    catalogue = compile_catalogue("vp:!f/")
    # -v flag, -p required string value, -f URL value

Unlisted punctuation is an ordinary option name. Whitespace is ignored.
"""
from __future__ import annotations

from optscan.parser.catalogue import OptionCatalogue
from optscan.parser.option import NO_ARGS, Option
from optscan.parser.value_type import REQUIRED_CODE, ValueType


def is_value_code(char: str) -> bool:
    """Return True if `char` qualifies the preceding option instead of naming one."""
    return char == REQUIRED_CODE or ValueType.from_code(char) is not None


def _build_option(name: str, value_type: ValueType | None, required: bool) -> Option:
    return Option(
        short_name=name,
        required=required,
        arity=NO_ARGS if value_type is None else 1,
        value_type=value_type,
    )


def compile_catalogue(pattern: str) -> OptionCatalogue:
    """
    Return the catalogue described by `pattern`.

    Raises:
        DuplicateNameError: If the pattern names the same option twice.
        IllegalOptionError: If the pattern names `=` or `-` as an option.
    """
    catalogue = OptionCatalogue()
    name: str | None = None
    value_type: ValueType | None = None
    required = False

    for char in pattern:
        if char.isspace():
            continue
        if not is_value_code(char):
            if name is not None:
                catalogue.register(_build_option(name, value_type, required))
                value_type = None
                required = False
            name = char
        elif char == REQUIRED_CODE:
            required = True
        else:
            value_type = ValueType.from_code(char)

    if name is not None:
        catalogue.register(_build_option(name, value_type, required))

    return catalogue
