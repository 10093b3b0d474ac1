"""
Optscan Option Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .builder import OptionBuilder
from .catalogue import OptionCatalogue
from .dialect import Dialect, flatten
from .engine import OptionParser, parse
from .option import NO_ARGS, UNLIMITED, Option
from .option_group import GroupRegistry, OptionGroup
from .pattern import compile_catalogue
from .result import ParseResult
from .value_type import ValueType

__all__ = [
    "Dialect",
    "GroupRegistry",
    "NO_ARGS",
    "Option",
    "OptionBuilder",
    "OptionCatalogue",
    "OptionGroup",
    "OptionParser",
    "ParseResult",
    "UNLIMITED",
    "ValueType",
    "compile_catalogue",
    "flatten",
    "parse",
]
