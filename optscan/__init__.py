"""
Optscan Option Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .parser import (
    Dialect,
    Option,
    OptionBuilder,
    OptionCatalogue,
    OptionGroup,
    OptionParser,
    ParseResult,
    compile_catalogue,
    parse,
)

logger = logging.getLogger("optscan")


__all__ = [
    "Dialect",
    "Option",
    "OptionBuilder",
    "OptionCatalogue",
    "OptionGroup",
    "OptionParser",
    "ParseResult",
    "compile_catalogue",
    "parse",
]
