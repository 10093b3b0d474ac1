"""
Optscan Option Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import os
import sys
from typing import Sequence

from rich.markup import escape
from rich.table import Table

from optscan.config import load_defaults
from optscan.console import console
from optscan.exceptions import OptScanError
from optscan.help import get_usage, render_help
from optscan.parser import (
    Dialect,
    OptionBuilder,
    OptionCatalogue,
    ParseResult,
    compile_catalogue,
    parse,
)
from optscan.utils import get_program_invocation, setup_logging

EXIT_OK = 0
EXIT_USAGE = 2

HEADER = (
    "Compile an option pattern and parse the arguments after '--' against it.\n"
    "Pattern codes: '@' object, ':' string, '%' number, '+' class, '#' date, "
    "'<' existing file, '>' file, '*' files, '/' url, '!' required."
)
FOOTER = "example: optscan --pattern 'vp:!f/' -- -v -p hello -f http://example.com"


def build_catalogue() -> OptionCatalogue:
    builder = OptionBuilder()
    catalogue = OptionCatalogue()
    catalogue.register(
        builder.with_long_name("pattern")
        .has_arg()
        .with_type("string")
        .with_description("Option pattern to compile.")
        .create("p")
    )
    catalogue.register(
        builder.with_long_name("dialect")
        .has_arg()
        .with_description("Flattening dialect: basic, posix or gnu (default basic).")
        .create("d")
    )
    catalogue.register(
        builder.with_long_name("defaults")
        .has_arg()
        .with_type("existing_file")
        .with_description("TOML, YAML or properties file of default values.")
        .create("D")
    )
    catalogue.register(
        builder.with_long_name("stop")
        .with_description("Stop option processing at the first non-option.")
        .create("s")
    )
    catalogue.register(
        builder.with_long_name("log-mode")
        .has_arg()
        .with_description("Log output: cli or json.")
        .create()
    )
    catalogue.register(
        builder.with_long_name("verbose")
        .with_description("Log parser decisions.")
        .create("v")
    )
    catalogue.register(
        builder.with_long_name("help").with_description("Show this help message.").create("h")
    )
    return catalogue


def render_result(result: ParseResult) -> None:
    table = Table(title="options", title_justify="left")
    table.add_column("option", style="optscan.flag")
    table.add_column("values", style="optscan.value")
    for option in result:
        table.add_row(escape(option.key), escape(", ".join(option.values)))
    console.print(table)
    args = " ".join(escape(repr(arg)) for arg in result.args)
    console.print(f"[bold]arguments:[/bold] {args or '[optscan.muted](none)[/]'}")


def _fail(message: str, usage: str) -> int:
    console.print(f"[optscan.error]error:[/] {escape(message)}")
    console.print(f"usage: {escape(usage)}", style="optscan.muted")
    return EXIT_USAGE


def main(argv: Sequence[str] | None = None) -> int:
    arguments = list(sys.argv[1:] if argv is None else argv)
    program = get_program_invocation()
    catalogue = build_catalogue()
    usage = get_usage(catalogue, program)

    try:
        options = parse(catalogue, arguments, dialect=Dialect.GNU)
    except OptScanError as error:
        return _fail(str(error), usage)

    if options.has_option("help"):
        render_help(catalogue, program, header=HEADER, footer=FOOTER)
        return EXIT_OK

    try:
        setup_logging(
            mode=options.get_value("log-mode"),
            log_filename=None,
            console_log_level=(
                logging.DEBUG if options.has_option("verbose") else logging.WARNING
            ),
        )
    except ValueError as error:
        return _fail(str(error), usage)

    pattern = options.get_value("pattern")
    if pattern is None:
        return _fail("Missing required option: pattern", usage)

    try:
        dialect = Dialect(options.get_value("dialect", "basic"))
        target = compile_catalogue(pattern)
        defaults_path = options.get_value("defaults") or os.getenv("OPTSCAN_DEFAULTS")
        defaults = load_defaults(defaults_path) if defaults_path else None
        result = parse(
            target,
            options.args,
            defaults=defaults,
            stop_at_non_option=options.has_option("stop"),
            dialect=dialect,
        )
    except (OptScanError, ValueError, OSError) as error:
        return _fail(str(error), usage)

    render_result(result)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
