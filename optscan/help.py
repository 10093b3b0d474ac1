# Optscan Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Rich-rendered usage and help output for an `OptionCatalogue`.

Functions:
- get_usage: Plain-text usage line.
- render_help: Print usage, an options table, and optional header/footer text.
"""
from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from optscan.console import OPTSCAN_THEME
from optscan.console import console as default_console
from optscan.parser.catalogue import OptionCatalogue
from optscan.parser.option import Option


def get_flags_text(option: Option) -> str:
    """Return e.g. '-o, --output'."""
    flags = []
    if option.short_name:
        flags.append(f"-{option.short_name}")
    if option.long_name:
        flags.append(f"--{option.long_name}")
    return ", ".join(flags)


def get_value_text(option: Option) -> str:
    """Return the value placeholder for `option`, e.g. '<file>' or '[<arg> ...]'."""
    if not option.has_arg:
        return ""
    name = f"<{option.value_type or 'arg'}>"
    if option.has_args:
        name = f"{name} ..."
    if option.optional_arg:
        name = f"[{name}]"
    return name


def _usage_fragment(option: Option) -> str:
    flag = f"-{option.short_name}" if option.short_name else f"--{option.long_name}"
    value = get_value_text(option)
    return f"{flag} {value}" if value else flag


def get_usage(catalogue: OptionCatalogue, program: str) -> str:
    """Return a one-line usage summary; optional entries are bracketed."""
    fragments = [program]
    seen_groups = []
    for option in catalogue:
        group = catalogue.group_of(option)
        if group is None:
            fragment = _usage_fragment(option)
            fragments.append(fragment if option.required else f"[{fragment}]")
        elif group not in seen_groups:
            seen_groups.append(group)
            members = " | ".join(_usage_fragment(member) for member in group.options)
            fragments.append(f"({members})" if group.required else f"[{members}]")
    return " ".join(fragments)


def render_help(
    catalogue: OptionCatalogue,
    program: str,
    console: Console | None = None,
    header: str = "",
    footer: str = "",
) -> None:
    """
    Print formatted help for `catalogue` using Rich output.

    Includes the usage line, optional header text, a table of every option with
    its value placeholder and description, and optional footer text.
    """
    console = console or default_console
    with console.use_theme(OPTSCAN_THEME):
        _render_help(catalogue, program, console, header, footer)


def _render_help(
    catalogue: OptionCatalogue,
    program: str,
    console: Console,
    header: str,
    footer: str,
) -> None:
    console.print(f"[bold]usage: {escape(get_usage(catalogue, program))}[/bold]\n")

    if header:
        console.print(header + "\n")

    if len(catalogue):
        table = Table(show_header=False, box=None, padding=(0, 2, 0, 2))
        table.add_column("flags", style="optscan.flag", no_wrap=True)
        table.add_column("value", style="optscan.value", no_wrap=True)
        table.add_column("description")
        for option in catalogue:
            description = escape(option.description)
            if option.required:
                description = f"[optscan.required](required)[/] {description}"
            group = catalogue.group_of(option)
            if group is not None:
                description = f"{description} [optscan.muted]one of {escape(str(group))}[/]"
            table.add_row(
                escape(get_flags_text(option)),
                escape(get_value_text(option)),
                description.strip(),
            )
        console.print("[bold]options:[/bold]")
        console.print(table)

    if footer:
        console.print("\n" + footer, style="optscan.muted")
