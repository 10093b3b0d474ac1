# Optscan Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for optscan output."""
from rich.console import Console
from rich.theme import Theme

OPTSCAN_THEME = Theme(
    {
        "optscan.flag": "bold cyan",
        "optscan.value": "green",
        "optscan.required": "bold yellow",
        "optscan.error": "bold red",
        "optscan.muted": "dim",
    }
)

console = Console(theme=OPTSCAN_THEME)
