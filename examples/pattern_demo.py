import sys

from rich.markup import escape

from optscan import Dialect, compile_catalogue, parse
from optscan.console import console
from optscan.exceptions import OptScanError
from optscan.help import render_help
from optscan.utils import setup_logging

setup_logging(log_filename=None)

# v: flag, p: string value (required), n: number, u: url
catalogue = compile_catalogue("vp:!n%u/")

if __name__ == "__main__":
    try:
        result = parse(catalogue, sys.argv[1:], dialect=Dialect.POSIX)
    except OptScanError as error:
        console.print(f"[optscan.error]error:[/] {escape(str(error))}")
        render_help(catalogue, "pattern_demo.py")
        sys.exit(2)

    console.print(f"[optscan.flag]verbose:[/] {result.has_option('v')}")
    console.print(f"[optscan.flag]path:[/] {escape(result.get_value('p'))}")
    if result.has_option("n"):
        console.print(f"[optscan.flag]count:[/] {result.get_parsed_value('n')}")
    console.print(f"[optscan.flag]args:[/] {escape(repr(result.args))}")
