import logging
import sys

from rich.markup import escape

from optscan import OptionBuilder, OptionCatalogue, OptionGroup, parse
from optscan.console import console
from optscan.exceptions import AlreadySelectedError, MissingRequiredOptionsError
from optscan.utils import setup_logging

setup_logging(log_filename=None, console_log_level=logging.DEBUG)

builder = OptionBuilder()
output = OptionGroup(required=True)
output.add_option(builder.with_long_name("json").with_description("JSON output").create("j"))
output.add_option(builder.with_long_name("yaml").with_description("YAML output").create("y"))

catalogue = OptionCatalogue()
catalogue.add_group(output)
catalogue.register(
    builder.with_long_name("define")
    .has_args(2)
    .with_value_separator("=")
    .with_description("Set a property")
    .create("D")
)

if __name__ == "__main__":
    try:
        result = parse(catalogue, sys.argv[1:], defaults={"D": "mode=fast"})
    except AlreadySelectedError as error:
        console.print(f"[optscan.error]pick one of {escape(str(error.group))}:[/] {escape(str(error))}")
        sys.exit(2)
    except MissingRequiredOptionsError as error:
        console.print(f"[optscan.error]missing:[/] {escape(str(error.keys))}")
        sys.exit(2)

    fmt = "json" if result.has_option("json") else "yaml"
    console.print(f"[optscan.flag]format:[/] {fmt}")
    console.print(f"[optscan.flag]properties:[/] {escape(str(result.get_properties('D')))}")
