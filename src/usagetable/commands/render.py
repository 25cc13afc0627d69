"""usagetable render - print the usage screen for a declaration file.

Reads a JSON option declaration and writes the full help screen to stdout:

    Usage: cat [OPTIONS] [PARAMETERS]
    Concatenate FILE(s), or standard input, to standard output.
      -A, --show-all              equivalent to -vET
      ...

Layout, program name and hang indent can come from the command line, the
project .usagetable.json or the global config (see usagetable.config).
"""

import argparse
import sys

from usagetable.config import resolve_config, save_project_config
from usagetable.declarations import load_declaration
from usagetable.lib.help_lib import FORMATTERS, Help, get_formatter
from usagetable.lib.log_lib import get_output
from usagetable.lib.table_lib import ConfigurationError
from usagetable.output import print_error, print_ok

DEFAULT_LAYOUT = "default"


def register(subparsers, parents):
    """Register the 'render' subcommand."""
    p = subparsers.add_parser(
        "render",
        parents=parents,
        help="Render the help screen for an option declaration",
        description=(
            "Render a complete usage screen (synopsis, summary, option table,\n"
            "footer) from a JSON option declaration file."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("declaration", metavar="DECLARATION",
                   help="Path to the JSON option declaration")
    p.add_argument("--layout", choices=sorted(FORMATTERS), default=None,
                   help=f"Option table layout (default: {DEFAULT_LAYOUT})")
    p.add_argument("--program", metavar="NAME", default=None,
                   help="Program name for the synopsis line")
    p.add_argument("--no-sort", action="store_true", default=False,
                   help="Keep options in declaration order")
    p.add_argument("--save", action="store_true", default=False,
                   help="Remember --layout/--program/--hang-indent in .usagetable.json")

    p.set_defaults(func=run)


def _build_help(args, settings):
    usage, registry = load_declaration(args.declaration)
    if settings.get("program"):
        usage.program_name = settings["program"]
    if args.no_sort:
        usage.sort_options = False

    hang = settings.get("hang_indent")
    if hang is None:
        hang = 2
    elif isinstance(hang, bool) or not isinstance(hang, int):
        raise ConfigurationError(f"hang_indent must be an integer, got {hang!r}")

    formatter = get_formatter(
        settings.get("layout") or DEFAULT_LAYOUT,
        indent_wrapped_lines=hang,
        break_on_hyphens=not args.no_hyphen_breaks,
    )
    return Help(registry.visible_options(), usage, formatter=formatter,
                line_separator="\n"), registry


def run(args):
    """Execute the render command."""
    out = get_output()
    try:
        settings = resolve_config(args)
        help_screen, registry = _build_help(args, settings)
        text = help_screen.usage_text()
    except ConfigurationError as e:
        print_error(str(e))
        return 1

    sys.stdout.write(text)

    if registry.hidden_count:
        out.hint('render.hidden', 'verbose', count=registry.hidden_count)

    if args.save:
        saved = {k: getattr(args, k, None) for k in ("layout", "program", "hang_indent")}
        path = save_project_config(saved)
        print_ok(f"Saved settings to {path}")
        out.hint('config.remember', 'result')
    elif help_screen.formatter.name == DEFAULT_LAYOUT:
        out.hint('render.two_up', 'result')
    return 0
