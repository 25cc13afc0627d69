"""usagetable table - lay out tab-separated rows as a fixed-width table.

Each input line is one row; fields are separated by tabs and an empty field
is an empty cell. Fields past the last column become continuation lines.

    printf -- '-v\\t,\\t--verbose\\tshow progress\\n' | usagetable table -
    usagetable table rows.tsv --columns 10:2:truncate,40:1:wrap
"""

import argparse
import sys

from usagetable.lib.log_lib import get_output
from usagetable.lib.table_lib import (
    ConfigurationError, DEFAULT_COLUMNS, TextTable, parse_column_spec,
)
from usagetable.output import print_error


def register(subparsers, parents):
    """Register the 'table' subcommand."""
    p = subparsers.add_parser(
        "table",
        parents=parents,
        help="Lay out tab-separated rows as a text table",
        description=(
            "Read tab-separated rows and print them as a fixed-width table.\n"
            "Column spec: WIDTH[:INDENT[:OVERFLOW]],... with OVERFLOW one of\n"
            "wrap, span, truncate (default layout: 2:2:truncate,1:0:truncate,\n"
            "24:1:span,50:0:wrap)."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("input", metavar="FILE", nargs="?", default="-",
                   help="TSV input file, '-' for stdin (default)")
    p.add_argument("--columns", metavar="SPEC", default=None,
                   help="Column layout spec")

    p.set_defaults(func=run)


def parse_rows(lines):
    """Split TSV lines into row value tuples (empty field = None)."""
    rows = []
    for line in lines:
        line = line.rstrip("\r\n")
        if not line:
            continue
        rows.append(tuple(field or None for field in line.split("\t")))
    return rows


def _read_lines(source):
    if source == "-":
        return sys.stdin.read().splitlines()
    try:
        with open(source, encoding="utf-8") as f:
            return f.read().splitlines()
    except FileNotFoundError:
        raise ConfigurationError(f"Input file not found: {source}") from None
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Cannot read input file {source}: {e}") from None


def run(args):
    """Execute the table command."""
    out = get_output()
    try:
        columns = parse_column_spec(args.columns) if args.columns else DEFAULT_COLUMNS
    except ConfigurationError as e:
        print_error(str(e))
        out.hint('table.column_spec', 'error')
        return 1

    try:
        table = TextTable(
            columns,
            indent_wrapped_lines=2 if args.hang_indent is None else args.hang_indent,
            break_on_hyphens=not args.no_hyphen_breaks,
            line_separator="\n",
        )
        rows = parse_rows(_read_lines(args.input))
    except ConfigurationError as e:
        print_error(str(e))
        return 1

    for values in rows:
        table.add_row(*values)
    out.emit(1, "table: {n} row(s), {w} characters wide",
             channel='layout', n=len(rows), w=table.width)

    sys.stdout.write(table.render())
    return 0
