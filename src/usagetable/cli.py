"""Command line for usagetable.

    usagetable render opts.json --layout two-up
    usagetable table rows.tsv --columns 4:2:truncate,30:1:span,40
    usagetable -vv --show=wrap:3 table - < rows.tsv

Output flags (-v, -Q, --show, --config) are read from the whole argument
list before the command is parsed, so ``usagetable render opts.json -v``
and ``usagetable -v render opts.json`` mean the same. Layout flags shared by
both commands come from one parent parser.
"""

import argparse
import sys

from usagetable._version import BASE_VERSION, VERSION

GLOBAL_FLAGS = {
    "--verbose": {"aliases": ["-v"], "action": "count", "default": 0,
                  "help": "More diagnostics on stderr (-v, -vv, -vvv)"},
    "--quiet": {"aliases": ["-Q"], "action": "count", "default": 0,
                "help": "Fewer status lines (-QQQQ silences errors too)"},
    "--show": {"nargs": "?", "action": "append", "metavar": "CHANNEL[:LEVEL]",
               "help": "Enable a diagnostic channel such as layout or wrap; "
                       "bare --show lists them"},
    "--config": {"metavar": "PATH", "default": None,
                 "help": "Global settings file "
                         "(default: ~/.usagetable/config.json)"},
}


def _add_global_flags(parser):
    for flag, spec in GLOBAL_FLAGS.items():
        kwargs = {k: v for k, v in spec.items() if k != "aliases"}
        parser.add_argument(flag, *spec.get("aliases", []), **kwargs)


def _extract_global_flags(argv):
    """Split argv into the output flags and everything else.

    Returns (namespace, remaining_argv).
    """
    global_parser = argparse.ArgumentParser(add_help=False)
    _add_global_flags(global_parser)
    return global_parser.parse_known_args(argv)


def _build_common_parser():
    """Layout flags accepted by every command."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--hang-indent", type=int, metavar="N", default=None,
                        help="Extra indent of wrapped and continuation lines (default: 2)")
    common.add_argument("--no-hyphen-breaks", action="store_true", default=False,
                        help="Do not break a label spilling into the last column "
                             "after a hyphen")
    return common


def _discover_commands():
    """Command modules; each provides register(subparsers, parents) and run(args)."""
    from usagetable.commands import render, table
    return [render, table]


def _build_parser(commands, common_parser):
    parser = argparse.ArgumentParser(
        prog="usagetable",
        description="usagetable - fixed-width usage/help screens",
        epilog=(
            "Run 'usagetable <command> --help' for the options of a command.\n"
            "\n"
            "-v, -Q, --show and --config may be given anywhere on the line."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", "-V", action="version",
                        version=f"usagetable {BASE_VERSION} ({VERSION})")
    # listed in --help; the values come from _extract_global_flags
    _add_global_flags(parser)

    subparsers = parser.add_subparsers(dest="command", title="commands",
                                       metavar="<command>")
    for cmd_module in commands:
        cmd_module.register(subparsers, parents=[common_parser])
    return parser


def _start_output(global_args):
    """Set up channels and the output manager.

    Returns an exit code when the command line is fully handled here
    (bare --show, or a malformed --show value), else None.
    """
    from usagetable.channels import configure_ut_channels
    from usagetable.lib.log_lib import format_channel_list, init_output
    configure_ut_channels()

    if global_args.show and None in global_args.show:
        print(format_channel_list())
        return 0

    verbosity = (global_args.verbose or 0) - (global_args.quiet or 0)
    channels = [s for s in (global_args.show or []) if s is not None]
    try:
        init_output(verbosity=verbosity, channels=channels)
    except ValueError as e:
        print(f"usagetable: invalid --show value: {e}", file=sys.stderr)
        return 2
    import usagetable.hints  # noqa: F401 - registers the hint texts
    return None


def main(argv=None):
    """Run usagetable and return its exit code.

    0 on success, 1 for a configuration or input error, 2 for a bad
    command line, 130 when interrupted.
    """
    if argv is None:
        argv = sys.argv[1:]

    global_args, remaining = _extract_global_flags(argv)
    code = _start_output(global_args)
    if code is not None:
        return code

    parser = _build_parser(_discover_commands(), _build_common_parser())
    if not remaining:
        parser.print_help()
        return 0

    args = parser.parse_args(remaining)
    if not hasattr(args, "func"):
        parser.print_help()
        return 0

    for key, value in vars(global_args).items():
        if getattr(args, key, None) is None:
            setattr(args, key, value)

    try:
        return args.func(args) or 0
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
