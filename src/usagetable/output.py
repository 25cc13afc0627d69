"""User-facing status messages for usagetable commands.

Status lines go to stderr so stdout carries only the rendered text. They
follow the quiet axis of the log_lib output system: shown down to -Q -Q
(warnings), hidden at errors-only and silent levels.

Also re-exports the log_lib public API for one-stop imports.
"""

import sys

from usagetable.lib.log_lib import (                 # noqa: F401
    OutputManager, init_output, get_output,
    Hint, register_hint, register_hints, get_hint,
    trace,
)


def _should_print():
    """Status lines behave like level -2 (warning) messages."""
    return get_output().verbosity >= -2


def print_ok(msg):
    """Print a success message."""
    if _should_print():
        print(f"  [OK] {msg}", file=sys.stderr)


def print_warn(msg):
    """Print a warning message."""
    if _should_print():
        print(f"  [WARN] {msg}", file=sys.stderr)


def print_error(msg):
    """Report an error through the output system (level -3, error channel)."""
    get_output().error(f"  ERROR: {msg}")
