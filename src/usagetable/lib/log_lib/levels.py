"""
Verbosity level names.

The output system compares plain integers; these names only document the
scale. A message is shown when ``message.level <= threshold``, where the
threshold is the channel override or the global verbosity (-v adds one,
-Q subtracts one).

    quiet <------------------ 0 ------------------> verbose
     -4      -3      -2      -1      0      1       2       3
    silent  errors  warnings  terse  normal  info  layout  debug
"""

DEBUG = 3          # Per-line wrap decisions, function tracing
LAYOUT = 2         # Column layouts, continuation rows, config sources
INFO = 1           # Tips, declaration summaries
NORMAL = 0         # Default output

MINIMAL = -1       # Hide tips
WARNING = -2       # Warnings and errors only
ERROR = -3         # Errors only
SILENT = -4        # Nothing at all; exit code only
