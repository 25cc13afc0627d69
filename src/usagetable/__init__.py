"""usagetable - fixed-width usage/help screens for command-line programs.

Lays out option names and descriptions in a column-based text table with
word wrap, column spill and continuation lines.
"""

from usagetable._version import __version__, __app_name__
from usagetable.lib.table_lib import (
    Column, Overflow, ConfigurationError, Row, TextTable,
    DEFAULT_COLUMNS, TWO_UP_COLUMNS, parse_column_spec,
)
from usagetable.lib.help_lib import (
    OptionSpec, UsageSpec, Help, OptionRegistry,
    OptionListFormatter, TwoUpFormatter, get_formatter,
)

__all__ = [
    "__version__", "__app_name__",
    "Column", "Overflow", "ConfigurationError", "Row", "TextTable",
    "DEFAULT_COLUMNS", "TWO_UP_COLUMNS", "parse_column_spec",
    "OptionSpec", "UsageSpec", "Help", "OptionRegistry",
    "OptionListFormatter", "TwoUpFormatter", "get_formatter",
]
