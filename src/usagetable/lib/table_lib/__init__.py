"""
table_lib - fixed-width column layout for help screens.

Lays out labeled cells into a multi-column grid, word-wraps long content
and turns surplus values into continuation lines.
"""

from .columns import (
    Column, Overflow, ConfigurationError,
    DEFAULT_COLUMNS, TWO_UP_COLUMNS, parse_column_spec, total_width,
)
from .core import Row, TextTable
from .wrap import normalize_whitespace, split_line, wrap_text

__all__ = [
    'Column',
    'Overflow',
    'ConfigurationError',
    'DEFAULT_COLUMNS',
    'TWO_UP_COLUMNS',
    'parse_column_spec',
    'total_width',
    'Row',
    'TextTable',
    'normalize_whitespace',
    'split_line',
    'wrap_text',
]
