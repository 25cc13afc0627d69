"""
Formatters that lay out option lists as TextTables.
"""

import os
from typing import Dict, List, Optional, Sequence, Tuple, Type

from usagetable.lib.table_lib import (
    Column, ConfigurationError, TextTable, DEFAULT_COLUMNS, TWO_UP_COLUMNS,
    normalize_whitespace,
)
from .core import OptionSpec


class OptionListFormatter:
    """One option per row: short name, separator, long names, description."""

    name = 'default'

    def __init__(self, columns: Optional[Sequence[Column]] = None,
                 indent_wrapped_lines: int = 2, break_on_hyphens: bool = True):
        self.columns = tuple(columns) if columns is not None else DEFAULT_COLUMNS
        self.indent_wrapped_lines = indent_wrapped_lines
        self.break_on_hyphens = break_on_hyphens

    def new_table(self, line_separator: str = os.linesep) -> TextTable:
        return TextTable(self.columns,
                         indent_wrapped_lines=self.indent_wrapped_lines,
                         break_on_hyphens=self.break_on_hyphens,
                         line_separator=line_separator)

    def build_table(self, options: Sequence[OptionSpec],
                    line_separator: str = os.linesep) -> TextTable:
        """
        Add one row per option.

        Args:
            options: Visible options in display order
            line_separator: Terminator for rendered lines

        Returns:
            The populated table
        """
        table = self.new_table(line_separator)
        for option in options:
            table.add_row(*option.row_values())
        return table

    def format(self, options: Sequence[OptionSpec],
               line_separator: str = os.linesep) -> str:
        return self.build_table(options, line_separator).render()


class TwoUpFormatter(OptionListFormatter):
    """
    Two options per row: label, description, label, description.

    An option whose description does not fit the left description column
    (or has several lines) gets a row to itself, so the description can run
    on across the right half of the table.
    """

    name = 'two-up'

    def __init__(self, columns: Optional[Sequence[Column]] = None,
                 indent_wrapped_lines: int = 2, break_on_hyphens: bool = True):
        super().__init__(columns if columns is not None else TWO_UP_COLUMNS,
                         indent_wrapped_lines, break_on_hyphens)
        if len(self.columns) != 4:
            raise ConfigurationError(
                f"Two-up layout needs 4 columns, got {len(self.columns)}")

    def _fits_left(self, option: OptionSpec) -> bool:
        lines = option.description_lines
        if len(lines) > 1:
            return False
        # measured the way the table lays it out
        text = normalize_whitespace(lines[0]).rstrip() if lines else ''
        return len(text) <= self.columns[1].width

    def pair_rows(self, options: Sequence[OptionSpec]) -> List[Tuple[str, ...]]:
        """Group options into row value tuples."""
        rows = []
        i = 0
        while i < len(options):
            left = options[i]
            i += 1
            left_lines = left.description_lines or ('',)
            if not self._fits_left(left) or i >= len(options):
                rows.append((left.label, left_lines[0], '', '') + left_lines[1:])
                continue
            right = options[i]
            i += 1
            right_lines = right.description_lines or ('',)
            rows.append((left.label, left_lines[0], right.label) + right_lines)
        return rows

    def build_table(self, options: Sequence[OptionSpec],
                    line_separator: str = os.linesep) -> TextTable:
        table = self.new_table(line_separator)
        for values in self.pair_rows(options):
            table.add_row(*values)
        return table


FORMATTERS: Dict[str, Type[OptionListFormatter]] = {
    OptionListFormatter.name: OptionListFormatter,
    TwoUpFormatter.name: TwoUpFormatter,
}


def get_formatter(name: str, **kwargs) -> OptionListFormatter:
    """
    Create the formatter registered under ``name``.

    Raises:
        ConfigurationError: If no formatter has that name
    """
    try:
        cls = FORMATTERS[name]
    except KeyError:
        choices = ', '.join(sorted(FORMATTERS))
        raise ConfigurationError(f"Unknown layout '{name}' (choose from {choices})") from None
    return cls(**kwargs)
