"""
TextTable - column-based layout of labeled cells into fixed-width text.

Rows are stored as logical records (one value slot per column) and laid out
into physical lines at render time, so rendering never changes table state
and can be repeated.

Layout example (DEFAULT_COLUMNS)::

    table = TextTable()
    table.add_row("-v", ",", "--verbose", "show what you're doing")
    table.add_row("-p", None, None, "a description long enough to wrap ...")
    print(table.render())

Values beyond the column count become continuation lines in the last
column, so multi-line descriptions read as one block::

    table.add_row("-c", ",", "--create", "first line", "second line")
"""

import os
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from usagetable.lib.log_lib import get_output

from .columns import DEFAULT_COLUMNS, Column, ConfigurationError, Overflow, total_width
from .wrap import normalize_whitespace, split_line, wrap_text


@dataclass(frozen=True)
class Row:
    """One logical record of a TextTable.

    Attributes:
        values: One slot per column; None or "" is an empty cell
        continuation: True for rows synthesized from overflow values;
            their text is laid out like a wrapped line of the last column
    """
    values: Tuple[Optional[str], ...]
    continuation: bool = False

    @property
    def is_empty(self) -> bool:
        return not any(v and v.strip() for v in self.values)


class _LineGrid:
    """Physical lines of one row while it is being laid out.

    Each line is a list of cell strings, one per column, always exactly
    ``column.span`` characters wide.
    """

    def __init__(self, columns: Sequence[Column]):
        self.columns = columns
        self.lines: List[List[str]] = []

    def new_line(self) -> int:
        self.lines.append([' ' * c.span for c in self.columns])
        return len(self.lines) - 1

    def ensure(self, index: int) -> None:
        while len(self.lines) <= index:
            self.new_line()

    def write(self, line: int, col: int, offset: int, text: str) -> None:
        self.ensure(line)
        cell = self.lines[line][col]
        text = text[:len(cell) - offset]
        self.lines[line][col] = cell[:offset] + text + cell[offset + len(text):]

    def render(self) -> List[str]:
        return [''.join(cells) for cells in self.lines]


class TextTable:
    """Fixed-width multi-column text table.

    Args:
        columns: Column layout; None selects DEFAULT_COLUMNS
        indent_wrapped_lines: Extra indent for wrapped lines and continuation
            lines, relative to the column's own indent
        break_on_hyphens: Let a spilled SPAN value break after a hyphen inside
            a word when it reaches the last column; cell wrapping always
            breaks at spaces
        line_separator: Terminator appended to every rendered line

    Raises:
        ConfigurationError: For an empty layout, a non-Column entry or a
            negative ``indent_wrapped_lines``
    """

    def __init__(self,
                 columns: Optional[Sequence[Column]] = None,
                 *,
                 indent_wrapped_lines: int = 2,
                 break_on_hyphens: bool = True,
                 line_separator: str = os.linesep):
        if columns is None:
            columns = DEFAULT_COLUMNS
        columns = tuple(columns)
        if not columns:
            raise ConfigurationError("A TextTable needs at least one column")
        for column in columns:
            if not isinstance(column, Column):
                raise ConfigurationError(f"Not a Column: {column!r}")
        if indent_wrapped_lines < 0:
            raise ConfigurationError(
                f"indent_wrapped_lines must not be negative, got {indent_wrapped_lines}")

        self._columns: Tuple[Column, ...] = columns
        self._rows: List[Row] = []
        self.indent_wrapped_lines = indent_wrapped_lines
        self.break_on_hyphens = break_on_hyphens
        self.line_separator = line_separator

    @classmethod
    def for_columns(cls, *columns: Column, **kwargs) -> 'TextTable':
        """Build a table from columns given as positional arguments."""
        return cls(columns, **kwargs)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def columns(self) -> Tuple[Column, ...]:
        return self._columns

    @property
    def rows(self) -> Tuple[Row, ...]:
        """Logical rows in insertion order."""
        return tuple(self._rows)

    @property
    def width(self) -> int:
        """Length of every rendered line (separator excluded)."""
        return total_width(self._columns)

    def __len__(self) -> int:
        return len(self._rows)

    # ------------------------------------------------------------------
    # Adding rows
    # ------------------------------------------------------------------
    def add_row(self, *values: Optional[str]) -> None:
        """Add one logical record.

        The first ``len(columns)`` values fill one row column by column.
        Every further value is added as a continuation line holding only
        that value in the last column.
        """
        count = len(self._columns)
        self.add_full_row(values[:count])
        extra = values[count:]
        if extra:
            get_output().emit(2, "table: {n} value(s) past column {count} added as continuation lines",
                              channel='layout', n=len(extra), count=count)
        for value in extra:
            self.add_continuation_line(value)

    def add_full_row(self, values: Sequence[Optional[str]]) -> None:
        """Add a row with values mapped 1:1 to columns.

        Missing trailing values are empty cells.

        Raises:
            ValueError: If there are more values than columns
        """
        values = tuple(values)
        if len(values) > len(self._columns):
            raise ValueError(
                f"{len(values)} values for {len(self._columns)} columns; "
                f"use add_row() to add the rest as continuation lines")
        padding = (None,) * (len(self._columns) - len(values))
        self._rows.append(Row(values + padding))

    def add_continuation_line(self, text: Optional[str]) -> None:
        """Add a row holding ``text`` in the last column only."""
        values = (None,) * (len(self._columns) - 1) + (text,)
        self._rows.append(Row(values, continuation=True))

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def render_lines(self) -> List[str]:
        """Lay out every row and return the physical lines."""
        lines = []
        for row in self._rows:
            lines.extend(self._layout_row(row))
        return lines

    def render(self) -> str:
        """Render the table, each line terminated by ``line_separator``."""
        return ''.join(line + self.line_separator for line in self.render_lines())

    def __str__(self) -> str:
        return self.render()

    def _hang(self, column: Column) -> int:
        """Wrapped-line indent inside a column, dropped if the column is too narrow."""
        return self.indent_wrapped_lines if self.indent_wrapped_lines < column.width else 0

    def _layout_row(self, row: Row) -> List[str]:
        grid = _LineGrid(self._columns)
        base = grid.new_line()
        last = len(self._columns) - 1

        for col, value in enumerate(row.values):
            if not value or not value.strip():
                continue
            column = self._columns[col]
            text = normalize_whitespace(value).rstrip()
            offset = self._hang(column) if row.continuation else 0

            if column.overflow is Overflow.TRUNCATE:
                grid.write(base, col, column.indent + offset, text[:column.width - offset])
            elif (column.overflow is Overflow.SPAN and col < last
                    and not row.continuation and len(text) > column.width):
                self._spill(grid, base, col, text)
                if any(v and v.strip() for v in row.values[col + 1:]):
                    base = grid.new_line()
            else:
                lines = wrap_text(text, column.width,
                                  hang=self._hang(column),
                                  initial_offset=offset)
                for i, line in enumerate(lines):
                    grid.write(base + i, col, column.indent, line)

        return grid.render()

    def _spill(self, grid: _LineGrid, line: int, start: int, text: str) -> None:
        """Write an oversized SPAN value across the following columns.

        The value fills its own column, then runs on into the next columns
        of the same line (their indents included). In the last column it is
        word-wrapped; what is left continues on the next line, back in the
        starting column with the wrapped-line indent.
        """
        start_column = self._columns[start]
        last = len(self._columns) - 1
        col = start
        offset = start_column.indent

        while text:
            available = self._columns[col].span - offset
            if col == last:
                chunk, text = split_line(text, available, self.break_on_hyphens)
                grid.write(line, col, offset, chunk)
                if text:
                    get_output().emit(3, "table: '{chunk}' wraps back to column {start}",
                                      channel='wrap', chunk=chunk, start=start)
                    line += 1
                    col = start
                    offset = start_column.indent + self._hang(start_column)
            else:
                grid.write(line, col, offset, text[:available])
                text = text[available:]
                if text:
                    col += 1
                    offset = 0
