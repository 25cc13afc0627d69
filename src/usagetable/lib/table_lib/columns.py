"""
Column definitions for the text table engine.

A Column is one fixed-width slot in the horizontal layout of a TextTable.
Columns are immutable; a table's layout is fixed when it is constructed.

Column spec syntax (compact, comma separated):
    WIDTH[:INDENT[:OVERFLOW]]

    Examples:
        50                  # width 50, indent 0, wrap
        24:1:span           # width 24, indent 1, spill into later columns
        2:2:truncate,1:0:truncate,24:1:span,50:0:wrap
"""

from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Tuple


class ConfigurationError(ValueError):
    """Raised when a table, column, layout or declaration is invalid."""


class Overflow(Enum):
    """What a column does with content longer than its width."""
    TRUNCATE = 'truncate'   # cut at the column width
    SPAN = 'span'           # spill into the following columns on the same line
    WRAP = 'wrap'           # word-wrap onto further lines within the column


@dataclass(frozen=True)
class Column:
    """A fixed-width cell slot.

    Attributes:
        width: Character cells reserved for content (>= 1)
        indent: Spaces written before the content on every line this
            column occupies, wrapped lines included (>= 0)
        overflow: Overflow policy for content longer than ``width``
    """
    width: int
    indent: int = 0
    overflow: Overflow = Overflow.WRAP

    def __post_init__(self):
        if isinstance(self.width, bool) or not isinstance(self.width, int):
            raise ConfigurationError(f"Column width must be an int, got {self.width!r}")
        if self.width <= 0:
            raise ConfigurationError(f"Column width must be positive, got {self.width}")
        if isinstance(self.indent, bool) or not isinstance(self.indent, int):
            raise ConfigurationError(f"Column indent must be an int, got {self.indent!r}")
        if self.indent < 0:
            raise ConfigurationError(f"Column indent must not be negative, got {self.indent}")
        if not isinstance(self.overflow, Overflow):
            raise ConfigurationError(f"Unknown overflow policy: {self.overflow!r}")

    @property
    def span(self) -> int:
        """Total characters the column occupies on a line (indent + width)."""
        return self.indent + self.width


# "  -c, --create                Creates a new archive"
# The first three columns form the option-name block, the last one holds
# the description.
DEFAULT_COLUMNS: Tuple[Column, ...] = (
    Column(2, 2, Overflow.TRUNCATE),   # "-c"
    Column(1, 0, Overflow.TRUNCATE),   # ","
    Column(24, 1, Overflow.SPAN),      # "--create"
    Column(50, 0, Overflow.WRAP),      # "Creates a new archive"
)

# "  -f   freshen: only changed files  -u   update: only changed or new files"
TWO_UP_COLUMNS: Tuple[Column, ...] = (
    Column(3, 2, Overflow.TRUNCATE),
    Column(28, 2, Overflow.SPAN),
    Column(3, 1, Overflow.TRUNCATE),
    Column(37, 2, Overflow.WRAP),
)


def total_width(columns: Sequence[Column]) -> int:
    """Width of every rendered line for this column layout."""
    return sum(column.span for column in columns)


def parse_column_spec(spec: str) -> Tuple[Column, ...]:
    """Parse a compact column spec into a tuple of Columns.

    Args:
        spec: Comma-separated ``WIDTH[:INDENT[:OVERFLOW]]`` entries,
            e.g. "2:2:truncate,1:0:truncate,24:1:span,50"

    Returns:
        Tuple of Column objects in spec order

    Raises:
        ConfigurationError: If the spec is empty or an entry is malformed
    """
    entries = [entry.strip() for entry in spec.split(',') if entry.strip()]
    if not entries:
        raise ConfigurationError("Column spec is empty")

    columns = []
    for entry in entries:
        parts = entry.split(':')
        if len(parts) > 3:
            raise ConfigurationError(f"Too many fields in column spec '{entry}'")
        try:
            width = int(parts[0])
            indent = int(parts[1]) if len(parts) > 1 and parts[1] else 0
        except ValueError:
            raise ConfigurationError(f"Invalid number in column spec '{entry}'") from None

        overflow = Overflow.WRAP
        if len(parts) > 2 and parts[2]:
            try:
                overflow = Overflow(parts[2].lower())
            except ValueError:
                choices = ', '.join(o.value for o in Overflow)
                raise ConfigurationError(
                    f"Unknown overflow '{parts[2]}' in column spec '{entry}' "
                    f"(choose from {choices})") from None

        columns.append(Column(width, indent, overflow))
    return tuple(columns)
