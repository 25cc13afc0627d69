"""
Core help components: option descriptors, usage metadata and the Help
façade that assembles a complete usage screen.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple, Union

from usagetable.lib.log_lib import get_output
from usagetable.lib.table_lib import ConfigurationError


def _as_lines(value: Union[str, Sequence[str], None]) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(value)


@dataclass
class OptionSpec:
    """
    One documented command-line option.

    This is the unit the help screen is built from: the option's names and
    the description lines shown next to them.
    """
    names: Sequence[str]                              # e.g. ['-v', '--verbose']
    description: Union[str, Sequence[str]] = ''       # One string or several lines
    hidden: bool = False                              # Left out of help screens

    def __post_init__(self):
        if isinstance(self.names, str):
            self.names = [self.names]
        self.names = list(self.names)
        if not self.names or not all(isinstance(n, str) and n.strip() for n in self.names):
            raise ConfigurationError(f"Option needs at least one non-empty name: {self.names!r}")

    @property
    def short_name(self) -> str:
        """First name not starting with '--', or '' if there is none."""
        for name in self.names:
            if not name.startswith('--'):
                return name
        return ''

    @property
    def long_names(self) -> List[str]:
        """All names except the short name, in declaration order."""
        short = self.short_name
        names = list(self.names)
        if short:
            names.remove(short)
        return names

    @property
    def label(self) -> str:
        """Shortest way to refer to the option: short name or first long name."""
        return self.short_name or self.long_names[0]

    @property
    def description_lines(self) -> Tuple[str, ...]:
        return _as_lines(self.description)

    def row_values(self) -> Tuple[str, ...]:
        """
        Values for one TextTable row in the default layout.

        Returns:
            (short, separator, long names, first description line, more lines...)
        """
        short = self.short_name
        longs = ', '.join(self.long_names)
        separator = ',' if short and longs else ''
        lines = self.description_lines or ('',)
        return (short, separator, longs) + lines


@dataclass
class UsageSpec:
    """
    Text around the option table.

    Attributes:
        program_name: Name shown in the synopsis line
        summary: Lines printed after the synopsis
        footer: Lines printed after the option table
        parameters: Descriptions of positional parameters; any entry adds
            "[PARAMETERS]" to the synopsis
        show_synopsis: Print the "Usage: ..." line
        sort_options: Order options by name instead of declaration order
    """
    program_name: str = '<main class>'
    summary: Sequence[str] = field(default_factory=list)
    footer: Sequence[str] = field(default_factory=list)
    parameters: Sequence[str] = field(default_factory=list)
    show_synopsis: bool = True
    sort_options: bool = True

    def __post_init__(self):
        self.summary = list(_as_lines(self.summary))
        self.footer = list(_as_lines(self.footer))
        self.parameters = list(_as_lines(self.parameters))


def option_sort_key(option: OptionSpec):
    """
    Sort key for help screens.

    Options with a short name come first, case-insensitively with the
    lowercase variant first ('-e' before '-E'); long-only options follow,
    ordered by their first long name.
    """
    short = option.short_name.lstrip('-')
    if short:
        return (0, short.lower(), short.isupper(), '')
    first_long = option.long_names[0].lstrip('-')
    return (1, first_long.lower(), False, first_long)


class Help:
    """
    Builds a complete usage screen from option descriptors.

    Hidden options never reach the table. The option table itself is laid
    out by a formatter (default: OptionListFormatter).
    """

    def __init__(self,
                 options: Sequence[OptionSpec],
                 usage: Optional[UsageSpec] = None,
                 formatter=None,
                 line_separator: str = os.linesep):
        """
        Initialize the help screen.

        Args:
            options: Options in declaration order
            usage: Synopsis, summary and footer settings
            formatter: Object with format(options, line_separator=...)
                returning the option table text
            line_separator: Terminator for every output line
        """
        if formatter is None:
            from .formatters import OptionListFormatter
            formatter = OptionListFormatter()
        self.options = list(options)
        self.usage = usage or UsageSpec()
        self.formatter = formatter
        self.line_separator = line_separator

    def visible_options(self) -> List[OptionSpec]:
        """Options that appear on the screen, in display order."""
        visible = [opt for opt in self.options if not opt.hidden]
        skipped = len(self.options) - len(visible)
        if skipped:
            get_output().emit(2, "help: skipping {n} hidden option(s)",
                              channel='layout', n=skipped)
        if self.usage.sort_options:
            visible.sort(key=option_sort_key)
        return visible

    def synopsis(self) -> str:
        """The "Usage: ..." line, without separator."""
        parts = [f"Usage: {self.usage.program_name}"]
        if any(not opt.hidden for opt in self.options):
            parts.append("[OPTIONS]")
        if self.usage.parameters:
            parts.append("[PARAMETERS]")
        return ' '.join(parts)

    def _lines(self, lines: Sequence[str]) -> str:
        return ''.join(line + self.line_separator for line in lines)

    def summary_text(self) -> str:
        return self._lines(self.usage.summary)

    def options_text(self) -> str:
        return self.formatter.format(self.visible_options(),
                                     line_separator=self.line_separator)

    def footer_text(self) -> str:
        return self._lines(self.usage.footer)

    def usage_text(self) -> str:
        """
        Full usage screen.

        Returns:
            Synopsis line (unless disabled), summary, option table and
            footer, every line terminated by the line separator
        """
        parts = []
        if self.usage.show_synopsis:
            parts.append(self._lines([self.synopsis()]))
        parts.append(self.summary_text())
        parts.append(self.options_text())
        parts.append(self.footer_text())
        return ''.join(parts)

    def __str__(self) -> str:
        return self.usage_text()
