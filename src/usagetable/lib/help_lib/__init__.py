"""
Help screens built on the text table engine.

Separates what an option is (OptionSpec, registered explicitly in an
OptionRegistry) from how the list is laid out (formatters), and assembles
synopsis, summary, option table and footer into one usage screen (Help).
"""

from .core import OptionSpec, UsageSpec, Help, option_sort_key
from .content_registry import OptionRegistry
from .formatters import (
    OptionListFormatter, TwoUpFormatter, FORMATTERS, get_formatter,
)

__all__ = [
    'OptionSpec',
    'UsageSpec',
    'Help',
    'option_sort_key',
    'OptionRegistry',
    'OptionListFormatter',
    'TwoUpFormatter',
    'FORMATTERS',
    'get_formatter',
]
