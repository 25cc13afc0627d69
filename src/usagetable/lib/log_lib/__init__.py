"""
log_lib - verbosity-gated output with named channels.

Public API:
    OutputManager      - central coordinator
    init_output        - create the singleton from CLI flags
    get_output         - access the singleton
    Hint               - tip dataclass
    register_hint(s)   - add tips to the registry
    get_hint           - look up a tip by ID
    ChannelConfig      - parsed --show entry
    parse_channel_spec - parse a --show entry
    configure_channels - install the application's channel set
    format_channel_list - channel listing for bare --show
    trace              - function tracing decorator
"""

from .manager import OutputManager, init_output, get_output
from .hints import (
    Hint, register_hint, register_hints, get_hint, get_hints_by_category,
)
from .channels import (
    ChannelConfig, parse_channel_spec, configure_channels, format_channel_list,
)
from .trace import trace

__all__ = [
    'OutputManager', 'init_output', 'get_output',
    'Hint', 'register_hint', 'register_hints', 'get_hint', 'get_hints_by_category',
    'ChannelConfig', 'parse_channel_spec', 'configure_channels', 'format_channel_list',
    'trace',
]
