"""
Named output channels.

A channel is a category of diagnostic output ('layout', 'config', ...).
Each channel can pin its own threshold, overriding the global verbosity.
The application registers its channel set once at startup through
configure_channels(); this module only ships the channels the output
system itself relies on.

Channel spec syntax (as given to --show):
    CHANNEL[:LEVEL[:DEST[:LOCATION[:FORMAT]]]]

    Examples:
        layout              # level 0
        wrap:3              # level 3
        config::file:cfg.log
"""

from dataclasses import dataclass
from typing import Dict, Optional, Set


KNOWN_CHANNELS: Set[str] = {'general', 'hint', 'error', 'trace'}

CHANNEL_DESCRIPTIONS: Dict[str, str] = {
    'general': 'General output',
    'hint':    'Contextual tips',
    'error':   'Error messages',
    'trace':   'Function call tracing',
}

# Off unless enabled explicitly with --show
OPT_IN_CHANNELS: Set[str] = {'trace'}


@dataclass
class ChannelConfig:
    """Parsed --show entry.

    Only ``name`` and ``level`` are acted on; destination, location and
    format are parsed so specs stay forward compatible.
    """
    name: str
    level: int = 0
    destination: Optional[str] = None
    location: Optional[str] = None
    format: Optional[str] = None


def configure_channels(known: Set[str], descriptions: Dict[str, str],
                       opt_in: Optional[Set[str]] = None) -> None:
    """Replace the channel set with the application's own.

    Call once at startup, before init_output().
    """
    global KNOWN_CHANNELS, CHANNEL_DESCRIPTIONS, OPT_IN_CHANNELS
    KNOWN_CHANNELS = set(known)
    CHANNEL_DESCRIPTIONS = dict(descriptions)
    OPT_IN_CHANNELS = set(opt_in or ())


def parse_channel_spec(spec: str) -> ChannelConfig:
    """Parse a channel spec string.

    Empty slots are written as '::'. A one-letter slot followed by another
    slot in the location position is taken as a Windows drive letter and
    joined back ('C:\\logs\\x.log').

    Args:
        spec: Spec like "wrap:3" or "config::file:C:\\logs\\cfg.log"

    Returns:
        ChannelConfig with the parsed values

    Raises:
        ValueError: If the level slot is not an integer
    """
    raw = spec.split(':')

    parts = []
    i = 0
    while i < len(raw):
        if i >= 3 and len(raw[i]) == 1 and raw[i].isalpha() and i + 1 < len(raw):
            parts.append(f"{raw[i]}:{raw[i + 1]}")
            i += 2
        else:
            parts.append(raw[i])
            i += 1

    def slot(n):
        return parts[n] if len(parts) > n and parts[n] else None

    level = int(parts[1]) if slot(1) else 0
    return ChannelConfig(name=parts[0], level=level, destination=slot(2),
                         location=slot(3), format=slot(4))


def format_channel_list() -> str:
    """List the known channels with descriptions, for bare --show."""
    lines = ["Available channels:"]
    width = max(len(name) for name in KNOWN_CHANNELS)
    for name in sorted(KNOWN_CHANNELS):
        desc = CHANNEL_DESCRIPTIONS.get(name, '')
        opt_in = " (opt-in)" if name in OPT_IN_CHANNELS else ""
        lines.append(f"  {name:<{width}}  {desc}{opt_in}")
    return "\n".join(lines)
