"""
OutputManager - verbosity-gated diagnostic output.

Emit rule: a message shows when its level <= the threshold of its channel.
The threshold is the channel's override when one is set (--show layout:2),
otherwise the global verbosity (-v/-Q). A threshold of -4 or below is a hard
wall: nothing is written on that channel, errors included.

Diagnostics go to stderr so they never mix with rendered help on stdout.
"""

import sys
from typing import Any, Dict, List, Optional, Set, TextIO

from . import channels as _channels
from .hints import get_hint

HARD_WALL = -4


class OutputManager:
    """Central coordinator for channel- and verbosity-gated output.

    Usage::

        out = OutputManager(verbosity=1)
        out.emit(1, "Loaded {count} options", channel='declaration', count=12)
        out.hint('render.two_up', 'result')
        out.error("Declaration file not found")
    """

    def __init__(
        self,
        verbosity: int = 0,
        channel_overrides: Optional[Dict[str, int]] = None,
        file: Optional[TextIO] = None,
    ):
        self.verbosity = verbosity
        self.channel_overrides: Dict[str, int] = dict(channel_overrides or {})
        self.file = file if file is not None else sys.stderr
        self._shown_hints: Set[str] = set()

    def threshold(self, channel: str) -> int:
        """Effective threshold for a channel."""
        return self.channel_overrides.get(channel, self.verbosity)

    def emit(self, level: int, message: str, *,
             channel: str = 'general', **kwargs: Any) -> None:
        """Write a message if ``level`` is within the channel's threshold.

        Args:
            level: Message level (higher = more verbose)
            message: str.format() template, formatted only when shown
            channel: Output channel name
            **kwargs: Template values
        """
        threshold = self.threshold(channel)
        if threshold <= HARD_WALL or level > threshold:
            return
        text = message.format(**kwargs) if kwargs else message
        print(text, file=self.file)

    def hint(self, hint_id: str, context: str = 'result', **kwargs: Any) -> None:
        """Show a registered hint once per session.

        The hint must belong to ``context`` and its min_level must be within
        the 'hint' channel threshold. Unknown IDs are ignored.
        """
        if hint_id in self._shown_hints:
            return
        h = get_hint(hint_id)
        if h is None or context not in h.context:
            return

        threshold = self.threshold('hint')
        if threshold <= HARD_WALL or h.min_level > threshold:
            return

        text = h.message.format(**kwargs) if kwargs else h.message
        print(text, file=self.file)
        self._shown_hints.add(hint_id)

    def warn(self, message: str) -> None:
        """Emit a warning (level -2)."""
        self.emit(-2, message, channel='general')

    def error(self, message: str) -> None:
        """Emit an error (level -3); only the hard wall hides it."""
        self.emit(-3, message, channel='error')

    def channel_active(self, channel: str) -> bool:
        """True if a level-0 message on ``channel`` would be shown."""
        threshold = self.threshold(channel)
        return threshold > HARD_WALL and threshold >= 0

    @property
    def quiet(self) -> bool:
        return self.verbosity < 0

    @property
    def shown_hints(self) -> Set[str]:
        """IDs of hints displayed this session."""
        return self._shown_hints.copy()


# =============================================================================
# Module-level singleton
# =============================================================================

_manager: Optional[OutputManager] = None


def init_output(verbosity: int = 0, channels: Optional[List[str]] = None,
                file: Optional[TextIO] = None) -> OutputManager:
    """Create the module-level OutputManager.

    Call once after parsing command-line flags. Opt-in channels start
    switched off (override -1) unless named in ``channels``.

    Args:
        verbosity: Global threshold (0 default, +1 per -v, -1 per -Q)
        channels: Channel specs from --show, e.g. ['wrap:3', 'trace']
        file: Output stream, default stderr

    Returns:
        The new OutputManager
    """
    global _manager

    overrides = {name: -1 for name in _channels.OPT_IN_CHANNELS}
    for spec in channels or []:
        cfg = _channels.parse_channel_spec(spec)
        overrides[cfg.name] = cfg.level

    _manager = OutputManager(verbosity=verbosity, channel_overrides=overrides, file=file)
    return _manager


def get_output() -> OutputManager:
    """Return the module-level OutputManager, creating a default one if needed."""
    global _manager
    if _manager is None:
        _manager = OutputManager()
    return _manager
