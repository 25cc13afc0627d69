"""
Hint registry.

Hints are short tips registered by application modules at import time
and shown by OutputManager.hint() when the context and verbosity allow,
at most once per session.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set


@dataclass
class Hint:
    """A tip that can be shown in specific contexts.

    Attributes:
        id: Dotted identifier, e.g. 'render.two_up'
        message: str.format() template
        context: Contexts the hint belongs to ('result', 'error', 'verbose')
        min_level: Lowest verbosity threshold at which it shows
        category: Grouping key
    """
    id: str
    message: str
    context: Set[str] = field(default_factory=lambda: {'verbose'})
    min_level: int = 1
    category: str = 'general'


_HINTS: Dict[str, Hint] = {}


def register_hint(hint: Hint) -> None:
    """Add a hint to the registry; an existing ID is replaced."""
    _HINTS[hint.id] = hint


def register_hints(*hints: Hint) -> None:
    for h in hints:
        register_hint(h)


def get_hint(hint_id: str) -> Optional[Hint]:
    """Look up a hint by ID. Returns None if not found."""
    return _HINTS.get(hint_id)


def get_hints_by_category(category: str) -> List[Hint]:
    return [h for h in _HINTS.values() if h.category == category]
