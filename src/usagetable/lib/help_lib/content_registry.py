"""
Explicit option registration.

Options are registered one by one (or loaded from a declaration file) and
kept in registration order. Every option name may be taken only once.
"""

from typing import Dict, Iterable, Iterator, List, Optional

from usagetable.lib.table_lib import ConfigurationError
from .core import OptionSpec


class OptionRegistry:
    """Ordered collection of OptionSpecs with unique names."""

    def __init__(self, options: Iterable[OptionSpec] = ()):
        self._options: List[OptionSpec] = []
        self._by_name: Dict[str, OptionSpec] = {}
        self.register_all(options)

    def register(self, option: OptionSpec) -> OptionSpec:
        """Register an option.

        Args:
            option: The option to add

        Returns:
            The registered option

        Raises:
            ConfigurationError: If one of its names is already registered
        """
        for name in option.names:
            if name in self._by_name:
                raise ConfigurationError(f"Duplicate option name: {name}")
        if len(set(option.names)) != len(option.names):
            raise ConfigurationError(f"Option repeats a name: {option.names}")
        self._options.append(option)
        for name in option.names:
            self._by_name[name] = option
        return option

    def register_all(self, options: Iterable[OptionSpec]) -> None:
        for option in options:
            self.register(option)

    def add(self, *names: str, description='', hidden: bool = False) -> OptionSpec:
        """Build and register an option in one call."""
        return self.register(OptionSpec(list(names), description, hidden=hidden))

    def get(self, name: str) -> Optional[OptionSpec]:
        """Look up an option by any of its names. Returns None if not found."""
        return self._by_name.get(name)

    def options(self) -> List[OptionSpec]:
        """All options in registration order."""
        return list(self._options)

    def visible_options(self) -> List[OptionSpec]:
        """Options shown on help screens, in registration order."""
        return [opt for opt in self._options if not opt.hidden]

    @property
    def hidden_count(self) -> int:
        return sum(1 for opt in self._options if opt.hidden)

    def __len__(self) -> int:
        return len(self._options)

    def __iter__(self) -> Iterator[OptionSpec]:
        return iter(list(self._options))

    def __contains__(self, name: str) -> bool:
        return name in self._by_name
