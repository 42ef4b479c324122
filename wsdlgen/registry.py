from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List

from .config import PortTypeConfig
from .porttypes import PortTypeStrategy

StrategyFactory = Callable[[PortTypeConfig], PortTypeStrategy]


@dataclass(slots=True)
class StrategyRegistry:
    """Maps strategy names (lower-cased) to factories that turn a PortTypeConfig into a strategy."""

    _factories: dict[str, StrategyFactory] = field(default_factory=dict)

    def register(self, name: str, factory: StrategyFactory) -> None:
        """Add a factory; names are case-insensitive and may be registered once."""
        key = name.lower().strip()
        if not key:
            raise ValueError("Strategy name must not be empty.")
        if key in self._factories:
            raise ValueError(f"Strategy '{key}' already registered.")
        self._factories[key] = factory

    def get(self, name: str) -> StrategyFactory:
        """Return the factory for ``name``; the error lists what is available."""
        key = name.lower().strip()
        if key not in self._factories:
            supported = ", ".join(sorted(self._factories)) or "<none>"
            raise ValueError(f"Unknown strategy '{name}'. Supported strategies: {supported}")
        return self._factories[key]

    def create(self, config: PortTypeConfig) -> PortTypeStrategy:
        """Instantiate the strategy named by the configuration."""
        return self.get(config.strategy)(config)

    def names(self) -> list[str]:
        """Sorted strategy names, as shown by ``--list-strategies``."""
        return sorted(self._factories.keys())


_STRATEGY_FACTORIES: List[tuple[str, StrategyFactory]] = []


def register_strategy(name: str) -> Callable[[StrategyFactory], StrategyFactory]:
    """
    Decorator that records a strategy factory for build_default_registry.

    Strategy modules apply it at import time:

        @register_strategy("suffix")
        def make_strategy(config: PortTypeConfig) -> PortTypeStrategy:
            return suffix_strategy(...)
    """

    def decorator(factory: StrategyFactory) -> StrategyFactory:
        _STRATEGY_FACTORIES.append((name, factory))
        return factory

    return decorator


def build_default_registry() -> StrategyRegistry:
    """
    Create a StrategyRegistry holding every factory recorded by
    register_strategy(). The suffix strategy module is imported first so
    that it is always available, including from the CLI.
    """
    from .porttypes import suffix as _suffix  # noqa: F401

    registry = StrategyRegistry()
    for name, factory in _STRATEGY_FACTORIES:
        registry.register(name, factory)
    return registry
