"""Registry for zoom strategies."""

from enum import Enum
from typing import Dict, Type

from winzoom.config.settings import BorderStyle, ZoomConfig
from winzoom.host import WindowHost

from .base import ZoomStrategy
from .sibling_hiding import SiblingHidingStrategy
from .tab_relocation import TabRelocationStrategy


class StrategyKind(Enum):
    """Available ways of zooming."""

    TAB_RELOCATION = "tab"
    SIBLING_HIDING = "hide"

    @classmethod
    def from_config(cls, config: ZoomConfig) -> "StrategyKind":
        return cls.TAB_RELOCATION if config.use_tab_zoom else cls.SIBLING_HIDING


class StrategyRegistry:
    """Registry mapping strategy kinds to strategy classes."""

    def __init__(self):
        self._strategies: Dict[StrategyKind, Type[ZoomStrategy]] = {
            StrategyKind.TAB_RELOCATION: TabRelocationStrategy,
            StrategyKind.SIBLING_HIDING: SiblingHidingStrategy,
        }

    def get_strategy(
        self,
        kind: StrategyKind,
        host: WindowHost,
        border: BorderStyle = BorderStyle.NONE,
    ) -> ZoomStrategy:
        """Create a strategy instance bound to a host.

        A new instance is returned on every call, since strategies carry
        per-host zoom state.
        """
        if kind not in self._strategies:
            raise ValueError(f"Unknown zoom strategy: {kind}")
        return self._strategies[kind](host, border)

    def register(self, kind: StrategyKind, strategy_class: Type[ZoomStrategy]) -> None:
        """Register a custom strategy class for a kind."""
        self._strategies[kind] = strategy_class


# Global registry instance
strategy_registry = StrategyRegistry()


def get_strategy(config: ZoomConfig, host: WindowHost) -> ZoomStrategy:
    """Create the strategy selected by ``config`` for ``host``."""
    return strategy_registry.get_strategy(StrategyKind.from_config(config), host, config.border)
