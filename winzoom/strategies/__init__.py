"""Zoom strategies: the enter/exit mechanics behind the controller."""

from .base import ZoomState, ZoomStrategy
from .registry import StrategyKind, StrategyRegistry, get_strategy, strategy_registry
from .sibling_hiding import SiblingHidingStrategy
from .tab_relocation import TabRelocationStrategy

__all__ = [
    "ZoomState",
    "ZoomStrategy",
    "SiblingHidingStrategy",
    "TabRelocationStrategy",
    "StrategyKind",
    "StrategyRegistry",
    "get_strategy",
    "strategy_registry",
]
