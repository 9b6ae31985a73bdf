"""
winzoom - temporarily maximize the focused window, then restore the layout
"""

from winzoom.controller import ZoomController, ZoomState
from winzoom.config.settings import BorderStyle, ZoomConfig
from winzoom.plugin import setup

__version__ = "0.1.0"

__all__ = [
    "BorderStyle",
    "ZoomConfig",
    "ZoomController",
    "ZoomState",
    "setup",
]
