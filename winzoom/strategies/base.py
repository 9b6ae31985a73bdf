"""Base class for zoom strategies."""

import logging
from abc import ABC, abstractmethod
from enum import Enum

from winzoom.config.settings import BorderStyle
from winzoom.host import WindowHandle, WindowHost
from winzoom.utils.error_handling import attempt

logger = logging.getLogger(__name__)


class ZoomState(Enum):
    """Whether a window is currently zoomed."""

    UNZOOMED = "unzoomed"
    ZOOMED = "zoomed"


class ZoomStrategy(ABC):
    """Base class for zoom strategies.

    Each way of zooming (hiding siblings, relocating to a tab) is a separate
    strategy class. A strategy also decides where the zoom state lives.
    ``enter`` and ``exit`` must be no-ops when already in the target state.
    """

    name: str = ""

    def __init__(self, host: WindowHost, border: BorderStyle = BorderStyle.NONE) -> None:
        self.host = host
        self.border = border

    @abstractmethod
    def state(self) -> ZoomState:
        """Current zoom state as this strategy tracks it."""
        pass

    @abstractmethod
    def enter(self) -> None:
        """Zoom the focused window."""
        pass

    @abstractmethod
    def exit(self) -> None:
        """Undo the zoom."""
        pass

    @property
    def is_zoomed(self) -> bool:
        return self.state() is ZoomState.ZOOMED

    def decorate(self, window: WindowHandle) -> None:
        """Draw the configured border around the zoomed window."""
        if self.border is BorderStyle.NONE:
            return
        attempt(self.host.set_window_border, window, self.border, operation="set border")

    def undecorate(self, window: WindowHandle) -> None:
        if self.border is BorderStyle.NONE:
            return
        attempt(self.host.set_window_border, window, BorderStyle.NONE, operation="clear border")
