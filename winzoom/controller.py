"""
Zoom controller: the Unzoomed/Zoomed state machine.

The controller owns its strategy and delegates both the mechanics and the
state lookup to it. Zooming in while zoomed, or out while unzoomed, does
nothing.
"""

import logging

from winzoom.config.constants import MSG_ZOOM_DISABLED, MSG_ZOOM_ENABLED
from winzoom.host import NotifyLevel, WindowHost
from winzoom.strategies.base import ZoomState, ZoomStrategy
from winzoom.utils.error_handling import attempt

logger = logging.getLogger(__name__)

__all__ = ["ZoomController", "ZoomState"]


class ZoomController:
    """Toggles zoom on one host using a strategy chosen at setup time."""

    def __init__(self, host: WindowHost, strategy: ZoomStrategy) -> None:
        self.host = host
        self.strategy = strategy

    @property
    def state(self) -> ZoomState:
        return self.strategy.state()

    @property
    def is_zoomed(self) -> bool:
        return self.state is ZoomState.ZOOMED

    def zoom_in(self) -> bool:
        """Zoom the focused window. Returns True if the state changed."""
        if self.is_zoomed:
            return False

        self.strategy.enter()
        if not self.is_zoomed:
            logger.warning(f"Zoom in via '{self.strategy.name}' did not take effect")
            return False

        logger.info(f"Window zoom enabled ({self.strategy.name})")
        self._notify(MSG_ZOOM_ENABLED)
        return True

    def zoom_out(self) -> bool:
        """Restore the layout from before the zoom. Returns True if the state changed."""
        if not self.is_zoomed:
            return False

        self.strategy.exit()
        if self.is_zoomed:
            logger.warning(f"Zoom out via '{self.strategy.name}' did not take effect")
            return False

        logger.info(f"Window zoom disabled ({self.strategy.name})")
        self._notify(MSG_ZOOM_DISABLED)
        return True

    def toggle(self) -> ZoomState:
        """Zoom in when unzoomed, out when zoomed. Returns the new state."""
        if self.is_zoomed:
            self.zoom_out()
        else:
            self.zoom_in()
        return self.state

    def _notify(self, message: str) -> None:
        attempt(self.host.notify, message, NotifyLevel.INFO, operation="notify")
