"""Zoom by hiding every window except the focused one."""

import logging
from typing import Optional

from winzoom.config.settings import BorderStyle
from winzoom.host import WindowHandle, WindowHost
from winzoom.layout_memory import LayoutMemory, LayoutSnapshot
from winzoom.utils.error_handling import attempt, attempt_value

from .base import ZoomState, ZoomStrategy

logger = logging.getLogger(__name__)


class SiblingHidingStrategy(ZoomStrategy):
    """Hides sibling windows in place and shows them again on exit.

    Windows are hidden, not closed, so buffers and content survive the zoom.
    The zoom state is an in-memory flag on this instance.
    """

    name = "hide"

    def __init__(self, host: WindowHost, border: BorderStyle = BorderStyle.NONE) -> None:
        super().__init__(host, border)
        self.memory = LayoutMemory(host)
        self._zoomed = False
        self._zoomed_window: Optional[WindowHandle] = None

    def state(self) -> ZoomState:
        return ZoomState.ZOOMED if self._zoomed else ZoomState.UNZOOMED

    def enter(self) -> None:
        if self._zoomed:
            return

        snapshot = attempt_value(self.memory.capture, operation="capture layout")
        if snapshot is None:
            logger.warning("Could not capture the window layout, not zooming")
            return
        focused = snapshot.focused

        # Re-list rather than reuse the snapshot in case the host reordered windows
        hidden = 0
        for window in attempt_value(self.host.list_windows, default=[]):
            if window == focused:
                continue
            if not attempt_value(self.host.window_is_valid, window, default=False):
                continue
            if attempt(self.host.set_window_hidden, window, True, operation="hide window"):
                hidden += 1

        self.decorate(focused)
        self._zoomed_window = focused
        self._zoomed = True
        logger.debug(f"Hid {hidden} windows around {focused!r}")

    def exit(self) -> None:
        if not self._zoomed:
            return

        snapshot = self.memory.snapshot
        try:
            if self._can_undecorate(snapshot):
                self.undecorate(self._zoomed_window)
            self.memory.restore()
        finally:
            self._zoomed_window = None
            self._zoomed = False

    def _can_undecorate(self, snapshot: Optional[LayoutSnapshot]) -> bool:
        # Windows of a tab the user has left are not touched
        if self._zoomed_window is None or snapshot is None:
            return False
        if not self.memory.is_current_tab(snapshot.tab):
            return False
        return attempt_value(self.host.window_is_valid, self._zoomed_window, default=False)
