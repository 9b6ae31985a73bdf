"""Zoom by opening the focused window alone in a new tab."""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from winzoom.config.settings import BorderStyle
from winzoom.host import TabHandle, WindowHandle, WindowHost
from winzoom.markers import TabMarkerStore
from winzoom.utils.error_handling import attempt, attempt_value

from .base import ZoomState, ZoomStrategy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ZoomOrigin:
    """Where a zoom tab was opened from."""

    tab: TabHandle
    window: WindowHandle


class TabRelocationStrategy(ZoomStrategy):
    """Relocates the focused window to an isolated tab marked as a zoom tab.

    The zoom state is the marker on the current tab, so each tab has its own
    state. The origin tab and window are remembered per zoom tab and focused
    again on exit instead of relying on the host's tab-close behaviour.
    """

    name = "tab"

    def __init__(self, host: WindowHost, border: BorderStyle = BorderStyle.NONE) -> None:
        super().__init__(host, border)
        self.markers = TabMarkerStore(host)
        self._origins: Dict[TabHandle, ZoomOrigin] = {}

    def state(self) -> ZoomState:
        tab = attempt_value(self.host.current_tab, default=None)
        if tab is not None and self.markers.is_marked(tab):
            return ZoomState.ZOOMED
        return ZoomState.UNZOOMED

    def enter(self) -> None:
        if self.is_zoomed:
            return

        self._forget_closed_tabs()

        tab = attempt_value(self.host.current_tab, default=None)
        window = attempt_value(self.host.current_window, default=None)
        if tab is None or window is None:
            logger.warning("No focused window to zoom")
            return
        origin = ZoomOrigin(tab=tab, window=window)
        view = attempt_value(self.host.save_view, origin.window, operation="save view")

        zoom_tab = attempt_value(
            self.host.open_in_new_tab, origin.window, operation="open zoom tab"
        )
        if zoom_tab is None:
            logger.warning(f"Could not open a zoom tab for window {origin.window!r}")
            return

        zoomed_window = attempt_value(self.host.current_window, default=None)
        if zoomed_window is not None:
            if view is not None:
                attempt(self.host.restore_view, zoomed_window, view, operation="apply view")
            self.decorate(zoomed_window)

        if not self.markers.mark(zoom_tab):
            logger.warning(f"Could not mark tab {zoom_tab!r} as a zoom tab, closing it")
            attempt(self.host.close_tab, zoom_tab, operation="close unmarked zoom tab")
            self._return_to(origin)
            return

        self._origins[zoom_tab] = origin
        logger.debug(f"Zoomed {origin.window!r} into tab {zoom_tab!r}")

    def exit(self) -> None:
        zoom_tab = attempt_value(self.host.current_tab, default=None)
        if zoom_tab is None or not self.markers.is_marked(zoom_tab):
            return

        zoomed_window = attempt_value(self.host.current_window, default=None)
        view = None
        if zoomed_window is not None:
            view = attempt_value(self.host.save_view, zoomed_window, operation="save view")

        if not attempt(self.host.close_tab, zoom_tab, operation="close zoom tab"):
            logger.warning(f"Could not close zoom tab {zoom_tab!r}")
            return

        origin = self._origins.pop(zoom_tab, None)
        target = self._return_to(origin)
        if view is not None and target is not None:
            attempt(self.host.restore_view, target, view, operation="reapply view")

    def _return_to(self, origin: Optional[ZoomOrigin]) -> Optional[WindowHandle]:
        """Focus the window the zoom started from, falling back to the host's choice."""
        if origin is not None:
            if attempt_value(self.host.tab_is_valid, origin.tab, default=False):
                if attempt_value(self.host.current_tab, default=None) != origin.tab:
                    attempt(self.host.set_current_tab, origin.tab, operation="return to tab")
            if attempt_value(self.host.window_is_valid, origin.window, default=False):
                attempt(self.host.set_current_window, origin.window, operation="refocus window")
                return origin.window

        return attempt_value(self.host.current_window, default=None)

    def _forget_closed_tabs(self) -> None:
        """Drop origins of zoom tabs the user closed without zooming out."""
        for zoom_tab in list(self._origins):
            if not attempt_value(self.host.tab_is_valid, zoom_tab, default=False):
                del self._origins[zoom_tab]
