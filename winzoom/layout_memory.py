"""
Layout memory: capture the window arrangement and put it back later.

At most one snapshot is held at a time. Restoring is best-effort: windows
closed since the capture are skipped, and nothing is touched when the user
has moved to another tab.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from winzoom.host import TabHandle, WindowHandle, WindowHost
from winzoom.utils.error_handling import attempt, attempt_value

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayoutSnapshot:
    """Windows visible at capture time, the focused one, and their tab."""

    windows: Tuple[WindowHandle, ...]
    focused: WindowHandle
    tab: TabHandle


class LayoutMemory:
    """Holds the single outstanding layout snapshot for one host."""

    def __init__(self, host: WindowHost) -> None:
        self.host = host
        self._snapshot: Optional[LayoutSnapshot] = None

    @property
    def snapshot(self) -> Optional[LayoutSnapshot]:
        return self._snapshot

    @property
    def has_snapshot(self) -> bool:
        return self._snapshot is not None

    def capture(self) -> LayoutSnapshot:
        """Record the current windows, focus and tab, replacing any earlier snapshot."""
        if self._snapshot is not None:
            logger.warning("Overwriting an unrestored layout snapshot")

        snapshot = LayoutSnapshot(
            windows=tuple(self.host.list_windows()),
            focused=self.host.current_window(),
            tab=self.host.current_tab(),
        )
        self._snapshot = snapshot
        logger.debug(
            f"Captured layout: {len(snapshot.windows)} windows, focus={snapshot.focused!r}"
        )
        return snapshot

    def restore(self, snapshot: Optional[LayoutSnapshot] = None) -> int:
        """Show the snapshot's windows again and refocus the saved window.

        Args:
            snapshot: Snapshot to restore, defaults to the stored one

        Returns:
            Number of windows made visible again
        """
        snapshot = snapshot or self._snapshot
        try:
            if snapshot is None:
                return 0
            if not self.is_current_tab(snapshot.tab):
                logger.debug("Skipping layout restore: original tab is gone or not active")
                return 0

            shown = 0
            for window in snapshot.windows:
                if not attempt_value(self.host.window_is_valid, window, default=False):
                    continue
                if attempt(
                    self.host.set_window_hidden, window, False, operation="show window"
                ):
                    shown += 1
                else:
                    logger.warning(f"Could not show window {window!r}")

            if attempt_value(self.host.window_is_valid, snapshot.focused, default=False):
                attempt(self.host.set_current_window, snapshot.focused, operation="focus window")

            logger.debug(f"Restored {shown} of {len(snapshot.windows)} windows")
            return shown
        finally:
            self._snapshot = None

    def is_current_tab(self, tab: TabHandle) -> bool:
        """True if the tab is still open and is the one the user is on."""
        if not attempt_value(self.host.tab_is_valid, tab, default=False):
            return False
        return attempt_value(self.host.current_tab, default=None) == tab
