"""
Tab markers: zoom state stored on the tab itself.

Each tab carries its own marker, so independent tabs can be zoomed
independently and the state outlives any single controller.
"""

import logging

from winzoom.config.constants import TAB_MARKER_KEY, TAB_MARKER_VALUE
from winzoom.host import TabHandle, WindowHost
from winzoom.utils.error_handling import attempt, attempt_value

logger = logging.getLogger(__name__)


class TabMarkerStore:
    """Association between a tab handle and whether that tab is a zoom tab."""

    def __init__(
        self,
        host: WindowHost,
        key: str = TAB_MARKER_KEY,
        value: str = TAB_MARKER_VALUE,
    ) -> None:
        self.host = host
        self.key = key
        self.value = value

    def is_marked(self, tab: TabHandle) -> bool:
        """True if the tab carries the zoom marker. Unreadable tabs count as unmarked."""
        return attempt_value(self.host.get_tab_var, tab, self.key, default=None) == self.value

    def mark(self, tab: TabHandle) -> bool:
        """Tag the tab as a zoom tab."""
        return attempt(self.host.set_tab_var, tab, self.key, self.value, operation="set tab marker")
