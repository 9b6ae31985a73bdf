"""Shared pytest fixtures for winzoom tests."""

from typing import Any, Callable, Dict, List, Optional, Set

import pytest

from winzoom.config.settings import BorderStyle
from winzoom.host import NotifyLevel
from winzoom.utils.error_handling import HostError


class FakeHost:
    """In-memory window host.

    Tabs map to ordered window lists. Closing a tab returns to the tab that
    was active before it, like most editors do.
    """

    def __init__(self, windows=("w1", "w2", "w3"), focused: str = "w1") -> None:
        self.tabs: Dict[str, List[str]] = {"t1": list(windows)}
        self.active_tab = "t1"
        self.focus: Dict[str, Optional[str]] = {"t1": focused}
        self.tab_history: List[str] = []
        self.hidden: Set[str] = set()
        self.borders: Dict[str, BorderStyle] = {}
        self.views: Dict[str, Dict[str, Any]] = {}
        self.tab_vars: Dict[str, Dict[str, Any]] = {}
        self.keybindings: Dict[str, Callable[[], Any]] = {}
        self.commands: Dict[str, Callable[[], Any]] = {}
        self.notifications: List[tuple] = []
        self.failing_windows: Set[str] = set()
        self.fail_notify = False
        self.fail_open_tab = False
        self.fail_close_tab = False
        self.fail_tab_vars = False
        self.origin_of: Dict[str, str] = {}
        self._tab_counter = 1

    # --- protocol --------------------------------------------------------

    def list_windows(self) -> List[str]:
        return [w for w in self.tabs[self.active_tab] if w not in self.hidden]

    def current_window(self) -> str:
        window = self.focus.get(self.active_tab)
        if window is None:
            raise HostError("No focused window")
        return window

    def current_tab(self) -> str:
        return self.active_tab

    def window_is_valid(self, window: Any) -> bool:
        return self._tab_of(window) is not None

    def tab_is_valid(self, tab: Any) -> bool:
        return tab in self.tabs

    def set_window_hidden(self, window: str, hidden: bool) -> None:
        if window in self.failing_windows:
            raise HostError(f"set_window_hidden failed for {window}")
        if not self.window_is_valid(window):
            raise HostError(f"Invalid window {window}")
        if hidden:
            self.hidden.add(window)
        else:
            self.hidden.discard(window)

    def set_current_window(self, window: str) -> None:
        tab = self._tab_of(window)
        if tab is None:
            raise HostError(f"Invalid window {window}")
        if tab != self.active_tab:
            raise HostError(f"Window {window} is in another tab")
        self.focus[tab] = window

    def set_current_tab(self, tab: str) -> None:
        if tab not in self.tabs:
            raise HostError(f"Invalid tab {tab}")
        self.active_tab = tab

    def set_window_border(self, window: str, border: BorderStyle) -> None:
        self.borders[window] = border

    def save_view(self, window: str) -> Dict[str, Any]:
        if not self.window_is_valid(window):
            raise HostError(f"Invalid window {window}")
        return dict(self.views.get(window, {"cursor": (1, 0)}))

    def restore_view(self, window: str, view: Dict[str, Any]) -> None:
        if not self.window_is_valid(window):
            raise HostError(f"Invalid window {window}")
        self.views[window] = dict(view)

    def open_in_new_tab(self, window: str) -> str:
        if self.fail_open_tab:
            raise HostError("tab split failed")
        self._tab_counter += 1
        tab = f"t{self._tab_counter}"
        clone = f"{window}@{tab}"
        self.tabs[tab] = [clone]
        self.origin_of[clone] = window
        self.focus[tab] = clone
        self.tab_history.append(self.active_tab)
        self.active_tab = tab
        return tab

    def close_tab(self, tab: str) -> None:
        if self.fail_close_tab:
            raise HostError("tab close failed")
        if tab not in self.tabs:
            raise HostError(f"Invalid tab {tab}")
        del self.tabs[tab]
        self.focus.pop(tab, None)
        self.tab_vars.pop(tab, None)
        if self.active_tab == tab:
            while self.tab_history and self.tab_history[-1] not in self.tabs:
                self.tab_history.pop()
            self.active_tab = self.tab_history.pop() if self.tab_history else next(iter(self.tabs))

    def get_tab_var(self, tab: str, key: str) -> Any:
        if tab not in self.tabs:
            raise HostError(f"Invalid tab {tab}")
        return self.tab_vars.get(tab, {}).get(key)

    def set_tab_var(self, tab: str, key: str, value: Any) -> None:
        if self.fail_tab_vars:
            raise HostError("set_tab_var failed")
        if tab not in self.tabs:
            raise HostError(f"Invalid tab {tab}")
        tab_vars = self.tab_vars.setdefault(tab, {})
        if value is None:
            tab_vars.pop(key, None)
        else:
            tab_vars[key] = value

    def register_keybinding(self, key: str, callback, description: str) -> None:
        self.keybindings[key] = callback

    def register_command(self, name: str, callback, description: str) -> None:
        self.commands[name] = callback

    def notify(self, message: str, level: NotifyLevel = NotifyLevel.INFO) -> None:
        if self.fail_notify:
            raise HostError("notify failed")
        self.notifications.append((message, level))

    # --- test helpers ----------------------------------------------------

    def visible(self) -> List[str]:
        return self.list_windows()

    def close_window(self, window: str) -> None:
        """Simulate the user closing a window."""
        tab = self._tab_of(window)
        if tab is None:
            return
        self.tabs[tab].remove(window)
        self.hidden.discard(window)
        if self.focus.get(tab) == window:
            remaining = [w for w in self.tabs[tab] if w not in self.hidden]
            self.focus[tab] = remaining[0] if remaining else None

    def add_tab(self, tab: str, windows, focused: Optional[str] = None) -> None:
        self.tabs[tab] = list(windows)
        self.focus[tab] = focused or (windows[0] if windows else None)

    def switch_tab(self, tab: str) -> None:
        self.tab_history.append(self.active_tab)
        self.active_tab = tab

    def _tab_of(self, window: Any) -> Optional[str]:
        for tab, windows in self.tabs.items():
            if window in windows:
                return tab
        return None


@pytest.fixture
def host():
    """Host with three windows in one tab, focus on w1."""
    return FakeHost()


@pytest.fixture
def make_host():
    """Factory for hosts with custom windows."""
    return FakeHost
