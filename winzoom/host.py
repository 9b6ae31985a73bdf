"""
Protocol for the host window environment.

This is the whole surface winzoom needs from an editor or window manager.
Handles are opaque to winzoom: it never creates or destroys a window or tab
on its own, it only passes handles back to the host.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Hashable, Protocol, runtime_checkable

if TYPE_CHECKING:
    from winzoom.config.settings import BorderStyle

WindowHandle = Hashable
TabHandle = Hashable


class NotifyLevel(Enum):
    """Severity of a user-visible notification."""

    INFO = "information"
    WARNING = "warning"
    ERROR = "error"


@runtime_checkable
class WindowHost(Protocol):
    """Window, tab and binding operations a host must provide."""

    # --- enumeration -----------------------------------------------------

    def list_windows(self) -> list[WindowHandle]:
        """Visible windows of the current tab, in a stable order."""
        ...

    def current_window(self) -> WindowHandle:
        """The focused window."""
        ...

    def current_tab(self) -> TabHandle:
        """The active tab."""
        ...

    def window_is_valid(self, window: WindowHandle) -> bool:
        """Whether the window still exists."""
        ...

    def tab_is_valid(self, tab: TabHandle) -> bool:
        """Whether the tab still exists."""
        ...

    # --- visibility and focus --------------------------------------------

    def set_window_hidden(self, window: WindowHandle, hidden: bool) -> None:
        """Hide or show a window without destroying its content."""
        ...

    def set_current_window(self, window: WindowHandle) -> None:
        """Focus a window."""
        ...

    def set_current_tab(self, tab: TabHandle) -> None:
        """Make a tab active."""
        ...

    def set_window_border(self, window: WindowHandle, border: BorderStyle) -> None:
        """Draw a border around a window. Cosmetic only."""
        ...

    # --- tabs and views --------------------------------------------------

    def save_view(self, window: WindowHandle) -> Any:
        """Return the window's view state (cursor, scroll, folds)."""
        ...

    def restore_view(self, window: WindowHandle, view: Any) -> None:
        """Apply a view state returned by ``save_view``."""
        ...

    def open_in_new_tab(self, window: WindowHandle) -> TabHandle:
        """Open the window's content alone in a new tab and make it current."""
        ...

    def close_tab(self, tab: TabHandle) -> None:
        """Close a tab, returning to the previously active tab."""
        ...

    def get_tab_var(self, tab: TabHandle, key: str) -> Any:
        """Read a value attached to a tab, or None if unset."""
        ...

    def set_tab_var(self, tab: TabHandle, key: str, value: Any) -> None:
        """Attach a value to a tab."""
        ...

    # --- bindings and notifications --------------------------------------

    def register_keybinding(
        self, key: str, callback: Callable[[], Any], description: str
    ) -> None:
        """Bind a key to a callback."""
        ...

    def register_command(
        self, name: str, callback: Callable[[], Any], description: str
    ) -> None:
        """Register a named command."""
        ...

    def notify(self, message: str, level: NotifyLevel = NotifyLevel.INFO) -> None:
        """Show a user-visible notification."""
        ...
