"""
Textual implementation of the winzoom host protocol.

Windows are widgets carrying the ``zoom-window`` CSS class. Tabs are the
screens on the app's screen stack: opening a zoom tab pushes a screen that
holds a clone of the window, and closing it pops back to the screen below.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterator, List, Optional, Set, Tuple

from textual.app import App, SystemCommand
from textual.screen import Screen
from textual.widget import Widget
from textual.widgets import TextArea

from winzoom.config.settings import BorderStyle
from winzoom.host import NotifyLevel
from winzoom.utils.error_handling import HostError

logger = logging.getLogger(__name__)

WINDOW_CLASS = "zoom-window"
BORDER_COLOR = "green"

# Textual has no shadow border; "outer" is the closest look
TEXTUAL_BORDERS: Dict[BorderStyle, str] = {
    BorderStyle.NONE: "none",
    BorderStyle.SINGLE: "solid",
    BorderStyle.DOUBLE: "double",
    BorderStyle.ROUNDED: "round",
    BorderStyle.SOLID: "thick",
    BorderStyle.SHADOW: "outer",
}


def clone_text_window(window: Widget) -> Widget:
    """Default window cloner: copies a TextArea's text and language."""
    if isinstance(window, TextArea):
        return TextArea(window.text, language=window.language, read_only=window.read_only)
    raise HostError(f"Cannot open {type(window).__name__} in a new tab")


class ZoomScreen(Screen):
    """A tab holding a single zoomed window."""

    def __init__(self, window: Widget, on_ready: Callable[[Widget], None]) -> None:
        super().__init__()
        self.zoomed_window = window
        self._on_ready = on_ready

    def compose(self):
        yield self.zoomed_window

    def on_mount(self) -> None:
        self.set_focus(self.zoomed_window)
        self._on_ready(self.zoomed_window)


class TextualWindowHost:
    """Adapts a Textual app to the WindowHost protocol."""

    def __init__(
        self,
        app: App,
        clone_window: Optional[Callable[[Widget], Widget]] = None,
    ) -> None:
        self.app = app
        self._clone_window = clone_window or clone_text_window
        self._tab_vars: Dict[Screen, Dict[str, Any]] = {}
        self._key_handlers: Dict[str, Callable[[], Any]] = {}
        self._commands: Dict[str, Tuple[Callable[[], Any], str]] = {}
        # zoom screen -> (original window, clone shown in that screen)
        self._clones: Dict[Screen, Tuple[Widget, Widget]] = {}
        # clones whose screen has not mounted yet, and views waiting for them
        self._pending: Set[Widget] = set()
        self._pending_views: Dict[Widget, Any] = {}
        # containers collapsed because all their windows are hidden, and
        # containers stretched to fill the room, with their inline sizes
        self._collapsed: Set[Widget] = set()
        self._stretched: Dict[Widget, Tuple[Any, Any]] = {}

    # --- enumeration -----------------------------------------------------

    def list_windows(self) -> List[Widget]:
        screen = self.app.screen
        if screen in self._clones:
            return [self._clones[screen][1]]
        return [w for w in screen.query(f".{WINDOW_CLASS}") if w.display]

    def current_window(self) -> Widget:
        screen = self.app.screen
        if screen in self._clones:
            return self._clones[screen][1]

        focused = self.app.focused
        if focused is not None:
            for node in focused.ancestors_with_self:
                if isinstance(node, Widget) and node.has_class(WINDOW_CLASS):
                    return node

        windows = self.list_windows()
        if not windows:
            raise HostError("No windows on the current screen")
        return windows[0]

    def current_tab(self) -> Screen:
        return self.app.screen

    def window_is_valid(self, window: Any) -> bool:
        if not isinstance(window, Widget):
            return False
        return window in self._pending or window.is_attached

    def tab_is_valid(self, tab: Any) -> bool:
        return tab in self.app.screen_stack

    # --- visibility and focus --------------------------------------------

    def set_window_hidden(self, window: Widget, hidden: bool) -> None:
        self._require_window(window)
        window.display = not hidden
        self._fit_containers(window.screen)

    def set_current_window(self, window: Widget) -> None:
        self._require_window(window)
        window.screen.set_focus(window)

    def set_current_tab(self, tab: Screen) -> None:
        if tab is self.app.screen:
            return
        if tab not in self.app.screen_stack:
            raise HostError("Screen is no longer open")
        raise HostError("Only the top screen can be made current")

    def set_window_border(self, window: Widget, border: BorderStyle) -> None:
        if border is BorderStyle.NONE:
            # Drop the inline rule so the stylesheet border applies again
            window.styles.border = None
        else:
            window.styles.border = (TEXTUAL_BORDERS[border], BORDER_COLOR)

    # --- tabs and views --------------------------------------------------

    def save_view(self, window: Widget) -> Dict[str, Any]:
        self._require_window(window)
        return {
            "cursor": getattr(window, "cursor_location", None),
            "scroll": (window.scroll_x, window.scroll_y),
        }

    def restore_view(self, window: Widget, view: Dict[str, Any]) -> None:
        if window in self._pending:
            self._pending_views[window] = view
            return
        self._require_window(window)
        self._apply_view(window, view)

    def open_in_new_tab(self, window: Widget) -> Screen:
        self._require_window(window)
        self._forget_closed_screens()
        clone = self._clone_window(window)
        clone.add_class(WINDOW_CLASS)

        screen = ZoomScreen(clone, on_ready=self._window_ready)
        self._clones[screen] = (window, clone)
        self._pending.add(clone)
        self.app.push_screen(screen)
        return screen

    def close_tab(self, tab: Screen) -> None:
        stack = self.app.screen_stack
        if tab not in stack:
            raise HostError("Screen is no longer open")
        if tab is not self.app.screen:
            raise HostError("Only the top screen can be closed")
        if len(stack) <= 1:
            raise HostError("Cannot close the last screen")

        origin = self._clones.pop(tab, None)
        if origin is not None:
            original, clone = origin
            self._pending.discard(clone)
            self._pending_views.pop(clone, None)
            self._write_back(original, clone)

        self._tab_vars.pop(tab, None)
        self.app.pop_screen()

    def get_tab_var(self, tab: Screen, key: str) -> Any:
        return self._tab_vars.get(tab, {}).get(key)

    def set_tab_var(self, tab: Screen, key: str, value: Any) -> None:
        if not self.tab_is_valid(tab):
            raise HostError("Screen is no longer open")
        tab_vars = self._tab_vars.setdefault(tab, {})
        if value is None:
            tab_vars.pop(key, None)
        else:
            tab_vars[key] = value

    # --- bindings and notifications --------------------------------------

    def register_keybinding(
        self, key: str, callback: Callable[[], Any], description: str
    ) -> None:
        self._key_handlers[key] = callback
        logger.debug(f"Bound '{key}' ({description})")

    def register_command(
        self, name: str, callback: Callable[[], Any], description: str
    ) -> None:
        self._commands[name] = (callback, description)

    def notify(self, message: str, level: NotifyLevel = NotifyLevel.INFO) -> None:
        self.app.notify(message, severity=level.value)

    def handle_key(self, key: str) -> bool:
        """Run the callback bound to ``key``. Returns True if one was bound."""
        callback = self._key_handlers.get(key)
        if callback is None:
            return False
        callback()
        return True

    def run_command(self, name: str) -> Any:
        if name not in self._commands:
            raise HostError(f"Unknown command: {name}")
        return self._commands[name][0]()

    def system_commands(self) -> Iterator[SystemCommand]:
        """Registered commands, for the app's command palette."""
        for name, (callback, description) in self._commands.items():
            yield SystemCommand(name, description, callback)

    # --- internals -------------------------------------------------------

    def _require_window(self, window: Any) -> None:
        if not self.window_is_valid(window):
            raise HostError(f"Window {window!r} is no longer open")

    def _window_ready(self, window: Widget) -> None:
        self._pending.discard(window)
        view = self._pending_views.pop(window, None)
        if view is not None:
            self._apply_view(window, view)

    def _apply_view(self, window: Widget, view: Dict[str, Any]) -> None:
        cursor = view.get("cursor")
        if cursor is not None and isinstance(window, TextArea):
            window.cursor_location = cursor
        scroll_x, scroll_y = view.get("scroll", (0, 0))
        window.scroll_to(scroll_x, scroll_y, animate=False)

    def _write_back(self, original: Widget, clone: Widget) -> None:
        """Copy edits made in the zoom tab back to the original window."""
        if not (isinstance(original, TextArea) and isinstance(clone, TextArea)):
            return
        if original.is_attached and original.text != clone.text:
            original.text = clone.text

    def _fit_containers(self, screen: Screen) -> None:
        """Collapse containers with no visible windows and stretch lone survivors.

        A window left alone in its container takes the room its hidden
        siblings and their emptied containers gave up.
        """
        windows = list(screen.query(f".{WINDOW_CLASS}"))
        holders: Dict[Widget, bool] = {}
        for window in windows:
            for node in window.ancestors:
                if node is screen or not isinstance(node, Widget):
                    break
                holders[node] = holders.get(node, False) or bool(window.display)

        for node, has_visible in holders.items():
            if not has_visible and node.display:
                node.display = False
                self._collapsed.add(node)
            elif has_visible and node in self._collapsed:
                node.display = True
                self._collapsed.discard(node)

        members = set(windows) | set(holders)
        for node in members:
            siblings = [s for s in node.parent.children if s in members]
            shown = [s for s in siblings if s.display]
            if node.display and len(siblings) > 1 and shown == [node]:
                if node not in self._stretched:
                    self._stretched[node] = (node.styles.inline.width, node.styles.inline.height)
                    node.styles.width = "1fr"
                    node.styles.height = "1fr"
            elif node in self._stretched:
                width, height = self._stretched.pop(node)
                node.styles.width = width
                node.styles.height = height

    def _forget_closed_screens(self) -> None:
        """Drop state for screens popped without going through close_tab."""
        stack = self.app.screen_stack
        for screen in [s for s in self._clones if s not in stack]:
            _, clone = self._clones.pop(screen)
            self._pending.discard(clone)
            self._pending_views.pop(clone, None)
        for screen in [s for s in self._tab_vars if s not in stack]:
            del self._tab_vars[screen]
