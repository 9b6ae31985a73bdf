"""
Demo Textual app with three editable panes.

Press the toggle key (f9 by default) or run "WindowZoomToggle" from the
command palette to zoom the focused pane.
"""

from __future__ import annotations

from typing import Iterable, Optional

from textual import events
from textual.app import App, ComposeResult, SystemCommand
from textual.containers import Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import Footer, Header, TextArea

from winzoom.config.settings import ZoomConfig
from winzoom.controller import ZoomController
from winzoom.plugin import setup

from .textual_host import WINDOW_CLASS, TextualWindowHost

SAMPLE_PANES = {
    "notes": "# Notes\n\nZoom this pane to give it the whole terminal.\n",
    "scratch": "scratch buffer\n",
    "todo": "- [ ] try tab zoom\n- [ ] try hiding zoom\n",
}


class ZoomDemoApp(App[None]):
    """Three panes wired to a winzoom controller."""

    TITLE = "winzoom demo"

    CSS = """
    .zoom-window {
        border: solid $primary;
    }
    #side {
        width: 40%;
    }
    """

    def __init__(self, config: Optional[ZoomConfig] = None) -> None:
        super().__init__()
        self.zoom_config = config or ZoomConfig()
        self.zoom_host = TextualWindowHost(self)
        self.controller: Optional[ZoomController] = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal():
            yield TextArea(SAMPLE_PANES["notes"], id="notes", classes=WINDOW_CLASS)
            with Vertical(id="side"):
                yield TextArea(SAMPLE_PANES["scratch"], id="scratch", classes=WINDOW_CLASS)
                yield TextArea(SAMPLE_PANES["todo"], id="todo", classes=WINDOW_CLASS)
        yield Footer()

    def on_mount(self) -> None:
        self.controller = setup(self.zoom_host, self.zoom_config)
        self.screen.set_focus(self.query_one("#notes", TextArea))

    def on_key(self, event: events.Key) -> None:
        if self.zoom_host.handle_key(event.key):
            event.stop()
            event.prevent_default()

    def get_system_commands(self, screen: Screen) -> Iterable[SystemCommand]:
        yield from super().get_system_commands(screen)
        yield from self.zoom_host.system_commands()


def run_demo(config: Optional[ZoomConfig] = None) -> None:
    """Run the demo app until the user quits."""
    ZoomDemoApp(config).run()
