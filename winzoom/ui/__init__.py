"""Textual host adapter and demo app."""

from .textual_host import WINDOW_CLASS, TextualWindowHost, ZoomScreen, clone_text_window

__all__ = [
    "WINDOW_CLASS",
    "TextualWindowHost",
    "ZoomScreen",
    "clone_text_window",
]
