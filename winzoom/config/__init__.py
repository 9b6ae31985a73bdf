"""Configuration for winzoom."""

from .settings import (
    BorderStyle,
    ZoomConfig,
    get_config_path,
    load_config,
    save_example_config,
)

__all__ = [
    "BorderStyle",
    "ZoomConfig",
    "get_config_path",
    "load_config",
    "save_example_config",
]
