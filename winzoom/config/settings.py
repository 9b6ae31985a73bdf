"""
winzoom configuration.

User configuration is read from ~/.config/winzoom/config.yaml and merged
over the defaults. Nested mappings are merged key by key, and user values
win over defaults.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from winzoom.utils.error_handling import ConfigError

from .constants import (
    CONFIG_FILENAME,
    DEFAULT_BORDER,
    DEFAULT_TOGGLE_KEY,
    DEFAULT_USE_TAB_ZOOM,
    WINZOOM_CONFIG_DIR,
)

logger = logging.getLogger(__name__)


class BorderStyle(Enum):
    """Border drawn around the zoomed window. Presentation only."""

    NONE = "none"
    SINGLE = "single"
    DOUBLE = "double"
    ROUNDED = "rounded"
    SOLID = "solid"
    SHADOW = "shadow"


DEFAULT_CONFIG: dict[str, Any] = {
    "mappings": {
        "toggle": DEFAULT_TOGGLE_KEY,
    },
    "border": DEFAULT_BORDER,
    "use_tab_zoom": DEFAULT_USE_TAB_ZOOM,
}

EXAMPLE_CONFIG = """# winzoom configuration
#
# mappings:
#   toggle: key that toggles zoom, or null to disable the binding
#
# border: none | single | double | rounded | solid | shadow
#
# use_tab_zoom: true relocates the window to its own tab,
#               false hides the sibling windows instead

mappings:
  toggle: "f9"
border: "none"
use_tab_zoom: true
"""


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Merge ``override`` into a copy of ``base``, recursing into mappings."""
    merged = copy.deepcopy(dict(base))
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), Mapping):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


@dataclass
class ZoomConfig:
    """Settings applied once when the plugin is set up."""

    mappings: dict[str, Optional[str]] = field(
        default_factory=lambda: {"toggle": DEFAULT_TOGGLE_KEY}
    )
    border: BorderStyle = BorderStyle.NONE
    use_tab_zoom: bool = DEFAULT_USE_TAB_ZOOM

    @property
    def toggle_key(self) -> Optional[str]:
        """Key bound to toggle, or None when the binding is disabled."""
        return self.mappings.get("toggle")

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]] = None) -> ZoomConfig:
        """Build a config from user values merged over the defaults.

        Raises:
            ConfigError: If a value has the wrong type or an unknown border
        """
        merged = deep_merge(DEFAULT_CONFIG, data or {})

        mappings = merged.get("mappings")
        if not isinstance(mappings, Mapping):
            raise ConfigError("'mappings' must be a mapping", details=repr(mappings))
        for name, key in mappings.items():
            if key is not None and not isinstance(key, str):
                raise ConfigError(
                    f"Mapping '{name}' must be a key string or null", details=repr(key)
                )

        border_value = merged.get("border")
        if isinstance(border_value, BorderStyle):
            border = border_value
        else:
            try:
                border = BorderStyle(border_value)
            except ValueError as e:
                valid = ", ".join(style.value for style in BorderStyle)
                raise ConfigError(
                    f"Unknown border style '{border_value}'", details=f"Expected one of: {valid}"
                ) from e

        use_tab_zoom = merged.get("use_tab_zoom")
        if not isinstance(use_tab_zoom, bool):
            raise ConfigError("'use_tab_zoom' must be true or false", details=repr(use_tab_zoom))

        return cls(mappings=dict(mappings), border=border, use_tab_zoom=use_tab_zoom)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary for display or serialization."""
        return {
            "mappings": dict(self.mappings),
            "border": self.border.value,
            "use_tab_zoom": self.use_tab_zoom,
        }


def get_config_path() -> Path:
    """Get the path to the user config file."""
    return WINZOOM_CONFIG_DIR / CONFIG_FILENAME


def load_config(path: Optional[Path] = None) -> ZoomConfig:
    """
    Load configuration from a YAML file.

    Args:
        path: File to read, defaults to ~/.config/winzoom/config.yaml

    Returns:
        ZoomConfig, or defaults if the file is missing, empty or unreadable

    Raises:
        ConfigError: If the file parses but holds invalid values
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        return ZoomConfig()

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Failed to load winzoom config: {e}")
        return ZoomConfig()

    if data is None:
        return ZoomConfig()
    if not isinstance(data, Mapping):
        raise ConfigError(f"Config file {config_path} must contain a mapping")

    return ZoomConfig.from_dict(data)


def save_example_config(path: Optional[Path] = None) -> bool:
    """
    Save example config file if it doesn't exist.

    Returns:
        True if file was created, False if it already exists or can't be written
    """
    config_path = path or get_config_path()

    if config_path.exists():
        return False

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(EXAMPLE_CONFIG)
        logger.info(f"Created example winzoom config at {config_path}")
        return True
    except OSError as e:
        logger.error(f"Failed to create winzoom config: {e}")
        return False
