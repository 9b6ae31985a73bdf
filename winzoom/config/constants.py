"""
Centralized constants for winzoom.
"""

from pathlib import Path

# =============================================================================
# PATHS
# =============================================================================

WINZOOM_CONFIG_DIR = Path.home() / ".config" / "winzoom"
CONFIG_FILENAME = "config.yaml"

# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_TOGGLE_KEY = "f9"
DEFAULT_BORDER = "none"
DEFAULT_USE_TAB_ZOOM = True

# =============================================================================
# HOST-FACING NAMES
# =============================================================================

# Named command registered with the host
TOGGLE_COMMAND_NAME = "WindowZoomToggle"
TOGGLE_COMMAND_DESCRIPTION = "Toggle window zoom on and off"

# Tab variable that marks a zoom tab, and the value it holds while zoomed
TAB_MARKER_KEY = "window_zoom"
TAB_MARKER_VALUE = "zoomed"

# =============================================================================
# NOTIFICATIONS
# =============================================================================

MSG_ZOOM_ENABLED = "Window zoom enabled"
MSG_ZOOM_DISABLED = "Window zoom disabled"
