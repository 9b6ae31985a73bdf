"""
Plugin entry point: wire a zoom controller into a host.

Usage:
    from winzoom import setup

    controller = setup(host, {"use_tab_zoom": False, "border": "rounded"})
    controller.toggle()
"""

import logging
import weakref
from typing import Any, Mapping, Optional, Union

from winzoom.config.constants import TOGGLE_COMMAND_DESCRIPTION, TOGGLE_COMMAND_NAME
from winzoom.config.settings import ZoomConfig
from winzoom.controller import ZoomController
from winzoom.host import WindowHost
from winzoom.strategies.registry import get_strategy

logger = logging.getLogger(__name__)

# One controller per host; loading twice returns the existing one
_loaded: "weakref.WeakKeyDictionary[Any, ZoomController]" = weakref.WeakKeyDictionary()


def setup(
    host: WindowHost,
    config: Optional[Union[ZoomConfig, Mapping[str, Any]]] = None,
) -> ZoomController:
    """Configure zoom for ``host`` and register its key binding and command.

    Args:
        host: Host window environment
        config: ZoomConfig, a mapping of user overrides, or None for defaults

    Returns:
        The controller for this host

    Raises:
        ConfigError: If a mapping config holds invalid values
    """
    existing = _loaded.get(host)
    if existing is not None:
        logger.debug("winzoom already set up for this host, reusing controller")
        return existing

    zoom_config = config if isinstance(config, ZoomConfig) else ZoomConfig.from_dict(config)
    controller = ZoomController(host, get_strategy(zoom_config, host))

    if zoom_config.toggle_key:
        host.register_keybinding(
            zoom_config.toggle_key, controller.toggle, TOGGLE_COMMAND_DESCRIPTION
        )
    host.register_command(TOGGLE_COMMAND_NAME, controller.toggle, TOGGLE_COMMAND_DESCRIPTION)

    _loaded[host] = controller
    logger.info(
        f"winzoom ready: strategy={controller.strategy.name}, "
        f"toggle={zoom_config.toggle_key or 'unbound'}"
    )
    return controller


def get_controller(host: WindowHost) -> Optional[ZoomController]:
    """Return the controller set up for ``host``, if any."""
    return _loaded.get(host)
