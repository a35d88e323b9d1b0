"""network-dmenu - one launcher menu for Wi-Fi, Bluetooth and Tailscale."""

from .core.config import NetworkDmenuConfig, load_config
from .core.dispatcher import ActionDispatcher
from .core.registry import Capabilities, MenuSession, SelectionNotFoundError, build_actions

__version__ = "1.0.0"
__all__ = [
    "ActionDispatcher",
    "Capabilities",
    "MenuSession",
    "NetworkDmenuConfig",
    "SelectionNotFoundError",
    "build_actions",
    "load_config",
]
