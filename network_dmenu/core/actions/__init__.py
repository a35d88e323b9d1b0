"""Menu action variants.

Every action renders the exact line shown by the launcher; the registry maps
a selected line back to its action by comparing against ``display``.
"""

from .base import Action
from .bluetooth import BluetoothToggle, extract_device_address
from .custom import CustomShellAction
from .system import SystemKind, SystemToggle
from .tailscale import ExitNode, TailscaleControl, TailscaleKind, exit_node_action, extract_node_ip
from .wifi import IWD, NETWORKMANAGER, WifiNetwork, WifiToggle, split_network_display

__all__ = [
    "Action",
    "BluetoothToggle",
    "CustomShellAction",
    "ExitNode",
    "IWD",
    "NETWORKMANAGER",
    "SystemKind",
    "SystemToggle",
    "TailscaleControl",
    "TailscaleKind",
    "WifiNetwork",
    "WifiToggle",
    "exit_node_action",
    "extract_device_address",
    "extract_node_ip",
    "split_network_display",
]
