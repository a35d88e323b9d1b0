"""Builds the menu entries and maps a selected line back to its action.

All tool queries for one menu happen here, once, at build time. The
resulting ``MenuSession`` keeps the actions in presentation order together
with the Bluetooth connected set captured alongside them.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from ..utils import cmd_runner
from . import bluetooth, tailscale
from .actions import (
    Action,
    SystemKind,
    SystemToggle,
    TailscaleControl,
    TailscaleKind,
    WifiToggle,
)
from .config import NetworkDmenuConfig
from .network import iwd, networkmanager

logger = logging.getLogger(__name__)


class SelectionNotFoundError(LookupError):
    """The selected text matches no action built for this menu."""


@dataclass(frozen=True)
class Capabilities:
    """Which external tools are available on this machine."""

    nmcli: bool = False
    iwctl: bool = False
    bluetoothctl: bool = False
    tailscale: bool = False
    rfkill: bool = False
    nm_connection_editor: bool = False

    @classmethod
    def detect(cls, is_installed: Optional[Callable[[str], bool]] = None) -> "Capabilities":
        is_installed = is_installed or cmd_runner.is_command_installed
        return cls(
            nmcli=is_installed("nmcli"),
            iwctl=is_installed("iwctl"),
            bluetoothctl=is_installed("bluetoothctl"),
            tailscale=is_installed("tailscale"),
            rfkill=is_installed("rfkill"),
            nm_connection_editor=is_installed("nm-connection-editor"),
        )


@dataclass
class MenuSession:
    actions: List[Action]
    connected_devices: List[str] = field(default_factory=list)

    def entries(self) -> List[str]:
        return [action.display for action in self.actions]

    def resolve(self, selection: str) -> Action:
        """Return the first action whose display equals ``selection``."""
        for action in self.actions:
            if action.display == selection:
                return action
        raise SelectionNotFoundError(f"Selected action not found: {selection!r}")


def build_actions(
    config: NetworkDmenuConfig,
    capabilities: Capabilities,
    wifi_interface: str,
) -> MenuSession:
    actions: List[Action] = list(config.actions)
    connected_devices: List[str] = []

    if capabilities.tailscale and tailscale.is_exit_node_active():
        actions.append(TailscaleControl(kind=TailscaleKind.DISABLE_EXIT_NODE))

    if capabilities.nmcli:
        actions.extend(networkmanager.get_nm_wifi_networks())
        actions.append(WifiToggle(connect=not networkmanager.is_nm_connected(wifi_interface)))
    elif capabilities.iwctl:
        actions.extend(iwd.get_iwd_networks(wifi_interface))
        if iwd.is_iwd_connected(wifi_interface):
            actions.append(WifiToggle(connect=False))

    if capabilities.rfkill:
        actions.append(SystemToggle(kind=SystemKind.RFKILL_BLOCK))
        actions.append(SystemToggle(kind=SystemKind.RFKILL_UNBLOCK))

    if capabilities.nm_connection_editor:
        actions.append(SystemToggle(kind=SystemKind.EDIT_CONNECTIONS))

    if capabilities.tailscale:
        actions.append(
            TailscaleControl(kind=TailscaleKind.SET_ENABLE, enable=not tailscale.is_tailscale_enabled())
        )
        actions.append(TailscaleControl(kind=TailscaleKind.SET_SHIELDS, enable=False))
        actions.append(TailscaleControl(kind=TailscaleKind.SET_SHIELDS, enable=True))
        actions.extend(tailscale.get_mullvad_actions())

    if capabilities.bluetoothctl:
        connected_devices = bluetooth.get_connected_devices()
        actions.extend(bluetooth.get_paired_bluetooth_devices(connected_devices))

    logger.debug(f"Built {len(actions)} menu entries")
    return MenuSession(actions=actions, connected_devices=connected_devices)
