"""Runs the command sequence behind a selected action."""
from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from ..utils import cmd_runner
from . import bluetooth, notify, tailscale
from .actions import (
    IWD,
    Action,
    BluetoothToggle,
    CustomShellAction,
    SystemKind,
    SystemToggle,
    TailscaleControl,
    TailscaleKind,
    WifiNetwork,
    WifiToggle,
    split_network_display,
)
from .network import iwd, networkmanager
from .network.password import DEFAULT_PINENTRY, prompt_for_password
from .registry import Capabilities

logger = logging.getLogger(__name__)


class ActionDispatcher:
    """Dispatch a resolved action; every handler reports success as a bool."""

    def __init__(
        self,
        wifi_interface: str,
        capabilities: Capabilities,
        connected_devices: Iterable[str] = (),
        pinentry_cmd: str = DEFAULT_PINENTRY,
        check_mullvad: bool = True,
        prompt: Optional[Callable[[str], Optional[str]]] = None,
    ):
        self.wifi_interface = wifi_interface
        self.capabilities = capabilities
        self.connected_devices = list(connected_devices)
        self.check_mullvad = check_mullvad
        self.prompt = prompt or (lambda ssid: prompt_for_password(ssid, pinentry_cmd))

    def dispatch(self, action: Action) -> bool:
        if isinstance(action, CustomShellAction):
            return self._handle_custom(action)
        if isinstance(action, SystemToggle):
            return self._handle_system(action)
        if isinstance(action, TailscaleControl):
            return self._handle_tailscale(action)
        if isinstance(action, WifiNetwork):
            return self._handle_wifi_network(action)
        if isinstance(action, WifiToggle):
            return self._handle_wifi_toggle(action)
        if isinstance(action, BluetoothToggle):
            return bluetooth.toggle_bluetooth_device(action.display, self.connected_devices)
        raise TypeError(f"Unsupported action type: {type(action).__name__}")

    def _handle_custom(self, action: CustomShellAction) -> bool:
        logger.info(f"Running custom action: {action.label}")
        return cmd_runner.execute_command("sh", ["-c", action.cmd], quiet=False, neutral_locale=False)

    def _handle_system(self, action: SystemToggle) -> bool:
        if action.kind is SystemKind.RFKILL_BLOCK:
            return cmd_runner.execute_command("rfkill", ["block", "wlan"])
        if action.kind is SystemKind.RFKILL_UNBLOCK:
            return cmd_runner.execute_command("rfkill", ["unblock", "wlan"])
        return cmd_runner.execute_command("nm-connection-editor", quiet=False, neutral_locale=False)

    def _handle_tailscale(self, action: TailscaleControl) -> bool:
        if not self.capabilities.tailscale:
            return False
        if action.kind is TailscaleKind.DISABLE_EXIT_NODE:
            success = tailscale.disable_exit_node()
            self._report_exit()
            return success
        if action.kind is TailscaleKind.SET_ENABLE:
            return tailscale.set_enabled(action.enable)
        if action.kind is TailscaleKind.SET_SHIELDS:
            return tailscale.set_shields(action.enable)
        success = tailscale.set_exit_node(action.display)
        self._report_exit()
        return success

    def _handle_wifi_network(self, action: WifiNetwork) -> bool:
        display = action.display
        if action.backend == IWD:
            success = iwd.connect_to_iwd_wifi(self.wifi_interface, display, self.prompt)
        else:
            success = networkmanager.connect_to_nm_wifi(display, self.prompt)
        if success:
            ssid, _ = split_network_display(display)
            notify.notify_connection(ssid)
        self._report_exit()
        return success

    def _handle_wifi_toggle(self, action: WifiToggle) -> bool:
        if action.connect:
            success = networkmanager.connect_nm_device(self.wifi_interface)
            self._report_exit()
            return success
        if self.capabilities.nmcli:
            return networkmanager.disconnect_nm_wifi(self.wifi_interface)
        return iwd.disconnect_iwd_wifi(self.wifi_interface)

    def _report_exit(self) -> None:
        if self.check_mullvad and self.capabilities.tailscale:
            notify.check_mullvad()
