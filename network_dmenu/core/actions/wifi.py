"""Wi-Fi actions and the reversal of their display strings."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from ...utils.formatting import (
    AVAILABLE_ICON,
    CONNECTED_ICON,
    DISABLED_ICON,
    format_entry,
)
from .base import Action

# Backends a network entry can come from
NETWORKMANAGER = "networkmanager"
IWD = "iwd"


@dataclass(frozen=True)
class WifiNetwork(Action):
    """One scanned network.

    The display text keeps SSID, security and signal in tab-separated
    columns so they can be split back out of the selected line.
    """

    ssid: str
    security: str
    signal: str
    connected: bool = False
    backend: str = NETWORKMANAGER
    category: str = "wifi"

    @property
    def display(self) -> str:
        icon = CONNECTED_ICON if self.connected else AVAILABLE_ICON
        return format_entry(self.category, icon, f"{self.ssid}\t{self.security}\t{self.signal}")


@dataclass(frozen=True)
class WifiToggle(Action):
    """Bring the wireless device up (connect) or down (disconnect)."""

    connect: bool
    category: str = "wifi"

    @property
    def display(self) -> str:
        if self.connect:
            return format_entry(self.category, AVAILABLE_ICON, "Connect")
        return format_entry(self.category, DISABLED_ICON, "Disconnect")


def split_network_display(display: str) -> Optional[Tuple[str, str]]:
    """Recover ``(ssid, security)`` from a rendered ``WifiNetwork`` line.

    The line must start with the category column and status glyph exactly as
    ``format_entry`` lays them out; the SSID runs from there to the first tab
    and the security is the next tab-separated field. Returns None for lines
    that were not produced by ``WifiNetwork.display``.
    """
    for icon in (CONNECTED_ICON, AVAILABLE_ICON):
        prefix = format_entry(WifiNetwork.category, icon, "")
        if not display.startswith(prefix):
            continue
        columns = display[len(prefix):].split("\t")
        if len(columns) < 3 or not columns[0]:
            return None
        return columns[0], columns[1]
    return None
