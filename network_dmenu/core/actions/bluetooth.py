"""Bluetooth device toggle."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from ...utils.formatting import CONNECTED_ICON, format_entry
from .base import Action

MAC_ADDRESS_RE = re.compile(r"([0-9A-Fa-f]{2}(?::[0-9A-Fa-f]{2}){5})$")


@dataclass(frozen=True)
class BluetoothToggle(Action):
    """A paired device; selecting it connects or disconnects it."""

    name: str
    mac: str
    connected: bool = False
    category: str = "bluetooth"

    @property
    def display(self) -> str:
        return format_entry(
            self.category,
            CONNECTED_ICON if self.connected else " ",
            f"{self.name:<25} - {self.mac}",
        )


def extract_device_address(display: str) -> Optional[str]:
    """Return the trailing MAC address of a rendered device line."""
    match = MAC_ADDRESS_RE.search(display)
    return match.group(1) if match else None
