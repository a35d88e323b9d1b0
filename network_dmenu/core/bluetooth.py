"""Bluetooth paired devices via ``bluetoothctl``."""
from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional

from ..utils import cmd_runner
from ..utils.output import decode_lines
from .actions.bluetooth import BluetoothToggle, extract_device_address

logger = logging.getLogger(__name__)

DEVICE_LINE_RE = re.compile(r"([0-9A-Fa-f]{2}(?::[0-9A-Fa-f]{2}){5})\s+(.*)")


def get_connected_devices() -> List[str]:
    """MAC addresses of the currently connected devices."""
    output = cmd_runner.run_command("bluetoothctl", ["info"])
    if not output.exit_success:
        return []
    addresses = []
    for line in decode_lines(output.stdout):
        if not line.startswith("Device "):
            continue
        parts = line.split()
        if len(parts) >= 2:
            addresses.append(parts[1])
    return addresses


def parse_bluetooth_device(line: str, connected_devices: Iterable[str]) -> Optional[BluetoothToggle]:
    match = DEVICE_LINE_RE.search(line)
    if not match:
        return None
    address, name = match.group(1), match.group(2).strip()
    if not name:
        return None
    return BluetoothToggle(name=name, mac=address, connected=address in connected_devices)


def parse_bluetooth_devices(lines: List[str], connected_devices: Iterable[str]) -> List[BluetoothToggle]:
    connected = set(connected_devices)
    devices = []
    for line in lines:
        device = parse_bluetooth_device(line, connected)
        if device is not None:
            devices.append(device)
    return devices


def get_paired_bluetooth_devices(connected_devices: Optional[List[str]] = None) -> List[BluetoothToggle]:
    if connected_devices is None:
        connected_devices = get_connected_devices()
    output = cmd_runner.run_command("bluetoothctl", ["devices"])
    if not output.exit_success:
        logger.warning("bluetoothctl devices failed, no paired devices listed")
        return []
    devices = parse_bluetooth_devices(decode_lines(output.stdout), connected_devices)
    logger.debug(f"bluetoothctl reported {len(devices)} paired devices")
    return devices


def toggle_bluetooth_device(display: str, connected_devices: Iterable[str]) -> bool:
    """Connect or disconnect the device named by a selected display line.

    The decision uses the connected set captured when the menu was built.
    """
    address = extract_device_address(display)
    if address is None:
        return False
    command = "disconnect" if address in set(connected_devices) else "connect"
    logger.info(f"bluetoothctl {command} {address}")
    if cmd_runner.execute_command("bluetoothctl", [command, address]):
        return True
    logger.warning(f"Failed to {command} Bluetooth device: {address}")
    return False
