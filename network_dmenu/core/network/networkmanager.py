"""NetworkManager backend driven through ``nmcli``.

Scan results come from the terse (``-t``) listing, one network per line with
colon-separated ``IN-USE:SSID:BARS:SECURITY`` fields. nmcli escapes literal
colons inside a field as ``\\:``.
"""
from __future__ import annotations

import logging
import re
from typing import Callable, List, Optional

from ...utils import cmd_runner
from ...utils.formatting import convert_network_strength
from ...utils.output import decode_lines
from ..actions.wifi import NETWORKMANAGER, WifiNetwork, split_network_display
from .connect import connect_network
from .password import prompt_for_password

logger = logging.getLogger(__name__)

WIFI_LIST_ARGS = ["-t", "-f", "IN-USE,SSID,BARS,SECURITY", "device", "wifi"]
RESCAN_ARGS = ["dev", "wifi", "list", "--rescan", "auto"]

_FIELD_SEPARATOR_RE = re.compile(r"(?<!\\):")


def split_terse_line(line: str) -> List[str]:
    """Split one ``nmcli -t`` line into its unescaped fields."""
    return [
        field.replace("\\:", ":").replace("\\\\", "\\")
        for field in _FIELD_SEPARATOR_RE.split(line)
    ]


def fetch_wifi_lines() -> Optional[List[str]]:
    output = cmd_runner.run_command("nmcli", WIFI_LIST_ARGS)
    if not output.exit_success:
        return None
    return decode_lines(output.stdout)


def parse_wifi_line(line: str) -> Optional[WifiNetwork]:
    parts = split_terse_line(line)
    if len(parts) != 4:
        return None
    in_use, ssid, bars, security = (part.strip() for part in parts)
    if not ssid:
        return None
    return WifiNetwork(
        ssid=ssid,
        security=security.upper(),
        signal=convert_network_strength(bars),
        connected=in_use == "*",
        backend=NETWORKMANAGER,
    )


def parse_wifi_lines(lines: List[str]) -> List[WifiNetwork]:
    networks = []
    for line in lines:
        network = parse_wifi_line(line)
        if network is not None:
            networks.append(network)
    return networks


def get_nm_wifi_networks() -> List[WifiNetwork]:
    """List scanned networks, rescanning once when none is in use."""
    lines = fetch_wifi_lines()
    if lines is None:
        return []

    if not any(line.startswith("*") for line in lines):
        rescan = cmd_runner.run_command("nmcli", RESCAN_ARGS)
        if rescan.exit_success:
            lines = fetch_wifi_lines() or lines
        else:
            logger.warning("nmcli rescan failed, using the cached scan results")

    networks = parse_wifi_lines(lines)
    logger.debug(f"nmcli reported {len(networks)} networks")
    return networks


def is_nm_connected(interface: str) -> bool:
    output = cmd_runner.run_command("nmcli", ["-t", "-f", "DEVICE,STATE", "device", "status"])
    if not output.exit_success:
        return False
    for line in decode_lines(output.stdout):
        parts = split_terse_line(line)
        if len(parts) >= 2 and parts[0] == interface:
            return parts[1] == "connected"
    return False


def is_known_network(ssid: str) -> bool:
    """True when ``ssid`` already has a saved connection profile."""
    output = cmd_runner.run_command("nmcli", ["-t", "-f", "NAME", "connection", "show"])
    if not output.exit_success:
        return False
    return any(
        split_terse_line(line)[0] == ssid for line in decode_lines(output.stdout)
    )


def attempt_connection(ssid: str, password: Optional[str] = None) -> bool:
    args = ["device", "wifi", "connect", ssid]
    if password is not None:
        args += ["password", password]
    if cmd_runner.execute_command("nmcli", args):
        return True
    logger.warning(f"Failed to connect to Wi-Fi network: {ssid}")
    return False


def connect_to_nm_wifi(
    display: str,
    prompt: Callable[[str], Optional[str]] = prompt_for_password,
) -> bool:
    """Connect to the network a selected display line stands for."""
    parsed = split_network_display(display)
    if parsed is None:
        return False
    ssid, security = parsed
    return connect_network(ssid, security, is_known_network(ssid), attempt_connection, prompt)


def disconnect_nm_wifi(interface: str) -> bool:
    return cmd_runner.execute_command("nmcli", ["device", "disconnect", interface])


def connect_nm_device(interface: str) -> bool:
    return cmd_runner.execute_command("nmcli", ["device", "connect", interface])
