"""iwd backend driven through ``iwctl``.

``iwctl station <iface> get-networks`` prints a banner, a header block and then
one coloured row per network. The connected network is prefixed with ``>``.
"""
from __future__ import annotations

import logging
import re
from typing import Callable, List, Optional

from ...utils import cmd_runner
from ...utils.formatting import convert_network_strength
from ...utils.output import decode_lines, strip_ansi
from ..actions.wifi import IWD, WifiNetwork, split_network_display
from .connect import connect_network
from .password import prompt_for_password

logger = logging.getLogger(__name__)

NETWORKS_BANNER = "Available networks"
# separator, column header, separator
HEADER_LINES_AFTER_BANNER = 3


def fetch_iwd_networks(interface: str) -> Optional[List[str]]:
    output = cmd_runner.run_command("iwctl", ["station", interface, "get-networks"])
    if not output.exit_success:
        return None

    lines = decode_lines(output.stdout)
    for index, line in enumerate(lines):
        if NETWORKS_BANNER in line:
            return lines[index + 1 + HEADER_LINES_AFTER_BANNER:]
    return []


def parse_iwd_line(line: str) -> Optional[WifiNetwork]:
    parts = strip_ansi(line).split()
    if len(parts) < 3:
        return None
    connected = parts[0] == ">"
    ssid = " ".join(parts[1 if connected else 0:-2])
    if not ssid:
        return None
    return WifiNetwork(
        ssid=ssid,
        security=parts[-2].upper(),
        signal=convert_network_strength(parts[-1]),
        connected=connected,
        backend=IWD,
    )


def parse_iwd_networks(lines: List[str]) -> List[WifiNetwork]:
    networks = []
    for line in lines:
        network = parse_iwd_line(line)
        if network is not None:
            networks.append(network)
    return networks


def get_iwd_networks(interface: str) -> List[WifiNetwork]:
    """List scanned networks, rescanning once when none is connected."""
    lines = fetch_iwd_networks(interface)
    if lines is None:
        return []

    if not any(strip_ansi(line).lstrip().startswith(">") for line in lines):
        rescan = cmd_runner.run_command("iwctl", ["station", interface, "scan"])
        if rescan.exit_success:
            lines = fetch_iwd_networks(interface) or lines
        else:
            logger.warning(f"iwctl scan on {interface} failed, using the cached scan results")

    networks = parse_iwd_networks(lines)
    logger.debug(f"iwctl reported {len(networks)} networks on {interface}")
    return networks


def is_iwd_connected(interface: str) -> bool:
    output = cmd_runner.run_command("iwctl", ["station", interface, "show"])
    if not output.exit_success:
        return False
    for line in decode_lines(output.stdout):
        parts = strip_ansi(line).split()
        if len(parts) >= 2 and parts[0] == "State":
            return parts[-1] == "connected"
    return False


def is_known_network(ssid: str) -> bool:
    output = cmd_runner.run_command("iwctl", ["known-networks", "list"])
    if not output.exit_success:
        return False
    pattern = re.compile(rf"\b{re.escape(ssid)}\b")
    return any(pattern.search(strip_ansi(line)) for line in decode_lines(output.stdout))


def attempt_connection(interface: str, ssid: str, passphrase: Optional[str] = None) -> bool:
    args = ["station", interface, "connect", ssid]
    if passphrase is not None:
        args += ["--passphrase", passphrase]
    if cmd_runner.execute_command("iwctl", args):
        return True
    logger.warning(f"Failed to connect to Wi-Fi network: {ssid}")
    return False


def connect_to_iwd_wifi(
    interface: str,
    display: str,
    prompt: Callable[[str], Optional[str]] = prompt_for_password,
) -> bool:
    """Connect ``interface`` to the network a selected display line stands for."""
    parsed = split_network_display(display)
    if parsed is None:
        return False
    ssid, security = parsed
    return connect_network(
        ssid,
        security,
        is_known_network(ssid),
        lambda name, passphrase: attempt_connection(interface, name, passphrase),
        prompt,
    )


def disconnect_iwd_wifi(interface: str) -> bool:
    return cmd_runner.execute_command("iwctl", ["station", interface, "disconnect"])
