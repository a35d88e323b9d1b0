"""Tailscale status and exit nodes, including Mullvad-hosted ones.

``tailscale exit-node list`` prints aligned columns (IP, hostname, country,
city, status) separated by runs of two or more spaces. Country names may
contain single spaces, so single spaces never split a column.
"""
from __future__ import annotations

import json
import logging
import re
from typing import List, Optional

from ..utils import cmd_runner
from ..utils.output import decode_lines
from .actions.tailscale import (
    ExitNode,
    TailscaleControl,
    exit_node_action,
    extract_node_ip,
)

logger = logging.getLogger(__name__)

COLUMN_SEPARATOR_RE = re.compile(r"\s{2,}")

MULLVAD_DOMAIN = "mullvad.ts.net"
TAILNET_DOMAIN = "ts.net"


def get_active_exit_node() -> str:
    """DNS name (without trailing dot) of the peer in use as exit node."""
    output = cmd_runner.run_command("tailscale", ["status", "--json"])
    if not output.exit_success:
        return ""
    try:
        status = json.loads(output.stdout.decode("utf-8", errors="replace"))
    except json.JSONDecodeError as e:
        logger.warning(f"Unreadable tailscale status JSON: {e}")
        return ""

    peers = status.get("Peer") if isinstance(status, dict) else None
    if not isinstance(peers, dict):
        return ""
    for peer in peers.values():
        if not isinstance(peer, dict):
            continue
        if peer.get("Active") is True and peer.get("ExitNode") is True:
            dns_name = peer.get("DNSName")
            if isinstance(dns_name, str):
                return dns_name.rstrip(".")
    return ""


def parse_exit_node_line(line: str, active_exit_node: str = "") -> Optional[ExitNode]:
    parts = [part.strip() for part in COLUMN_SEPARATOR_RE.split(line.strip())]
    if len(parts) < 2 or not parts[0] or not parts[1]:
        return None
    columns = parts + [""] * (5 - len(parts))
    ip, hostname, country, city, status = columns[:5]
    return ExitNode(
        ip=ip,
        hostname=hostname,
        country=country,
        city=city,
        status=status,
        active=hostname == active_exit_node,
    )


def parse_exit_node_lines(lines: List[str], active_exit_node: str = "") -> List[TailscaleControl]:
    """Build exit-node actions, Mullvad nodes first, sorted by category."""
    mullvad_lines = [line for line in lines if MULLVAD_DOMAIN in line]
    tailnet_lines = [
        line for line in lines if TAILNET_DOMAIN in line and MULLVAD_DOMAIN not in line
    ]

    actions = []
    for line in mullvad_lines + tailnet_lines:
        node = parse_exit_node_line(line, active_exit_node)
        if node is not None:
            actions.append(exit_node_action(node))

    actions.sort(key=lambda action: action.display.split()[0])
    return actions


def get_mullvad_actions() -> List[TailscaleControl]:
    output = cmd_runner.run_command("tailscale", ["exit-node", "list"])
    active_exit_node = get_active_exit_node()
    if not output.exit_success:
        return []
    actions = parse_exit_node_lines(decode_lines(output.stdout), active_exit_node)
    logger.debug(f"tailscale reported {len(actions)} exit nodes")
    return actions


def is_exit_node_active() -> bool:
    output = cmd_runner.run_command("tailscale", ["status"])
    if not output.exit_success:
        return False
    return any("active; exit node;" in line for line in decode_lines(output.stdout))


def is_tailscale_enabled() -> bool:
    output = cmd_runner.run_command("tailscale", ["status"])
    if not output.exit_success:
        return False
    return "Tailscale is stopped" not in output.stdout.decode("utf-8", errors="replace")


def set_exit_node(display: str) -> bool:
    """Route traffic through the exit node named by a selected display line."""
    node_ip = extract_node_ip(display)
    if node_ip is None:
        return False
    logger.info(f"Exit-node ip address: {node_ip}")

    if not cmd_runner.execute_command("tailscale", ["up"]):
        return False
    return cmd_runner.execute_command(
        "tailscale",
        ["set", "--exit-node", node_ip, "--exit-node-allow-lan-access=true"],
    )


def disable_exit_node() -> bool:
    return cmd_runner.execute_command("tailscale", ["set", "--exit-node="])


def set_enabled(enable: bool) -> bool:
    return cmd_runner.execute_command("tailscale", ["up" if enable else "down"])


def set_shields(enable: bool) -> bool:
    return cmd_runner.execute_command(
        "tailscale", ["set", f"--shields-up={'true' if enable else 'false'}"]
    )
