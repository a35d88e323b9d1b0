"""Tailscale controls and exit nodes."""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ...utils.formatting import (
    CONNECTED_ICON,
    DISABLED_ICON,
    EXIT_NODE_ICON,
    SHIELD_ICON,
    format_entry,
    get_flag,
)
from .base import Action

NODE_IP_RE = re.compile(r"\b\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}\b")


class TailscaleKind(Enum):
    DISABLE_EXIT_NODE = "disable-exit-node"
    SET_ENABLE = "set-enable"
    SET_EXIT_NODE = "set-exit-node"
    SET_SHIELDS = "set-shields"


@dataclass(frozen=True)
class ExitNode:
    """One row of ``tailscale exit-node list``."""

    ip: str
    hostname: str
    country: str = ""
    city: str = ""
    status: str = ""
    active: bool = False

    @property
    def is_mullvad(self) -> bool:
        return "mullvad.ts.net" in self.hostname

    @property
    def short_name(self) -> str:
        return self.hostname.split(".", 1)[0]

    @property
    def display(self) -> str:
        if self.is_mullvad:
            icon = CONNECTED_ICON if self.active else get_flag(self.country)
            return format_entry(
                "mullvad", icon, f"{self.country:<15} - {self.ip:<16} {self.hostname}"
            )
        icon = CONNECTED_ICON if self.active else EXIT_NODE_ICON
        return format_entry(
            "exit-node", icon, f"{self.short_name:<15} - {self.ip:<16} {self.hostname}"
        )


@dataclass(frozen=True)
class TailscaleControl(Action):
    kind: TailscaleKind
    enable: bool = False
    node: Optional[ExitNode] = None
    category: str = "tailscale"

    @property
    def display(self) -> str:
        if self.kind is TailscaleKind.SET_EXIT_NODE:
            return self.node.display
        if self.kind is TailscaleKind.DISABLE_EXIT_NODE:
            return format_entry(self.category, DISABLED_ICON, "Disable exit node")
        if self.kind is TailscaleKind.SET_ENABLE:
            if self.enable:
                return format_entry(self.category, CONNECTED_ICON, "Enable tailscale")
            return format_entry(self.category, DISABLED_ICON, "Disable tailscale")
        return format_entry(
            self.category, SHIELD_ICON, "Shields up" if self.enable else "Shields down"
        )


def exit_node_action(node: ExitNode) -> TailscaleControl:
    return TailscaleControl(kind=TailscaleKind.SET_EXIT_NODE, node=node)


def extract_node_ip(display: str) -> Optional[str]:
    """Return the first IPv4 address embedded in a rendered exit-node line."""
    match = NODE_IP_RE.search(display)
    return match.group(0) if match else None
