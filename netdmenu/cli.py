"""network-dmenu command line.

Without a subcommand the launcher menu is shown: the actions are collected
from the installed tools, the user's pick is mapped back to its action and
the action is run. ``list`` and ``status`` print what would be offered.
"""
from __future__ import annotations

import argparse
import json
import logging
import os
from pathlib import Path
from typing import Iterable, Optional

from rich.console import Console
from rich.table import Table

from network_dmenu.core.config import NetworkDmenuConfig, load_config
from network_dmenu.core.dispatcher import ActionDispatcher
from network_dmenu.core.launcher import launch_menu
from network_dmenu.core.registry import Capabilities, SelectionNotFoundError, build_actions
from network_dmenu.utils.cmd_runner import is_command_installed

logger = logging.getLogger(__name__)

console = Console(stderr=True)

DEFAULT_WIFI_INTERFACE = "wlan0"


def _load(config_path: Optional[str]) -> NetworkDmenuConfig:
    return load_config(Path(config_path) if config_path else None)


def cmd_menu(config_path: Optional[str], wifi_interface: str) -> int:
    try:
        config = _load(config_path)
        dmenu_cmd = config.dmenu_cmd
    except (ValueError, KeyError) as e:
        console.print(f"[red]Invalid configuration: {e}[/red]")
        return 2

    missing = [cmd for cmd in (config.pinentry_cmd, dmenu_cmd) if not is_command_installed(cmd)]
    if missing:
        console.print(f"[red]Missing required tools: {', '.join(missing)}[/red]")
        return 1

    capabilities = Capabilities.detect()
    session = build_actions(config, capabilities, wifi_interface)

    selection = launch_menu(dmenu_cmd, config.dmenu_args, session.entries())
    if not selection:
        return 0

    try:
        action = session.resolve(selection)
    except SelectionNotFoundError as e:
        console.print(f"[red]{e}[/red]")
        return 2

    dispatcher = ActionDispatcher(
        wifi_interface,
        capabilities,
        connected_devices=session.connected_devices,
        pinentry_cmd=config.pinentry_cmd,
        check_mullvad=config.check_mullvad,
    )
    if dispatcher.dispatch(action):
        logger.info(f"Action succeeded: {selection}")
        return 0
    console.print(f"[red]Action failed: {selection}[/red]")
    return 1


def cmd_list(config_path: Optional[str], wifi_interface: str, output_json: bool) -> int:
    try:
        config = _load(config_path)
    except (ValueError, KeyError) as e:
        console.print(f"[red]Invalid configuration: {e}[/red]")
        return 2

    session = build_actions(config, Capabilities.detect(), wifi_interface)

    if output_json:
        rows = [{"category": action.category, "display": action.display} for action in session.actions]
        print(json.dumps(rows, ensure_ascii=False, indent=2))
        return 0

    table = Table(title="network-dmenu entries")
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Entry", style="white")
    for index, entry in enumerate(session.entries(), 1):
        table.add_row(str(index), entry.replace("\t", "  "))
    Console().print(table)
    return 0


def cmd_status() -> int:
    capabilities = Capabilities.detect()
    table = Table(title="Detected tools")
    table.add_column("Tool", style="cyan")
    table.add_column("Available")
    for tool, available in (
        ("nmcli", capabilities.nmcli),
        ("iwctl", capabilities.iwctl),
        ("bluetoothctl", capabilities.bluetoothctl),
        ("tailscale", capabilities.tailscale),
        ("rfkill", capabilities.rfkill),
        ("nm-connection-editor", capabilities.nm_connection_editor),
    ):
        table.add_row(tool, "[green]yes[/green]" if available else "[red]no[/red]")
    Console().print(table)
    return 0


# ---------------------------------------------------------------------------
# CLI entrypoint
# ---------------------------------------------------------------------------
def main(argv: Iterable[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Network menu for dmenu-style launchers")
    parser.add_argument(
        "-w", "--wifi-interface",
        default=os.environ.get("NETWORK_DMENU_WIFI_IF", DEFAULT_WIFI_INTERFACE),
        help="Wi-Fi interface name (default: wlan0 or NETWORK_DMENU_WIFI_IF)",
    )
    parser.add_argument("--config", help="Path to config.yaml (default: ~/.config/network-dmenu/config.yaml)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("menu", help="Show the launcher menu and run the selected action (default)")
    p_list = sub.add_parser("list", help="Print the menu entries without launching the menu")
    p_list.add_argument("--json", action="store_true", help="Output JSON")
    sub.add_parser("status", help="Show which external tools were detected")

    args = parser.parse_args(list(argv) if argv is not None else None)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        if args.command == "status":
            return cmd_status()
        if args.command == "list":
            return cmd_list(args.config, args.wifi_interface, bool(getattr(args, "json", False)))
        return cmd_menu(args.config, args.wifi_interface)
    except OSError as e:
        console.print(f"[red]Failed to run command: {e}[/red]")
        return 1
