"""Desktop notifications and the Mullvad connectivity check."""
from __future__ import annotations

import logging

import requests

from ..utils import cmd_runner

logger = logging.getLogger(__name__)

APP_NAME = "network-dmenu"
MULLVAD_CHECK_URL = "https://am.i.mullvad.net/connected"


def notify(summary: str, body: str) -> bool:
    """Show a desktop notification via notify-send."""
    if not cmd_runner.is_command_installed("notify-send"):
        logger.info(f"{summary}: {body}")
        return False
    return cmd_runner.execute_command(
        "notify-send", ["-a", APP_NAME, summary, body], neutral_locale=False
    )


def notify_connection(ssid: str) -> bool:
    return notify("Wi-Fi", f"Connected to {ssid}")


def check_mullvad(timeout: float = 10.0) -> bool:
    """Ask Mullvad whether traffic leaves through its network and show the answer.

    Purely informational: HTTP failures are logged and reported as False.
    """
    try:
        response = requests.get(MULLVAD_CHECK_URL, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        logger.warning(f"Mullvad connectivity check failed: {e}")
        return False
    return notify("Connected Status", response.text.strip())
