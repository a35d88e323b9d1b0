"""Connect-or-prompt policy shared by the Wi-Fi backends."""
from __future__ import annotations

import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)

OPEN_SECURITY = ("", "--", "OPEN")

Attempt = Callable[[str, Optional[str]], bool]
Prompt = Callable[[str], Optional[str]]


def is_open_security(security: str) -> bool:
    return security.strip().upper() in OPEN_SECURITY


def connect_network(
    ssid: str,
    security: str,
    known: bool,
    attempt: Attempt,
    prompt: Prompt,
) -> bool:
    """Connect to ``ssid`` with at most one password retry.

    Known or open networks get one attempt without a password. If that fails
    on a secured network the saved credentials are assumed stale, so the user
    is prompted once and a single attempt with the password follows. Unknown
    secured networks go straight to the prompt.
    """
    open_network = is_open_security(security)
    if known or open_network:
        if attempt(ssid, None):
            return True
        if open_network:
            return False
        logger.info(f"Saved credentials for {ssid} were rejected, asking for a password")

    password = prompt(ssid)
    if password is None:
        return False
    return attempt(ssid, password)
