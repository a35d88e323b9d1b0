"""Password prompt through pinentry."""
from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import unquote

from ...utils import cmd_runner
from ...utils.output import decode_lines

logger = logging.getLogger(__name__)

DEFAULT_PINENTRY = "pinentry-gnome3"


def prompt_for_password(ssid: str, pinentry_cmd: str = DEFAULT_PINENTRY) -> Optional[str]:
    """Ask for the passphrase of ``ssid``.

    pinentry answers a GETPIN with a ``D <secret>`` data line in which
    ``%``, CR and LF are percent-escaped. Returns None when the dialog was
    cancelled or produced no data line.
    """
    script = f"SETDESC Enter '{ssid}' password\nGETPIN\n".encode("utf-8")
    output = cmd_runner.run_command(pinentry_cmd, input=script, neutral_locale=False)
    for line in decode_lines(output.stdout):
        if line.startswith("D "):
            return unquote(line[2:])
    logger.info(f"No password entered for {ssid}")
    return None
