"""Runs the dmenu-style launcher and returns what the user picked."""
from __future__ import annotations

import logging
from typing import Iterable, Sequence

from ..utils import cmd_runner

logger = logging.getLogger(__name__)


def launch_menu(dmenu_cmd: str, dmenu_args: Sequence[str], entries: Iterable[str]) -> str:
    """Feed ``entries`` on stdin, one per line, and return the trimmed choice.

    An empty string means the menu was dismissed.
    """
    result = cmd_runner.run(
        [dmenu_cmd, *dmenu_args],
        input="\n".join(entries),
        capture_output=True,
        text=True,
        check=False,
    )
    selection = (result.stdout or "").strip()
    logger.debug(f"{dmenu_cmd} returned {result.returncode} with selection {selection!r}")
    return selection
