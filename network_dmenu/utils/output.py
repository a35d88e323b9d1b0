"""Helpers for turning captured tool output into text lines."""
from __future__ import annotations

import re
from typing import List, Union

# ANSI SGR / CSI sequences (iwctl colours its columns)
ANSI_ESCAPE_RE = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")


def decode_lines(stdout: Union[bytes, str]) -> List[str]:
    """Split captured stdout into lines, in order.

    Invalid UTF-8 is replaced rather than raised so a single odd SSID does not
    hide the rest of the listing.
    """
    if isinstance(stdout, bytes):
        stdout = stdout.decode("utf-8", errors="replace")
    return stdout.splitlines()


def strip_ansi(line: str) -> str:
    return ANSI_ESCAPE_RE.sub("", line)
