"""User-defined shell actions."""
from __future__ import annotations

from dataclasses import dataclass

from ...utils.formatting import format_entry
from .base import Action


@dataclass(frozen=True)
class CustomShellAction(Action):
    """Run a configured shell command line through ``sh -c``."""

    label: str
    cmd: str
    category: str = "action"

    @property
    def display(self) -> str:
        return format_entry(self.category, "", self.label)
