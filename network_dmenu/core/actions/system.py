"""Radio and connection-editor actions."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ...utils.formatting import AVAILABLE_ICON, DISABLED_ICON, format_entry
from .base import Action


class SystemKind(Enum):
    EDIT_CONNECTIONS = "edit-connections"
    RFKILL_BLOCK = "rfkill-block"
    RFKILL_UNBLOCK = "rfkill-unblock"


_LABELS = {
    SystemKind.RFKILL_BLOCK: (DISABLED_ICON, "Radio wifi rfkill block"),
    SystemKind.RFKILL_UNBLOCK: (AVAILABLE_ICON, "Radio wifi rfkill unblock"),
    SystemKind.EDIT_CONNECTIONS: (AVAILABLE_ICON, "Edit connections"),
}


@dataclass(frozen=True)
class SystemToggle(Action):
    kind: SystemKind
    category: str = "system"

    @property
    def display(self) -> str:
        icon, text = _LABELS[self.kind]
        return format_entry(self.category, icon, text)
