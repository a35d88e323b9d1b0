"""Configuration helpers for network-dmenu.

The configuration is a YAML mapping stored under the user's config directory.
A default file is written on first run so the user has something to edit.
"""
from __future__ import annotations

import os
import shlex
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .actions.custom import CustomShellAction

APP_DIR = "network-dmenu"
CONFIG_FILE = "config.yaml"

DEFAULT_CONFIG: Dict[str, Any] = {
    "dmenu_cmd": "dmenu",
    "dmenu_args": "--no-multi",
    "pinentry_cmd": "pinentry-gnome3",
    "check_mullvad": True,
    "actions": [
        {"display": "🛡️ Example", "cmd": "notify-send 'hello' 'world'"},
    ],
}


def get_config_path() -> Path:
    base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / APP_DIR / CONFIG_FILE


def create_default_config_if_missing(path: Optional[Path] = None) -> Path:
    path = Path(path) if path else get_config_path()
    if not path.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            yaml.safe_dump(DEFAULT_CONFIG, allow_unicode=True, sort_keys=False),
            encoding="utf-8",
        )
    return path


@dataclass
class NetworkDmenuConfig:
    """Launcher command, prompt program and custom actions."""

    raw: Dict[str, Any]

    @classmethod
    def from_file(cls, path: str | Path) -> "NetworkDmenuConfig":
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError("Configuration root must be a mapping")
        return cls(raw=data)

    def get(self, key: str, default: Any = None) -> Any:
        return self.raw.get(key, default)

    def require(self, key: str) -> Any:
        if key not in self.raw:
            raise KeyError(f"Missing configuration key: {key}")
        return self.raw[key]

    @property
    def dmenu_cmd(self) -> str:
        return str(self.require("dmenu_cmd"))

    @property
    def dmenu_args(self) -> List[str]:
        return shlex.split(str(self.get("dmenu_args", "") or ""))

    @property
    def pinentry_cmd(self) -> str:
        return str(self.get("pinentry_cmd") or DEFAULT_CONFIG["pinentry_cmd"])

    @property
    def check_mullvad(self) -> bool:
        return bool(self.get("check_mullvad", True))

    @property
    def actions(self) -> List[CustomShellAction]:
        entries = self.get("actions") or []
        if not isinstance(entries, list):
            raise ValueError("'actions' must be a list")
        actions = []
        for index, entry in enumerate(entries):
            if not isinstance(entry, dict) or "display" not in entry or "cmd" not in entry:
                raise ValueError(f"Action #{index + 1} needs both 'display' and 'cmd'")
            actions.append(CustomShellAction(label=str(entry["display"]), cmd=str(entry["cmd"])))
        return actions


def load_config(path: Optional[Path] = None) -> NetworkDmenuConfig:
    """Load the configuration, writing the default file first if needed."""
    return NetworkDmenuConfig.from_file(create_default_config_if_missing(path))
