"""Test configuration and fixtures."""
from pathlib import Path

import pytest
import yaml

from network_dmenu.utils import cmd_runner
from tests.utils.fake_subprocess import FakeSubprocess


@pytest.fixture(autouse=True)
def fake_subprocess():
    """Route every command through a FakeSubprocess; nothing real is spawned."""
    fake = FakeSubprocess()
    cmd_runner.set_runner(fake)
    yield fake
    cmd_runner.reset_runner()


@pytest.fixture
def no_notify_send(monkeypatch):
    """Pretend notify-send is not installed so notifications only log."""
    monkeypatch.setattr(cmd_runner, "is_command_installed", lambda cmd: False)


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Write a config.yaml with one custom action."""
    config = {
        "dmenu_cmd": "fuzzel",
        "dmenu_args": "--dmenu --lines 20",
        "pinentry_cmd": "pinentry-test",
        "check_mullvad": False,
        "actions": [
            {"display": "🛡️ Example", "cmd": "notify-send 'hello' 'world'"},
        ],
    }
    path = tmp_path / "network-dmenu" / "config.yaml"
    path.parent.mkdir(parents=True)
    path.write_text(yaml.safe_dump(config, allow_unicode=True), encoding="utf-8")
    return path
