import pytest
import yaml

from network_dmenu.core import config as config_mod
from network_dmenu.core.actions import CustomShellAction
from network_dmenu.core.config import NetworkDmenuConfig, load_config


def test_load_config_reads_file(config_file):
    config = load_config(config_file)

    assert config.dmenu_cmd == "fuzzel"
    assert config.dmenu_args == ["--dmenu", "--lines", "20"]
    assert config.pinentry_cmd == "pinentry-test"
    assert config.check_mullvad is False
    assert config.actions == [CustomShellAction(label="🛡️ Example", cmd="notify-send 'hello' 'world'")]


def test_default_config_is_written(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    config = load_config()

    path = tmp_path / "network-dmenu" / "config.yaml"
    assert path.exists()
    assert yaml.safe_load(path.read_text(encoding="utf-8")) == config_mod.DEFAULT_CONFIG
    assert config.dmenu_cmd == "dmenu"
    assert config.dmenu_args == ["--no-multi"]
    assert config.pinentry_cmd == "pinentry-gnome3"
    assert config.check_mullvad is True
    assert [action.label for action in config.actions] == ["🛡️ Example"]


def test_existing_config_is_not_overwritten(config_file):
    before = config_file.read_text(encoding="utf-8")

    config_mod.create_default_config_if_missing(config_file)

    assert config_file.read_text(encoding="utf-8") == before


def test_root_must_be_mapping(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ValueError):
        NetworkDmenuConfig.from_file(path)


def test_missing_dmenu_cmd():
    with pytest.raises(KeyError):
        NetworkDmenuConfig(raw={"actions": []}).dmenu_cmd


def test_optional_keys_have_defaults():
    config = NetworkDmenuConfig(raw={"dmenu_cmd": "rofi"})

    assert config.dmenu_args == []
    assert config.pinentry_cmd == "pinentry-gnome3"
    assert config.check_mullvad is True
    assert config.actions == []


@pytest.mark.parametrize(
    "actions",
    [
        "not a list",
        [{"display": "No command"}],
        [{"cmd": "true"}],
        ["plain string"],
    ],
)
def test_invalid_actions(actions):
    with pytest.raises(ValueError):
        NetworkDmenuConfig(raw={"dmenu_cmd": "dmenu", "actions": actions}).actions
