import pytest

from network_dmenu.core.actions import WifiNetwork
from network_dmenu.core.network import networkmanager

WIFI_LINES = "*:HomeNet:***:WPA2\n:Cafe:**:\n:Office\\:5G:****:wpa1 wpa2\n"
NOTHING_IN_USE = ":HomeNet:***:WPA2\n:Cafe:**:\n"


def _refuse_prompt(ssid):
    raise AssertionError(f"unexpected password prompt for {ssid}")


def test_parse_wifi_lines():
    networks = networkmanager.parse_wifi_lines(WIFI_LINES.splitlines())

    assert [network.ssid for network in networks] == ["HomeNet", "Cafe", "Office:5G"]
    home, cafe, office = networks
    assert home.connected is True
    assert home.display == "wifi      - ✅ HomeNet\tWPA2\t▂▄▆_"
    assert cafe.connected is False
    assert cafe.display == "wifi      - 📶 Cafe\t\t▂▄__"
    assert office.security == "WPA1 WPA2"
    assert office.signal == "▂▄▆█"


@pytest.mark.parametrize(
    "line",
    [
        "::***:WPA2",
        "*:Hidden:***",
        ":a:b:c:d",
        "garbage",
        "",
    ],
)
def test_malformed_lines_are_dropped(line):
    assert networkmanager.parse_wifi_lines([line]) == []


def test_get_networks_without_rescan_when_in_use(fake_subprocess):
    fake_subprocess.when("IN-USE,SSID,BARS,SECURITY").then_stdout(WIFI_LINES)

    networks = networkmanager.get_nm_wifi_networks()

    assert len(networks) == 3
    assert not fake_subprocess.ran("--rescan")


def test_get_networks_rescans_once(fake_subprocess):
    fake_subprocess.when("IN-USE,SSID,BARS,SECURITY").then_stdout(NOTHING_IN_USE, times=1)
    fake_subprocess.when("IN-USE,SSID,BARS,SECURITY").then_stdout(WIFI_LINES, times=1)

    networks = networkmanager.get_nm_wifi_networks()

    assert [call for call in fake_subprocess.calls if "--rescan" in call] == [
        "nmcli dev wifi list --rescan auto"
    ]
    assert networks[0].connected is True


def test_rescan_is_not_repeated_when_still_nothing_in_use(fake_subprocess):
    fake_subprocess.when("IN-USE,SSID,BARS,SECURITY").then_stdout(NOTHING_IN_USE)

    networks = networkmanager.get_nm_wifi_networks()

    assert sum("--rescan" in call for call in fake_subprocess.calls) == 1
    assert [network.ssid for network in networks] == ["HomeNet", "Cafe"]


def test_failed_rescan_keeps_cached_networks(fake_subprocess):
    fake_subprocess.when("IN-USE,SSID,BARS,SECURITY").then_stdout(NOTHING_IN_USE)
    fake_subprocess.when("--rescan").then_fail()

    networks = networkmanager.get_nm_wifi_networks()

    assert [network.ssid for network in networks] == ["HomeNet", "Cafe"]
    assert sum("--rescan" in call for call in fake_subprocess.calls) == 1
    assert sum("IN-USE,SSID,BARS,SECURITY" in call for call in fake_subprocess.calls) == 1


def test_failed_listing_gives_no_networks(fake_subprocess):
    fake_subprocess.when("IN-USE,SSID,BARS,SECURITY").then_fail()
    assert networkmanager.get_nm_wifi_networks() == []


def test_is_nm_connected(fake_subprocess):
    fake_subprocess.when("DEVICE,STATE").then_stdout("wlan0:connected\nlo:unmanaged\n")
    assert networkmanager.is_nm_connected("wlan0") is True
    assert networkmanager.is_nm_connected("wlan1") is False


def test_is_nm_connected_when_disconnected(fake_subprocess):
    fake_subprocess.when("DEVICE,STATE").then_stdout("wlan0:disconnected\n")
    assert networkmanager.is_nm_connected("wlan0") is False


def test_connect_known_network_without_password(fake_subprocess):
    fake_subprocess.when("connection show").then_stdout("HomeNet\nWork\n")
    display = WifiNetwork(ssid="HomeNet", security="WPA2", signal="▂▄▆_").display

    assert networkmanager.connect_to_nm_wifi(display, _refuse_prompt) is True
    assert "nmcli device wifi connect HomeNet" in fake_subprocess.calls


def test_connect_open_network_without_password(fake_subprocess):
    display = WifiNetwork(ssid="Cafe", security="", signal="▂▄__").display

    assert networkmanager.connect_to_nm_wifi(display, _refuse_prompt) is True
    assert fake_subprocess.calls[-1] == "nmcli device wifi connect Cafe"


def test_connect_unknown_secured_network_prompts(fake_subprocess):
    display = WifiNetwork(ssid="Office", security="WPA2", signal="▂▄▆█").display

    assert networkmanager.connect_to_nm_wifi(display, lambda ssid: "s3cret") is True
    connects = [call for call in fake_subprocess.calls if "wifi connect" in call]
    assert connects == ["nmcli device wifi connect Office password s3cret"]


def test_connect_known_network_retries_once_with_password(fake_subprocess):
    fake_subprocess.when("connection show").then_stdout("HomeNet\n")
    fake_subprocess.when("wifi connect").then_fail(times=1)
    display = WifiNetwork(ssid="HomeNet", security="WPA2", signal="▂▄▆_").display

    assert networkmanager.connect_to_nm_wifi(display, lambda ssid: "new-pass") is True
    connects = [call for call in fake_subprocess.calls if "wifi connect" in call]
    assert connects == [
        "nmcli device wifi connect HomeNet",
        "nmcli device wifi connect HomeNet password new-pass",
    ]


def test_connect_open_network_failure_is_not_retried(fake_subprocess):
    fake_subprocess.when("wifi connect").then_fail()
    display = WifiNetwork(ssid="Cafe", security="", signal="▂▄__").display

    assert networkmanager.connect_to_nm_wifi(display, _refuse_prompt) is False
    assert sum("wifi connect" in call for call in fake_subprocess.calls) == 1


def test_cancelled_prompt_does_not_connect(fake_subprocess):
    display = WifiNetwork(ssid="Office", security="WPA2", signal="▂▄▆█").display

    assert networkmanager.connect_to_nm_wifi(display, lambda ssid: None) is False
    assert not fake_subprocess.ran("wifi connect")


def test_connect_ignores_non_network_lines(fake_subprocess):
    assert networkmanager.connect_to_nm_wifi("wifi      - 📶 Connect", _refuse_prompt) is False
    assert fake_subprocess.calls == []


def test_disconnect_and_device_connect(fake_subprocess):
    assert networkmanager.disconnect_nm_wifi("wlan0") is True
    assert networkmanager.connect_nm_device("wlan0") is True
    assert fake_subprocess.calls == ["nmcli device disconnect wlan0", "nmcli device connect wlan0"]
