from network_dmenu.core import bluetooth

DEVICES = (
    "Device AA:BB:CC:DD:EE:FF Headphones\n"
    "Device 11:22:33:44:55:66 Keyboard K380\n"
    "not a device line\n"
    "Device 11:22:33:44:55\n"
)

INFO = "Device AA:BB:CC:DD:EE:FF (public)\n\tName: Headphones\n\tConnected: yes\n"


def test_get_connected_devices(fake_subprocess):
    fake_subprocess.when("bluetoothctl info").then_stdout(INFO)
    assert bluetooth.get_connected_devices() == ["AA:BB:CC:DD:EE:FF"]


def test_get_connected_devices_without_connection(fake_subprocess):
    fake_subprocess.when("bluetoothctl info").then_stdout("Missing device address argument\n", returncode=1)
    assert bluetooth.get_connected_devices() == []


def test_paired_devices_mark_connected(fake_subprocess):
    fake_subprocess.when("bluetoothctl info").then_stdout(INFO)
    fake_subprocess.when("bluetoothctl devices").then_stdout(DEVICES)

    devices = bluetooth.get_paired_bluetooth_devices()

    assert [(d.name, d.mac, d.connected) for d in devices] == [
        ("Headphones", "AA:BB:CC:DD:EE:FF", True),
        ("Keyboard K380", "11:22:33:44:55:66", False),
    ]
    assert devices[0].display.startswith("bluetooth - ✅ Headphones")


def test_failed_device_listing_gives_no_devices(fake_subprocess):
    fake_subprocess.when("bluetoothctl devices").then_fail()
    assert bluetooth.get_paired_bluetooth_devices([]) == []


def test_toggle_disconnects_connected_device(fake_subprocess):
    device = bluetooth.parse_bluetooth_device("Device AA:BB:CC:DD:EE:FF Name", ["AA:BB:CC:DD:EE:FF"])
    assert device.connected is True

    assert bluetooth.toggle_bluetooth_device(device.display, ["AA:BB:CC:DD:EE:FF"]) is True
    assert fake_subprocess.calls == ["bluetoothctl disconnect AA:BB:CC:DD:EE:FF"]


def test_toggle_connects_disconnected_device(fake_subprocess):
    device = bluetooth.parse_bluetooth_device("Device 11:22:33:44:55:66 Keyboard", [])

    assert bluetooth.toggle_bluetooth_device(device.display, []) is True
    assert fake_subprocess.calls == ["bluetoothctl connect 11:22:33:44:55:66"]


def test_toggle_reports_failure(fake_subprocess):
    fake_subprocess.when("bluetoothctl connect").then_fail()
    device = bluetooth.parse_bluetooth_device("Device 11:22:33:44:55:66 Keyboard", [])
    assert bluetooth.toggle_bluetooth_device(device.display, []) is False


def test_toggle_without_mac_does_nothing(fake_subprocess):
    assert bluetooth.toggle_bluetooth_device("bluetooth - ❌ Disconnect", []) is False
    assert fake_subprocess.calls == []
