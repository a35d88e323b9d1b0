from network_dmenu.core.launcher import launch_menu


def test_launch_menu_returns_trimmed_selection(fake_subprocess):
    fake_subprocess.when("fuzzel").then_stdout("wifi      - 📶 Cafe\t\t▂▄__\n")

    selection = launch_menu("fuzzel", ["--dmenu"], ["action    - Example", "wifi      - 📶 Cafe\t\t▂▄__"])

    assert selection == "wifi      - 📶 Cafe\t\t▂▄__"
    assert fake_subprocess.calls == ["fuzzel --dmenu"]
    assert fake_subprocess.inputs == ["action    - Example\nwifi      - 📶 Cafe\t\t▂▄__"]


def test_dismissed_menu(fake_subprocess):
    fake_subprocess.when("fuzzel").then_stdout("", returncode=1)

    assert launch_menu("fuzzel", [], ["action    - Example"]) == ""
