import pytest

from rtop.theme import Color, Theme


@pytest.mark.parametrize(
    "name, expected",
    [
        ("dark", "dark"),
        ("DARK", "dark"),
        ("Light", "light"),
        ("custom", "default"),
        ("default", "default"),
        ("nonsense", "default"),
    ],
)
def test_from_name(name, expected):
    assert Theme.from_name(name).name == expected


def test_default_colors():
    theme = Theme.default_theme()
    assert theme.background_color() is Color.BLACK
    assert theme.foreground_color() is Color.WHITE
    assert theme.header_color() is Color.CYAN
    assert theme.border_color() is Color.GRAY
    assert theme.get_color("network_rx") is Color.BLUE
    assert theme.get_color("network_tx") is Color.MAGENTA


def test_dark_overrides():
    theme = Theme.dark()
    assert theme.foreground_color() is Color.GRAY
    assert theme.border_color() is Color.DARK_GRAY
    assert theme.get_color("cpu_high") is Color.RED


def test_light_overrides():
    theme = Theme.light()
    assert theme.background_color() is Color.WHITE
    assert theme.foreground_color() is Color.BLACK
    assert theme.header_color() is Color.BLUE


def test_custom_equals_default():
    assert Theme.custom().colors == Theme.default_theme().colors


def test_unknown_color_is_white():
    assert Theme().get_color("no_such_role") is Color.WHITE


def test_cycle_order():
    theme = Theme.default_theme()
    seen = []
    for _ in range(4):
        theme.cycle_next()
        seen.append(theme.name)
    assert seen == ["dark", "light", "default", "dark"]


def test_cycle_replaces_colors():
    theme = Theme.default_theme()
    theme.cycle_next()
    assert theme.colors == Theme.dark().colors


def test_cycle_from_unknown_name_goes_default():
    theme = Theme("mystery")
    theme.cycle_next()
    assert theme.name == "default"


@pytest.mark.parametrize(
    "usage, expected",
    [(0.0, Color.GREEN), (49.9, Color.GREEN), (50.0, Color.YELLOW), (79.9, Color.YELLOW), (80.0, Color.RED), (100.0, Color.RED)],
)
def test_cpu_and_memory_thresholds(usage, expected):
    theme = Theme()
    assert theme.cpu_color(usage) is expected
    assert theme.memory_color(usage) is expected


@pytest.mark.parametrize(
    "usage, expected",
    [(69.9, Color.GREEN), (70.0, Color.YELLOW), (89.9, Color.YELLOW), (90.0, Color.RED)],
)
def test_disk_thresholds(usage, expected):
    assert Theme().disk_color(usage) is expected