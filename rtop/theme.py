"""Colour themes for the terminal interface."""

from __future__ import annotations

from enum import Enum


class Color(Enum):
    """Terminal colours, valued by their style names."""

    BLACK = "black"
    WHITE = "bright_white"
    GRAY = "white"
    DARK_GRAY = "bright_black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    LIGHT_MAGENTA = "bright_magenta"


_DEFAULT_COLORS: dict[str, Color] = {
    "background": Color.BLACK,
    "foreground": Color.WHITE,
    "header": Color.CYAN,
    "cpu_low": Color.GREEN,
    "cpu_medium": Color.YELLOW,
    "cpu_high": Color.RED,
    "memory_low": Color.GREEN,
    "memory_medium": Color.YELLOW,
    "memory_high": Color.RED,
    "disk_low": Color.GREEN,
    "disk_medium": Color.YELLOW,
    "disk_high": Color.RED,
    "network_rx": Color.BLUE,
    "network_tx": Color.MAGENTA,
    "process_selected": Color.CYAN,
    "border": Color.GRAY,
    "tab_active": Color.CYAN,
    "tab_inactive": Color.GRAY,
}

_NEXT_THEME = {"default": "dark", "dark": "light", "light": "custom"}


class Theme:
    """A named mapping of interface roles to colours."""

    def __init__(self, name: str = "default") -> None:
        self.name = name
        self.colors: dict[str, Color] = dict(_DEFAULT_COLORS)

    def __repr__(self) -> str:
        return f"Theme(name={self.name!r})"

    @classmethod
    def from_name(cls, name: str) -> Theme:
        """Pick a theme by name, case-insensitively; unknown names give the default."""
        builders = {"dark": cls.dark, "light": cls.light, "custom": cls.custom}
        return builders.get(name.lower(), cls.default_theme)()

    @classmethod
    def default_theme(cls) -> Theme:
        return cls("default")

    @classmethod
    def dark(cls) -> Theme:
        theme = cls("dark")
        theme.colors.update(
            background=Color.BLACK,
            foreground=Color.GRAY,
            header=Color.CYAN,
            border=Color.DARK_GRAY,
        )
        return theme

    @classmethod
    def light(cls) -> Theme:
        theme = cls("light")
        theme.colors.update(
            background=Color.WHITE,
            foreground=Color.BLACK,
            header=Color.BLUE,
            border=Color.GRAY,
            cpu_low=Color.GREEN,
            cpu_medium=Color.YELLOW,
            cpu_high=Color.RED,
        )
        return theme

    @classmethod
    def custom(cls) -> Theme:
        return cls.default_theme()

    def get_color(self, name: str) -> Color:
        """Colour for a role, white when the role is unknown."""
        return self.colors.get(name, Color.WHITE)

    def cycle_next(self) -> None:
        """Switch in place to the next theme in the cycle."""
        replacement = Theme.from_name(_NEXT_THEME.get(self.name, "default"))
        self.name = replacement.name
        self.colors = replacement.colors

    def _graded(self, prefix: str, usage: float, medium: float, high: float) -> Color:
        if usage < medium:
            return self.get_color(f"{prefix}_low")
        if usage < high:
            return self.get_color(f"{prefix}_medium")
        return self.get_color(f"{prefix}_high")

    def cpu_color(self, usage: float) -> Color:
        return self._graded("cpu", usage, 50.0, 80.0)

    def memory_color(self, usage: float) -> Color:
        return self._graded("memory", usage, 50.0, 80.0)

    def disk_color(self, usage: float) -> Color:
        return self._graded("disk", usage, 70.0, 90.0)

    def header_color(self) -> Color:
        return self.get_color("header")

    def border_color(self) -> Color:
        return self.get_color("border")

    def background_color(self) -> Color:
        return self.get_color("background")

    def foreground_color(self) -> Color:
        return self.get_color("foreground")