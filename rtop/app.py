"""The interactive terminal application."""

from __future__ import annotations

import sys
import time
from collections.abc import Callable
from enum import Enum, auto

from blessed import Terminal
from rich.console import Console, RenderableType

from rtop import layout
from rtop.config import Config
from rtop.system import SystemState
from rtop.theme import Theme


class LayoutView(Enum):
    """The screens the user can switch between."""

    DEFAULT = auto()
    GRAPH_VIEW = auto()
    CPU_FOCUSED = auto()
    MEMORY_FOCUSED = auto()
    COMPACT = auto()


Renderer = Callable[[SystemState, Config, Theme, str, int], RenderableType]

_RENDERERS: dict[LayoutView, tuple[Renderer, str]] = {
    LayoutView.DEFAULT: (layout.render, "Default View"),
    LayoutView.GRAPH_VIEW: (layout.render_with_graphs, "Graph View"),
    LayoutView.CPU_FOCUSED: (layout.render_cpu_focused, "CPU Focus"),
    LayoutView.MEMORY_FOCUSED: (layout.render_memory_focused, "Memory Focus"),
    LayoutView.COMPACT: (layout.render_compact, "Compact View"),
}

_VIEW_KEYS = {
    "1": LayoutView.DEFAULT,
    "2": LayoutView.GRAPH_VIEW,
    "3": LayoutView.CPU_FOCUSED,
    "4": LayoutView.MEMORY_FOCUSED,
    "5": LayoutView.COMPACT,
}


class App:
    """Holds the monitor's state and drives the draw/input/update loop."""

    def __init__(self, config: Config, system: SystemState | None = None) -> None:
        self.config = config
        self.theme = Theme.from_name(config.theme)
        self.system = system if system is not None else SystemState()
        self.should_quit = False
        self.current_layout = LayoutView.DEFAULT

    def handle_key(self, key: str) -> None:
        """React to one key press."""
        if key == "q":
            self.should_quit = True
        elif key == "c":
            self.theme.cycle_next()
        elif key == "g":
            self.toggle_graph_view()
        elif key in _VIEW_KEYS:
            self.current_layout = _VIEW_KEYS[key]

    def toggle_graph_view(self) -> None:
        """Switch to the graph view, or back to the default one."""
        if self.current_layout is LayoutView.DEFAULT:
            self.current_layout = LayoutView.GRAPH_VIEW
        else:
            self.current_layout = LayoutView.DEFAULT

    def update(self) -> None:
        """Refresh the metrics; a failure is reported and the loop goes on."""
        try:
            self.system.update()
        except Exception:
            print("Error updating system metrics", file=sys.stderr)

    def render(self, height: int) -> RenderableType:
        """The current screen, ``height`` lines tall."""
        renderer, name = _RENDERERS[self.current_layout]
        return renderer(self.system, self.config, self.theme, name, height)

    def run(self) -> None:
        """Take over the terminal until the user quits."""
        term = Terminal()
        error: Exception | None = None
        with term.fullscreen(), term.cbreak(), term.hidden_cursor():
            try:
                self._loop(term)
            except Exception as exc:
                error = exc
        if error is not None:
            print(repr(error))

    def _loop(self, term: Terminal) -> None:
        tick = self.config.update_interval / 1000.0
        last_tick = time.monotonic()
        while not self.should_quit:
            self._draw(term)
            timeout = max(tick - (time.monotonic() - last_tick), 0.0)
            key = term.inkey(timeout=timeout)
            if key:
                self.handle_key(str(key))
            if time.monotonic() - last_tick >= tick:
                self.update()
                last_tick = time.monotonic()

    def _draw(self, term: Terminal) -> None:
        height = max(term.height, 1)
        console = Console(width=max(term.width, 1), height=height, force_terminal=True)
        with console.capture() as capture:
            console.print(self.render(height), end="")
        sys.stdout.write(term.home + capture.get().rstrip("\n"))
        sys.stdout.flush()