"""Screen layouts that arrange the monitor's panels."""

from __future__ import annotations

from collections.abc import Callable

from rich.console import Console, ConsoleOptions, RenderableType, RenderResult
from rich.layout import Layout
from rich.text import Text

from rtop import widgets
from rtop.config import Config
from rtop.system import SystemState
from rtop.theme import Theme

STATUS_HEIGHT = 2
MIN_CONTENT_HEIGHT = 5

SizedFactory = Callable[[int, int], RenderableType]


class _Sized:
    """A renderable built once the size of its region is known."""

    def __init__(self, factory: SizedFactory) -> None:
        self._factory = factory

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        height = options.height if options.height is not None else options.size.height
        yield self._factory(options.max_width, height)


class _Screen:
    """A layout rendered at a fixed number of lines."""

    def __init__(self, layout: Layout, height: int) -> None:
        self._layout = layout
        self._height = max(height, 1)

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        yield from console.render(self._layout, options.update_height(self._height))


def _region(
    renderable: RenderableType | None = None,
    *,
    size: int | None = None,
    ratio: int = 1,
    minimum_size: int = 1,
) -> Layout:
    return Layout(
        renderable if renderable is not None else Text(),
        size=size,
        ratio=ratio,
        minimum_size=minimum_size,
    )


def _column(*children: Layout, ratio: int = 1, minimum_size: int = 1) -> Layout:
    layout = Layout(ratio=ratio, minimum_size=minimum_size)
    layout.split_column(*children)
    return layout


def _row(*children: Layout, ratio: int = 1, minimum_size: int = 1) -> Layout:
    layout = Layout(ratio=ratio, minimum_size=minimum_size)
    layout.split_row(*children)
    return layout


def _with_margin(body: Layout) -> Layout:
    """Surround ``body`` with a one-cell margin on every side."""
    row = _row(_region(size=1), body, _region(size=1))
    return _column(_region(size=1), row, _region(size=1), minimum_size=MIN_CONTENT_HEIGHT)


def _screen(content: Layout, layout_name: str, height: int) -> RenderableType:
    root = _column(
        content,
        _region(widgets.render_status_bar(layout_name), size=STATUS_HEIGHT),
    )
    return _Screen(root, height)


def _processes(system: SystemState, config: Config, theme: Theme) -> _Sized:
    return _Sized(
        lambda _width, height: widgets.render_process_widget(
            system.processes, config, theme, height
        )
    )


def render(
    system: SystemState, config: Config, theme: Theme, layout_name: str, height: int
) -> RenderableType:
    """Default view: every enabled panel stacked above the process table."""
    show = config.layout
    body = _column(
        _region(widgets.render_cpu_widget(system.cpu, theme) if show.show_cpu else None, size=3),
        _region(
            widgets.render_memory_widget(system.memory, theme) if show.show_memory else None,
            size=5,
        ),
        _region(widgets.render_disk_widget(system.disk, theme) if show.show_disk else None, size=8),
        _region(
            widgets.render_network_widget(system.network, theme) if show.show_network else None,
            size=8,
        ),
        _region(_processes(system, config, theme), minimum_size=10),
    )
    return _screen(_with_margin(body), layout_name, height)


def render_cpu_focused(
    system: SystemState, config: Config, theme: Theme, layout_name: str, height: int
) -> RenderableType:
    """CPU gauge over most of the screen, processes below."""
    body = _column(
        _region(widgets.render_cpu_widget(system.cpu, theme), ratio=70),
        _region(_processes(system, config, theme), ratio=30),
    )
    return _screen(_with_margin(body), layout_name, height)


def render_memory_focused(
    system: SystemState, config: Config, theme: Theme, layout_name: str, height: int
) -> RenderableType:
    """Memory gauges over most of the screen, processes below."""
    body = _column(
        _region(widgets.render_memory_widget(system.memory, theme), ratio=70),
        _region(_processes(system, config, theme), ratio=30),
    )
    return _screen(_with_margin(body), layout_name, height)


def render_compact(
    system: SystemState, config: Config, theme: Theme, layout_name: str, height: int
) -> RenderableType:
    """Two columns: CPU, memory and processes; disk and network."""
    left = _column(
        _region(widgets.render_cpu_widget(system.cpu, theme), size=3),
        _region(widgets.render_memory_widget(system.memory, theme), size=5),
        _region(_processes(system, config, theme), minimum_size=8),
    )
    right = _column(
        _region(widgets.render_disk_widget(system.disk, theme)),
        _region(widgets.render_network_widget(system.network, theme)),
    )
    return _screen(_with_margin(_row(left, right)), layout_name, height)


def render_with_graphs(
    system: SystemState, config: Config, theme: Theme, layout_name: str, height: int
) -> RenderableType:
    """Four quadrants: CPU, memory and network histories, and processes."""
    top = _row(
        _region(_Sized(lambda w, h: widgets.render_cpu_graph(system.cpu, theme, w, h))),
        _region(_Sized(lambda w, h: widgets.render_memory_graph(system.memory, theme, w, h))),
    )
    bottom = _row(
        _region(_Sized(lambda w, h: widgets.render_network_graph(system.network, theme, w, h))),
        _region(_processes(system, config, theme)),
    )
    return _screen(_with_margin(_column(top, bottom)), layout_name, height)