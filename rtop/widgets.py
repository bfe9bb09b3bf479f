"""Panels, tables and charts that make up the monitor's screen."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from rich.align import Align
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from rtop.config import Config
from rtop.cpu import CpuState
from rtop.disk import DiskState
from rtop.memory import MemoryState
from rtop.network import NetworkState
from rtop.process import ProcessList
from rtop.theme import Color, Theme

KB = 1024
MB = KB * 1024
GB = MB * 1024

_BRAILLE_BASE = 0x2800
# Bit for each dot of a braille cell, indexed by (column, row) inside the cell.
_BRAILLE_BITS = {
    (0, 0): 0x01,
    (0, 1): 0x02,
    (0, 2): 0x04,
    (1, 0): 0x08,
    (1, 1): 0x10,
    (1, 2): 0x20,
    (0, 3): 0x40,
    (1, 3): 0x80,
}

_CONTROLS = (
    ("q", "Quit"),
    ("c", "Cycle Theme"),
    ("g", "Graph View"),
    ("1-5", "Change Layout"),
)

Row = tuple[str, ...]
Dataset = tuple[str, Sequence[tuple[float, float]], Color]


def format_bytes(num_bytes: int) -> str:
    """Human-readable byte count in binary units."""
    if num_bytes >= GB:
        return f"{num_bytes / GB:.2f} GB"
    if num_bytes >= MB:
        return f"{num_bytes / MB:.2f} MB"
    if num_bytes >= KB:
        return f"{num_bytes / KB:.2f} KB"
    return f"{num_bytes} B"


def format_bytes_rate(bytes_per_sec: float) -> str:
    """Human-readable transfer rate in binary units per second."""
    if bytes_per_sec >= GB:
        return f"{bytes_per_sec / GB:.2f} GB/s"
    if bytes_per_sec >= MB:
        return f"{bytes_per_sec / MB:.2f} MB/s"
    if bytes_per_sec >= KB:
        return f"{bytes_per_sec / KB:.2f} KB/s"
    return f"{bytes_per_sec:.2f} B/s"


def process_rows(processes: ProcessList, config: Config, limit: int | None = None) -> list[Row]:
    """Table rows (pid, cpu, memory, name, status) in the configured order."""
    if config.sort_by == "cpu":
        ordered = processes.sorted_by_cpu(limit)
    else:
        ordered = processes.sorted_by_memory(limit)
    return [
        (
            str(proc.pid),
            f"{proc.cpu_usage:.1f}%",
            f"{proc.memory_usage // 1024} MB",
            proc.name,
            proc.status,
        )
        for proc in ordered
    ]


def _gib(num_bytes: int) -> str:
    return f"{num_bytes / GB:.1f}G"


def disk_rows(disk: DiskState) -> list[Row]:
    """Table rows (mount, size, used, available, use%, file system)."""
    return [
        (
            info.mount_point,
            _gib(info.total_space),
            _gib(info.used_space),
            _gib(info.available_space),
            f"{info.usage_percent:.1f}%",
            info.file_system,
        )
        for info in disk.disks
    ]


def network_rows(network: NetworkState) -> list[Row]:
    """Table rows (interface, received, sent, receive rate, send rate)."""
    return [
        (
            iface.name,
            format_bytes(iface.received_bytes),
            format_bytes(iface.transmitted_bytes),
            format_bytes_rate(iface.receive_rate),
            format_bytes_rate(iface.transmit_rate),
        )
        for iface in network.interfaces
    ]


def scale_history(history: Sequence[float], max_value: float) -> list[float]:
    """Express each value as a percentage of ``max_value``; all zero if it is not positive."""
    if max_value <= 0.0:
        return [0.0 for _ in history]
    return [value / max_value * 100.0 for value in history]


def _status_segments(current_layout: str) -> list[tuple[str, str]]:
    segments: list[tuple[str, str]] = []
    for key, desc in (*_CONTROLS, ("", current_layout), ("", "")):
        if key:
            segments.append((f"[{key}]", f"bold {Color.YELLOW.value}"))
            segments.append((" ", ""))
            segments.append((desc, Color.WHITE.value))
            segments.append(("  ", ""))
        elif desc:
            segments.append((f"Current: {desc}", f"bold {Color.CYAN.value}"))
    return segments


def status_bar_text(current_layout: str) -> str:
    """Plain text of the status bar for the named layout."""
    return "".join(text for text, _ in _status_segments(current_layout))


def _gauge(title: str, percent: int, color: Color) -> Panel:
    grid = Table.grid(expand=True, padding=(0, 1))
    grid.add_column(ratio=1)
    grid.add_column(justify="right", width=4, no_wrap=True)
    bar = ProgressBar(
        total=100,
        completed=percent,
        complete_style=color.value,
        finished_style=color.value,
    )
    grid.add_row(bar, Text(f"{percent}%", style=color.value))
    return Panel(grid, title=title, title_align="left")


def render_cpu_widget(cpu: CpuState, theme: Theme) -> RenderableType:
    """Gauge of average CPU usage."""
    capped = min(cpu.average_usage, 100.0)
    return _gauge("CPU Usage", int(capped), theme.cpu_color(capped))


def render_memory_widget(memory: MemoryState, theme: Theme) -> RenderableType:
    """Gauges of memory and swap usage."""
    memory_usage = min(int(memory.memory_usage_percent), 100)
    swap_usage = min(int(memory.swap_usage_percent), 100)
    return Group(
        _gauge("Memory", memory_usage, theme.memory_color(float(memory_usage))),
        _gauge("Swap", swap_usage, theme.memory_color(float(swap_usage))),
    )


def _table(theme: Theme, columns: Sequence[tuple[str, int | None]]) -> Table:
    table = Table(expand=True, box=None, show_edge=False, pad_edge=False)
    header_style = theme.header_color().value
    for title, width in columns:
        if width is None:
            table.add_column(title, ratio=1, no_wrap=True, header_style=header_style)
        else:
            table.add_column(title, width=width, no_wrap=True, header_style=header_style)
    return table


def render_process_widget(
    processes: ProcessList, config: Config, theme: Theme, height: int
) -> RenderableType:
    """Table of the processes that fit in ``height`` lines."""
    table = _table(
        theme, (("PID", 7), ("CPU%", 6), ("MEM", 9), ("Name", None), ("Status", 8))
    )
    for row in process_rows(processes, config, max(height - 3, 0)):
        table.add_row(*row)
    return Panel(table, title="Processes", title_align="left")


def render_disk_widget(disk: DiskState, theme: Theme) -> RenderableType:
    """Table of mounted file systems."""
    table = _table(
        theme,
        (("Mount", None), ("Size", 8), ("Used", 8), ("Avail", 8), ("Use%", 6), ("FS", 10)),
    )
    for row in disk_rows(disk):
        table.add_row(*row)
    return Panel(table, title="Disk Usage", title_align="left")


def render_network_widget(network: NetworkState, theme: Theme) -> RenderableType:
    """Table of network interfaces and their traffic."""
    table = _table(
        theme, (("Interface", None), ("RX", 10), ("TX", 10), ("RX/s", 10), ("TX/s", 10))
    )
    for row in network_rows(network):
        table.add_row(*row)
    return Panel(table, title="Network", title_align="left")


def _scale(value: float, bound: float, steps: int) -> int:
    if bound <= 0.0 or steps <= 1:
        return 0
    return min(max(round(value / bound * (steps - 1)), 0), steps - 1)


def _line(x0: int, y0: int, x1: int, y1: int) -> Iterator[tuple[int, int]]:
    dx, dy = abs(x1 - x0), -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy
    while True:
        yield x0, y0
        if x0 == x1 and y0 == y1:
            return
        doubled = 2 * err
        if doubled >= dy:
            err += dy
            x0 += sx
        if doubled <= dx:
            err += dx
            y0 += sy


def _chart(
    datasets: Sequence[Dataset],
    x_bound: float,
    y_title: str,
    y_labels: Sequence[str],
    width: int,
    height: int,
) -> Text:
    label_width = max(len(label) for label in y_labels)
    plot_w = max(width - 2 - label_width - 1, 1)
    plot_h = max(height - 4, 1)
    dots_w, dots_h = plot_w * 2, plot_h * 4

    bits: dict[tuple[int, int], int] = {}
    colors: dict[tuple[int, int], Color] = {}
    for _, points, color in datasets:
        previous: tuple[int, int] | None = None
        for x, y in points:
            dot = (_scale(x, x_bound, dots_w), dots_h - 1 - _scale(y, 100.0, dots_h))
            path = _line(*previous, *dot) if previous else iter((dot,))
            for px, py in path:
                cell = (px // 2, py // 4)
                bits[cell] = bits.get(cell, 0) | _BRAILLE_BITS[(px % 2, py % 4)]
                colors[cell] = color
            previous = dot

    gray = Color.GRAY.value
    row_labels: dict[int, str] = {}
    last = len(y_labels) - 1
    for index, label in enumerate(y_labels):
        row = round((1 - index / last) * (plot_h - 1)) if last else plot_h - 1
        row_labels[row] = label

    text = Text(no_wrap=True, overflow="crop")
    text.append(y_title, style=gray)
    for name, _, color in datasets:
        text.append("  ")
        text.append(name, style=color.value)
    text.append("\n")
    for row in range(plot_h):
        text.append(row_labels.get(row, "").rjust(label_width) + "│", style=gray)
        for col in range(plot_w):
            cell_bits = bits.get((col, row), 0)
            if cell_bits:
                text.append(chr(_BRAILLE_BASE + cell_bits), style=colors[(col, row)].value)
            else:
                text.append(" ")
        text.append("\n")
    axis = ("─" * max(plot_w - 4, 0) + "Time")[-plot_w:]
    text.append(" " * label_width + "└" + axis, style=gray)
    return text


def _indexed(values: Sequence[float]) -> list[tuple[float, float]]:
    return [(float(i), float(value)) for i, value in enumerate(values)]


_PERCENT_LABELS = ("0", "50", "100")


def render_cpu_graph(cpu: CpuState, theme: Theme, width: int, height: int) -> RenderableType:
    """Line chart of the CPU usage history."""
    title = "CPU Usage History"
    history = cpu.history
    if not history:
        return Panel(Text(""), title=title, title_align="left", width=width, height=height)
    datasets = [("CPU %", _indexed(history), theme.cpu_color(cpu.average_usage))]
    chart = _chart(datasets, float(len(history)), "CPU %", _PERCENT_LABELS, width, height)
    return Panel(chart, title=title, title_align="left", width=width, height=height)


def render_memory_graph(
    memory: MemoryState, theme: Theme, width: int, height: int
) -> RenderableType:
    """Line chart of the memory and swap usage histories."""
    title = "Memory & Swap History"
    mem_history, swap_history = memory.memory_history, memory.swap_history
    if not mem_history and not swap_history:
        return Panel(Text(""), title=title, title_align="left", width=width, height=height)
    datasets = [
        (
            "Memory %",
            _indexed(mem_history),
            theme.memory_color(memory.memory_usage_percent),
        ),
        ("Swap %", _indexed(swap_history), Color.LIGHT_MAGENTA),
    ]
    length = max(len(mem_history), len(swap_history))
    chart = _chart(datasets, float(length), "Usage %", _PERCENT_LABELS, width, height)
    return Panel(chart, title=title, title_align="left", width=width, height=height)


def render_network_graph(
    network: NetworkState, theme: Theme, width: int, height: int
) -> RenderableType:
    """Line chart of the first interface's traffic, scaled to its peak."""
    title = "Network Traffic"
    empty = Panel(Text(""), title=title, title_align="left", width=width, height=height)
    interfaces = network.interfaces
    if not interfaces:
        return empty
    interface = interfaces[0]
    rx_history = interface.receive_rate_history
    tx_history = interface.transmit_rate_history
    if not rx_history and not tx_history:
        return empty

    max_value = max((0.0, *rx_history, *tx_history))
    datasets = [
        (
            f"RX: {format_bytes_rate(interface.receive_rate)}/s",
            _indexed(scale_history(rx_history, max_value)),
            Color.BLUE,
        ),
        (
            f"TX: {format_bytes_rate(interface.transmit_rate)}/s",
            _indexed(scale_history(tx_history, max_value)),
            Color.RED,
        ),
    ]
    labels = ("0", format_bytes_rate(max_value / 2.0), format_bytes_rate(max_value))
    length = max(len(rx_history), len(tx_history))
    chart = _chart(datasets, float(length), "Throughput", labels, width, height)
    return Panel(chart, title=title, title_align="left", width=width, height=height)


def render_status_bar(current_layout: str) -> RenderableType:
    """Key help line with the current layout's name, under a separator."""
    line = Text.assemble(*_status_segments(current_layout))
    return Group(Rule(style=Color.DARK_GRAY.value), Align.center(line))