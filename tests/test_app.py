import io

import pytest
from rich.console import Console

from rtop.app import App, LayoutView
from rtop.config import Config
from rtop.cpu import CpuState
from rtop.disk import DiskInfo, DiskState
from rtop.memory import MemoryState
from rtop.network import NetworkCounters, NetworkState
from rtop.process import Process, ProcessList
from rtop.system import SystemState


def _system(cpu_sampler=None):
    return SystemState(
        cpu=CpuState(sampler=cpu_sampler or (lambda: [20.0, 40.0])),
        memory=MemoryState(sampler=lambda: (1000, 250, 0, 0)),
        processes=ProcessList(provider=lambda: [Process(pid=1, name="init", cpu_usage=1.0)]),
        disk=DiskState(provider=lambda: [DiskInfo("sda1", "/", 100, 40, "ext4")]),
        network=NetworkState(
            provider=lambda: {"lo": NetworkCounters(received=10, transmitted=10)},
            clock=lambda: 0.0,
        ),
    )


@pytest.fixture
def app():
    return App(Config(), system=_system())


def _text(renderable, height):
    console = Console(file=io.StringIO(), width=100, height=height, color_system=None)
    console.print(renderable)
    return console.file.getvalue()


def test_starts_in_default_layout_with_configured_theme():
    app = App(Config(theme="Light"), system=_system())
    assert app.current_layout is LayoutView.DEFAULT
    assert app.theme.name == "light"
    assert app.should_quit is False


def test_q_quits(app):
    app.handle_key("q")
    assert app.should_quit is True


@pytest.mark.parametrize(
    ("key", "view"),
    [
        ("1", LayoutView.DEFAULT),
        ("2", LayoutView.GRAPH_VIEW),
        ("3", LayoutView.CPU_FOCUSED),
        ("4", LayoutView.MEMORY_FOCUSED),
        ("5", LayoutView.COMPACT),
    ],
)
def test_number_keys_select_layout(app, key, view):
    app.handle_key("3" if key != "3" else "4")
    app.handle_key(key)
    assert app.current_layout is view


def test_g_toggles_between_default_and_graphs(app):
    app.handle_key("g")
    assert app.current_layout is LayoutView.GRAPH_VIEW
    app.handle_key("g")
    assert app.current_layout is LayoutView.DEFAULT


def test_toggle_from_other_layout_returns_to_default(app):
    app.handle_key("5")
    app.toggle_graph_view()
    assert app.current_layout is LayoutView.DEFAULT


def test_c_cycles_theme(app):
    app.handle_key("c")
    assert app.theme.name == "dark"
    app.handle_key("c")
    assert app.theme.name == "light"


def test_unknown_key_changes_nothing(app):
    app.handle_key("x")
    assert app.current_layout is LayoutView.DEFAULT
    assert app.should_quit is False
    assert app.theme.name == "default"


def test_update_refreshes_metrics(app):
    app.update()
    app.update()
    assert len(app.system.cpu.history) == 2
    assert app.system.cpu.average_usage == pytest.approx(30.0)


def test_update_failure_is_reported(capsys):
    def failing():
        raise RuntimeError("sensor gone")

    app = App(Config(), system=_system(cpu_sampler=failing))
    app.update()
    assert "Error updating system metrics" in capsys.readouterr().err
    assert app.system.cpu.history == ()


@pytest.mark.parametrize(
    ("key", "name"),
    [
        ("1", "Default View"),
        ("2", "Graph View"),
        ("3", "CPU Focus"),
        ("4", "Memory Focus"),
        ("5", "Compact View"),
    ],
)
def test_render_uses_current_layout(app, key, name):
    app.handle_key(key)
    output = _text(app.render(35), 35)
    assert f"Current: {name}" in output
    assert len(output.splitlines()) == 35