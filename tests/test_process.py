import os

import psutil
import pytest

from rtop.process import Process, ProcessList


def _sample():
    return [
        Process(pid=10, name="alpha", cpu_usage=5.0, memory_usage=300),
        Process(pid=20, name="beta", cpu_usage=50.0, memory_usage=100),
        Process(pid=30, name="gamma", cpu_usage=20.0, memory_usage=900),
    ]


@pytest.fixture
def plist():
    return ProcessList(provider=_sample)


def test_len_counts_processes(plist):
    assert len(plist) == len(_sample())


def test_get_known_and_unknown(plist):
    assert plist.get(20).name == "beta"
    assert plist.get(999) is None


def test_sorted_by_cpu_descending(plist):
    names = [p.name for p in plist.sorted_by_cpu()]
    assert names == ["beta", "gamma", "alpha"]


def test_sorted_by_memory_descending(plist):
    names = [p.name for p in plist.sorted_by_memory()]
    assert names == ["gamma", "alpha", "beta"]


def test_limit_truncates(plist):
    top = plist.sorted_by_cpu(2)
    assert [p.pid for p in top] == [20, 30]
    assert plist.sorted_by_memory(0) == []
    assert len(plist.sorted_by_memory(10)) == len(plist)


def test_sorting_is_monotonic(plist):
    usages = [p.cpu_usage for p in plist.sorted_by_cpu()]
    assert usages == sorted(usages, reverse=True)


def test_update_replaces_snapshot():
    batches = iter([_sample(), [Process(pid=77, name="solo")]])
    plist = ProcessList(provider=lambda: next(batches))
    assert plist.get(10) is not None and plist.get(10).name == "alpha"
    plist.update()
    assert plist.get(10) is None
    assert [p.pid for p in plist.processes] == [77]


def test_default_provider_sees_current_process():
    plist = ProcessList()
    me = plist.get(os.getpid())
    assert me is not None
    assert me.name == psutil.Process().name()
    assert me.memory_usage > 0