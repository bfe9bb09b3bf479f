"""Snapshot of running processes with sorting helpers."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

import psutil

# Status names as the monitor displays them, keyed by psutil's status strings.
_STATUS_NAMES = {
    psutil.STATUS_RUNNING: "Run",
    psutil.STATUS_SLEEPING: "Sleep",
    psutil.STATUS_DISK_SLEEP: "UninterruptibleDiskSleep",
    psutil.STATUS_STOPPED: "Stop",
    psutil.STATUS_TRACING_STOP: "Tracing",
    psutil.STATUS_ZOMBIE: "Zombie",
    psutil.STATUS_DEAD: "Dead",
    psutil.STATUS_WAKE_KILL: "Wakekill",
    psutil.STATUS_WAKING: "Waking",
    psutil.STATUS_IDLE: "Idle",
    psutil.STATUS_LOCKED: "LockBlocked",
    psutil.STATUS_WAITING: "Waiting",
    psutil.STATUS_PARKED: "Parked",
}


@dataclass(frozen=True)
class Process:
    """One process as seen at the last refresh."""

    pid: int
    name: str
    command: tuple[str, ...] = field(default_factory=tuple)
    cpu_usage: float = 0.0
    memory_usage: int = 0
    status: str = "Unknown"
    user_id: str | None = None


ProcessProvider = Callable[[], Iterable[Process]]


def _status_name(status: str | None) -> str:
    if status is None:
        return "Unknown"
    return _STATUS_NAMES.get(status, "Unknown")


def _attrs() -> list[str]:
    attrs = ["pid", "name", "cmdline", "cpu_percent", "memory_info", "status"]
    if psutil.POSIX:
        attrs.append("uids")
    return attrs


def _read_processes() -> list[Process]:
    processes = []
    for proc in psutil.process_iter(_attrs(), ad_value=None):
        info = proc.info
        memory = info.get("memory_info")
        uids = info.get("uids")
        processes.append(
            Process(
                pid=info["pid"],
                name=info.get("name") or "",
                command=tuple(info.get("cmdline") or ()),
                cpu_usage=float(info.get("cpu_percent") or 0.0),
                memory_usage=memory.rss if memory is not None else 0,
                status=_status_name(info.get("status")),
                user_id=str(uids.real) if uids is not None else None,
            )
        )
    return processes


class ProcessList:
    """The processes found at the last refresh, keyed by pid."""

    def __init__(self, provider: ProcessProvider | None = None) -> None:
        self._provider = provider or _read_processes
        self._processes: dict[int, Process] = {}
        self.update()

    def update(self) -> None:
        """Replace the snapshot with a fresh one."""
        self._processes = {proc.pid: proc for proc in self._provider()}

    def get(self, pid: int) -> Process | None:
        """The process with ``pid``, or None when it is not running."""
        return self._processes.get(pid)

    @property
    def processes(self) -> list[Process]:
        return list(self._processes.values())

    @staticmethod
    def _limited(processes: list[Process], limit: int | None) -> list[Process]:
        return processes if limit is None else processes[:limit]

    def sorted_by_cpu(self, limit: int | None = None) -> list[Process]:
        """Processes by descending CPU usage, at most ``limit`` of them."""
        ordered = sorted(self._processes.values(), key=lambda p: p.cpu_usage, reverse=True)
        return self._limited(ordered, limit)

    def sorted_by_memory(self, limit: int | None = None) -> list[Process]:
        """Processes by descending memory usage, at most ``limit`` of them."""
        ordered = sorted(self._processes.values(), key=lambda p: p.memory_usage, reverse=True)
        return self._limited(ordered, limit)

    def __len__(self) -> int:
        return len(self._processes)