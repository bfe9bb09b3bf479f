"""Aggregate of every metric the monitor shows."""

from __future__ import annotations

from rtop.cpu import CpuState
from rtop.disk import DiskState
from rtop.memory import MemoryState
from rtop.network import NetworkState
from rtop.process import ProcessList


class SystemState:
    """CPU, memory, process, disk and network state, refreshed together."""

    def __init__(
        self,
        cpu: CpuState | None = None,
        memory: MemoryState | None = None,
        processes: ProcessList | None = None,
        disk: DiskState | None = None,
        network: NetworkState | None = None,
    ) -> None:
        self.cpu = cpu if cpu is not None else CpuState()
        self.memory = memory if memory is not None else MemoryState()
        self.processes = processes if processes is not None else ProcessList()
        self.disk = disk if disk is not None else DiskState()
        self.network = network if network is not None else NetworkState()

    def update(self) -> None:
        """Refresh every component in turn."""
        self.cpu.update()
        self.memory.update()
        self.processes.update()
        self.disk.update()
        self.network.update()