"""Mounted file systems and their space usage."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

import psutil


@dataclass(frozen=True)
class DiskInfo:
    """Space figures for one mounted file system, in bytes."""

    name: str
    mount_point: str
    total_space: int
    available_space: int
    file_system: str

    @property
    def used_space(self) -> int:
        return self.total_space - self.available_space

    @property
    def usage_percent(self) -> float:
        if self.total_space == 0:
            return 0.0
        return self.used_space / self.total_space * 100.0


DiskProvider = Callable[[], Iterable[DiskInfo]]


def _read_disks() -> list[DiskInfo]:
    disks = []
    for partition in psutil.disk_partitions(all=False):
        try:
            usage = psutil.disk_usage(partition.mountpoint)
        except OSError:
            continue
        disks.append(
            DiskInfo(
                name=partition.device,
                mount_point=partition.mountpoint,
                total_space=usage.total,
                available_space=usage.free,
                file_system=partition.fstype,
            )
        )
    return disks


class DiskState:
    """The current set of disks and their combined space."""

    def __init__(self, provider: DiskProvider | None = None) -> None:
        self._provider = provider or _read_disks
        self._disks: tuple[DiskInfo, ...] = tuple(self._provider())

    def update(self) -> None:
        """Re-read the list of disks."""
        self._disks = tuple(self._provider())

    @property
    def disks(self) -> tuple[DiskInfo, ...]:
        return self._disks

    @property
    def total_space(self) -> int:
        return sum(disk.total_space for disk in self._disks)

    @property
    def available_space(self) -> int:
        return sum(disk.available_space for disk in self._disks)

    @property
    def used_space(self) -> int:
        return self.total_space - self.available_space