"""Memory and swap usage with bounded histories."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable

import psutil

HISTORY_SIZE = 100

# (total_memory, used_memory, total_swap, used_swap), all in bytes
MemorySampler = Callable[[], tuple[int, int, int, int]]


def _sample_memory() -> tuple[int, int, int, int]:
    vm = psutil.virtual_memory()
    swap = psutil.swap_memory()
    return vm.total, vm.total - vm.available, swap.total, swap.used


def _percent(used: int, total: int) -> float:
    if total == 0:
        return 0.0
    return used / total * 100.0


class MemoryState:
    """Current memory and swap figures and the history of their percentages."""

    def __init__(self, sampler: MemorySampler | None = None) -> None:
        self._sampler = sampler or _sample_memory
        self._memory_history: deque[float] = deque(maxlen=HISTORY_SIZE)
        self._swap_history: deque[float] = deque(maxlen=HISTORY_SIZE)
        self._read()

    def _read(self) -> None:
        (
            self.total_memory,
            self.used_memory,
            self.total_swap,
            self.used_swap,
        ) = self._sampler()

    def update(self) -> None:
        """Take a fresh sample and record both percentages."""
        self._read()
        self._memory_history.append(self.memory_usage_percent)
        self._swap_history.append(self.swap_usage_percent)

    @property
    def memory_usage_percent(self) -> float:
        return _percent(self.used_memory, self.total_memory)

    @property
    def swap_usage_percent(self) -> float:
        return _percent(self.used_swap, self.total_swap)

    @property
    def memory_history(self) -> tuple[float, ...]:
        return tuple(self._memory_history)

    @property
    def swap_history(self) -> tuple[float, ...]:
        return tuple(self._swap_history)