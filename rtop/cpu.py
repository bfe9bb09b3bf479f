"""CPU usage sampling with a bounded history."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Sequence

import psutil

HISTORY_SIZE = 100
SAMPLE_SECONDS = 0.1

CpuSampler = Callable[[], Sequence[float]]


def _sample_cpu() -> list[float]:
    return psutil.cpu_percent(interval=SAMPLE_SECONDS, percpu=True)


class CpuState:
    """Per-core and average CPU usage, with a history of averages."""

    def __init__(self, sampler: CpuSampler | None = None) -> None:
        if sampler is None:
            psutil.cpu_percent(percpu=True)
            sampler = _sample_cpu
        self._sampler = sampler
        self._per_core: list[float] = []
        self._average = 0.0
        self._history: deque[float] = deque(maxlen=HISTORY_SIZE)

    def update(self) -> None:
        """Take a fresh sample and append the average to the history."""
        self._per_core = [min(float(value), 100.0) for value in self._sampler()]
        if self._per_core:
            self._average = min(sum(self._per_core) / len(self._per_core), 100.0)
        else:
            self._average = 0.0
        self._history.append(self._average)

    def core_usage(self, index: int) -> float | None:
        """Usage of one core, or None when there is no such core."""
        if 0 <= index < len(self._per_core):
            return self._per_core[index]
        return None

    @property
    def average_usage(self) -> float:
        return self._average

    @property
    def core_count(self) -> int:
        return len(self._per_core)

    @property
    def history(self) -> tuple[float, ...]:
        """Averages from oldest to newest, at most HISTORY_SIZE of them."""
        return tuple(self._history)