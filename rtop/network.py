"""Per-interface network counters and transfer rates."""

from __future__ import annotations

import sys
import time
from collections import deque
from collections.abc import Callable, Mapping
from dataclasses import dataclass

import psutil

HISTORY_SIZE = 100
MIN_TIME_DELTA = 0.001
_RATE_CAP = sys.float_info.max / 2.0


@dataclass(frozen=True)
class NetworkCounters:
    """Raw counters for one interface."""

    received: int = 0
    transmitted: int = 0
    packets_received: int = 0
    packets_transmitted: int = 0


NetworkProvider = Callable[[], Mapping[str, NetworkCounters]]
Clock = Callable[[], float]


def _read_counters() -> dict[str, NetworkCounters]:
    return {
        name: NetworkCounters(
            received=io.bytes_recv,
            transmitted=io.bytes_sent,
            packets_received=io.packets_recv,
            packets_transmitted=io.packets_sent,
        )
        for name, io in psutil.net_io_counters(pernic=True).items()
    }


class NetworkInterface:
    """One interface's latest counters, rates and rate histories."""

    def __init__(self, name: str, counters: NetworkCounters, now: float) -> None:
        self.name = name
        self.received_bytes = counters.received
        self.transmitted_bytes = counters.transmitted
        self.received_packets = counters.packets_received
        self.transmitted_packets = counters.packets_transmitted
        self.receive_rate = 0.0
        self.transmit_rate = 0.0
        self._last_update = now
        self._rx_history: deque[float] = deque(maxlen=HISTORY_SIZE)
        self._tx_history: deque[float] = deque(maxlen=HISTORY_SIZE)

    def __repr__(self) -> str:
        return f"NetworkInterface(name={self.name!r})"

    def update(self, counters: NetworkCounters, now: float) -> None:
        """Record new counters taken at time ``now`` (seconds) and recompute rates."""
        time_delta = now - self._last_update
        prev_rx, prev_tx = self.received_bytes, self.transmitted_bytes

        self.received_bytes = counters.received
        self.transmitted_bytes = counters.transmitted
        self.received_packets = counters.packets_received
        self.transmitted_packets = counters.packets_transmitted

        if time_delta > MIN_TIME_DELTA:
            rx_diff = max(self.received_bytes - prev_rx, 0)
            tx_diff = max(self.transmitted_bytes - prev_tx, 0)
            self.receive_rate = min(rx_diff / time_delta, _RATE_CAP)
            self.transmit_rate = min(tx_diff / time_delta, _RATE_CAP)

        self._rx_history.append(self.receive_rate)
        self._tx_history.append(self.transmit_rate)
        self._last_update = now

    @property
    def receive_rate_history(self) -> tuple[float, ...]:
        return tuple(self._rx_history)

    @property
    def transmit_rate_history(self) -> tuple[float, ...]:
        return tuple(self._tx_history)


class NetworkState:
    """All interfaces seen so far, in the order they first appeared."""

    def __init__(
        self, provider: NetworkProvider | None = None, clock: Clock | None = None
    ) -> None:
        self._provider = provider or _read_counters
        self._clock = clock or time.monotonic
        now = self._clock()
        self._interfaces: dict[str, NetworkInterface] = {
            name: NetworkInterface(name, counters, now)
            for name, counters in self._provider().items()
        }

    def update(self) -> None:
        """Refresh counters; new interfaces are added, vanished ones are kept."""
        counters_by_name = self._provider()
        now = self._clock()
        for name, counters in counters_by_name.items():
            interface = self._interfaces.get(name)
            if interface is None:
                self._interfaces[name] = NetworkInterface(name, counters, now)
            else:
                interface.update(counters, now)

    @property
    def interfaces(self) -> tuple[NetworkInterface, ...]:
        return tuple(self._interfaces.values())

    def interface(self, name: str) -> NetworkInterface | None:
        """The interface called ``name``, or None."""
        return self._interfaces.get(name)

    @property
    def total_received(self) -> int:
        return sum(i.received_bytes for i in self._interfaces.values())

    @property
    def total_transmitted(self) -> int:
        return sum(i.transmitted_bytes for i in self._interfaces.values())

    @property
    def total_receive_rate(self) -> float:
        return sum(i.receive_rate for i in self._interfaces.values())

    @property
    def total_transmit_rate(self) -> float:
        return sum(i.transmit_rate for i in self._interfaces.values())