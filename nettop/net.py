"""Per-interface network counters — psutil snapshots, deltas, rates and ranking."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass

import psutil

logger = logging.getLogger(__name__)

# loopback, container, bridge and hypervisor NICs
VIRTUAL_PREFIXES = ("lo", "veth", "docker", "br-", "vmnet", "virbr")


# ---- counter source ----

@dataclass(frozen=True)
class Counters:
    """Cumulative counters for one interface at one point in time."""
    bytes_recv: int = 0
    bytes_sent: int = 0
    packets_recv: int = 0
    packets_sent: int = 0
    errin: int = 0
    errout: int = 0


Snapshot = dict[str, Counters]


@dataclass(frozen=True)
class InterfaceSample:
    """Bytes moved since the previous snapshot plus cumulative packet/error totals."""
    interface: str
    rx_bytes: int
    tx_bytes: int
    packets_in: int
    packets_out: int
    errors_in: int
    errors_out: int


def read_psutil_counters() -> Snapshot:
    """Read cumulative per-NIC counters via psutil."""
    stats = psutil.net_io_counters(pernic=True)
    return {
        name: Counters(
            bytes_recv=nic.bytes_recv,
            bytes_sent=nic.bytes_sent,
            packets_recv=nic.packets_recv,
            packets_sent=nic.packets_sent,
            errin=nic.errin,
            errout=nic.errout,
        )
        for name, nic in stats.items()
    }


class CounterSource:
    """Holds the last snapshot so each refresh can be diffed against it.

    Usage per tick::

        previous = source.refresh()
        samples = source.delta_since(previous)
    """

    def __init__(self, reader: Callable[[], Snapshot] = read_psutil_counters):
        self._reader = reader
        self.snapshot: Snapshot = reader()
        logger.debug("counter source seeded with %d interfaces", len(self.snapshot))

    def refresh(self) -> Snapshot:
        """Read fresh counters, retain them, and return the snapshot they replace."""
        current = self._reader()
        previous, self.snapshot = self.snapshot, current
        return previous

    def delta_since(self, previous: Snapshot) -> list[InterfaceSample]:
        samples = []
        for name, cur in self.snapshot.items():
            # new interfaces start from their own totals, resets clamp to zero
            prev = previous.get(name, cur)
            samples.append(InterfaceSample(
                interface=name,
                rx_bytes=max(0, cur.bytes_recv - prev.bytes_recv),
                tx_bytes=max(0, cur.bytes_sent - prev.bytes_sent),
                packets_in=cur.packets_recv,
                packets_out=cur.packets_sent,
                errors_in=cur.errin,
                errors_out=cur.errout,
            ))
        return samples


# ---- sampler ----

@dataclass(frozen=True)
class Row:
    """One table row, rebuilt every tick."""
    interface: str
    rx_rate: float
    tx_rate: float
    packets_in: int
    packets_out: int
    errors_in: int
    errors_out: int

    @property
    def total(self) -> float:
        return self.rx_rate + self.tx_rate


def is_virtual(name: str) -> bool:
    return name.startswith(VIRTUAL_PREFIXES)


def collect(elapsed_s: float, samples: Iterable[InterfaceSample],
            show_virtual: bool = False) -> list[Row]:
    """Convert byte deltas over *elapsed_s* into rows of bytes/sec rates."""
    if elapsed_s <= 0:
        elapsed_s = 1.0

    rows = []
    for s in samples:
        if not show_virtual and is_virtual(s.interface):
            continue
        rows.append(Row(
            interface=s.interface,
            rx_rate=s.rx_bytes / elapsed_s,
            tx_rate=s.tx_bytes / elapsed_s,
            packets_in=s.packets_in,
            packets_out=s.packets_out,
            errors_in=s.errors_in,
            errors_out=s.errors_out,
        ))
    return rows


# ---- ranker ----

def _rank_key(row: Row) -> tuple[bool, float]:
    total = row.total
    if math.isnan(total):
        return True, 0.0
    return False, -total


def rank(rows: Iterable[Row]) -> list[Row]:
    """Busiest interface first. NaN totals sink to the bottom in input order."""
    return sorted(rows, key=_rank_key)
