"""
Last-known-value store shared by every request handler.

One slot per catalog metric, each guarded by its own lock, so concurrent
pushes and scrapes never serialize on a registry-wide lock.
"""
import threading
import time
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Tuple

from stormcast.catalog import CATALOG, MetricSpec


@dataclass(frozen=True)
class RegistryEntry:
    name: str
    value: float
    last_updated: float


Snapshot = Tuple[RegistryEntry, ...]


class _Slot:
    __slots__ = ("lock", "value", "last_updated")

    def __init__(self):
        self.lock = threading.Lock()
        self.value: Optional[float] = None
        self.last_updated = 0.0


class MetricRegistry:
    """Holds the latest value per metric; a metric is absent until first set."""

    def __init__(self, specs: Iterable[MetricSpec] = CATALOG,
                 clock: Callable[[], float] = time.time):
        self._clock = clock
        # built once; only slot contents change afterwards
        self._slots = {spec.name: _Slot() for spec in specs}
        self._order = tuple(self._slots)

    def set(self, name: str, value: float) -> None:
        try:
            slot = self._slots[name]
        except KeyError:
            raise KeyError(f"unknown metric {name!r}") from None
        now = self._clock()
        with slot.lock:
            slot.value = float(value)
            slot.last_updated = now

    def snapshot(self) -> Snapshot:
        """Copy every observed metric, in catalog order."""
        entries = []
        for name in self._order:
            slot = self._slots[name]
            with slot.lock:
                value, updated = slot.value, slot.last_updated
            if value is not None:
                entries.append(RegistryEntry(name, value, updated))
        return tuple(entries)
