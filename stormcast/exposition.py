"""Prometheus text exposition of a registry snapshot."""
from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, generate_latest
from prometheus_client.core import GaugeMetricFamily

from stormcast import catalog
from stormcast.registry import Snapshot

__all__ = ["CONTENT_TYPE_LATEST", "SnapshotCollector", "render"]


class SnapshotCollector:
    """Custom collector yielding one gauge family per snapshot entry."""

    def __init__(self, snapshot: Snapshot):
        self._snapshot = snapshot

    def collect(self):
        for entry in self._snapshot:
            spec = catalog.by_name(entry.name)
            help_text = spec.help_text if spec is not None else entry.name
            yield GaugeMetricFamily(entry.name, help_text, value=entry.value)


def render(snapshot: Snapshot) -> bytes:
    registry = CollectorRegistry(auto_describe=False)
    registry.register(SnapshotCollector(snapshot))
    return generate_latest(registry)
