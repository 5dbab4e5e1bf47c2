"""
Pytest configuration for unit tests.

Provides a real stormcast server bound to an ephemeral port.
"""
import threading

import pytest

from stormcast.registry import MetricRegistry
from stormcast.server import WeatherServer


@pytest.fixture
def registry():
    return MetricRegistry()


@pytest.fixture
def live_server(registry):
    """Run a WeatherServer in a background thread; yields its base URL."""
    server = WeatherServer(("127.0.0.1", 0), registry)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    host, port = server.server_address[:2]
    yield f"http://{host}:{port}"
    server.shutdown()
    server.server_close()
    thread.join(timeout=5)
