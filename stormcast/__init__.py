"""
stormcast - weather station data collector.

Receives station pushes as HTTP query parameters and exposes the latest
readings in Prometheus text format.
"""

__version__ = "1.0.0"
