"""
Translate a station push (query parameters) into metric updates.

Unknown parameters are ignored and a value that fails to parse only drops
that one field; the rest of the push still goes through.
"""
import logging
import math
import re
from typing import List, Mapping, Optional, Tuple

from stormcast import catalog
from stormcast.catalog import MetricKind, MetricSpec

logger = logging.getLogger(__name__)

Update = Tuple[str, float]

_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_decimal(raw: str) -> Optional[float]:
    """Parse a plain decimal literal; None for anything else (nan, inf, hex...)."""
    text = raw.strip()
    if not _DECIMAL.fullmatch(text):
        return None
    value = float(text)
    # huge exponents overflow to inf
    if math.isinf(value):
        return None
    return value


def parse_boolean(raw: str) -> Optional[float]:
    text = raw.strip()
    if text == "0":
        return 0.0
    if text == "1":
        return 1.0
    return None


def parse_angle(raw: str) -> Optional[float]:
    value = parse_decimal(raw)
    if value is None or not 0.0 <= value < 360.0:
        return None
    return value


_PARSERS = {
    MetricKind.GAUGE: parse_decimal,
    MetricKind.BOOLEAN: parse_boolean,
    MetricKind.ANGLE: parse_angle,
}


def parse_value(spec: MetricSpec, raw: str) -> Optional[float]:
    return _PARSERS[spec.kind](raw)


def map_params(params: Mapping[str, str]) -> List[Update]:
    """
    Map a push's parameters to ``(metric name, value)`` updates.

    Updates come out in the order of ``params``. Keys without a catalog
    entry and values that do not parse for their metric kind are skipped.
    """
    updates: List[Update] = []
    for key, raw in params.items():
        spec = catalog.lookup(key)
        if spec is None:
            continue
        value = parse_value(spec, raw)
        if value is None:
            logger.debug("skipping malformed %s=%r", key, raw)
            continue
        updates.append((spec.name, value))
    return updates
