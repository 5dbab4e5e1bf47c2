"""
Process configuration for the stormcast server.

Loaded from environment variables; the command line may override it.
Nothing here changes how pushes are interpreted.
"""
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

DEFAULT_BIND = "0.0.0.0:8080"
DEFAULT_LOG_LEVEL = "info"


def parse_bind(bind: str) -> Tuple[str, int]:
    """Split ``host:port`` into its parts. An empty host means all interfaces."""
    host, sep, port = bind.rpartition(":")
    if not sep or not port.isdigit():
        raise ValueError(f"invalid bind address {bind!r}, expected host:port")
    number = int(port)
    if number > 65535:
        raise ValueError(f"invalid port in bind address {bind!r}")
    # [::1]:8080
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    return host, number


def parse_log_level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"unknown log level {name!r}")
    return level


@dataclass
class Config:
    bind: str = DEFAULT_BIND
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        env = os.environ if environ is None else environ
        return cls(
            bind=env.get("STORMCAST_BIND", DEFAULT_BIND),
            log_level=env.get("STORMCAST_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        )

    @property
    def address(self) -> Tuple[str, int]:
        return parse_bind(self.bind)

    @property
    def level(self) -> int:
        return parse_log_level(self.log_level)
