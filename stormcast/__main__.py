"""
stormcast entrypoint.

Run with: python3 -m stormcast [--bind HOST:PORT] [--log-level LEVEL]
"""
import argparse
import logging

from stormcast.config import Config
from stormcast.registry import MetricRegistry
from stormcast.server import serve


def build_parser(defaults: Config) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="stormcast",
                                description="Weather station → Prometheus exporter")
    p.add_argument("--bind", default=defaults.bind,
                   help=f"host:port to listen on (default: {defaults.bind})")
    p.add_argument("-p", "--port", type=int,
                   help="Port to listen on, overriding the one in --bind")
    p.add_argument("--log-level", default=defaults.log_level,
                   help=f"debug, info, warning or error (default: {defaults.log_level})")
    return p


def main(argv=None):
    parser = build_parser(Config.from_env())
    args = parser.parse_args(argv)
    config = Config(bind=args.bind, log_level=args.log_level)
    try:
        host, port = config.address
        level = config.level
    except ValueError as exc:
        parser.error(str(exc))
    if args.port is not None:
        port = args.port

    logging.basicConfig(level=level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    serve((host, port), MetricRegistry())


if __name__ == "__main__":
    main()
