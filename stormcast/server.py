import logging
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import parse_qs, urlparse

from stormcast import exposition, health
from stormcast.mapper import map_params
from stormcast.registry import MetricRegistry

logger = logging.getLogger(__name__)

PUSH_PATHS = ("/push/", "/push", "/weatherstation/updateweatherstation.php")


class WeatherServer(ThreadingHTTPServer):
    """HTTP server carrying the registry its handlers update and scrape."""

    daemon_threads = True

    def __init__(self, address, registry: MetricRegistry):
        self.registry = registry
        super().__init__(address, StormcastHandler)


class StormcastHandler(BaseHTTPRequestHandler):
    server: WeatherServer

    def do_GET(self):
        parsed = urlparse(self.path)
        if parsed.path in PUSH_PATHS:
            self.handle_push(parsed.query)
        elif parsed.path == "/metrics":
            payload = exposition.render(self.server.registry.snapshot())
            self.respond(200, payload, exposition.CONTENT_TYPE_LATEST)
        elif parsed.path == "/health":
            self.respond(200, health.probe().encode(), "text/plain; charset=utf-8")
        else:
            self.respond(404)

    def do_POST(self):
        # some firmwares POST the same query string; the body is not used
        parsed = urlparse(self.path)
        length = int(self.headers.get("Content-Length") or 0)
        if length:
            self.rfile.read(length)
        if parsed.path in PUSH_PATHS:
            self.handle_push(parsed.query)
        else:
            self.respond(404)

    def handle_push(self, query: str):
        # first value wins for repeated keys
        params = {key: values[0] for key, values in parse_qs(query).items()}
        updates = map_params(params)
        for name, value in updates:
            self.server.registry.set(name, value)
        logger.debug("push from %s: %d fields, %d applied",
                     self.client_address[0], len(params), len(updates))
        # respond so the station thinks it succeeded
        self.respond(200)

    def respond(self, status: int, body: bytes = b"", content_type: str = None):
        self.send_response(status)
        if content_type:
            self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        if body:
            self.wfile.write(body)

    def log_message(self, fmt, *args):
        logger.debug("%s - %s", self.address_string(), fmt % args)


def serve(address, registry: MetricRegistry):
    server = WeatherServer(address, registry)
    host, port = server.server_address[:2]
    logger.info("starting stormcast on %s:%s", host, port)
    logger.info("  - data pushes: /push/?tempf=...&humidity=...")
    logger.info("  - metrics scrape: /metrics")
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("shutting down")
    finally:
        server.server_close()
