def probe() -> str:
    """Liveness only: answers as long as the process can serve a request."""
    return "ok"
