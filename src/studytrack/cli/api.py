# studytrack/cli/api.py
import os

import requests

from studytrack.config import load_settings
from studytrack.logging import get_logger


def register_subcommands(subparsers):
    status_parser = subparsers.add_parser("status", help="Check a running server's health endpoint")
    status_parser.add_argument(
        "--server",
        default=os.getenv("STUDYTRACK_API_URL") or "",
        help="Server base URL (default: $STUDYTRACK_API_URL or http://127.0.0.1:$PORT)",
    )
    status_parser.add_argument(
        "--timeout-seconds",
        type=float,
        default=5.0,
        help="HTTP timeout seconds (default: 5)",
    )

    starter_parser = subparsers.add_parser("start", help="start the API server")
    starter_parser.add_argument("--host", default=None, help="Host to bind (default: $STUDYTRACK_HOST or 0.0.0.0)")
    starter_parser.add_argument("--port", type=int, default=None, help="Port to listen on (default: $PORT or 4000)")


def _probe_host(host: str) -> str:
    if host in {"0.0.0.0", "::"}:
        return "127.0.0.1"
    return host


def _default_server_url(value: str | None) -> str:
    raw = (value or "").strip().rstrip("/")
    if raw:
        return raw
    settings = load_settings()
    return f"http://{_probe_host(settings.host)}:{settings.port}"


def dispatch(args):
    """Dispatch API CLI subcommands using a simple lookup table.

    Errors from handlers are allowed to propagate so callers can see the
    underlying exception. Unknown subcommands raise ``ValueError`` with a clear
    message.
    """
    logger = get_logger(__file__)

    def _status() -> None:
        server = _default_server_url(getattr(args, "server", ""))
        url = server + "/api/health"
        try:
            resp = requests.get(url, timeout=max(0.5, float(getattr(args, "timeout_seconds", 5.0))))
            resp.raise_for_status()
        except requests.exceptions.RequestException as exc:
            logger.error("Health check failed for %s: %s", url, exc)
            raise SystemExit(f"Server at {server} is not healthy: {exc}") from exc
        data = resp.json()
        print(f"{data.get('status', 'unknown')}: {data.get('message', '')}".rstrip(": "))

    def _start() -> None:
        from studytrack.api.main import app
        import uvicorn

        settings = load_settings()
        host = args.host or settings.host
        port = args.port or settings.port
        logger.info("Study Tracker Server running on port %s", port)
        logger.info("Access at: http://%s:%s", _probe_host(host), port)
        logger.info("Health check: http://%s:%s/api/health", _probe_host(host), port)
        uvicorn.run(app, host=host, port=port)

    commands = {"status": _status, "start": _start}
    try:
        handler = commands[args.subcommand]
    except KeyError as exc:
        message = f"No handler for API subcommand: {args.subcommand}"
        logger.error(message)
        raise ValueError(message) from exc

    handler()
