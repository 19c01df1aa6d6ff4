"""FastAPI app for GET /health (JSON) and GET / (HTML status page), served by uvicorn in a background thread.

Handlers only read the immutable config snapshot and the clock, so requests need no locking."""

import html
import logging
import socket
import threading
import time
from datetime import datetime
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.responses import HTMLResponse, JSONResponse

from pulse_logger import __version__
from pulse_logger.config.settings import LoggerConfig
from pulse_logger.core.durations import format_duration, truncate_to_seconds
from pulse_logger.core.logging_utils import TIMESTAMP_FORMAT
from pulse_logger.errors import ServerStartError

logger = logging.getLogger(__name__)

LISTEN_HOST = "0.0.0.0"

_INDEX_TEMPLATE = """<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>Pulse Logger</title></head>
<body style="font-family:system-ui;padding:1rem;">
  <h1>Pulse Logger</h1>
  <p>Status: <span style="color:green">running</span></p>
  <p>Started: {start_time}</p>
  <p>Uptime: {uptime}</p>
  <p>Hostname: {hostname}</p>
  <p>Log interval: {interval}s</p>
  <p>Message: {message}</p>
  <p><a href="/health">/health</a></p>
</body>
</html>"""


def create_app(config: LoggerConfig) -> FastAPI:
    """Build FastAPI app with exactly two routes; docs/openapi routes are disabled."""
    app = FastAPI(
        title="Pulse Logger",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    @app.get("/health")
    def get_health() -> JSONResponse:
        """status, RFC3339 timestamp, hostname and full-precision uptime text."""
        return JSONResponse(
            content={
                "status": "healthy",
                "timestamp": datetime.now().astimezone().isoformat(timespec="seconds"),
                "hostname": config.hostname,
                "uptime": format_duration(config.uptime()),
            }
        )

    @app.get("/", response_class=HTMLResponse)
    def get_index() -> str:
        return _INDEX_TEMPLATE.format(
            start_time=config.start_time.strftime(TIMESTAMP_FORMAT),
            uptime=format_duration(truncate_to_seconds(config.uptime())),
            hostname=html.escape(config.hostname),
            interval=config.log_interval,
            message=html.escape(config.log_message),
        )

    return app


def _bind_socket(port: int) -> socket.socket:
    """Bind and listen on LISTEN_HOST:port. Raises ServerStartError if the port is unavailable."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((LISTEN_HOST, port))
        sock.listen()
    except OSError as e:
        sock.close()
        raise ServerStartError(port, e) from e
    sock.set_inheritable(True)
    return sock


class StatusServerHandle:
    """Running uvicorn server on its own thread and event loop."""

    def __init__(self, server: uvicorn.Server, sock: socket.socket):
        self._server = server
        self._sock = sock
        self.port: int = sock.getsockname()[1]
        self._thread = threading.Thread(
            target=server.run,
            kwargs={"sockets": [sock]},
            name="status-server",
            daemon=True,
        )

    def start(self) -> None:
        self._thread.start()

    @property
    def started(self) -> bool:
        return bool(self._server.started)

    def is_alive(self) -> bool:
        return self._thread.is_alive()

    def wait_until_started(self, timeout: float = 5.0) -> bool:
        """Poll until uvicorn reports startup complete. Returns False on timeout or early exit."""
        deadline = time.monotonic() + timeout
        while time.monotonic() < deadline:
            if self.started:
                return True
            if not self._thread.is_alive():
                return False
            time.sleep(0.02)
        return self.started

    def stop(self, timeout: float = 5.0) -> None:
        """Ask uvicorn to exit and join the thread."""
        self._server.should_exit = True
        self._thread.join(timeout)
        if self._thread.is_alive():
            logger.warning("Status server thread did not exit within %.1fs", timeout)
        try:
            self._sock.close()
        except OSError as e:
            logger.debug("Closing status server socket failed: %s", e)


def start_status_server(config: LoggerConfig) -> Optional[StatusServerHandle]:
    """
    Start the status server if include_http is set; otherwise log a notice and return None.

    The socket is bound on the calling thread so a busy port surfaces immediately as
    ServerStartError; uvicorn then serves on a daemon thread.
    """
    if not config.include_http:
        logger.info("HTTP server disabled")
        return None

    sock = _bind_socket(config.server_port)
    uv_config = uvicorn.Config(
        create_app(config),
        log_config=None,
        access_log=False,
        lifespan="off",
    )
    handle = StatusServerHandle(uvicorn.Server(uv_config), sock)
    handle.start()
    logger.info("HTTP server listening on %s:%s", LISTEN_HOST, handle.port)
    return handle
