"""Read-only HTTP status surface: GET /health and GET /."""

from pulse_logger.status_server.app import StatusServerHandle, create_app, start_status_server

__all__ = ["StatusServerHandle", "create_app", "start_status_server"]
