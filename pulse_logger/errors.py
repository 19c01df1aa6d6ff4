"""Exceptions raised at startup. Anything else is left to the runtime defaults."""


class PulseLoggerError(Exception):
    """Base class for fatal pulse logger errors."""


class ConfigError(PulseLoggerError):
    """Configuration snapshot failed validation (e.g. non-positive interval)."""


class ServerStartError(PulseLoggerError):
    """Status server could not bind its listening socket."""

    def __init__(self, port: int, cause: OSError):
        super().__init__(f"cannot listen on port {port}: {cause}")
        self.port = port
        self.cause = cause
