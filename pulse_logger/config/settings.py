"""Immutable configuration snapshot built from environment variables.

Defaults: loaded from config/defaults.yaml (single source of truth, no code-level defaults).
The snapshot is created once at process start and handed to the periodic logger and the
status server; neither mutates it.
"""

import logging
import os
import re
import threading
import time
from dataclasses import dataclass
from datetime import datetime, timedelta
from pathlib import Path
from typing import Dict, Mapping, Optional

import yaml

from pulse_logger.errors import ConfigError

logger = logging.getLogger(__name__)

# Plain optionally-signed ASCII decimal; no whitespace, underscores or other digit scripts
_INT_RE = re.compile(r"[+-]?[0-9]+")

# Longest sleep the timer loop can wait on
MAX_INTERVAL_SEC = int(threading.TIMEOUT_MAX)

# Lazy-loaded packaged defaults
_DEFAULTS: Optional[Dict[str, str]] = None


def _load_defaults() -> Dict[str, str]:
    """Load defaults.yaml next to this module. Values are kept as strings, like env vars."""
    global _DEFAULTS
    if _DEFAULTS is None:
        path = Path(__file__).resolve().parent / "defaults.yaml"
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
        _DEFAULTS = {k: str(v) for k, v in raw.items()}
    return _DEFAULTS


@dataclass(frozen=True)
class LoggerConfig:
    """Configuration snapshot: read-only for the whole process lifetime."""

    log_interval: float  # whole seconds from the environment
    server_port: int
    log_message: str
    include_http: bool
    hostname: str
    start_time: datetime
    start_monotonic: float

    def uptime(self, now_monotonic: Optional[float] = None) -> timedelta:
        """Elapsed time since start. Monotonic clock, so repeated calls never go backwards."""
        now = time.monotonic() if now_monotonic is None else now_monotonic
        return timedelta(seconds=max(0.0, now - self.start_monotonic))


def get_env(environ: Mapping[str, str], key: str, defaults: Mapping[str, str]) -> str:
    """Value of key, or its default when absent or empty."""
    value = environ.get(key)
    if value:
        return value
    return defaults.get(key, "")


def _parse_int(key: str, raw: str) -> int:
    """Parse an integer; malformed input becomes 0 (logged, not raised)."""
    if _INT_RE.fullmatch(raw):
        try:
            return int(raw)
        except ValueError:
            pass  # beyond the interpreter's int/str digit limit
    logger.warning("Config %s=%.40r is not an integer; using 0", key, raw)
    return 0


def _validate(cfg: LoggerConfig) -> None:
    if cfg.log_interval <= 0:
        raise ConfigError(f"LOG_INTERVAL must be a positive number of seconds (got {cfg.log_interval})")
    if cfg.log_interval > MAX_INTERVAL_SEC:
        raise ConfigError(f"LOG_INTERVAL must be at most {MAX_INTERVAL_SEC} seconds (got {cfg.log_interval})")
    if not 0 <= cfg.server_port <= 65535:
        raise ConfigError(f"SERVER_PORT must be within 0-65535 (got {cfg.server_port})")


def load_config(
    environ: Optional[Mapping[str, str]] = None,
    defaults: Optional[Mapping[str, str]] = None,
) -> LoggerConfig:
    """
    Build the configuration snapshot.

    Reads LOG_INTERVAL, SERVER_PORT, LOG_MESSAGE, INCLUDE_HTTP, HOSTNAME from environ
    (os.environ when None). Missing or empty values come from defaults.yaml.
    INCLUDE_HTTP enables the status server only when it is exactly "true".
    Raises ConfigError when the resulting interval or port is unusable.
    """
    env = os.environ if environ is None else environ
    dflt = _load_defaults() if defaults is None else defaults

    cfg = LoggerConfig(
        log_interval=_parse_int("LOG_INTERVAL", get_env(env, "LOG_INTERVAL", dflt)),
        server_port=_parse_int("SERVER_PORT", get_env(env, "SERVER_PORT", dflt)),
        log_message=get_env(env, "LOG_MESSAGE", dflt),
        include_http=get_env(env, "INCLUDE_HTTP", dflt) == "true",
        hostname=get_env(env, "HOSTNAME", dflt),
        start_time=datetime.now().astimezone(),
        start_monotonic=time.monotonic(),
    )
    _validate(cfg)

    logger.info(
        "Config loaded: interval=%ss port=%s http=%s",
        cfg.log_interval,
        cfg.server_port,
        cfg.include_http,
    )
    logger.info("Hostname: %s", cfg.hostname)
    return cfg
