"""Configuration snapshot loaded once from the environment."""

from pulse_logger.config.settings import LoggerConfig, load_config

__all__ = ["LoggerConfig", "load_config"]
