"""Logging configuration for terr.

@public

terr is a library: importing it never configures logging. Applications
that want terr's records (and trace trees rendered under logged
tracebacks) call setup_logging() once at startup, either with a YAML
file or with the built-in defaults.

Usage:
    >>> from terr.logging import get_terr_logger, setup_logging
    >>> setup_logging(level="DEBUG")
    >>> logger = get_terr_logger(__name__)

Environment variables:
    TERR_LOGGING_CONFIG: Path to custom logging.yml
    TERR_LOG_LEVEL: Default level for the terr loggers (WARNING if unset)
"""

import logging.config
import os
from pathlib import Path
from typing import Any

import yaml

# Default log levels for the package loggers
DEFAULT_LOG_LEVELS = {
    "terr": "WARNING",
    "terr.location": "WARNING",
}


class LoggingConfig:
    """Manages logging configuration for terr and its host application.

    @public

    Attributes:
        config_path: Path to YAML configuration file.
        _config: Cached configuration dictionary.

    Configuration precedence:
        1. Explicit config_path parameter
        2. TERR_LOGGING_CONFIG environment variable
        3. Default configuration

    Example:
        >>> config = LoggingConfig()
        >>> config.apply()
        >>>
        >>> config = LoggingConfig(Path("custom_logging.yml"))
        >>> config.apply()

    Note:
        Configuration is lazy-loaded and cached after first access.
    """

    def __init__(self, config_path: Path | None = None):
        self.config_path = config_path or self._get_default_config_path()
        self._config: dict[str, Any] | None = None

    @staticmethod
    def _get_default_config_path() -> Path | None:
        """Return the config path named by TERR_LOGGING_CONFIG, if any."""
        if env_path := os.environ.get("TERR_LOGGING_CONFIG"):
            return Path(env_path)
        return None

    def load_config(self) -> dict[str, Any]:
        """Load logging configuration from file or defaults.

        Returns:
            Dictionary in logging.config.dictConfig format. Read from the
            YAML file when it exists, otherwise the default configuration.

        Note:
            Configuration is cached after first load. Create a new
            LoggingConfig instance to reload from disk.
        """
        if self._config is None:
            if self.config_path and self.config_path.exists():
                with open(self.config_path, "r") as f:
                    self._config = yaml.safe_load(f)
            else:
                self._config = self._get_default_config()
        assert self._config is not None
        return self._config

    @staticmethod
    def _get_default_config() -> dict[str, Any]:
        """Get default logging configuration.

        Records from the terr loggers go to stdout through the ``tree``
        formatter, which appends rendered trace trees to logged traced
        errors. The root logger keeps the plain ``standard`` formatter.

        Default format:
            "HH:MM:SS.mmm | LEVEL | logger.name - message"
        """
        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "standard": {
                    "format": "%(asctime)s.%(msecs)03d | %(levelname)-7s | %(name)s - %(message)s",
                    "datefmt": "%H:%M:%S",
                },
                "tree": {
                    "()": "terr.logging.tree_formatter.TraceTreeFormatter",
                    "fmt": "%(asctime)s.%(msecs)03d | %(levelname)-7s | %(name)s - %(message)s",
                    "datefmt": "%H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "standard",
                    "stream": "ext://sys.stdout",
                },
                "tree_console": {
                    "class": "logging.StreamHandler",
                    "formatter": "tree",
                    "stream": "ext://sys.stdout",
                },
            },
            "loggers": {
                "terr": {
                    "level": os.environ.get("TERR_LOG_LEVEL", "WARNING"),
                    "handlers": ["tree_console"],
                    "propagate": False,
                },
            },
            "root": {
                "level": "WARNING",
                "handlers": ["console"],
            },
        }

    def apply(self):
        """Apply the configuration with logging.config.dictConfig.

        Note:
            Multiple calls will reconfigure logging.
        """
        config = self.load_config()
        logging.config.dictConfig(config)


_logging_config: LoggingConfig | None = None


def setup_logging(config_path: Path | None = None, level: str | None = None):
    """Set up logging for terr.

    @public

    Args:
        config_path: Optional path to YAML logging configuration file.
                    If None, uses TERR_LOGGING_CONFIG or defaults.
        level: Optional log level override (INFO, DEBUG, WARNING, etc.)
              applied to every terr logger after the configuration.

    Example:
        >>> setup_logging()
        >>> setup_logging(Path("/etc/myapp/logging.yml"))
        >>> setup_logging(level="DEBUG")
    """
    global _logging_config

    _logging_config = LoggingConfig(config_path)
    _logging_config.apply()

    if level:
        for logger_name in DEFAULT_LOG_LEVELS:
            get_terr_logger(logger_name).setLevel(level)


def get_terr_logger(name: str) -> logging.Logger:
    """Get a logger for a terr component.

    @public

    Unlike setup_logging(), this never touches the logging configuration,
    so modules can create their loggers at import time.

    Args:
        name: Logger name, typically __name__.
    """
    return logging.getLogger(name)
