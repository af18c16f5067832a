"""Logging infrastructure for terr.

@public

Key components:
    get_terr_logger: Factory function for package loggers
    setup_logging: Opt-in logging configuration from YAML or defaults
    LoggingConfig: Configuration class for logging settings
    TraceTreeFormatter: Formatter that renders trace trees under tracebacks

Example:
    >>> import logging
    >>> from terr.logging import TraceTreeFormatter
    >>>
    >>> handler = logging.StreamHandler()
    >>> handler.setFormatter(TraceTreeFormatter("%(levelname)s %(message)s"))
    >>> logging.getLogger("myapp").addHandler(handler)
"""

from .logging_config import LoggingConfig, get_terr_logger, setup_logging
from .tree_formatter import TraceTreeFormatter

__all__ = [
    "LoggingConfig",
    "TraceTreeFormatter",
    "get_terr_logger",
    "setup_logging",
]
