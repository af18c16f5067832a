"""terr - source-location tracing and trace trees for Python exceptions.

@public

terr records where an error was created, traced, wrapped or masked, and
which traced errors it was built from, without changing the error's
message, its ``__cause__`` chain, or how it matches in identity and
downcast checks.

Core Capabilities:
    - **Formatted errors**: ``newf("reading {}: {!w}", path, err)`` builds
      a traced error with ``str.format`` templates; ``!w`` wraps
    - **Tracing**: ``trace(err)`` adds one tracing level without wrapping
    - **Custom constructors**: ``trace_skip`` and ``trace_with_location``
      attribute errors to the caller of a helper
    - **Trace trees**: ``f"{err:@}"`` renders the tree; ``trace_tree``
      exposes it for custom serialization
    - **Chain protocol**: ``is_error``, ``as_error`` and ``unwrap`` see
      through traced errors

Quick Start:
    >>> from terr import newf, trace
    >>>
    >>> err = newf("base")
    >>> traced = trace(err)
    >>> wrapped = newf("wrapped: {!w}", traced)
    >>> masked = newf("masked: {}", wrapped)
    >>> print(f"{masked:@}")
    masked: wrapped: base @ example.py:6
    	wrapped: base @ example.py:5
    		base @ example.py:4
    			base @ example.py:3

Environment Variables:
    - TERR_TRIM_PATH_PREFIX: Prefix stripped from captured file names
    - TERR_LOGGING_CONFIG: YAML logging configuration for setup_logging()
    - TERR_LOG_LEVEL: Default level of the terr loggers
"""

from .chain import as_error, causes, is_error, unwrap, walk
from .exceptions import NotTracedError, TerrError, WrapConversionError
from .formatting import FormattedError, errorf
from .location import Location, capture_location
from .logging import TraceTreeFormatter, get_terr_logger, setup_logging
from .render import TREE_FORMAT_SPEC, render_tree, tree_lines
from .settings import Settings
from .traced import ErrorTracer, TracedError, iter_tree, trace_tree
from .tracing import newf, trace, trace_skip, trace_with_location

__version__ = "0.3.0"

__all__ = [
    # Construction
    "newf",
    "trace",
    "trace_skip",
    "trace_with_location",
    # Trace tree
    "ErrorTracer",
    "TracedError",
    "Location",
    "trace_tree",
    "iter_tree",
    "render_tree",
    "tree_lines",
    "TREE_FORMAT_SPEC",
    "capture_location",
    # Chain protocol
    "FormattedError",
    "errorf",
    "is_error",
    "as_error",
    "unwrap",
    "causes",
    "walk",
    # Exceptions
    "TerrError",
    "NotTracedError",
    "WrapConversionError",
    # Logging and settings
    "TraceTreeFormatter",
    "get_terr_logger",
    "setup_logging",
    "Settings",
]
