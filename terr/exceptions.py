"""Exception hierarchy for terr.

terr never raises for ordinary tracing: these exceptions only signal
programming errors, such as handing a plain value to the tree renderer.
All of them inherit from TerrError.
"""


class TerrError(Exception):
    """Base exception for all terr errors."""


class NotTracedError(TerrError, TypeError):
    """Raised when a trace-tree operation receives a value that is not a tree node."""


class WrapConversionError(TerrError, TypeError):
    """Raised when the ``!w`` conversion is applied to something that is not an exception."""
