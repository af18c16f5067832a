"""Test helpers for location assertions and custom error types."""

import sys

from terr import TracedError, trace_skip


def here() -> tuple[str, int]:
    """Return the file and line of the caller."""
    frame = sys._getframe(1)
    return frame.f_code.co_filename, frame.f_lineno


class CustomError(Exception):
    """Plain exception carrying a value, used for downcast checks."""

    def __init__(self, value: str):
        super().__init__(value)
        self.value = value


class ValidationError(Exception):
    """Custom error type built through a tracing constructor."""


def new_validation_error(msg: str) -> TracedError | None:
    """Custom constructor reporting the location of its caller."""
    return trace_skip(ValidationError(msg), 1)
