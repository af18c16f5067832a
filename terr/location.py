"""Source locations and call-stack capture."""

import sys
from collections.abc import Iterator

from pydantic.dataclasses import dataclass

from terr.logging import get_terr_logger
from terr.settings import settings

logger = get_terr_logger(__name__)


@dataclass(frozen=True)
class Location:
    """File and line an error was created, traced, wrapped or masked at.

    Unpacks like a ``(file, line)`` pair and prints as ``file:line``.
    """

    file: str
    line: int

    def __iter__(self) -> Iterator[str | int]:
        yield self.file
        yield self.line

    def __str__(self) -> str:
        return f"{self.file}:{self.line}"


UNKNOWN_LOCATION = Location("", 0)


def capture_location(skip: int) -> Location:
    """Return the location of a frame on the current call stack.

    Args:
        skip: Frames to ascend from the function calling capture_location.
              0 is that function, 1 its caller, and so on.

    Returns:
        The frame's file and current line. UNKNOWN_LOCATION when the stack
        is not deep enough; capturing never raises.
    """
    try:
        frame = sys._getframe(skip + 1)
    except ValueError:
        logger.debug("Call stack has no frame %d levels up, location unknown", skip)
        return UNKNOWN_LOCATION

    file = frame.f_code.co_filename
    prefix = settings.trim_path_prefix
    if prefix and file.startswith(prefix):
        file = file[len(prefix) :]
    return Location(file, frame.f_lineno or 0)


def as_location(value: Location | tuple[str, int]) -> Location:
    """Coerce an explicit ``(file, line)`` pair into a Location."""
    if isinstance(value, Location):
        return value
    file, line = value
    return Location(file, line)


__all__ = ["Location", "UNKNOWN_LOCATION", "as_location", "capture_location"]
