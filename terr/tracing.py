"""Construction of traced errors.

@public

Every function here records where it was called from and which traced
errors went into the new one. Only TracedError arguments become children
in the trace tree; any other exception keeps its place in the native
``__cause__`` chain and nothing more.

Example:
    >>> from terr import newf, trace
    >>>
    >>> def load(path):
    ...     try:
    ...         with open(path) as f:
    ...             return f.read()
    ...     except OSError as exc:
    ...         return newf("loading {}: {!w}", path, exc)
    >>>
    >>> err = trace(load("/missing"))
    >>> print(f"{err:@}")  # two lines: the trace() call, then the newf() call
"""

from collections.abc import Iterable
from typing import Any, overload

from terr.formatting import vformat_error
from terr.location import Location, as_location, capture_location
from terr.traced import TracedError, only_traced


def _require_exception(err: object) -> None:
    if not isinstance(err, BaseException):
        raise TypeError(f"expected an exception, got {type(err).__name__}")


def newf(template: str, /, *args: Any, **kwargs: Any) -> TracedError:
    """Build a traced error from a ``str.format`` template.

    @public

    Works like errorf(): fields with ``!w`` wrap their argument in the
    native chain, other fields only embed its message. Every traced error
    among the arguments becomes a child, whichever conversion embeds it,
    in argument order (positional first, then keyword).

    Args:
        template: Format string, ``!w`` marks wrapped errors.
        *args: Positional format arguments.
        **kwargs: Keyword format arguments.

    Returns:
        A traced error located at the caller of newf.

    Example:
        >>> base = newf("base")
        >>> err = newf("masked: {}", trace(base))
        >>> [str(child) for child in err.children]
        ['base']
    """
    underlying = vformat_error(template, args, kwargs)
    return TracedError(underlying, capture_location(1), only_traced((*args, *kwargs.values())))


@overload
def trace(err: None, *, location: Location | tuple[str, int] | None = None, children: Iterable[object] = ()) -> None: ...


@overload
def trace(
    err: BaseException, *, location: Location | tuple[str, int] | None = None, children: Iterable[object] = ()
) -> TracedError: ...


def trace(
    err: BaseException | None,
    *,
    location: Location | tuple[str, int] | None = None,
    children: Iterable[object] = (),
) -> TracedError | None:
    """Add a tracing level to ``err`` without changing it.

    @public

    The new traced error reports ``err``'s message and chain unchanged.
    If ``err`` is itself traced, it becomes the only default child, so
    repeated tracing draws a straight line in the rendered tree.

    Args:
        err: Error to trace. None is passed through.
        location: Explicit ``(file, line)`` replacing the caller location,
                  for error constructors that report their own caller.
        children: Extra errors to attach after ``err``; entries that are
                  not traced errors are ignored.

    Returns:
        None for None, otherwise the new traced error.

    Note:
        The result is an ``Exception`` even when ``err`` is only a
        ``BaseException`` (KeyboardInterrupt, SystemExit), so raising it is
        caught by ``except Exception``.
    """
    if err is None:
        return None
    _require_exception(err)
    loc = as_location(location) if location is not None else capture_location(1)
    return TracedError(err, loc, only_traced((err, *children)))


def trace_skip(err: BaseException | None, skip: int) -> TracedError | None:
    """Trace ``err`` at a location ``skip`` frames above the caller.

    @public

    ``trace_skip(err, 0)`` is ``trace(err)``. Custom error constructors
    pass 1 so the location points at whoever called them.

    Example:
        >>> def not_found(name):
        ...     return trace_skip(KeyError(name), 1)
        >>>
        >>> err = not_found("user")  # located on this line

    Raises:
        ValueError: ``skip`` is negative.
    """
    if skip < 0:
        raise ValueError(f"skip must be >= 0, got {skip}")
    if err is None:
        return None
    _require_exception(err)
    return TracedError(err, capture_location(skip + 1), only_traced((err,)))


def trace_with_location(err: BaseException | None, file: str, line: int) -> TracedError | None:
    """Trace ``err`` at an explicit location.

    @public

    Equivalent to ``trace(err, location=(file, line))``.
    """
    return trace(err, location=Location(file, line))


__all__ = ["newf", "trace", "trace_skip", "trace_with_location"]
