"""Error chain protocol: identity, downcast and unwrap over exception chains.

@public

Python links exceptions through ``__cause__`` (``raise ... from ...``) and
groups them in ``BaseExceptionGroup``. This module walks those links and
lets an exception take part in the walk through three optional hooks:

- ``unwrap()`` returns the immediate cause, replacing ``__cause__``.
- ``unwrap_all()`` returns every immediate cause of a multi-wrapping error.
- ``is_(target)`` / ``as_(cls)`` answer identity and downcast queries for
  errors that wrap a value without exposing it as a cause.

Example:
    >>> sentinel = KeyError("missing")
    >>> try:
    ...     raise RuntimeError("lookup failed") from sentinel
    ... except RuntimeError as exc:
    ...     assert is_error(exc, sentinel)
    ...     assert as_error(exc, KeyError) is sentinel
"""

from collections.abc import Iterator
from typing import TypeVar

E = TypeVar("E", bound=BaseException)


def unwrap(err: BaseException | None) -> BaseException | None:
    """Return the immediate cause of ``err``, or None.

    Errors whose type defines ``unwrap()`` decide for themselves; all
    others report their ``__cause__``. The implicit ``__context__`` is not
    a cause.
    """
    if err is None:
        return None
    if callable(getattr(type(err), "unwrap", None)):
        return err.unwrap()  # pyright: ignore[reportAttributeAccessIssue]
    return err.__cause__


def causes(err: BaseException) -> tuple[BaseException, ...]:
    """Return every immediate cause of ``err``, in order."""
    if callable(getattr(type(err), "unwrap_all", None)):
        return tuple(err.unwrap_all())  # pyright: ignore[reportAttributeAccessIssue]
    if isinstance(err, BaseExceptionGroup):
        return tuple(err.exceptions)
    cause = unwrap(err)
    return (cause,) if cause is not None else ()


def walk(err: BaseException | None) -> Iterator[BaseException]:
    """Iterate ``err`` and its causes depth-first, each error at most once."""
    if err is None:
        return
    seen: set[int] = set()
    stack = [err]
    while stack:
        current = stack.pop()
        if id(current) in seen:
            continue
        seen.add(id(current))
        yield current
        stack.extend(reversed(causes(current)))


def is_error(err: BaseException | None, target: BaseException) -> bool:
    """Report whether any error in the chain of ``err`` matches ``target``.

    An error matches when it compares equal to ``target`` (identity for
    exceptions that do not override ``__eq__``) or when its ``is_(target)``
    hook returns True.
    """
    for current in walk(err):
        if current == target:
            return True
        hook = getattr(type(current), "is_", None)
        if callable(hook) and current.is_(target):  # pyright: ignore[reportAttributeAccessIssue]
            return True
    return False


def as_error(err: BaseException | None, cls: type[E]) -> E | None:
    """Return the first error in the chain of ``err`` that is a ``cls``, or None.

    Errors with an ``as_(cls)`` hook may answer on behalf of a value they
    wrap.
    """
    for current in walk(err):
        if isinstance(current, cls):
            return current
        hook = getattr(type(current), "as_", None)
        if callable(hook):
            found = current.as_(cls)  # pyright: ignore[reportAttributeAccessIssue]
            if found is not None:
                return found
    return None


__all__ = ["as_error", "causes", "is_error", "unwrap", "walk"]
