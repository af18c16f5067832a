"""Traced errors and the trace tree.

A TracedError wraps any exception together with the location it was
created, traced, wrapped or masked at, and the traced errors it was built
from. Those children form an n-ary trace tree that is separate from
Python's native ``__cause__`` chain: a traced error reports exactly the
same message, causes, identity matches and downcasts as the error it
wraps.
"""

from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Protocol, TypeVar, final, runtime_checkable

from terr.chain import as_error, is_error, unwrap
from terr.exceptions import NotTracedError
from terr.location import Location

E = TypeVar("E", bound=BaseException)


@runtime_checkable
class ErrorTracer(Protocol):
    """Read-only view of a trace tree node.

    ``str(node)`` is the node's error message. TracedError implements this
    protocol; so can any user type that mirrors a tree, e.g. for comparing
    trees in tests or rebuilding one from storage.
    """

    @property
    def location(self) -> Location: ...

    @property
    def children(self) -> Sequence["ErrorTracer"]: ...


@final
class TracedError(Exception):
    """An exception with a source location and child traced errors.

    Instances are created by terr's construction functions (newf, trace,
    trace_skip, trace_with_location) and are immutable afterwards.

    ``str()`` and every format spec except ``"@"`` are forwarded to the
    underlying error. ``repr()`` is not: it names the underlying error and
    the location, so ``{!r}`` in a newf template shows the node rather than
    the wrapped error's own repr.

    A TracedError is always an ``Exception``, even when it wraps a
    ``BaseException`` such as KeyboardInterrupt, so ``except Exception``
    catches it when raised.

    Attributes:
        underlying: The wrapped exception. Its message, causes and
                    identity are what the traced error reports.
        location: Where the traced error was built.
        children: Traced errors this one traced, wrapped or masked.

    Raises:
        TypeError: ``underlying`` is not an exception.
        NotTracedError: A child is not a TracedError.
    """

    def __init__(self, underlying: BaseException, location: Location, children: Iterable["TracedError"] = ()):
        if not isinstance(underlying, BaseException):
            raise TypeError(f"expected an exception, got {type(underlying).__name__}")
        nodes = tuple(children)
        for child in nodes:
            if not isinstance(child, TracedError):
                raise NotTracedError(f"trace tree children must be traced errors, got {type(child).__name__}")
        super().__init__(underlying)
        self._underlying = underlying
        self._location = location
        self._children: tuple[TracedError, ...] = nodes
        cause = unwrap(underlying)
        if cause is not None:
            self.__cause__ = cause

    @property
    def underlying(self) -> BaseException:
        return self._underlying

    @property
    def location(self) -> Location:
        return self._location

    @property
    def children(self) -> tuple["TracedError", ...]:
        return self._children

    # Nested traced errors are peeled in a loop so long trace() chains never recurse.

    def is_(self, target: BaseException) -> bool:
        err = self._underlying
        while isinstance(err, TracedError):
            if err == target:
                return True
            err = err._underlying
        return is_error(err, target)

    def as_(self, cls: type[E]) -> E | None:
        err = self._underlying
        while isinstance(err, TracedError):
            if isinstance(err, cls):
                return err
            err = err._underlying
        return as_error(err, cls)

    def unwrap(self) -> BaseException | None:
        return unwrap(self._innermost())

    def _innermost(self) -> BaseException:
        err = self._underlying
        while isinstance(err, TracedError):
            err = err._underlying
        return err

    def __str__(self) -> str:
        return str(self._innermost())

    def __repr__(self) -> str:
        return f"<TracedError {self._innermost()!r} @ {self._location}>"

    def __format__(self, format_spec: str) -> str:
        from terr.render import TREE_FORMAT_SPEC, render_tree  # noqa: PLC0415

        if format_spec == TREE_FORMAT_SPEC:
            return render_tree(self)
        return format(self._innermost(), format_spec)

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self._underlying, self._location, self._children))


def only_traced(values: Iterable[object]) -> list[TracedError]:
    """Keep the TracedError instances among ``values``, in order."""
    return [value for value in values if isinstance(value, TracedError)]


def trace_tree(err: BaseException | None) -> TracedError | None:
    """Return the root of the trace tree of ``err``.

    @public

    Returns ``err`` itself when it is a traced error and None otherwise,
    including for None. Walk the result with ``children`` (or iter_tree)
    to serialize the tree in any shape; ``f"{err:@}"`` gives the standard
    tab-indented rendering.
    """
    if isinstance(err, TracedError):
        return err
    return None


def iter_tree(node: ErrorTracer) -> Iterator[tuple[int, ErrorTracer]]:
    """Yield ``(depth, node)`` for ``node`` and its descendants in pre-order."""
    stack: list[tuple[int, ErrorTracer]] = [(0, node)]
    while stack:
        depth, current = stack.pop()
        yield depth, current
        stack.extend((depth + 1, child) for child in reversed(current.children))


__all__ = ["ErrorTracer", "TracedError", "iter_tree", "only_traced", "trace_tree"]
