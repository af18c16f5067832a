"""Test utilities for applications that use terr.

Build the expected tree with TraceTreeNode and compare it against a real
one with assert_trace_tree_equal:

    >>> expected = TraceTreeNode("wrapped: base", "app.py", 12, [TraceTreeNode("base", "app.py", 11)])
    >>> assert_trace_tree_equal(trace_tree(err), expected)
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

from terr.location import Location
from terr.traced import ErrorTracer


@dataclass
class TraceTreeNode:
    """Plain ErrorTracer implementation describing an expected tree node."""

    message: str
    file: str
    line: int
    nodes: list["TraceTreeNode"] = field(default_factory=list)

    def __str__(self) -> str:
        return self.message

    @property
    def location(self) -> Location:
        return Location(self.file, self.line)

    @property
    def children(self) -> Sequence[ErrorTracer]:
        return self.nodes


def assert_trace_tree_equal(got: ErrorTracer | None, want: ErrorTracer | None, path: str = "root") -> None:
    """Assert that two trace trees have the same messages, locations and shape.

    Raises:
        AssertionError: naming the first differing node, e.g. ``root.children[1]``.
    """
    if got is None or want is None:
        assert got is None and want is None, f"{path}: got {got!r}, want {want!r}"
        return
    assert str(got) == str(want), f"{path}: message {str(got)!r} != {str(want)!r}"
    assert tuple(got.location) == tuple(want.location), f"{path}: location {got.location} != {want.location}"
    assert len(got.children) == len(want.children), (
        f"{path}: {len(got.children)} children, want {len(want.children)}"
    )
    for index, (got_child, want_child) in enumerate(zip(got.children, want.children)):
        assert_trace_tree_equal(got_child, want_child, f"{path}.children[{index}]")


__all__ = ["TraceTreeNode", "assert_trace_tree_equal"]
