"""Tests for TracedError, the trace tree accessor and the tree renderer."""

import pickle

import pytest

from terr import (
    TREE_FORMAT_SPEC,
    ErrorTracer,
    Location,
    NotTracedError,
    TracedError,
    errorf,
    iter_tree,
    newf,
    render_tree,
    trace,
    trace_tree,
    tree_lines,
)
from terr.testing import TraceTreeNode, assert_trace_tree_equal
from tests.support.helpers import here


class Formattable(Exception):
    """Exception with its own format spec handling."""

    def __format__(self, format_spec: str) -> str:
        return f"<{format_spec}>"


class TestTracedError:
    """Test the traced error node."""

    def test_message_unchanged(self):
        """Test str(trace(e)) == str(e) for assorted errors."""
        for err in (ValueError("bad"), KeyError("id"), errorf("wrapped: {!w}", OSError("disk")), newf("x")):
            assert str(trace(err)) == str(err)

    def test_children_empty_tuple(self):
        """Test children is an empty tuple, never None."""
        assert trace(ValueError("x")).children == ()

    def test_location_unpacks(self):
        """Test location unpacks into file and line."""
        file, line = here()
        traced = trace(ValueError("x"))

        got_file, got_line = traced.location
        assert (got_file, got_line) == (file, line + 1)
        assert str(traced.location) == f"{file}:{line + 1}"

    def test_location_is_immutable(self):
        """Test the location cannot be reassigned."""
        traced = trace(ValueError("x"))

        with pytest.raises(AttributeError):
            traced.location = Location("other.py", 1)  # pyright: ignore[reportAttributeAccessIssue]
        with pytest.raises((AttributeError, ValueError)):
            traced.location.line = 5  # pyright: ignore[reportAttributeAccessIssue]

    def test_format_forwarded_to_underlying(self):
        """Test format specs other than the tree spec go to the wrapped error."""
        traced = trace(Formattable())

        assert format(traced, ">10") == "<>10>"
        assert f"{traced:x}" == "<x>"
        assert f"{trace(ValueError('plain'))}" == "plain"

    def test_unsupported_format_spec_fails_like_underlying(self):
        """Test a spec the wrapped error rejects is rejected the same way."""
        with pytest.raises(TypeError):
            format(ValueError("x"), ">10")
        with pytest.raises(TypeError):
            format(trace(ValueError("x")), ">10")

    def test_repr(self):
        """Test repr names the wrapped error and the location."""
        traced = trace(ValueError("x"), location=("app.py", 3))

        assert repr(traced) == "<TracedError ValueError('x') @ app.py:3>"

    def test_pickle(self):
        """Test a traced tree survives pickling."""
        base = newf("base")
        err = newf("wrapped: {!w}", trace(base))

        restored = pickle.loads(pickle.dumps(err))

        assert isinstance(restored, TracedError)
        assert f"{restored:@}" == f"{err:@}"

    def test_rejects_plain_exception_child(self):
        """Test direct construction refuses children that are not traced errors."""
        with pytest.raises(NotTracedError, match="ValueError"):
            TracedError(ValueError("x"), Location("a.py", 1), [ValueError("plain")])  # pyright: ignore[reportArgumentType]

    def test_rejects_missing_underlying(self):
        """Test direct construction refuses None or a non-exception as the wrapped error."""
        with pytest.raises(TypeError, match="expected an exception"):
            TracedError(None, Location("a.py", 1))  # pyright: ignore[reportArgumentType]
        with pytest.raises(TypeError, match="expected an exception"):
            TracedError("text", Location("a.py", 1))  # pyright: ignore[reportArgumentType]

    def test_direct_construction(self):
        """Test a hand-built node with valid arguments renders like a constructed one."""
        child = trace(ValueError("child"), location=("c.py", 2))
        node = TracedError(ValueError("root"), Location("r.py", 1), [child])

        assert node.children == (child,)
        assert f"{node:@}" == "root @ r.py:1\n\tchild @ c.py:2"

    def test_base_exception_becomes_exception(self):
        """Test tracing a BaseException yields a node caught by except Exception."""
        interrupt = KeyboardInterrupt()
        try:
            raise trace(interrupt)
        except Exception as exc:
            caught = exc

        assert isinstance(caught, TracedError)
        assert caught.underlying is interrupt

    def test_repr_not_forwarded_in_templates(self):
        """Test {!r} of a traced argument shows the node repr, {} shows the message."""
        traced = trace(ValueError("x"), location=("app.py", 3))

        assert str(newf("{!r}", traced)) == "<TracedError ValueError('x') @ app.py:3>"
        assert str(newf("{}", traced)) == "x"

    def test_is_error_tracer(self):
        """Test the node satisfies the tree protocol."""
        assert isinstance(newf("x"), ErrorTracer)
        assert not isinstance(ValueError("x"), ErrorTracer)


class TestTraceTree:
    """Test the trace tree accessor."""

    def test_traced(self):
        """Test the accessor returns the traced error itself."""
        err = newf("x")

        assert trace_tree(err) is err

    def test_not_traced(self):
        """Test plain errors and None have no tree."""
        assert trace_tree(ValueError("x")) is None
        assert trace_tree(None) is None

    def test_walk_children(self):
        """Test walking the tree programmatically."""
        non_traced = ValueError("non-traced")
        traced1 = newf("traced 1")
        traced2 = newf("traced 2")
        node = trace_tree(newf("{!w}, {}, {!w}", non_traced, traced1, traced2))

        assert node is not None
        assert str(node) == "non-traced, traced 1, traced 2"
        assert [str(child) for child in node.children] == ["traced 1", "traced 2"]
        assert node.children[0].children == ()

    def test_iter_tree_pre_order(self):
        """Test iter_tree yields depth and node in pre-order."""
        a = newf("a")
        b = newf("b: {}", a)
        c = newf("c")
        root = newf("root: {} {}", b, c)

        assert [(depth, str(node)) for depth, node in iter_tree(root)] == [
            (0, "root: b: a c"),
            (1, "b: a"),
            (2, "a"),
            (1, "c"),
        ]


class TestRender:
    """Test the tab-indented tree rendering."""

    def test_format_spec_matches_render_tree(self):
        """Test f-string rendering and render_tree agree."""
        err = newf("wrapped: {!w}", trace(newf("base")))

        assert TREE_FORMAT_SPEC == "@"
        assert f"{err:@}" == render_tree(err) == "\n".join(tree_lines(err))
        assert "{:@}".format(err) == render_tree(err)

    def test_single_node(self):
        """Test a leaf renders as one line without indentation."""
        err = trace(ValueError("leaf"), location=("leaf.py", 9))

        assert tree_lines(err) == ["leaf @ leaf.py:9"]

    def test_exact_format(self):
        """Test the line format for explicit locations."""
        child = trace(ValueError("child"), location=("c.py", 2))
        root = trace(ValueError("root"), location=("r.py", 1), children=[child])

        assert render_tree(root) == "root @ r.py:1\n\tchild @ c.py:2"

    def test_idempotent(self):
        """Test rendering the same node twice gives identical output."""
        err = newf("{} {}", newf("a"), trace(newf("b")))

        assert render_tree(err) == render_tree(err)

    def test_user_tree_nodes(self):
        """Test any ErrorTracer implementation can be rendered."""
        tree = TraceTreeNode("root", "r.py", 1, [TraceTreeNode("child", "c.py", 2)])

        assert render_tree(tree) == "root @ r.py:1\n\tchild @ c.py:2"

    def test_non_tree_fails_loudly(self):
        """Test rendering something that is not a tree node raises."""
        with pytest.raises(NotTracedError):
            render_tree(ValueError("x"))  # pyright: ignore[reportArgumentType]
        with pytest.raises(TypeError):
            tree_lines("text")  # pyright: ignore[reportArgumentType]

    def test_non_tree_descendant_fails_loudly(self):
        """Test a user node with a child that is not a tree node raises NotTracedError."""
        tree = TraceTreeNode("root", "r.py", 1, [ValueError("plain")])  # pyright: ignore[reportArgumentType]

        with pytest.raises(NotTracedError, match="ValueError"):
            render_tree(tree)

    def test_deep_tree(self):
        """Test very deep trees render without recursion limits."""
        err = newf("base")
        for _ in range(3000):
            err = trace(err)

        lines = tree_lines(err)
        assert len(lines) == 3001
        assert lines[-1].startswith("\t" * 3000 + "base @ ")

    def test_wide_tree(self):
        """Test many children keep their order."""
        children = [newf("child {}", i) for i in range(50)]
        root = newf("root", *children)

        lines = tree_lines(root)
        assert len(lines) == 51
        assert [line.split(" @ ")[0] for line in lines[1:]] == [f"\tchild {i}" for i in range(50)]


class TestTestingHelpers:
    """Test terr.testing helpers."""

    def test_mismatch_reports_path(self):
        """Test the assertion names the first differing node."""
        got = TraceTreeNode("root", "r.py", 1, [TraceTreeNode("child", "c.py", 2)])
        want = TraceTreeNode("root", "r.py", 1, [TraceTreeNode("child", "c.py", 3)])

        with pytest.raises(AssertionError, match=r"root\.children\[0\]: location"):
            assert_trace_tree_equal(got, want)

    def test_missing_tree(self):
        """Test None against a tree fails."""
        with pytest.raises(AssertionError):
            assert_trace_tree_equal(None, TraceTreeNode("x", "x.py", 1))
