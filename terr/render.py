r"""Text rendering of trace trees.

@public

Each node becomes one line: its depth in tabs, its message, `` @ `` and
its ``file:line``. Children follow their parent, depth-first:

    masked: wrapped: base @ app.py:12
    \twrapped: base @ app.py:11
    \t\tbase @ app.py:10
    \t\t\tbase @ app.py:9

TracedError exposes the rendering through the ``"@"`` format spec, so
``f"{err:@}"`` and ``render_tree(err)`` produce the same text.
"""

from terr.exceptions import NotTracedError
from terr.traced import ErrorTracer, iter_tree

TREE_FORMAT_SPEC = "@"


def tree_lines(node: ErrorTracer) -> list[str]:
    """Return one line per node of the tree rooted at ``node``.

    Raises:
        NotTracedError: ``node`` or one of its descendants is not a trace tree node.
    """
    lines: list[str] = []
    for depth, current in iter_tree(node):
        if not isinstance(current, ErrorTracer):
            raise NotTracedError(f"cannot render a trace tree for {type(current).__name__}")
        file, line = current.location
        indent = "\t" * depth
        lines.append(f"{indent}{current!s} @ {file}:{line}")
    return lines


def render_tree(node: ErrorTracer) -> str:
    """Render the tree rooted at ``node`` as newline-separated lines."""
    return "\n".join(tree_lines(node))


__all__ = ["TREE_FORMAT_SPEC", "render_tree", "tree_lines"]
