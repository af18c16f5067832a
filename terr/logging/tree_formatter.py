"""Logging formatter that renders trace trees of logged traced errors.

This module subclasses ``logging.Formatter`` and therefore imports the
standard ``logging`` module directly. The ruff ban on ``import logging``
(pyproject.toml) is suppressed with ``# noqa: TID251``.
"""

import logging  # noqa: TID251
from types import TracebackType

_ExcInfo = tuple[type[BaseException], BaseException, TracebackType | None] | tuple[None, None, None]


class TraceTreeFormatter(logging.Formatter):
    """Formatter that appends the trace tree after the traceback of a traced error.

    Records logged with ``exc_info`` for a non-traced exception are
    formatted exactly as ``logging.Formatter`` would.
    """

    def formatException(self, ei: _ExcInfo) -> str:  # noqa: N802
        text = super().formatException(ei)
        # terr.location logs through terr.logging, so the tree modules load lazily
        from terr.render import render_tree  # noqa: PLC0415
        from terr.traced import trace_tree  # noqa: PLC0415

        node = trace_tree(ei[1])
        if node is None:
            return text
        return f"{text}\nTrace tree:\n{render_tree(node)}"
