#!/usr/bin/env python3
"""Showcase of terr features.

Demonstrates:
  • newf / trace combined into one trace tree, printed with f"{err:@}"
  • traced vs non-traced arguments to newf, and the wrap ({!w}) vs
    display ({}) conversions
  • trace on traced and non-traced errors
  • custom error constructors located at their caller (trace_skip,
    trace_with_location)
  • walking the tree with trace_tree for custom output
  • logging a traced error with the trace tree under the traceback

Usage:
  python examples/showcase.py
"""

import sys

from terr import (
    ErrorTracer,
    as_error,
    get_terr_logger,
    is_error,
    newf,
    setup_logging,
    trace,
    trace_skip,
    trace_tree,
    trace_with_location,
)


class ValidationError(Exception):
    """Custom error type whose constructor reports its caller's location."""

    def __init__(self, msg: str):
        super().__init__(msg)
        self.msg = msg


def new_validation_error(msg: str):
    return trace_skip(ValidationError(msg), 1)


def new_validation_error_at_caller(msg: str):
    caller = sys._getframe(1)
    return trace_with_location(ValidationError(msg), caller.f_code.co_filename, caller.f_lineno)


def show_tree():
    err = newf("base")
    traced = trace(err)
    wrapped = newf("wrapped: {!w}", traced)
    masked = newf("masked: {}", wrapped)
    print(f"{masked:@}")


def show_newf():
    non_traced = ValueError("non-traced")
    traced1 = newf("traced 1")
    traced2 = newf("traced 2")
    new_err = newf("errors: {!w}, {}, {!w}", non_traced, traced1, traced2)

    print(f"{new_err:@}")
    print("---")
    print("new_err is non_traced:", is_error(new_err, non_traced))
    print("new_err is traced1:", is_error(new_err, traced1))
    print("new_err is traced2:", is_error(new_err, traced2))


def show_trace():
    non_traced = ValueError("non-traced")
    print(f"{trace(non_traced):@}")
    print("---")
    traced = newf("traced")
    print(f"{trace(traced):@}")


def show_custom_errors():
    err = new_validation_error("x must be >= 0")
    print(f"{err:@}")
    print("---")
    custom = as_error(err, ValidationError)
    print("Is ValidationError:", custom is not None)
    print("Custom error message:", custom.msg if custom else None)
    print("---")
    print(f"{new_validation_error_at_caller('y must be < 10'):@}")


def show_trace_tree():
    non_traced = ValueError("non-traced")
    traced1 = newf("traced 1")
    traced2 = newf("traced 2")
    new_err = newf("{!w}, {}, {!w}", non_traced, traced1, traced2)

    def print_node(node: ErrorTracer):
        file, line = node.location
        print(f"Error: {node}")
        print(f"Location: {file}:{line}")
        print(f"Children: {[str(child) for child in node.children]}")
        print("---")

    node = trace_tree(new_err)
    assert node is not None
    print_node(node)
    print_node(node.children[0])
    print_node(node.children[1])


def show_logging():
    setup_logging(level="INFO")
    logger = get_terr_logger("terr.showcase")
    try:
        raise newf("request failed: {!w}", trace(TimeoutError("upstream timed out")))
    except Exception:
        logger.exception("Showcase request")


def main():
    """Run every section in order."""
    for section in (show_tree, show_newf, show_trace, show_custom_errors, show_trace_tree, show_logging):
        print(f"=== {section.__name__} ===")
        section()


if __name__ == "__main__":
    main()
