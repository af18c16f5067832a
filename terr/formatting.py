"""Formatted error construction with ``str.format`` templates.

@public

``errorf`` builds an exception whose message is ``template.format(...)``.
One extra conversion is understood: ``{!w}`` formats the argument like
``{}`` and also records it as a wrapped cause of the new error.

    >>> base = KeyError("id")
    >>> err = errorf("lookup failed: {!w}", base)
    >>> err.__cause__ is base
    True
    >>> masked = errorf("lookup failed: {}", base)
    >>> masked.__cause__ is None
    True

Wrapping rules:
    - no ``!w`` field: the error has no cause
    - one wrapped argument: it becomes ``__cause__`` and ``unwrap()``
    - several wrapped arguments: ``unwrap_all()`` returns them in template
      order and ``unwrap()`` returns None
"""

import string
from collections.abc import Mapping, Sequence
from typing import Any

from terr.exceptions import WrapConversionError

WRAP_CONVERSION = "w"


class _WrappingFormatter(string.Formatter):
    """Single-use formatter collecting the arguments of ``!w`` fields."""

    def __init__(self) -> None:
        super().__init__()
        self.wrapped: list[BaseException] = []

    def convert_field(self, value: Any, conversion: str | None) -> Any:
        if conversion != WRAP_CONVERSION:
            return super().convert_field(value, conversion)
        if not isinstance(value, BaseException):
            raise WrapConversionError(f"!w conversion requires an exception, got {type(value).__name__}")
        if not any(value is seen for seen in self.wrapped):
            self.wrapped.append(value)
        return value


class FormattedError(Exception):
    """Exception built by errorf.

    Attributes:
        wrapped: Errors embedded with ``!w``, in the order they appear in
                 the template.
    """

    def __init__(self, message: str, wrapped: Sequence[BaseException] = ()):
        super().__init__(message)
        self.wrapped: tuple[BaseException, ...] = tuple(wrapped)
        if len(self.wrapped) == 1:
            self.__cause__ = self.wrapped[0]

    def unwrap(self) -> BaseException | None:
        if len(self.wrapped) == 1:
            return self.wrapped[0]
        return None

    def unwrap_all(self) -> tuple[BaseException, ...]:
        return self.wrapped

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (str(self), self.wrapped))


def vformat_error(template: str, args: Sequence[Any], kwargs: Mapping[str, Any]) -> FormattedError:
    """Like errorf, with arguments passed as a sequence and a mapping."""
    formatter = _WrappingFormatter()
    message = formatter.vformat(template, args, kwargs)
    return FormattedError(message, formatter.wrapped)


def errorf(template: str, /, *args: Any, **kwargs: Any) -> FormattedError:
    """Build an error from a ``str.format`` template.

    @public

    Args:
        template: Format string. Fields with the ``!w`` conversion wrap
                  their argument, which must be an exception.
        *args: Positional format arguments, any mix of errors and values.
        **kwargs: Keyword format arguments.

    Raises:
        WrapConversionError: ``!w`` applied to a non-exception.
    """
    return vformat_error(template, args, kwargs)


__all__ = ["FormattedError", "WRAP_CONVERSION", "errorf", "vformat_error"]
