"""Structured error types for caller misuse."""

from __future__ import annotations


class CGorithmError(Exception):
    """Base class for structured cgorithm errors."""


class CGorithmTypeError(CGorithmError, TypeError):
    """Argument has the wrong container kind, is not callable, or is immutable."""


class CGorithmValueError(CGorithmError, ValueError):
    """Argument has the right type but an unusable value."""


class CGorithmShapeError(CGorithmValueError):
    """Array argument is not one-dimensional."""


def describe_type(value: object) -> str:
    kind = type(value)
    module = kind.__module__
    if module == "builtins":
        return kind.__name__
    return f"{module}.{kind.__qualname__}"
