"""Sequence construction from a rule or by tiling."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Callable, TypeVar

from .values import as_elements, validate_callable, validate_count

T = TypeVar("T")


def generate(count: int, fn: Callable[[int], T]) -> list[T]:
    """``[fn(0), fn(1), ..., fn(count - 1)]``."""
    length = validate_count(count)
    validate_callable(fn, where="fn")
    return [fn(index) for index in range(length)]


def repeat_element(count: int, element: T) -> list[T]:
    # The same object fills every slot.
    return [element] * validate_count(count)


def repeat_array(count: int, seq: Sequence[T]) -> list[T]:
    """``count`` copies of ``seq`` laid end to end, in order."""
    length = validate_count(count)
    items = list(as_elements(seq))
    return items * length
