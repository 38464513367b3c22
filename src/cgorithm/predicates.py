"""Predicate combinators over one container or the cross product of two."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Callable, TypeVar

from .values import as_elements, validate_callable, validate_mapping

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K")
V = TypeVar("V")
K2 = TypeVar("K2")
V2 = TypeVar("V2")


def all_of(seq: Sequence[T], predicate: Callable[[int, T], bool]) -> bool:
    """True when ``predicate(index, value)`` holds for every element.

    An empty sequence is vacuously true.
    """
    items = as_elements(seq)
    validate_callable(predicate, where="predicate")
    for index, element in enumerate(items):
        if not predicate(index, element):
            return False
    return True


def any_of(seq: Sequence[T], predicate: Callable[[T], bool]) -> bool:
    """True when ``predicate(value)`` holds for at least one element.

    The predicate receives the value only.
    """
    items = as_elements(seq)
    validate_callable(predicate, where="predicate")
    for element in items:
        if predicate(element):
            return True
    return False


def all_satisfy(
    seq_a: Sequence[T],
    seq_b: Sequence[U],
    predicate: Callable[[int, int, T, U], bool],
) -> bool:
    """True when every pair of the cross product satisfies the predicate.

    Pairs are not aligned by index: ``predicate(i, j, a[i], b[j])`` is
    evaluated for every ``i`` and every ``j``. True if either side is empty.
    """
    left = as_elements(seq_a, where="seq_a")
    right = as_elements(seq_b, where="seq_b")
    validate_callable(predicate, where="predicate")
    for index_a, element_a in enumerate(left):
        for index_b, element_b in enumerate(right):
            if not predicate(index_a, index_b, element_a, element_b):
                return False
    return True


def any_satisfy(
    seq_a: Sequence[T],
    seq_b: Sequence[U],
    predicate: Callable[[int, int, T, U], bool],
) -> bool:
    """True when at least one pair of the cross product satisfies the predicate."""
    left = as_elements(seq_a, where="seq_a")
    right = as_elements(seq_b, where="seq_b")
    validate_callable(predicate, where="predicate")
    for index_a, element_a in enumerate(left):
        for index_b, element_b in enumerate(right):
            if predicate(index_a, index_b, element_a, element_b):
                return True
    return False


def m_all(m: Mapping[K, V], predicate: Callable[[K, V], bool]) -> bool:
    validate_mapping(m)
    validate_callable(predicate, where="predicate")
    for key, value in m.items():
        if not predicate(key, value):
            return False
    return True


def m_any(m: Mapping[K, V], predicate: Callable[[K, V], bool]) -> bool:
    validate_mapping(m)
    validate_callable(predicate, where="predicate")
    for key, value in m.items():
        if predicate(key, value):
            return True
    return False


def m_all_satisfy(
    m1: Mapping[K, V],
    m2: Mapping[K2, V2],
    predicate: Callable[[K, K2, V, V2], bool],
) -> bool:
    """Cross-product ``all_satisfy`` over key-value pairs: ``predicate(k1, k2, v1, v2)``."""
    validate_mapping(m1, where="m1")
    validate_mapping(m2, where="m2")
    validate_callable(predicate, where="predicate")
    for key1, value1 in m1.items():
        for key2, value2 in m2.items():
            if not predicate(key1, key2, value1, value2):
                return False
    return True


def m_any_satisfy(
    m1: Mapping[K, V],
    m2: Mapping[K2, V2],
    predicate: Callable[[K, K2, V, V2], bool],
) -> bool:
    validate_mapping(m1, where="m1")
    validate_mapping(m2, where="m2")
    validate_callable(predicate, where="predicate")
    for key1, value1 in m1.items():
        for key2, value2 in m2.items():
            if predicate(key1, key2, value1, value2):
                return True
    return False
