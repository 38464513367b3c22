"""Linear search and counting.

Sequence searches report positions and use ``-1`` when nothing matches.
Mapping searches report the set of matching keys, empty when nothing
matches; a set is returned because mapping enumeration order is not part
of the contract.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Callable, Final, TypeVar

from .errors import CGorithmTypeError, describe_type
from .values import as_elements, validate_callable, validate_mapping

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")

NOT_FOUND: Final[int] = -1


def _equals(left, right) -> bool:
    """Compare two elements to a plain bool.

    Elements must compare to a single truth value; array elements whose
    ``==`` is element-wise cannot be searched for by equality.
    """
    try:
        return bool(left == right)
    except ValueError as exc:
        raise CGorithmTypeError(
            f"{describe_type(left)} and {describe_type(right)} do not compare to a single truth value"
        ) from exc


def find(seq: Sequence[T], element: T) -> int:
    for index, item in enumerate(as_elements(seq)):
        if _equals(item, element):
            return index
    return NOT_FOUND


def find_if(seq: Sequence[T], predicate: Callable[[int, T], bool]) -> int:
    items = as_elements(seq)
    validate_callable(predicate, where="predicate")
    for index, item in enumerate(items):
        if predicate(index, item):
            return index
    return NOT_FOUND


def count(seq: Sequence[T], element: T) -> int:
    return sum(1 for item in as_elements(seq) if _equals(item, element))


def count_if(seq: Sequence[T], predicate: Callable[[int, T], bool]) -> int:
    items = as_elements(seq)
    validate_callable(predicate, where="predicate")
    result = 0
    for index, item in enumerate(items):
        if predicate(index, item):
            result += 1
    return result


def m_find_v(m: Mapping[K, V], value: V) -> set[K]:
    """Every key whose value equals ``value``. Values need not be unique."""
    validate_mapping(m)
    return {key for key, item in m.items() if _equals(item, value)}


def m_find_k(m: Mapping[K, V], value: V) -> set[K]:
    """Key lookup by value; same result as :func:`m_find_v`."""
    return m_find_v(m, value)


def m_find_if(m: Mapping[K, V], predicate: Callable[[K, V], bool]) -> set[K]:
    validate_mapping(m)
    validate_callable(predicate, where="predicate")
    return {key for key, item in m.items() if predicate(key, item)}


def m_count(m: Mapping[K, V], value: V) -> int:
    validate_mapping(m)
    return sum(1 for item in m.values() if _equals(item, value))


def m_count_if(m: Mapping[K, V], predicate: Callable[[K, V], bool]) -> int:
    validate_mapping(m)
    validate_callable(predicate, where="predicate")
    result = 0
    for key, item in m.items():
        if predicate(key, item):
            result += 1
    return result
