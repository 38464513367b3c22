"""Transform, filter and fold operations for sequences and mappings."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping, Sequence
from typing import Callable, Final, TypeVar

import jax.numpy as jnp
import numpy as np

from .values import as_elements, is_numeric_array, validate_callable, validate_mapping

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K")
V = TypeVar("V")
K2 = TypeVar("K2")
V2 = TypeVar("V2")

_NO_FAST_PATH: Final = object()
_USE_ARRAY_SUM_FAST_PATH: Final[bool] = os.environ.get("CGORITHM_DISABLE_ARRAY_SUM_FAST_PATH", "0") != "1"


def filter_by(seq: Sequence[T], predicate: Callable[[int, T], bool]) -> list[T]:
    """Elements for which ``predicate(index, value)`` is true, in original order."""
    items = as_elements(seq)
    validate_callable(predicate, where="predicate")
    return [item for index, item in enumerate(items) if predicate(index, item)]


def transform(seq: Sequence[T], fn: Callable[[int, T], U]) -> list[U]:
    items = as_elements(seq)
    validate_callable(fn, where="fn")
    return [fn(index, item) for index, item in enumerate(items)]


def reduce(seq: Sequence[T], init: U, fn: Callable[[int, U, T], U]) -> U:
    """Left fold: ``acc = fn(index, acc, value)`` starting from ``init``."""
    items = as_elements(seq)
    validate_callable(fn, where="fn")
    acc = init
    for index, item in enumerate(items):
        acc = fn(index, acc, item)
    return acc


def transform_reduce(
    seq: Sequence[T],
    init: U,
    reduce_fn: Callable[[int, U, U], U],
    transform_fn: Callable[[int, T], U],
) -> U:
    """Same result as ``reduce(transform(seq, transform_fn), init, reduce_fn)``.

    Computed in one pass without building the transformed list.
    """
    items = as_elements(seq)
    validate_callable(reduce_fn, where="reduce_fn")
    validate_callable(transform_fn, where="transform_fn")
    acc = init
    for index, item in enumerate(items):
        acc = reduce_fn(index, acc, transform_fn(index, item))
    return acc


def m_filter(m: Mapping[K, V], predicate: Callable[[K, V], bool]) -> dict[K, V]:
    validate_mapping(m)
    validate_callable(predicate, where="predicate")
    return {key: value for key, value in m.items() if predicate(key, value)}


def m_transform(m: Mapping[K, V], fn: Callable[[K, V], tuple[K2, V2]]) -> dict[K2, V2]:
    """Build a new mapping from the ``(key, value)`` pairs returned by ``fn``.

    If two source keys produce the same output key, the one enumerated later
    overwrites the earlier. Enumeration order is unspecified, so which value
    survives a collision is unspecified too.
    """
    validate_mapping(m)
    validate_callable(fn, where="fn")
    result: dict[K2, V2] = {}
    for key, value in m.items():
        new_key, new_value = fn(key, value)
        result[new_key] = new_value
    return result


def m_reduce(m: Mapping[K, V], init: U, fn: Callable[[K, U, V], U]) -> U:
    """Fold over key-value pairs: ``acc = fn(key, acc, value)``.

    Only well defined when ``fn`` does not depend on the enumeration order.
    """
    validate_mapping(m)
    validate_callable(fn, where="fn")
    acc = init
    for key, value in m.items():
        acc = fn(key, acc, value)
    return acc


def m_transform_reduce(
    m: Mapping[K, V],
    init: U,
    reduce_fn: Callable[[K, U, U], U],
    transform_fn: Callable[[K, V], U],
) -> U:
    validate_mapping(m)
    validate_callable(reduce_fn, where="reduce_fn")
    validate_callable(transform_fn, where="transform_fn")
    acc = init
    for key, value in m.items():
        acc = reduce_fn(key, acc, transform_fn(key, value))
    return acc


def _fast_sum_array(seq, init):
    if not _USE_ARRAY_SUM_FAST_PATH or not is_numeric_array(seq):
        return _NO_FAST_PATH
    logger.debug("sum_of: vectorized path for array of shape %s", tuple(seq.shape))
    if int(seq.shape[0]) == 0:
        return init
    if isinstance(seq, np.ndarray):
        # jnp.asarray would downcast 64-bit input when x64 is disabled.
        return init + seq.sum()
    return init + jnp.sum(seq)


def sum_of(seq: Sequence[T], init: T) -> T:
    """Left fold with ``+``; ``sum_of([], init) == init``.

    Works for anything supporting ``+``, strings included.
    """
    fast = _fast_sum_array(seq, init)
    if fast is not _NO_FAST_PATH:
        return fast
    acc = init
    for item in as_elements(seq):
        acc = acc + item
    return acc


def concatenate(*strings: str) -> str:
    return "".join(strings)


def concatenate_slice(strings: Sequence[str]) -> str:
    return "".join(as_elements(strings, where="strings"))
