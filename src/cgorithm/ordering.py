"""Scalar comparison and in-place sorting."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Callable, TypeVar

import numpy as np

from .values import validate_callable, validate_mutable_sequence

T = TypeVar("T")
S = TypeVar("S", bound=MutableSequence)


def min_of(x: T, y: T) -> T:
    """Smaller of ``x`` and ``y``; ``y`` on a tie."""
    return x if x < y else y


def max_of(x: T, y: T) -> T:
    """Larger of ``x`` and ``y``; ``y`` on a tie."""
    return x if x > y else y


def sort(seq: S) -> S:
    """Sort ``seq`` ascending in place and return the same object.

    The sort is stable. Tuples, strings and jax arrays cannot be reordered in
    place and are rejected.
    """
    validate_mutable_sequence(seq)
    if isinstance(seq, np.ndarray):
        seq.sort(kind="stable")
    elif isinstance(seq, list):
        seq.sort()
    else:
        for index, value in enumerate(sorted(seq)):
            seq[index] = value
    return seq


def qsort(seq: S, cmp: Callable[[int, int, T, T], int]) -> S:
    """Sort ``seq`` in place with a three-way comparator and return it.

    ``cmp(index_a, index_b, a, b)`` gets the current positions of two
    neighbouring elements and returns ``> 0`` when ``a`` belongs after ``b``.
    Adjacent-swap passes run until one makes no swap, at most ``n - 1``
    times. Equal elements never swap, so the order is stable.
    """
    n = validate_mutable_sequence(seq).length
    validate_callable(cmp, where="cmp")
    for _ in range(n - 1):
        swapped = False
        for j in range(n - 1):
            if cmp(j, j + 1, seq[j], seq[j + 1]) > 0:
                seq[j], seq[j + 1] = seq[j + 1], seq[j]
                swapped = True
        if not swapped:
            break
    return seq
