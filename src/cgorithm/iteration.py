"""Controlled traversal driven by per-element ``ForeachAction`` signals.

Visitors return one of the three actions below, either as the enum member
or as its plain integer value:

* ``NOOP`` and ``CONTINUE`` move on to the next element.
* ``BREAK`` stops the traversal; the call still reports success.

Any other return value stops the traversal and the call returns ``False``.
Setting ``CGORITHM_LEGACY_FOREACH_BREAK=1`` restores the historical
behaviour where ``BREAK`` did not stop the traversal.
"""

from __future__ import annotations

import logging
import numbers
import os
from collections.abc import Mapping, Sequence
from enum import IntEnum
from typing import Callable, Final, TypeVar

from .values import as_elements, validate_callable, validate_mapping

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K")
V = TypeVar("V")

_LEGACY_FOREACH_BREAK: Final[bool] = os.environ.get("CGORITHM_LEGACY_FOREACH_BREAK", "0") == "1"


class ForeachAction(IntEnum):
    NOOP = 0
    BREAK = 1
    CONTINUE = 2


_INVALID: Final = object()


def _as_action(value: object):
    # bool is an int subclass but never a meaningful action.
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        return _INVALID
    try:
        return ForeachAction(int(value))
    except ValueError:
        return _INVALID


def _dispatch(action: object, *, where: object, legacy_break: bool) -> bool | None:
    """Interpret one visitor result.

    Returns ``None`` to keep going, ``True`` to stop successfully and
    ``False`` to stop with failure.
    """
    resolved = _as_action(action)
    if resolved is _INVALID:
        logger.warning("invalid ForeachAction %r returned at %r; traversal failed", action, where)
        return False
    if resolved is ForeachAction.BREAK and not legacy_break:
        logger.debug("traversal stopped by BREAK at %r", where)
        return True
    return None


def foreach(
    seq: Sequence[T],
    visitor: Callable[[int, T], ForeachAction | int],
    *,
    legacy_break: bool = _LEGACY_FOREACH_BREAK,
) -> bool:
    """Call ``visitor(index, value)`` for each element in order."""
    items = as_elements(seq)
    validate_callable(visitor, where="visitor")
    for index, element in enumerate(items):
        outcome = _dispatch(visitor(index, element), where=index, legacy_break=legacy_break)
        if outcome is not None:
            return outcome
    return True


def m_foreach(
    m: Mapping[K, V],
    visitor: Callable[[K, V], ForeachAction | int],
    *,
    legacy_break: bool = _LEGACY_FOREACH_BREAK,
) -> bool:
    """Call ``visitor(key, value)`` for each pair, in unspecified order."""
    validate_mapping(m)
    validate_callable(visitor, where="visitor")
    for key, value in m.items():
        outcome = _dispatch(visitor(key, value), where=key, legacy_break=legacy_break)
        if outcome is not None:
            return outcome
    return True


def zip_with(
    seq_a: Sequence[T],
    seq_b: Sequence[U],
    visitor: Callable[[int, T, U], ForeachAction | int],
    *,
    legacy_break: bool = _LEGACY_FOREACH_BREAK,
) -> bool:
    """Index-aligned traversal: ``visitor(i, a[i], b[i])``.

    Runs over ``min(len(a), len(b))`` positions; the tail of the longer
    sequence is never visited.
    """
    left = as_elements(seq_a, where="seq_a")
    right = as_elements(seq_b, where="seq_b")
    validate_callable(visitor, where="visitor")
    for index in range(min(len(left), len(right))):
        outcome = _dispatch(visitor(index, left[index], right[index]), where=index, legacy_break=legacy_break)
        if outcome is not None:
            return outcome
    return True
