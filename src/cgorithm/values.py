"""Container value model and validators shared by every operation."""

from __future__ import annotations

import numbers
from collections.abc import Mapping, MutableSequence, Sequence
from dataclasses import dataclass
from enum import Enum

import jax
import jax.numpy as jnp
import numpy as np

from .errors import CGorithmShapeError, CGorithmTypeError, CGorithmValueError, describe_type


class ContainerKind(str, Enum):
    SEQUENCE = "sequence"
    ARRAY = "array"
    MAPPING = "mapping"


@dataclass(frozen=True)
class ContainerInfo:
    kind: ContainerKind
    length: int
    mutable: bool


def is_array(value: object) -> bool:
    return isinstance(value, (np.ndarray, jax.Array))


def is_mapping(value: object) -> bool:
    return isinstance(value, Mapping)


def is_mutable(value: object) -> bool:
    """Whether the container can be reordered in place.

    jax arrays are immutable; numpy arrays and mutable sequences are not.
    """
    if isinstance(value, np.ndarray):
        return bool(value.flags.writeable)
    return isinstance(value, MutableSequence)


def is_numeric_array(value: object) -> bool:
    if not is_array(value) or value.ndim != 1:
        return False
    dtype = value.dtype
    return bool(jnp.issubdtype(dtype, jnp.number) or jnp.issubdtype(dtype, jnp.bool_))


def kind_of(value: object, *, where: str = "container") -> ContainerKind:
    if is_array(value):
        return ContainerKind.ARRAY
    if is_mapping(value):
        return ContainerKind.MAPPING
    if isinstance(value, Sequence):
        return ContainerKind.SEQUENCE
    raise CGorithmTypeError(f"{where} must be a sequence or a mapping, got {describe_type(value)}")


def container_info(value: object, *, where: str = "container") -> ContainerInfo:
    kind = kind_of(value, where=where)
    if kind is ContainerKind.ARRAY:
        _require_rank_one(value, where=where)
        length = int(value.shape[0])
    else:
        length = len(value)
    return ContainerInfo(kind=kind, length=length, mutable=is_mutable(value))


def _require_rank_one(value, *, where: str) -> None:
    if value.ndim != 1:
        raise CGorithmShapeError(
            f"{where} must be a rank-1 array, got shape {tuple(int(d) for d in value.shape)}"
        )


def as_elements(value: object, *, where: str = "sequence") -> Sequence:
    """Return an indexable view of a sequence argument.

    Plain sequences are returned unchanged. Arrays are split into their
    elements so that callbacks always receive one element per position.
    """
    kind = kind_of(value, where=where)
    if kind is ContainerKind.MAPPING:
        raise CGorithmTypeError(f"{where} must be a sequence, got {describe_type(value)}")
    if kind is ContainerKind.ARRAY:
        _require_rank_one(value, where=where)
        return [value[i] for i in range(int(value.shape[0]))]
    return value


def validate_mapping(value: object, *, where: str = "mapping") -> Mapping:
    if kind_of(value, where=where) is not ContainerKind.MAPPING:
        raise CGorithmTypeError(f"{where} must be a mapping, got {describe_type(value)}")
    return value


def validate_mutable_sequence(value: object, *, where: str = "sequence") -> ContainerInfo:
    info = container_info(value, where=where)
    if info.kind is ContainerKind.MAPPING:
        raise CGorithmTypeError(f"{where} must be a sequence, got {describe_type(value)}")
    if not info.mutable:
        raise CGorithmTypeError(f"{where} of type {describe_type(value)} cannot be reordered in place")
    return info


def validate_callable(value: object, *, where: str = "callback") -> None:
    if not callable(value):
        raise CGorithmTypeError(f"{where} must be callable, got {describe_type(value)}")


def validate_count(value: object, *, where: str = "count") -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise CGorithmTypeError(f"{where} must be an integer, got {describe_type(value)}")
    count = int(value)
    if count < 0:
        raise CGorithmValueError(f"{where} must be non-negative, got {count}")
    return count
