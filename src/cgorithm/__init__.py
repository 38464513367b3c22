"""cgorithm public API."""

from .errors import (
    CGorithmError,
    CGorithmShapeError,
    CGorithmTypeError,
    CGorithmValueError,
)
from .folds import (
    concatenate,
    concatenate_slice,
    filter_by,
    m_filter,
    m_reduce,
    m_transform,
    m_transform_reduce,
    reduce,
    sum_of,
    transform,
    transform_reduce,
)
from .generation import generate, repeat_array, repeat_element
from .iteration import ForeachAction, foreach, m_foreach, zip_with
from .logger import setup_logger
from .ordering import max_of, min_of, qsort, sort
from .predicates import (
    all_of,
    all_satisfy,
    any_of,
    any_satisfy,
    m_all,
    m_all_satisfy,
    m_any,
    m_any_satisfy,
)
from .search import (
    NOT_FOUND,
    count,
    count_if,
    find,
    find_if,
    m_count,
    m_count_if,
    m_find_if,
    m_find_k,
    m_find_v,
)

__all__ = [
    "all_of",
    "any_of",
    "all_satisfy",
    "any_satisfy",
    "m_all",
    "m_any",
    "m_all_satisfy",
    "m_any_satisfy",
    "NOT_FOUND",
    "find",
    "find_if",
    "count",
    "count_if",
    "m_find_v",
    "m_find_k",
    "m_find_if",
    "m_count",
    "m_count_if",
    "filter_by",
    "transform",
    "reduce",
    "transform_reduce",
    "m_filter",
    "m_transform",
    "m_reduce",
    "m_transform_reduce",
    "sum_of",
    "concatenate",
    "concatenate_slice",
    "generate",
    "repeat_element",
    "repeat_array",
    "ForeachAction",
    "foreach",
    "m_foreach",
    "zip_with",
    "min_of",
    "max_of",
    "sort",
    "qsort",
    "setup_logger",
    "CGorithmError",
    "CGorithmTypeError",
    "CGorithmValueError",
    "CGorithmShapeError",
]
