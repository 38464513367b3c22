"""Shared benchmark runtime helpers."""

from __future__ import annotations

import math
import os
import platform
import time
from typing import Any

import jax

THREAD_ENV_VARS = (
    "OMP_NUM_THREADS",
    "OPENBLAS_NUM_THREADS",
    "MKL_NUM_THREADS",
    "JAX_NUM_THREADS",
    "XLA_FLAGS",
)

FLAG_ENV_VARS = (
    "CGORITHM_DISABLE_ARRAY_SUM_FAST_PATH",
    "CGORITHM_LEGACY_FOREACH_BREAK",
)


def env_snapshot() -> dict[str, str]:
    names = THREAD_ENV_VARS + FLAG_ENV_VARS
    return {name: os.environ[name] for name in names if name in os.environ}


def host_metadata() -> dict[str, Any]:
    return {
        "platform": platform.platform(),
        "python": platform.python_version(),
        "jax": getattr(jax, "__version__", "unknown"),
        "backend": jax.default_backend(),
        "cpu_count": os.cpu_count(),
        "env": env_snapshot(),
    }


def block_until_ready(value: object) -> None:
    if hasattr(value, "block_until_ready"):
        value.block_until_ready()
        return
    if isinstance(value, (tuple, list)):
        for item in value:
            block_until_ready(item)


def percentile(values: list[float], q: float) -> float:
    ordered = sorted(values)
    if len(ordered) == 1:
        return ordered[0]
    pos = (len(ordered) - 1) * q
    lo = int(math.floor(pos))
    hi = int(math.ceil(pos))
    if lo == hi:
        return ordered[lo]
    alpha = pos - lo
    return ordered[lo] * (1.0 - alpha) + ordered[hi] * alpha


def mean(values: list[float]) -> float:
    return sum(values) / len(values)


def stddev(values: list[float]) -> float:
    if len(values) < 2:
        return 0.0
    m = mean(values)
    var = sum((v - m) ** 2 for v in values) / (len(values) - 1)
    return math.sqrt(var)


def sample_ms(fn, make_args, *, repeats: int, warmup: int, samples: int) -> list[float]:
    """Time ``fn(*make_args())`` and return per-call milliseconds per sample.

    ``make_args`` is called before every call so in-place operations always
    see fresh input; building the arguments is excluded from the timing.
    """
    for _ in range(max(0, warmup)):
        block_until_ready(fn(*make_args()))

    rows: list[float] = []
    for _ in range(samples):
        elapsed_ns = 0
        for _ in range(repeats):
            args = make_args()
            start_ns = time.perf_counter_ns()
            block_until_ready(fn(*args))
            elapsed_ns += time.perf_counter_ns() - start_ns
        rows.append((elapsed_ns / repeats) / 1e6)
    return rows
