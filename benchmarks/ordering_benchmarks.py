"""Scaling benchmarks for sorting and summing over growing input sizes."""

from __future__ import annotations

import argparse
import json
import random
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Callable

import jax.numpy as jnp
import numpy as np

from _bench_utils import host_metadata, mean, percentile, sample_ms, stddev
from cgorithm import qsort, sort, sum_of


@dataclass(frozen=True)
class BenchCase:
    name: str
    note: str
    fn: Callable[..., object]
    build_args: Callable[[list[int]], tuple[object, ...]]


@dataclass(frozen=True)
class BenchRow:
    case: str
    size: int
    mean_ms: float
    p50_ms: float
    p90_ms: float
    stddev_ms: float


def _ascending(_i: int, _j: int, a: int, b: int) -> int:
    return a - b


CASES: tuple[BenchCase, ...] = (
    BenchCase("sort_list", "in-place list sort", sort, lambda data: (list(data),)),
    BenchCase("sort_numpy", "in-place numpy sort", sort, lambda data: (np.asarray(data),)),
    BenchCase("qsort_list", "adjacent-swap sort, O(n^2)", qsort, lambda data: (list(data), _ascending)),
    BenchCase("sum_list", "element-wise fold", sum_of, lambda data: (list(data), 0)),
    BenchCase("sum_jax", "vectorized fold", sum_of, lambda data: (jnp.asarray(data), 0)),
)


def run(sizes: list[int], *, samples: int, repeats: int, seed: int) -> list[BenchRow]:
    rng = random.Random(seed)
    rows: list[BenchRow] = []
    for size in sizes:
        data = [rng.randrange(-10_000, 10_000) for _ in range(size)]
        for case in CASES:
            if case.name.startswith("qsort") and size > 2_000:
                continue
            timings = sample_ms(case.fn, lambda: case.build_args(data), repeats=repeats, warmup=1, samples=samples)
            rows.append(
                BenchRow(
                    case=case.name,
                    size=size,
                    mean_ms=mean(timings),
                    p50_ms=percentile(timings, 0.5),
                    p90_ms=percentile(timings, 0.9),
                    stddev_ms=stddev(timings),
                )
            )
    return rows


def _markdown(rows: list[BenchRow]) -> str:
    lines = [
        "| Case | Size | Mean (ms) | p50 (ms) | p90 (ms) | Stddev (ms) |",
        "|---|---:|---:|---:|---:|---:|",
    ]
    for row in rows:
        lines.append(
            f"| `{row.case}` | {row.size} | {row.mean_ms:.4f} | {row.p50_ms:.4f} | {row.p90_ms:.4f} | {row.stddev_ms:.4f} |"
        )
    return "\n".join(lines)


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--sizes", default="16,128,1024,8192", help="comma-separated input sizes")
    parser.add_argument("--samples", type=int, default=5)
    parser.add_argument("--repeats", type=int, default=3)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--json-out", default="benchmarks/output/ordering_benchmarks.json")
    args = parser.parse_args()

    sizes = [int(part) for part in args.sizes.split(",") if part.strip()]
    rows = run(sizes, samples=args.samples, repeats=args.repeats, seed=args.seed)
    print(_markdown(rows))

    out = Path(args.json_out)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(
        json.dumps({"host": host_metadata(), "rows": [asdict(row) for row in rows]}, indent=2),
        encoding="utf-8",
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
