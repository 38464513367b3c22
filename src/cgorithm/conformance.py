"""Suite-level pass-rate reporting grouped by operation family."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Final
import io
import json
import unittest


@dataclass(frozen=True)
class SuiteStats:
    name: str
    tests_run: int
    passed: int
    failed: int
    errors: int
    skipped: int
    executable: int
    pass_rate: float | None
    status: str

    @property
    def ok(self) -> bool:
        return self.status in {"pass", "skipped"}


@dataclass(frozen=True)
class OperationFamily:
    name: str
    title: str
    operations: tuple[str, ...]
    patterns: tuple[str, ...]


_FAMILIES: Final[tuple[OperationFamily, ...]] = (
    OperationFamily(
        name="predicates",
        title="Predicate combinators",
        operations=("all_of", "any_of", "all_satisfy", "any_satisfy", "m_all", "m_any", "m_all_satisfy", "m_any_satisfy"),
        patterns=("test_predicates.py",),
    ),
    OperationFamily(
        name="search",
        title="Search & count",
        operations=("find", "find_if", "count", "count_if", "m_find_v", "m_find_k", "m_find_if", "m_count", "m_count_if"),
        patterns=("test_search.py",),
    ),
    OperationFamily(
        name="folds",
        title="Transform/Reduce family",
        operations=(
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
        ),
        patterns=("test_folds.py",),
    ),
    OperationFamily(
        name="generation",
        title="Generation & repetition",
        operations=("generate", "repeat_element", "repeat_array"),
        patterns=("test_generation.py",),
    ),
    OperationFamily(
        name="iteration",
        title="Controlled iteration",
        operations=("foreach", "m_foreach", "zip_with"),
        patterns=("test_iteration.py",),
    ),
    OperationFamily(
        name="ordering",
        title="Ordering",
        operations=("min_of", "max_of", "sort", "qsort"),
        patterns=("test_ordering.py",),
    ),
    OperationFamily(
        name="values",
        title="Container value model",
        operations=(),
        patterns=("test_value_model.py", "test_array_inputs.py"),
    ),
)


def default_families() -> tuple[OperationFamily, ...]:
    return _FAMILIES


def _discover_suite(patterns: tuple[str, ...], *, tests_dir: Path) -> unittest.TestSuite:
    loader = unittest.TestLoader()
    suite = unittest.TestSuite()
    for pattern in patterns:
        discovered = loader.discover(start_dir=str(tests_dir), pattern=pattern, top_level_dir=str(tests_dir))
        suite.addTests(discovered)
    return suite


def run_patterns(name: str, patterns: tuple[str, ...], *, tests_dir: Path = Path("tests")) -> SuiteStats:
    suite = _discover_suite(patterns, tests_dir=tests_dir)
    stream = io.StringIO()
    result = unittest.TextTestRunner(stream=stream, verbosity=0).run(suite)
    return stats_from_result(name, result)


def stats_from_result(name: str, result: unittest.TestResult) -> SuiteStats:
    failures = len(result.failures)
    errors = len(result.errors)
    skipped = len(result.skipped)
    executed = result.testsRun - skipped
    passed = result.testsRun - failures - errors - skipped

    if failures or errors:
        status = "fail"
    elif executed == 0:
        status = "skipped"
    else:
        status = "pass"

    pass_rate = None if executed == 0 else (passed / executed) * 100.0
    return SuiteStats(
        name=name,
        tests_run=result.testsRun,
        passed=passed,
        failed=failures,
        errors=errors,
        skipped=skipped,
        executable=executed,
        pass_rate=pass_rate,
        status=status,
    )


def run_families(*, tests_dir: Path = Path("tests")) -> list[tuple[OperationFamily, SuiteStats]]:
    rows: list[tuple[OperationFamily, SuiteStats]] = []
    for family in default_families():
        stats = run_patterns(family.name, family.patterns, tests_dir=tests_dir)
        rows.append((family, stats))
    return rows


def aggregate(name: str, stats: list[SuiteStats]) -> SuiteStats:
    tests_run = sum(s.tests_run for s in stats)
    passed = sum(s.passed for s in stats)
    failed = sum(s.failed for s in stats)
    errors = sum(s.errors for s in stats)
    skipped = sum(s.skipped for s in stats)
    executable = sum(s.executable for s in stats)
    pass_rate = None if executable == 0 else (passed / executable) * 100.0
    status = "fail" if (failed or errors) else ("skipped" if executable == 0 else "pass")
    return SuiteStats(
        name=name,
        tests_run=tests_run,
        passed=passed,
        failed=failed,
        errors=errors,
        skipped=skipped,
        executable=executable,
        pass_rate=pass_rate,
        status=status,
    )


def stats_to_markdown_table(rows: list[SuiteStats]) -> str:
    lines = [
        "| Suite | Run | Passed | Skipped | Failed | Errors | Pass Rate | Status |",
        "|---|---:|---:|---:|---:|---:|---:|---|",
    ]
    for row in rows:
        rate = "n/a" if row.pass_rate is None else f"{row.pass_rate:.2f}%"
        lines.append(
            f"| `{row.name}` | {row.tests_run} | {row.passed} | {row.skipped} | {row.failed} | {row.errors} | {rate} | {row.status} |"
        )
    return "\n".join(lines)


def write_json(path: Path, payload: object) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")


def stats_payload(rows: list[SuiteStats]) -> list[dict[str, object]]:
    return [asdict(row) for row in rows]
