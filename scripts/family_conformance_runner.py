"""Run the unittest suites of each operation family and report pass rates."""

from __future__ import annotations

import argparse
from pathlib import Path

from cgorithm.conformance import aggregate, run_families, stats_payload, stats_to_markdown_table, write_json


def _build_markdown(rows) -> str:
    lines = [
        "# Operation Family Conformance Report",
        "",
        "| Family | Operations | Run | Passed | Skipped | Failed | Errors | Pass Rate | Status |",
        "|---|---|---:|---:|---:|---:|---:|---:|---|",
    ]
    for family, stats in rows:
        rate = "n/a" if stats.pass_rate is None else f"{stats.pass_rate:.2f}%"
        operations = ", ".join(f"`{op}`" for op in family.operations) or "-"
        lines.append(
            f"| {family.title} | {operations} | {stats.tests_run} | {stats.passed} | {stats.skipped} | {stats.failed} | {stats.errors} | {rate} | {stats.status} |"
        )

    overall = aggregate("all", [stats for _, stats in rows])
    lines.extend(
        [
            "",
            "## Summary",
            "",
            stats_to_markdown_table([overall]),
        ]
    )
    return "\n".join(lines)


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--tests-dir",
        default="tests",
        help="directory containing unittest test files",
    )
    parser.add_argument(
        "--json-out",
        default="benchmarks/output/conformance/family_conformance.json",
        help="where to write machine-readable conformance results",
    )
    parser.add_argument(
        "--markdown-out",
        default="benchmarks/output/conformance/family_conformance.md",
        help="where to write markdown summary",
    )
    args = parser.parse_args()

    rows = run_families(tests_dir=Path(args.tests_dir))
    overall = aggregate("all", [stats for _, stats in rows])

    report = _build_markdown(rows)
    print(report)

    write_json(
        Path(args.json_out),
        {
            "families": [
                {
                    "name": family.name,
                    "title": family.title,
                    "operations": list(family.operations),
                    "stats": stats_payload([stats])[0],
                }
                for family, stats in rows
            ],
            "summary": stats_payload([overall])[0],
        },
    )
    Path(args.markdown_out).parent.mkdir(parents=True, exist_ok=True)
    Path(args.markdown_out).write_text(report + "\n", encoding="utf-8")

    return 1 if overall.status == "fail" else 0


if __name__ == "__main__":
    raise SystemExit(main())
