"""Report aggregation and schema-friendly output."""

from __future__ import annotations

from typing import Any

SATISFIED = "satisfied"
UNSATISFIED = "unsatisfied"
INVALID_RANGE = "invalid-range"
INVALID_VERSION = "invalid-version"

INVALID_STATUSES = {INVALID_RANGE, INVALID_VERSION}


def aggregate(results: list[dict[str, Any]], fail_on_invalid: bool = True) -> dict[str, Any]:
    """Aggregate per-constraint results into a single report.

    Each item in ``results`` is expected to carry at least ``name`` and
    ``status`` keys. Unsatisfied constraints always count as failures; invalid
    ranges or versions count only when ``fail_on_invalid`` is set.
    """

    satisfied = sum(1 for r in results if r.get("status") == SATISFIED)
    unsatisfied = sum(1 for r in results if r.get("status") == UNSATISFIED)
    invalid = sum(1 for r in results if r.get("status") in INVALID_STATUSES)

    failures = unsatisfied + (invalid if fail_on_invalid else 0)

    report: dict[str, Any] = {
        "version": "1",
        "hasFailures": failures > 0,
        "results": results,
        "totals": {
            "constraints": len(results),
            "satisfied": satisfied,
            "unsatisfied": unsatisfied,
            "invalid": invalid,
        },
    }

    return report
