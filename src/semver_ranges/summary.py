"""Human-readable Markdown summary of a constraint report."""

from __future__ import annotations

from typing import Any


def render_summary(report: dict[str, Any]) -> str:
    """Return a Markdown string with totals and a table of checked constraints."""
    totals = report.get("totals", {})
    results = report.get("results", [])

    lines = []
    lines.append("# semver-ranges Summary")
    lines.append("")
    lines.append(
        f"Constraints: {totals.get('constraints', 0)} | "
        f"Satisfied: {totals.get('satisfied', 0)} | "
        f"Unsatisfied: {totals.get('unsatisfied', 0)} | "
        f"Invalid: {totals.get('invalid', 0)}"
    )
    lines.append("")
    lines.append("| Name | Range | Interval | Version | Status |")
    lines.append("| --- | --- | --- | --- | --- |")

    for result in results:
        name = result.get("name") or "(unnamed)"
        expr = result.get("range", "")
        interval = result.get("interval") or "n/a"
        version = result.get("version", "")
        status = result.get("status", "")
        lines.append(f"| {name} | `{expr}` | {interval} | {version} | {status} |")

    if not results:
        lines.append("| (no constraints checked) | n/a | n/a | n/a | n/a |")

    return "\n".join(lines) + "\n"
