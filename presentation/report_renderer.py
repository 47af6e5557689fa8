"""Text and JSON renderings of a FleetReport."""
from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

from domain.entities import AggregateTotals, FleetReport


def success_rate(totals: AggregateTotals) -> Optional[float]:
    """Percentage of successful requests, or None when nothing was counted."""
    if totals.total_requests == 0:
        return None
    return totals.total_successes / totals.total_requests * 100


def format_rate(rate: Optional[float]) -> str:
    return "no data" if rate is None else f"{rate:.2f}%"


def render_text(report: FleetReport) -> List[str]:
    lines = ["Health Report:"]
    if report.is_empty:
        lines.append("  (no successful responses)")
    for totals in report.iter_totals():
        lines.append(
            f"Application: {totals.application}, Version: {totals.version}, "
            f"Success Rate: {format_rate(success_rate(totals))}"
        )
    if report.failures:
        lines.append("")
        lines.append(f"Failed hosts ({report.hosts_failed}):")
        for outcome in sorted(report.failures, key=lambda o: o.host):
            lines.append(f"- {outcome.describe()}")
    lines.append("")
    summary = f"Polled {report.hosts_polled} hosts: {report.hosts_succeeded} ok, {report.hosts_failed} failed"
    if report.cancelled:
        summary += " (batch cancelled)"
    lines.append(summary)
    return lines


def render_json(report: FleetReport) -> str:
    return json.dumps(report.to_dict(), indent=2, ensure_ascii=False)


def write_json_report(report: FleetReport, path: Path) -> Path:
    path = Path(path)
    if path.parent and not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_json(report) + "\n", encoding="utf-8")
    return path
