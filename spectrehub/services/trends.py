"""
Trend analysis across aggregated runs.

Trends here are count based: they compare total issue counts between runs
and never look at issue identity. Use ``spectrehub.services.diff`` for
identity-based new/resolved sets.
"""

import logging
from typing import Dict, List, Optional, Sequence

from spectrehub.core.config import settings
from spectrehub.core.constants import COMPARISON_PLACEHOLDER, SINGLE_RUN_TIME_RANGE
from spectrehub.models.report import AggregatedReport, ToolTrend, Trend, TrendDirection, TrendSummary

logger = logging.getLogger(__name__)

TREND_INDICATORS: Dict[str, str] = {
    TrendDirection.IMPROVING.value: "↓",
    TrendDirection.DEGRADING.value: "↑",
    TrendDirection.STABLE.value: "→",
}


def get_trend_indicator(direction: Optional[str]) -> str:
    """Arrow for a trend direction, "?" when the direction is unknown."""
    return TREND_INDICATORS.get(direction or "", "?")


def _percent_change(previous: int, current: int) -> float:
    if previous == 0:
        return 0.0
    return (current - previous) / previous * 100.0


class TrendAnalyzer:
    """Compares aggregated reports over time."""

    def calculate_trend(
        self, current: AggregatedReport, previous: Optional[AggregatedReport]
    ) -> Optional[Trend]:
        """
        Count-based trend between two runs.

        Returns None when there is no previous run. The percentage stays at
        0 when the previous run had no issues.
        """
        if previous is None:
            return None

        previous_total = previous.summary.total_issues
        current_total = current.summary.total_issues
        change = current_total - previous_total

        if change < 0:
            direction = TrendDirection.IMPROVING
        elif change > 0:
            direction = TrendDirection.DEGRADING
        else:
            direction = TrendDirection.STABLE

        return Trend(
            direction=direction,
            change_percent=_percent_change(previous_total, current_total),
            previous_issues=previous_total,
            current_issues=current_total,
            compared_with=previous.timestamp,
            new_issues=max(0, change),
            resolved_issues=max(0, -change),
        )

    def analyze_last_n_runs(self, runs: Sequence[AggregatedReport]) -> Optional[TrendSummary]:
        """
        Summarize a window of runs.

        Runs are ordered by timestamp before analysis, so callers may pass
        them in any order. Per-tool trends compare only the earliest and the
        latest run of the window.
        """
        if not runs:
            return None

        ordered = sorted(runs, key=lambda r: r.timestamp)

        if len(ordered) > 1:
            span = ordered[-1].timestamp - ordered[0].timestamp
            days = int(span.total_seconds() // 3600 // 24)
            time_range = f"Last {days} days"
        else:
            time_range = SINGLE_RUN_TIME_RANGE

        by_tool: Dict[str, ToolTrend] = {}
        if len(ordered) >= 2:
            by_tool = self._tool_trends(ordered[0], ordered[-1])

        logger.debug(f"Analyzed {len(ordered)} run(s): {time_range}")
        return TrendSummary(
            time_range=time_range,
            runs_analyzed=len(ordered),
            issue_sparkline=[r.summary.total_issues for r in ordered],
            by_tool=by_tool,
        )

    def _tool_trends(self, earliest: AggregatedReport, latest: AggregatedReport) -> Dict[str, ToolTrend]:
        before = earliest.summary.issues_by_tool
        after = latest.summary.issues_by_tool

        trends: Dict[str, ToolTrend] = {}
        for tool in sorted(set(before) | set(after)):
            previous_count = before.get(tool, 0)
            current_count = after.get(tool, 0)

            if previous_count > 0:
                change_percent = _percent_change(previous_count, current_count)
            elif current_count > 0:
                # Tool is new in the latest run
                change_percent = 100.0
            else:
                change_percent = 0.0

            trends[tool] = ToolTrend(
                name=tool,
                current_issues=current_count,
                previous_issues=previous_count,
                change=current_count - previous_count,
                change_percent=change_percent,
            )
        return trends

    def generate_comparison_report(
        self, current: AggregatedReport, previous: Optional[AggregatedReport]
    ) -> str:
        """Human-readable comparison of two runs. Unchanged tools are omitted."""
        if previous is None:
            return COMPARISON_PLACEHOLDER

        trend = self.calculate_trend(current, previous)
        date_format = settings.COMPARISON_DATE_FORMAT

        lines: List[str] = [
            f"Comparison: {current.timestamp.strftime(date_format)} vs "
            f"{previous.timestamp.strftime(date_format)}\n\n",
            f"Overall: {trend.previous_issues} → {trend.current_issues} issues "
            f"({trend.change_percent:.1f}% {trend.direction})\n\n",
        ]

        before = previous.summary.issues_by_tool
        after = current.summary.issues_by_tool
        for tool in sorted(set(before) | set(after)):
            prev_count = before.get(tool, 0)
            curr_count = after.get(tool, 0)
            if prev_count == curr_count:
                continue
            lines.append(f"{tool}:\n")
            lines.append(f"  {prev_count} → {curr_count} ({curr_count - prev_count:+d})\n")

        if trend.new_issues > 0:
            lines.append(f"\nNew Issues: {trend.new_issues}\n")
        if trend.resolved_issues > 0:
            lines.append(f"\nResolved Issues: {trend.resolved_issues}\n")

        return "".join(lines)
