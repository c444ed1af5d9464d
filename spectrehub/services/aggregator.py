import logging
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Tuple

from spectrehub.core import ensure_utc, utc_now
from spectrehub.core.constants import HEALTH_THRESHOLDS, HEALTH_UNKNOWN
from spectrehub.models.issue import NormalizedIssue, ToolType
from spectrehub.models.report import AggregatedReport, CrossToolSummary, ToolReport
from spectrehub.schemas import ClickHouseReport, KafkaReport, PgReport, S3Report, VaultReport
from spectrehub.services.normalizers import normalize
from spectrehub.services.recommendations import RecommendationGenerator
from spectrehub.services.trends import TrendAnalyzer

logger = logging.getLogger(__name__)


def count_tool_resources(report: ToolReport) -> int:
    """
    Total addressable resources a tool report covers.

    This is the denominator of the health score. Tools without a resource
    total (and spectre/v1 envelopes) contribute 0.
    """
    payload = report.raw_data
    tool = report.tool

    if tool == ToolType.VAULT.value and isinstance(payload, VaultReport):
        return payload.summary.total_references
    if tool == ToolType.S3.value and isinstance(payload, S3Report):
        return payload.summary.total_buckets
    if tool == ToolType.KAFKA.value and isinstance(payload, KafkaReport):
        return payload.summary.total_topics if payload.summary is not None else 0
    if tool == ToolType.CLICKHOUSE.value and isinstance(payload, ClickHouseReport):
        return len(payload.tables)
    if tool == ToolType.POSTGRES.value and isinstance(payload, PgReport):
        return payload.scanned.tables
    return 0


def count_affected_resources(issues: Iterable[NormalizedIssue]) -> int:
    """Distinct non-empty resource identifiers with at least one issue."""
    return len({issue.resource for issue in issues if issue.resource})


def calculate_health_score(affected: int, total: int) -> Tuple[str, float]:
    """
    Health level and percentage of clean resources.

    Returns ("unknown", 0.0) when there is nothing to score. The percentage
    is clamped to 0-100 since issues may name resources the tool did not
    count.
    """
    if total == 0:
        return HEALTH_UNKNOWN, 0.0

    score = (total - affected) / total * 100.0
    score = max(0.0, min(100.0, score))

    for minimum, level in HEALTH_THRESHOLDS:
        if score >= minimum:
            return level, score
    return HEALTH_THRESHOLDS[-1][1], score


class Aggregator:
    """Merges reports from multiple Spectre tools into one aggregated report."""

    def __init__(self):
        self.trend_analyzer = TrendAnalyzer()
        self.recommendation_generator = RecommendationGenerator()

    def aggregate(
        self, tool_reports: Iterable[ToolReport], timestamp: Optional[datetime] = None
    ) -> AggregatedReport:
        """
        Normalize every tool report and build the cross-tool summary.

        Reports are stored by tool name; a later report for the same tool
        replaces the earlier one but its issues are still counted. Caller
        objects are never modified: the stored report is a copy carrying
        ``issue_count``.

        Raises:
            NormalizationError: any report fails to normalize. There is no
                partial result.
        """
        issues: List[NormalizedIssue] = []
        stored: Dict[str, ToolReport] = {}

        for tool_report in tool_reports:
            tool_issues: List[NormalizedIssue] = []
            if tool_report.is_supported:
                tool_issues = normalize(tool_report)
                issues.extend(tool_issues)
            else:
                logger.debug(f"Skipping normalization for unsupported tool {tool_report.tool}")

            stored[tool_report.tool] = tool_report.model_copy(update={"issue_count": len(tool_issues)})

        report = AggregatedReport(
            timestamp=ensure_utc(timestamp) or utc_now(),
            issues=issues,
            tool_reports=stored,
            summary=self._build_summary(issues, stored),
        )
        report.recommendations = self.recommendation_generator.generate_recommendations(report)

        logger.info(
            f"Aggregated {len(stored)} tool report(s): {report.summary.total_issues} issue(s), "
            f"health {report.summary.health_score} ({report.summary.score_percent:.1f}%)"
        )
        return report

    def _build_summary(self, issues: List[NormalizedIssue], tool_reports: Dict[str, ToolReport]) -> CrossToolSummary:
        by_tool: Dict[str, int] = {}
        by_category: Dict[str, int] = {}
        by_severity: Dict[str, int] = {}
        for issue in issues:
            by_tool[issue.tool] = by_tool.get(issue.tool, 0) + 1
            by_category[issue.category] = by_category.get(issue.category, 0) + 1
            by_severity[issue.severity] = by_severity.get(issue.severity, 0) + 1

        supported = sum(1 for r in tool_reports.values() if r.is_supported)

        total_resources = sum(count_tool_resources(r) for r in tool_reports.values() if r.is_supported)
        health, score = calculate_health_score(count_affected_resources(issues), total_resources)

        return CrossToolSummary(
            total_issues=len(issues),
            issues_by_tool=by_tool,
            issues_by_category=by_category,
            issues_by_severity=by_severity,
            health_score=health,
            score_percent=score,
            total_tools=len(tool_reports),
            supported_tools=supported,
            unsupported_tools=len(tool_reports) - supported,
        )

    def add_trend(self, current: AggregatedReport, previous: Optional[AggregatedReport]) -> None:
        """Attach a trend to ``current`` in place. No-op without a previous run."""
        if previous is None:
            return
        current.trend = self.trend_analyzer.calculate_trend(current, previous)

    def with_trend(self, current: AggregatedReport, previous: Optional[AggregatedReport]) -> AggregatedReport:
        """Copy of ``current`` with the trend attached; ``current`` is untouched."""
        if previous is None:
            return current.model_copy()
        return current.model_copy(update={"trend": self.trend_analyzer.calculate_trend(current, previous)})
