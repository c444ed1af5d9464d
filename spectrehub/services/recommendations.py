"""
Recommendation generator.

Groups the issues of one aggregated report by (tool, category, severity)
and turns every group into an action/impact pair. Output is ordered by
severity, most severe first; groups of equal severity are ordered by tool
and category.
"""

import logging
from typing import Dict, List, NamedTuple, Optional, Tuple

from spectrehub.core.config import settings
from spectrehub.core.constants import sort_by_severity
from spectrehub.models.issue import Category, Severity
from spectrehub.models.report import AggregatedReport, Recommendation
from spectrehub.services.normalizers.mappings import DEFAULT_RESOURCE_NAME, TOOL_RESOURCE_NAMES

logger = logging.getLogger(__name__)

# Placeholders: {count}, {resource} (human label for the tool), {tool}
ACTION_TEMPLATES: Dict[str, str] = {
    Category.MISSING.value: "Fix {count} missing {resource}",
    Category.UNUSED.value: "Clean up {count} unused {resource}",
    Category.STALE.value: "Review {count} stale {resource}",
    Category.ERROR.value: "Investigate {count} error(s) in {tool}",
    Category.MISCONFIG.value: "Fix {count} misconfiguration(s) in {tool}",
    Category.ACCESS_DENIED.value: "Restore access to {count} {resource}",
    Category.INVALID.value: "Fix {count} invalid {resource}",
    Category.DRIFT.value: "Resolve {count} drift issue(s) in {tool}",
}

DEFAULT_ACTION_TEMPLATE = "Address {count} issue(s) in {tool}"

IMPACTS: Dict[Tuple[str, str], str] = {
    (Severity.CRITICAL.value, Category.MISSING.value): "Services may fail to start or operate incorrectly",
    (Severity.CRITICAL.value, Category.ACCESS_DENIED.value): "Critical operations are blocked",
    (Severity.CRITICAL.value, Category.ERROR.value): "System integrity is compromised",
    (Severity.HIGH.value, Category.MISSING.value): "Important features may not work as expected",
    (Severity.HIGH.value, Category.UNUSED.value): "Significant waste of resources and potential security risks",
    (Severity.HIGH.value, Category.STALE.value): "Data may be outdated or invalid",
    (Severity.HIGH.value, Category.MISCONFIG.value): "System behavior may be unpredictable",
    (Severity.MEDIUM.value, Category.UNUSED.value): "Resources are wasted but no immediate risk",
    (Severity.MEDIUM.value, Category.STALE.value): "Data quality may degrade over time",
    (Severity.MEDIUM.value, Category.MISCONFIG.value): "Suboptimal performance or behavior",
    (Severity.LOW.value, Category.UNUSED.value): "Minor cleanup to improve maintainability",
    (Severity.LOW.value, Category.STALE.value): "Consider updating or removing",
}

# Used when the (severity, category) pair has no specific phrasing
SEVERITY_IMPACTS: Dict[str, str] = {
    Severity.CRITICAL.value: "Immediate action required to prevent outages",
    Severity.HIGH.value: "Significant impact on system reliability",
    Severity.MEDIUM.value: "Moderate impact on system efficiency",
    Severity.LOW.value: "Low priority cleanup or optimization",
}

DEFAULT_IMPACT = "Review and address as needed"


class _IssueGroup(NamedTuple):
    tool: str
    category: str
    severity: str


def get_resource_name(tool: str) -> str:
    return TOOL_RESOURCE_NAMES.get(tool, DEFAULT_RESOURCE_NAME)


def build_action(tool: str, category: str, count: int) -> str:
    template = ACTION_TEMPLATES.get(category, DEFAULT_ACTION_TEMPLATE)
    return template.format(count=count, resource=get_resource_name(tool), tool=tool)


def build_impact(severity: str, category: str) -> str:
    specific = IMPACTS.get((severity, category))
    if specific:
        return specific
    return SEVERITY_IMPACTS.get(severity, DEFAULT_IMPACT)


class RecommendationGenerator:
    """Creates prioritized, human-readable recommendations from issues."""

    def generate_recommendations(self, report: AggregatedReport) -> List[Recommendation]:
        """
        One recommendation per (tool, category, severity) group.

        The group count is the sum of the underlying issue counts, not the
        number of issues.
        """
        counts: Dict[_IssueGroup, int] = {}
        for issue in report.issues:
            group = _IssueGroup(issue.tool, issue.category, issue.severity)
            counts[group] = counts.get(group, 0) + issue.count

        recommendations = [
            Recommendation(
                severity=group.severity,
                tool=group.tool,
                action=build_action(group.tool, group.category, count),
                impact=build_impact(group.severity, group.category),
                count=count,
            )
            for group, count in sorted(counts.items(), key=lambda item: (item[0].tool, item[0].category))
        ]

        logger.debug(f"Generated {len(recommendations)} recommendation(s) from {len(report.issues)} issue(s)")
        return sort_by_severity(recommendations)

    def get_top_recommendations(
        self, recommendations: List[Recommendation], n: Optional[int] = None
    ) -> List[Recommendation]:
        """First ``n`` recommendations; ``n`` defaults to ``settings.TOP_RECOMMENDATIONS``."""
        if n is None:
            n = settings.TOP_RECOMMENDATIONS
        if n <= 0:
            return []
        if n >= len(recommendations):
            return recommendations
        return recommendations[:n]

    def group_by_severity(self, recommendations: List[Recommendation]) -> Dict[str, List[Recommendation]]:
        """Partition by severity, keeping input order inside each bucket."""
        grouped: Dict[str, List[Recommendation]] = {}
        for rec in recommendations:
            grouped.setdefault(rec.severity, []).append(rec)
        return grouped
