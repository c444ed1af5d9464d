"""
Identity-based diff between two aggregated runs.

Two issues are the same issue when ``tool|category|resource`` matches.
Severity, evidence and count may change without an issue becoming new.
"""

import logging
from typing import Dict, List, Optional

from spectrehub.core.config import settings
from spectrehub.core.constants import ISSUE_KEY_SEPARATOR, get_severity_value
from spectrehub.models.diff import DiffResult, DiffSummary
from spectrehub.models.issue import NormalizedIssue
from spectrehub.models.report import AggregatedReport

logger = logging.getLogger(__name__)

DIFF_BANNER = (
    "╔════════════════════════════════════════════╗\n"
    "║         SpectreHub Drift Delta            ║\n"
    "╚════════════════════════════════════════════╝"
)
DIFF_RULE = "-" * 50


def issue_key(issue: NormalizedIssue) -> str:
    """Identity key of an issue. Resources are not escaped."""
    return ISSUE_KEY_SEPARATOR.join([issue.tool, issue.category, issue.resource])


def _index(issues: List[NormalizedIssue]) -> Dict[str, NormalizedIssue]:
    # Later issues with the same key win
    return {issue_key(issue): issue for issue in issues}


def _count_by(issues: List[NormalizedIssue], attr: str) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for issue in issues:
        value = getattr(issue, attr)
        counts[value] = counts.get(value, 0) + 1
    return counts


def compute_diff(
    baseline: AggregatedReport, current: AggregatedReport, timestamp_format: Optional[str] = None
) -> DiffResult:
    """
    New and resolved issues between ``baseline`` and ``current``.

    ``summary.delta`` is the raw issue count change and can disagree with
    the new/resolved sets when an issue changed without changing identity.
    Both issue lists are sorted by identity key.
    """
    fmt = timestamp_format or settings.DIFF_TIMESTAMP_FORMAT

    base_set = _index(baseline.issues)
    curr_set = _index(current.issues)

    new_issues = [curr_set[key] for key in sorted(curr_set) if key not in base_set]
    resolved_issues = [base_set[key] for key in sorted(base_set) if key not in curr_set]

    logger.debug(f"Diff computed: {len(new_issues)} new, {len(resolved_issues)} resolved")

    return DiffResult(
        baseline=baseline.timestamp.strftime(fmt),
        current=current.timestamp.strftime(fmt),
        new_issues=new_issues,
        resolved_issues=resolved_issues,
        summary=DiffSummary(
            baseline_total=len(baseline.issues),
            current_total=len(current.issues),
            new_count=len(new_issues),
            resolved_count=len(resolved_issues),
            delta=len(current.issues) - len(baseline.issues),
            new_by_severity=_count_by(new_issues, "severity"),
            new_by_tool=_count_by(new_issues, "tool"),
            new_by_category=_count_by(new_issues, "category"),
        ),
    )


def render_diff_text(result: DiffResult) -> str:
    """Plain-text rendering of a diff for terminals and CI logs."""
    summary = result.summary
    lines: List[str] = [DIFF_BANNER, ""]

    lines.append(f"Baseline: {result.baseline}")
    lines.append(f"Current:  {result.current}")
    lines.append("")
    lines.append(f"Issues: {summary.baseline_total} → {summary.current_total} ({summary.delta:+d})")
    lines.append(f"New: {summary.new_count}   Resolved: {summary.resolved_count}")
    lines.append("")

    if result.new_issues:
        lines.append("New Issues:")
        lines.append(DIFF_RULE)
        for issue in result.new_issues:
            lines.append(f"  [{issue.severity.upper()}] {issue.tool} - {issue.category}: {issue.resource}")
            if issue.evidence:
                lines.append(f"         {issue.evidence}")
        lines.append("")

    if result.resolved_issues:
        lines.append("Resolved Issues:")
        lines.append(DIFF_RULE)
        for issue in result.resolved_issues:
            lines.append(f"  ✓ {issue.tool} - {issue.category}: {issue.resource}")
        lines.append("")

    if summary.new_by_severity:
        lines.append("New by Severity:")
        # Known severities first in display order, anything else after
        ordered = sorted(
            summary.new_by_severity,
            key=lambda sev: (-get_severity_value(sev), sev),
        )
        for sev in ordered:
            lines.append(f"  {sev.upper()}: {summary.new_by_severity[sev]}")
        lines.append("")

    if summary.new_by_tool:
        lines.append("New by Tool:")
        for tool in sorted(summary.new_by_tool):
            lines.append(f"  {tool}: {summary.new_by_tool[tool]}")
        lines.append("")

    if summary.new_count == 0 and summary.resolved_count == 0:
        lines.append("No drift detected.")
    elif summary.new_count == 0:
        lines.append("No new issues, only improvements.")

    return "\n".join(lines) + "\n"
