"""Explain how an aggregated report's health score was computed."""

from typing import Dict, List, Set

from spectrehub.core.constants import (
    AFFECTED_LIST_FULL_LIMIT,
    AFFECTED_LIST_PREVIEW,
    HEALTH_THRESHOLDS,
    SEVERITY_DISPLAY_ORDER,
)
from spectrehub.models.report import AggregatedReport
from spectrehub.models.score import ScoreExplanation, ScoreThreshold, ToolContribution
from spectrehub.services.aggregator import count_tool_resources


def explain_score(report: AggregatedReport) -> ScoreExplanation:
    """
    Rebuild the score inputs of a report.

    Resource totals are recomputed from the stored tool reports; the score
    and health level are the ones recorded in the summary.
    """
    issues_by_tool: Dict[str, int] = {}
    affected_by_tool: Dict[str, Set[str]] = {}
    for issue in report.issues:
        issues_by_tool[issue.tool] = issues_by_tool.get(issue.tool, 0) + 1
        if issue.resource:
            affected_by_tool.setdefault(issue.tool, set()).add(issue.resource)

    per_tool: List[ToolContribution] = []
    for tool_report in report.tool_reports.values():
        if not tool_report.is_supported:
            continue
        per_tool.append(
            ToolContribution(
                tool=tool_report.tool,
                resources=count_tool_resources(tool_report),
                issues=issues_by_tool.get(tool_report.tool, 0),
                affected=len(affected_by_tool.get(tool_report.tool, ())),
            )
        )
    per_tool.sort(key=lambda tc: tc.tool)

    total = sum(tc.resources for tc in per_tool)
    affected = sorted({issue.resource for issue in report.issues if issue.resource})
    score = report.summary.score_percent

    return ScoreExplanation(
        per_tool=per_tool,
        total_resources=total,
        affected_resources=affected,
        affected_count=len(affected),
        score=score,
        health=report.summary.health_score,
        formula=f"({total} - {len(affected)}) / {total} * 100 = {score:.1f}",
        thresholds=[ScoreThreshold(min=minimum, label=label) for minimum, label in HEALTH_THRESHOLDS],
        issues_by_severity=dict(report.summary.issues_by_severity),
    )


def render_score_explanation(explanation: ScoreExplanation) -> str:
    lines: List[str] = ["Health Score Breakdown", "======================", ""]

    lines.append("1. Resources per tool:")
    for tc in explanation.per_tool:
        lines.append(f"   {tc.tool:<14}  {tc.resources} resources, {tc.issues} issues, {tc.affected} affected")
    lines.append(f"   {'':<14}  {explanation.total_resources} resources total")
    lines.append("")

    lines.append(f"2. Affected resources: {explanation.affected_count} distinct")
    affected = explanation.affected_resources
    if len(affected) <= AFFECTED_LIST_FULL_LIMIT:
        lines.extend(f"   - {r}" for r in affected)
    else:
        lines.extend(f"   - {r}" for r in affected[:AFFECTED_LIST_PREVIEW])
        lines.append(f"   ... +{len(affected) - AFFECTED_LIST_PREVIEW} more")
    lines.append("")

    lines.append("3. Formula:")
    lines.append("   score = (total - affected) / total * 100")
    lines.append(f"   score = {explanation.formula}")
    lines.append("")

    lines.append("4. Thresholds:")
    for threshold in explanation.thresholds:
        marker = "→ " if explanation.health.lower() == threshold.label.lower() else "  "
        lines.append(f"   {marker}≥ {threshold.min:.0f}%  {threshold.label}")
    lines.append("")

    if explanation.issues_by_severity:
        lines.append("5. Issues by severity:")
        for sev in SEVERITY_DISPLAY_ORDER:
            if sev in explanation.issues_by_severity:
                lines.append(f"   {sev:<10}  {explanation.issues_by_severity[sev]}")
        lines.append("")

    lines.append(f"Result: {explanation.health.upper()} ({explanation.score:.1f}%)")
    return "\n".join(lines) + "\n"
