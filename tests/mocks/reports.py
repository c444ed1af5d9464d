"""Builders for tool payloads, tool reports and aggregated reports."""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from spectrehub.models import AggregatedReport, CrossToolSummary, NormalizedIssue, ToolReport

RUN_TIME = datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


def make_issue(
    tool: str = "vaultspectre",
    category: str = "missing",
    severity: str = "critical",
    resource: str = "secret/data/app",
    evidence: str = "",
    count: int = 1,
) -> NormalizedIssue:
    return NormalizedIssue(
        tool=tool,
        category=category,
        severity=severity,
        resource=resource,
        evidence=evidence,
        count=count,
    )


def make_tool_report(
    tool: str,
    raw_data: Any,
    is_supported: bool = True,
    timestamp: datetime = RUN_TIME,
) -> ToolReport:
    return ToolReport(
        tool=tool,
        version="1.0.0",
        timestamp=timestamp,
        raw_data=raw_data,
        status="supported" if is_supported else "unsupported",
        is_supported=is_supported,
    )


def make_run(
    issues: Optional[List[NormalizedIssue]] = None,
    timestamp: datetime = RUN_TIME,
    issues_by_tool: Optional[Dict[str, int]] = None,
    total_issues: Optional[int] = None,
) -> AggregatedReport:
    """Aggregated report with a hand-built summary, for trend and diff tests."""
    issues = issues or []
    if issues_by_tool is None:
        issues_by_tool = {}
        for issue in issues:
            issues_by_tool[issue.tool] = issues_by_tool.get(issue.tool, 0) + 1
    return AggregatedReport(
        timestamp=timestamp,
        issues=issues,
        summary=CrossToolSummary(
            total_issues=len(issues) if total_issues is None else total_issues,
            issues_by_tool=issues_by_tool,
        ),
    )


def vault_payload(secrets: Optional[Dict[str, Dict[str, Any]]] = None, total_references: int = 0) -> Dict[str, Any]:
    return {
        "tool": "vaultspectre",
        "version": "0.2.0",
        "timestamp": "2026-03-01T12:00:00Z",
        "config": {"vault_addr": "https://vault.internal", "repo_path": "/src"},
        "summary": {"total_references": total_references, "status_ok": 0, "status_missing": 0},
        "secrets": secrets or {},
    }


def vault_secret(status: str, references: int = 1, **extra: Any) -> Dict[str, Any]:
    secret = {
        "status": status,
        "references": [{"file": f"app{i}.py", "line": i + 1} for i in range(references)],
    }
    secret.update(extra)
    return secret


def s3_payload(buckets: Optional[Dict[str, Dict[str, Any]]] = None, total_buckets: int = 0) -> Dict[str, Any]:
    return {
        "tool": "s3spectre",
        "version": "0.3.1",
        "timestamp": "2026-03-01T12:00:00Z",
        "summary": {"total_buckets": total_buckets},
        "buckets": buckets or {},
    }


def kafka_payload(unused_topics: Optional[List[Dict[str, Any]]] = None, total_topics: int = 0) -> Dict[str, Any]:
    return {
        "summary": {
            "cluster_name": "prod-kafka",
            "total_brokers": 3,
            "total_topics_analyzed": total_topics,
        },
        "unused_topics": unused_topics or [],
        "cluster_metadata": {"fetched_at": "2026-03-01 12:00:00 UTC"},
    }


def clickhouse_payload(
    tables: Optional[List[Dict[str, Any]]] = None, anomalies: Optional[List[Dict[str, Any]]] = None
) -> Dict[str, Any]:
    return {
        "metadata": {
            "generated_at": "2026-03-01T12:00:00Z",
            "clickhouse_host": "ch.internal:9000",
            "version": "0.4.0",
        },
        "tables": tables or [],
        "anomalies": anomalies or [],
        "cleanup_recommendations": {},
    }


def pg_payload(findings: Optional[List[Dict[str, Any]]] = None, tables: int = 0) -> Dict[str, Any]:
    return {
        "metadata": {"tool": "pgspectre", "version": "0.1.5", "timestamp": "2026-03-01T12:00:00Z"},
        "findings": findings or [],
        "maxSeverity": "high",
        "summary": {"total": len(findings or [])},
        "scanned": {"tables": tables, "indexes": 0, "schemas": 1},
    }


def mongo_payload(findings: Optional[List[Dict[str, Any]]] = None) -> Dict[str, Any]:
    return {
        "metadata": {"version": "0.2.0", "timestamp": "2026-03-01T12:00:00Z", "mongodbVersion": "7.0.5"},
        "findings": findings or [],
        "summary": {"total": len(findings or [])},
    }


def v1_payload(tool: str, findings: Optional[List[Dict[str, Any]]] = None) -> Dict[str, Any]:
    return {
        "schema": "spectre/v1",
        "tool": tool,
        "version": "1.0.0",
        "timestamp": "2026-03-01T12:00:00Z",
        "target": {"type": "aws-account", "uri_hash": "abc123"},
        "findings": findings or [],
        "summary": {"total": len(findings or [])},
    }
