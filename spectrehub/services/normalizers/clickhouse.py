from typing import List

from spectrehub.core.exceptions import PayloadShapeError
from spectrehub.models.issue import Category, NormalizedIssue
from spectrehub.models.report import ToolReport
from spectrehub.schemas.clickhouse import ClickHouseReport
from spectrehub.services.normalizers.mappings import (
    CLICKHOUSE_ANOMALY_CATEGORIES,
    CLICKHOUSE_ANOMALY_SEVERITIES,
    CLICKHOUSE_UNUSED_SEVERITY,
    DEFAULT_CLICKHOUSE_ANOMALY_CATEGORY,
    DEFAULT_CLICKHOUSE_ANOMALY_SEVERITY,
)


def normalize_clickhouse(report: ToolReport) -> List[NormalizedIssue]:
    """
    Normalize ClickSpectre results.

    Zero-usage tables become ``unused`` issues carrying the table's own
    observation window. Access anomalies become ``drift`` issues, except
    configuration anomalies which are ``misconfig``.
    """
    payload = report.raw_data
    if not isinstance(payload, ClickHouseReport):
        raise PayloadShapeError(report.tool, "ClickHouseReport", type(payload).__name__)

    issues = []
    for table in payload.tables:
        if not table.zero_usage:
            continue
        issues.append(
            NormalizedIssue(
                tool=report.tool,
                category=Category.UNUSED,
                severity=CLICKHOUSE_UNUSED_SEVERITY[table.is_replicated],
                resource=table.full_name,
                evidence=f"zero usage (reads: {table.reads}, writes: {table.writes})",
                count=1,
                first_seen=table.first_seen,
                last_seen=table.last_access,
            )
        )

    for anomaly in payload.anomalies:
        issues.append(
            NormalizedIssue(
                tool=report.tool,
                category=CLICKHOUSE_ANOMALY_CATEGORIES.get(anomaly.type, DEFAULT_CLICKHOUSE_ANOMALY_CATEGORY),
                severity=CLICKHOUSE_ANOMALY_SEVERITIES.get(
                    anomaly.severity.lower(), DEFAULT_CLICKHOUSE_ANOMALY_SEVERITY
                ),
                resource=anomaly.affected_table,
                evidence=anomaly.description,
                count=1,
                first_seen=anomaly.detected_at,
                last_seen=anomaly.detected_at,
            )
        )

    return issues
