from typing import List

from spectrehub.core.exceptions import PayloadShapeError
from spectrehub.models.issue import Category, NormalizedIssue
from spectrehub.models.report import ToolReport
from spectrehub.schemas.kafka import KafkaReport
from spectrehub.services.normalizers.mappings import DEFAULT_KAFKA_SEVERITY, KAFKA_RISK_SEVERITIES


def normalize_kafka(report: ToolReport) -> List[NormalizedIssue]:
    """Normalize KafkaSpectre results: every unused topic is an issue."""
    payload = report.raw_data
    if not isinstance(payload, KafkaReport):
        raise PayloadShapeError(report.tool, "KafkaReport", type(payload).__name__)

    issues = []
    for topic in payload.unused_topics:
        issues.append(
            NormalizedIssue(
                tool=report.tool,
                category=Category.UNUSED,
                severity=KAFKA_RISK_SEVERITIES.get(topic.risk, DEFAULT_KAFKA_SEVERITY),
                resource=f"topic:{topic.name}",
                evidence=f"{topic.reason} (partitions: {topic.partitions}, risk: {topic.risk})",
                count=topic.partitions,
                first_seen=report.timestamp,
                last_seen=report.timestamp,
            )
        )

    return issues
