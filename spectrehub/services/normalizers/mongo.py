from typing import List

from spectrehub.core.exceptions import PayloadShapeError
from spectrehub.models.issue import Category, NormalizedIssue, ToolType
from spectrehub.models.report import ToolReport
from spectrehub.schemas.mongo import MongoReport
from spectrehub.services.normalizers.mappings import GENERIC_SEVERITIES, MONGO_FINDING_CATEGORIES, MONGO_OK_TYPES
from spectrehub.services.normalizers.utils import determine_severity, join_resource


def normalize_mongo(report: ToolReport) -> List[NormalizedIssue]:
    """Normalize MongoSpectre results into ``db.collection[.index]`` issues."""
    payload = report.raw_data
    if not isinstance(payload, MongoReport):
        raise PayloadShapeError(report.tool, "MongoReport", type(payload).__name__)

    issues = []
    for finding in payload.findings:
        if finding.type in MONGO_OK_TYPES:
            continue

        category = MONGO_FINDING_CATEGORIES.get(finding.type, Category.ERROR)
        severity = GENERIC_SEVERITIES.get(finding.severity.lower()) or determine_severity(
            category, ToolType.MONGO
        )
        issues.append(
            NormalizedIssue(
                tool=report.tool,
                category=category,
                severity=severity,
                resource=join_resource(finding.database, finding.collection, finding.index),
                evidence=finding.message,
                count=1,
                first_seen=report.timestamp,
                last_seen=report.timestamp,
            )
        )

    return issues
