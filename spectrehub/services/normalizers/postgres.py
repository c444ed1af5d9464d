from typing import List

from spectrehub.core.exceptions import PayloadShapeError
from spectrehub.models.issue import Category, NormalizedIssue, ToolType
from spectrehub.models.report import ToolReport
from spectrehub.schemas.postgres import PgFinding, PgReport
from spectrehub.services.normalizers.mappings import GENERIC_SEVERITIES, PG_FINDING_CATEGORIES, PG_OK_TYPES
from spectrehub.services.normalizers.utils import determine_severity, join_resource


def _pg_resource(finding: PgFinding) -> str:
    # schema.table, then column or index when the finding names one
    return join_resource(finding.schema_name, finding.table, finding.column or finding.index)


def normalize_postgres(report: ToolReport) -> List[NormalizedIssue]:
    """Normalize PgSpectre results.

    PgSpectre reports its own severity; findings without a recognised
    severity fall back to the category policy.
    """
    payload = report.raw_data
    if not isinstance(payload, PgReport):
        raise PayloadShapeError(report.tool, "PgReport", type(payload).__name__)

    issues = []
    for finding in payload.findings:
        if finding.type in PG_OK_TYPES:
            continue

        category = PG_FINDING_CATEGORIES.get(finding.type, Category.ERROR)
        severity = GENERIC_SEVERITIES.get(finding.severity.lower()) or determine_severity(
            category, ToolType.POSTGRES
        )
        issues.append(
            NormalizedIssue(
                tool=report.tool,
                category=category,
                severity=severity,
                resource=_pg_resource(finding),
                evidence=finding.message,
                count=1,
                first_seen=report.timestamp,
                last_seen=report.timestamp,
            )
        )

    return issues
