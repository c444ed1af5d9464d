from typing import List

from spectrehub.core.exceptions import PayloadShapeError
from spectrehub.models.issue import Category, NormalizedIssue, ToolType
from spectrehub.models.report import ToolReport
from spectrehub.schemas.s3 import S3Report
from spectrehub.services.normalizers.mappings import S3_OK_STATUSES, S3_STATUS_CATEGORIES
from spectrehub.services.normalizers.utils import determine_severity


def _s3_category(status: str) -> Category:
    return S3_STATUS_CATEGORIES.get(status, Category.ERROR)


def normalize_s3(report: ToolReport) -> List[NormalizedIssue]:
    """Normalize S3Spectre results.

    A bucket with prefix analyses is reported per prefix: every non-OK
    prefix becomes its own issue (``s3://bucket/prefix``) and the bucket
    itself is not reported. A bucket without prefixes becomes a single
    ``s3://bucket`` issue.
    """
    payload = report.raw_data
    if not isinstance(payload, S3Report):
        raise PayloadShapeError(report.tool, "S3Report", type(payload).__name__)

    issues = []
    for name, bucket in sorted(payload.buckets.items()):
        if bucket.status in S3_OK_STATUSES:
            continue

        if bucket.prefixes:
            for prefix in bucket.prefixes:
                if prefix.status in S3_OK_STATUSES:
                    continue
                category = _s3_category(prefix.status)
                issues.append(
                    NormalizedIssue(
                        tool=report.tool,
                        category=category,
                        severity=determine_severity(category, ToolType.S3),
                        resource=f"s3://{name}/{prefix.prefix}",
                        evidence=prefix.message,
                        count=prefix.object_count,
                        first_seen=report.timestamp,
                        last_seen=report.timestamp,
                    )
                )
            continue

        category = _s3_category(bucket.status)
        issues.append(
            NormalizedIssue(
                tool=report.tool,
                category=category,
                severity=determine_severity(category, ToolType.S3),
                resource=f"s3://{name}",
                evidence=bucket.message,
                count=1,
                first_seen=report.timestamp,
                last_seen=report.timestamp,
            )
        )

    return issues
