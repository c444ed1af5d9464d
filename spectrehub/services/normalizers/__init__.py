"""
Tool report normalizers.

``normalize`` dispatches a ``ToolReport`` to the converter for its tool.
Payload shape mismatches and unknown tools raise; nothing is skipped
silently.
"""

import logging
from typing import Callable, Dict, List

from spectrehub.core.exceptions import PayloadShapeError, UnknownToolError
from spectrehub.models.issue import NormalizedIssue, ToolType
from spectrehub.models.report import ToolReport
from spectrehub.schemas import is_spectre_v1_payload
from spectrehub.services.normalizers.clickhouse import normalize_clickhouse
from spectrehub.services.normalizers.kafka import normalize_kafka
from spectrehub.services.normalizers.mongo import normalize_mongo
from spectrehub.services.normalizers.postgres import normalize_postgres
from spectrehub.services.normalizers.s3 import normalize_s3
from spectrehub.services.normalizers.spectre_v1 import normalize_spectre_v1
from spectrehub.services.normalizers.vault import normalize_vault

logger = logging.getLogger(__name__)

Normalizer = Callable[[ToolReport], List[NormalizedIssue]]

NORMALIZERS: Dict[str, Normalizer] = {
    ToolType.VAULT.value: normalize_vault,
    ToolType.S3.value: normalize_s3,
    ToolType.KAFKA.value: normalize_kafka,
    ToolType.CLICKHOUSE.value: normalize_clickhouse,
    ToolType.POSTGRES.value: normalize_postgres,
    ToolType.MONGO.value: normalize_mongo,
}

# Tools that only ever emit the spectre/v1 envelope
V1_ONLY_TOOLS = frozenset({ToolType.AWS.value, ToolType.IAM.value, ToolType.GCS.value})


def normalize(report: ToolReport) -> List[NormalizedIssue]:
    """
    Convert one tool report into normalized issues.

    Args:
        report: The tool report to normalize

    Returns:
        Normalized issues, empty for unsupported reports

    Raises:
        PayloadShapeError: raw_data is not the shape the tool emits
        UnknownToolError: a supported report names a tool with no normalizer
    """
    if not report.is_supported:
        return []

    if is_spectre_v1_payload(report.raw_data):
        issues = normalize_spectre_v1(report)
    elif report.tool in NORMALIZERS:
        issues = NORMALIZERS[report.tool](report)
    elif report.tool in V1_ONLY_TOOLS:
        raise PayloadShapeError(report.tool, "SpectreV1Report", type(report.raw_data).__name__)
    else:
        raise UnknownToolError(report.tool)

    logger.debug(f"Normalized {report.tool}: {len(issues)} issue(s)")
    return issues


__all__ = [
    "NORMALIZERS",
    "V1_ONLY_TOOLS",
    "normalize",
    "normalize_clickhouse",
    "normalize_kafka",
    "normalize_mongo",
    "normalize_postgres",
    "normalize_s3",
    "normalize_spectre_v1",
    "normalize_vault",
]
