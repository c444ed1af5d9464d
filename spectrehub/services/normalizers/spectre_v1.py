from typing import List

from spectrehub.core.exceptions import PayloadShapeError
from spectrehub.models.issue import NormalizedIssue
from spectrehub.models.report import ToolReport
from spectrehub.schemas.spectre_v1 import SpectreV1Report
from spectrehub.services.normalizers.utils import map_finding_id_to_category, map_generic_severity


def normalize_spectre_v1(report: ToolReport) -> List[NormalizedIssue]:
    """
    Normalize a spectre/v1 envelope.

    Findings map one to one: the finding ID picks the category, the
    envelope severity is mapped directly and the location is the resource.
    The envelope's own ``tool`` field is informational; issues are
    attributed to ``report.tool``.
    """
    payload = report.raw_data
    if not isinstance(payload, SpectreV1Report):
        raise PayloadShapeError(report.tool, "SpectreV1Report", type(payload).__name__)

    return [
        NormalizedIssue(
            tool=report.tool,
            category=map_finding_id_to_category(finding.id),
            severity=map_generic_severity(finding.severity),
            resource=finding.location,
            evidence=finding.message,
            count=1,
            first_seen=report.timestamp,
            last_seen=report.timestamp,
        )
        for finding in payload.findings
    ]
