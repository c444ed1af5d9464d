from typing import List

from spectrehub.core.exceptions import PayloadShapeError
from spectrehub.models.issue import Category, NormalizedIssue, ToolType
from spectrehub.models.report import ToolReport
from spectrehub.schemas.vault import SecretInfo, VaultReport
from spectrehub.services.normalizers.mappings import VAULT_OK_STATUSES, VAULT_STATUS_CATEGORIES
from spectrehub.services.normalizers.utils import determine_severity


def _vault_evidence(secret: SecretInfo) -> str:
    if secret.error_msg:
        return secret.error_msg
    if secret.is_stale and secret.last_accessed:
        return f"stale (last accessed: {secret.last_accessed})"
    return f"status: {secret.status}"


def normalize_vault(report: ToolReport) -> List[NormalizedIssue]:
    """Normalize VaultSpectre results.

    One issue per secret path whose status is not "ok". The count is the
    number of code references pointing at the path.
    """
    payload = report.raw_data
    if not isinstance(payload, VaultReport):
        raise PayloadShapeError(report.tool, "VaultReport", type(payload).__name__)

    issues = []
    for path, secret in sorted(payload.secrets.items()):
        if secret.status in VAULT_OK_STATUSES:
            continue

        category = VAULT_STATUS_CATEGORIES.get(secret.status, Category.ERROR)
        issues.append(
            NormalizedIssue(
                tool=report.tool,
                category=category,
                severity=determine_severity(category, ToolType.VAULT),
                resource=path,
                evidence=_vault_evidence(secret),
                count=len(secret.references),
                first_seen=report.timestamp,
                last_seen=report.timestamp,
            )
        )

    return issues
