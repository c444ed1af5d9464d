from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel

from spectrehub.schemas.base import ToolPayloadModel


class VaultConfig(BaseModel):
    vault_addr: str = ""
    repo_path: str = ""
    stale_threshold_days: int = 0


class VaultSummary(BaseModel):
    total_references: int = 0
    status_ok: int = 0
    status_missing: int = 0
    status_access_denied: int = 0
    status_invalid: int = 0
    status_dynamic: int = 0
    status_error: int = 0
    stale_secrets: int = 0
    health_score: str = ""


class VaultReference(BaseModel):
    file: str = ""
    line: int = 0
    type: str = ""  # lookup, env_var, template, ...
    path: str = ""
    status: str = ""
    is_stale: bool = False
    last_accessed: str = ""
    error_msg: str = ""


class SecretInfo(BaseModel):
    path: str = ""
    status: str = ""
    is_stale: bool = False
    last_accessed: str = ""
    error_msg: str = ""
    references: List[VaultReference] = []


class VaultReport(ToolPayloadModel):
    """VaultSpectre output: secret paths referenced in code and their state."""

    TOOL = "vaultspectre"

    tool: str = "vaultspectre"
    version: str = ""
    timestamp: Optional[datetime] = None
    config: VaultConfig = VaultConfig()
    summary: VaultSummary = VaultSummary()
    secrets: Dict[str, SecretInfo]
    references: List[VaultReference] = []
