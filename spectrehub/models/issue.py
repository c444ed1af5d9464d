from datetime import datetime
from enum import Enum
from typing import Dict, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field


class Severity(str, Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Category(str, Enum):
    MISSING = "missing"
    UNUSED = "unused"
    STALE = "stale"
    MISCONFIG = "misconfig"
    ACCESS_DENIED = "access_denied"
    INVALID = "invalid"
    DRIFT = "drift"
    ERROR = "error"


class ToolType(str, Enum):
    VAULT = "vaultspectre"
    S3 = "s3spectre"
    KAFKA = "kafkaspectre"
    CLICKHOUSE = "clickspectre"
    POSTGRES = "pgspectre"
    MONGO = "mongospectre"
    AWS = "awsspectre"
    IAM = "iamspectre"
    GCS = "gcsspectre"
    UNKNOWN = "unknown"


class ToolInfo(NamedTuple):
    name: str
    min_version: str
    has_validation: bool
    has_normalizer: bool


# Tools whose reports are normalized and scored. iamspectre and gcsspectre
# are recognised by the collector but reported as unsupported.
SUPPORTED_TOOLS: Dict[ToolType, ToolInfo] = {
    ToolType.VAULT: ToolInfo("vaultspectre", "0.1.0", True, True),
    ToolType.S3: ToolInfo("s3spectre", "0.1.0", True, True),
    ToolType.KAFKA: ToolInfo("kafkaspectre", "0.1.0", True, True),
    ToolType.CLICKHOUSE: ToolInfo("clickspectre", "0.1.0", True, True),
    ToolType.POSTGRES: ToolInfo("pgspectre", "0.1.0", False, True),
    ToolType.MONGO: ToolInfo("mongospectre", "0.1.0", False, True),
    ToolType.AWS: ToolInfo("awsspectre", "0.1.0", True, True),
}


def is_supported_tool(tool: str) -> bool:
    return get_tool_info(tool) is not None


def get_tool_info(tool: str) -> Optional[ToolInfo]:
    try:
        return SUPPORTED_TOOLS.get(ToolType(tool))
    except ValueError:
        return None


class NormalizedIssue(BaseModel):
    """The atomic unit every tool report is mapped into.

    Identity across runs is the ``(tool, category, resource)`` triple;
    evidence, severity and count may change without the issue becoming a
    different one.
    """

    tool: str = Field(..., description="Producing tool, e.g. vaultspectre")
    category: Category = Field(..., description="Normalized issue category")
    severity: Severity = Field(..., description="Normalized severity")
    resource: str = Field("", description="Stable tool-specific resource identifier")
    evidence: str = Field("", description="Short explanation")
    count: int = Field(1, description="Weight of the issue, e.g. reference or partition count")
    first_seen: Optional[datetime] = Field(None, description="Start of the observation window")
    last_seen: Optional[datetime] = Field(None, description="End of the observation window")

    model_config = ConfigDict(use_enum_values=True, frozen=True)

    @property
    def identity_key(self) -> str:
        # No escaping: a resource containing "|" can collide with another key.
        return f"{self.tool}|{self.category}|{self.resource}"
