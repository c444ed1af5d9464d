from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field

from spectrehub.schemas.base import ToolPayloadModel


class PgMetadata(BaseModel):
    tool: str = "pgspectre"
    version: str = ""
    command: str = ""
    timestamp: str = ""


class PgSummary(BaseModel):
    total: int = 0
    high: int = 0
    medium: int = 0
    low: int = 0
    info: int = 0


class PgScanContext(BaseModel):
    tables: int = 0
    indexes: int = 0
    schemas: int = 0


class PgFinding(BaseModel):
    type: str = ""
    severity: str = ""
    schema_name: str = Field("", alias="schema")
    table: str = ""
    column: str = ""
    index: str = ""
    message: str = ""
    detail: Dict[str, str] = {}

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class PgReport(ToolPayloadModel):
    """PgSpectre output: schema findings for a Postgres database."""

    TOOL = "pgspectre"
    FOREIGN_METADATA_KEYS = frozenset({"mongodbVersion", "uriHash", "repoPath"})

    metadata: PgMetadata = PgMetadata()
    findings: List[PgFinding]
    max_severity: str = Field("", alias="maxSeverity")
    summary: PgSummary = PgSummary()
    scanned: PgScanContext = PgScanContext()

    model_config = ConfigDict(populate_by_name=True)
