from typing import List

from pydantic import BaseModel, ConfigDict, Field

from spectrehub.schemas.base import ToolPayloadModel


class MongoMetadata(BaseModel):
    version: str = ""
    command: str = ""
    timestamp: str = ""
    database: str = ""
    mongodb_version: str = Field("", alias="mongodbVersion")
    repo_path: str = Field("", alias="repoPath")
    uri_hash: str = Field("", alias="uriHash")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class MongoSummary(BaseModel):
    total: int = 0
    high: int = 0
    medium: int = 0
    low: int = 0
    info: int = 0


class MongoFinding(BaseModel):
    type: str = ""
    severity: str = ""
    database: str = ""
    collection: str = ""
    index: str = ""
    message: str = ""


class MongoReport(ToolPayloadModel):
    """MongoSpectre output: collection and index findings."""

    TOOL = "mongospectre"

    metadata: MongoMetadata = MongoMetadata()
    findings: List[MongoFinding]
    max_severity: str = Field("", alias="maxSeverity")
    summary: MongoSummary = MongoSummary()

    model_config = ConfigDict(populate_by_name=True)
