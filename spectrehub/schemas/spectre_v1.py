from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

SPECTRE_V1_SCHEMA = "spectre/v1"


class SpectreV1Target(BaseModel):
    type: str = ""
    uri_hash: str = ""


class SpectreV1Finding(BaseModel):
    id: str
    severity: str = ""
    location: str = ""
    message: str = ""
    estimated_monthly_waste: Optional[float] = None

    model_config = ConfigDict(extra="ignore")


class SpectreV1Summary(BaseModel):
    total: int = 0
    high: int = 0
    medium: int = 0
    low: int = 0
    info: int = 0


class SpectreV1Report(BaseModel):
    """The generic finding envelope newer Spectre tools emit."""

    schema_id: str = Field(SPECTRE_V1_SCHEMA, alias="schema")
    tool: str = ""
    version: str = ""
    timestamp: Optional[datetime] = None
    target: SpectreV1Target = SpectreV1Target()
    findings: List[SpectreV1Finding] = []
    summary: SpectreV1Summary = SpectreV1Summary()

    model_config = ConfigDict(populate_by_name=True, extra="ignore")
