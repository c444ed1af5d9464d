from typing import Dict, List

from pydantic import BaseModel, Field


class ToolContribution(BaseModel):
    tool: str
    resources: int = Field(0, description="Addressable resources the tool reported")
    issues: int = Field(0, description="Normalized issues from the tool")
    affected: int = Field(0, description="Distinct resources with at least one issue")


class ScoreThreshold(BaseModel):
    min: float
    label: str


class ScoreExplanation(BaseModel):
    """Step-by-step breakdown of a report's health score."""

    per_tool: List[ToolContribution] = Field(default_factory=list)
    total_resources: int = 0
    affected_resources: List[str] = Field(default_factory=list, description="Sorted distinct affected resources")
    affected_count: int = 0
    score: float = 0.0
    health: str = "unknown"
    formula: str = ""
    thresholds: List[ScoreThreshold] = Field(default_factory=list)
    issues_by_severity: Dict[str, int] = Field(default_factory=dict)
