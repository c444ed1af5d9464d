from typing import Dict, List

from pydantic import BaseModel, Field

from spectrehub.models.issue import NormalizedIssue


class DiffSummary(BaseModel):
    baseline_total: int = 0
    current_total: int = 0
    new_count: int = 0
    resolved_count: int = 0
    delta: int = Field(0, description="Raw issue count change; positive means more issues")
    new_by_severity: Dict[str, int] = Field(default_factory=dict)
    new_by_tool: Dict[str, int] = Field(default_factory=dict)
    new_by_category: Dict[str, int] = Field(default_factory=dict)


class DiffResult(BaseModel):
    """Identity-based churn between a baseline run and a current run."""

    baseline: str = Field(..., description="Formatted baseline timestamp")
    current: str = Field(..., description="Formatted current timestamp")
    new_issues: List[NormalizedIssue] = Field(default_factory=list)
    resolved_issues: List[NormalizedIssue] = Field(default_factory=list)
    summary: DiffSummary = Field(default_factory=DiffSummary)
