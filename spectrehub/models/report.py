from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from spectrehub.core import utc_now
from spectrehub.models.issue import NormalizedIssue
from spectrehub.schemas import coerce_payload


class HealthLevel(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    WARNING = "warning"
    CRITICAL = "critical"
    SEVERE = "severe"
    UNKNOWN = "unknown"


class TrendDirection(str, Enum):
    IMPROVING = "improving"
    DEGRADING = "degrading"
    STABLE = "stable"


class ToolReport(BaseModel):
    """One tool's output for one run.

    ``raw_data`` holds the typed payload for the tool (``VaultReport``,
    ``S3Report``, ...), a ``SpectreV1Report`` for envelope output, or the
    plain decoded JSON for tools that are not supported.
    """

    tool: str = Field(..., description="Tool name, e.g. s3spectre")
    version: str = Field("unknown", description="Tool version")
    timestamp: datetime = Field(default_factory=utc_now, description="When the tool ran")
    raw_data: Any = Field(None, description="Typed tool payload or raw JSON")
    status: str = Field("supported", description="'supported' or 'unsupported'")
    issue_count: int = Field(0, description="Normalized issues produced by this report")
    is_supported: bool = Field(True, description="Whether the tool is explicitly supported")

    @field_validator("raw_data", mode="before")
    @classmethod
    def _hydrate_payload(cls, value: Any, info: ValidationInfo) -> Any:
        return coerce_payload(info.data.get("tool", ""), value)


class CrossToolSummary(BaseModel):
    total_issues: int = 0
    issues_by_tool: Dict[str, int] = Field(default_factory=dict)
    issues_by_category: Dict[str, int] = Field(default_factory=dict)
    issues_by_severity: Dict[str, int] = Field(default_factory=dict)
    health_score: HealthLevel = Field(HealthLevel.UNKNOWN, description="Health level derived from score_percent")
    score_percent: float = Field(0.0, description="Share of addressable resources without issues (0-100)")
    total_tools: int = 0
    supported_tools: int = 0
    unsupported_tools: int = 0

    model_config = ConfigDict(use_enum_values=True)


class Trend(BaseModel):
    """Count-based change between the current run and the previous one."""

    direction: TrendDirection
    change_percent: float = Field(0.0, description="Negative means fewer issues")
    previous_issues: int
    current_issues: int
    compared_with: datetime = Field(..., description="Timestamp of the previous run")
    new_issues: int = 0
    resolved_issues: int = 0

    model_config = ConfigDict(use_enum_values=True)


class ToolTrend(BaseModel):
    name: str
    current_issues: int
    previous_issues: int
    change: int = Field(..., description="Positive means more issues")
    change_percent: float = Field(..., description="Positive means more issues")


class TrendSummary(BaseModel):
    time_range: str = Field(..., description="e.g. 'Last 7 days' or 'Single run'")
    runs_analyzed: int
    issue_sparkline: List[int] = Field(default_factory=list, description="Total issues per run, oldest first")
    by_tool: Dict[str, ToolTrend] = Field(default_factory=dict)


class Recommendation(BaseModel):
    severity: str
    tool: str
    action: str = Field(..., description="What to do")
    impact: str = Field(..., description="Why it matters")
    count: int = Field(..., description="Summed weight of the underlying issues")


class AggregatedReport(BaseModel):
    timestamp: datetime = Field(default_factory=utc_now)
    issues: List[NormalizedIssue] = Field(default_factory=list)
    tool_reports: Dict[str, ToolReport] = Field(default_factory=dict)
    summary: CrossToolSummary = Field(default_factory=CrossToolSummary)
    trend: Optional[Trend] = None
    recommendations: List[Recommendation] = Field(default_factory=list)
