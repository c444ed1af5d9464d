from spectrehub.models.diff import DiffResult, DiffSummary
from spectrehub.models.issue import (
    Category,
    NormalizedIssue,
    Severity,
    ToolInfo,
    ToolType,
    SUPPORTED_TOOLS,
    get_tool_info,
    is_supported_tool,
)
from spectrehub.models.report import (
    AggregatedReport,
    CrossToolSummary,
    HealthLevel,
    Recommendation,
    ToolReport,
    ToolTrend,
    Trend,
    TrendDirection,
    TrendSummary,
)
from spectrehub.models.score import ScoreExplanation, ScoreThreshold, ToolContribution

__all__ = [
    "AggregatedReport",
    "Category",
    "CrossToolSummary",
    "DiffResult",
    "DiffSummary",
    "HealthLevel",
    "NormalizedIssue",
    "Recommendation",
    "ScoreExplanation",
    "ScoreThreshold",
    "Severity",
    "SUPPORTED_TOOLS",
    "ToolContribution",
    "ToolInfo",
    "ToolReport",
    "ToolTrend",
    "ToolType",
    "Trend",
    "TrendDirection",
    "TrendSummary",
    "get_tool_info",
    "is_supported_tool",
]
