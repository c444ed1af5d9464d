"""
Shared Constants

Centralized constants used across the application to ensure consistency.
"""

from typing import Dict, List, Optional, Tuple

# Severity order for sorting (higher value = more severe)
SEVERITY_ORDER: Dict[str, int] = {
    "critical": 4,
    "high": 3,
    "medium": 2,
    "low": 1,
}

# Display order for severity breakdowns
SEVERITY_DISPLAY_ORDER: List[str] = ["critical", "high", "medium", "low"]


def get_severity_value(severity: Optional[str]) -> int:
    """Get numeric value for severity. Higher = more severe, unknown = 0."""
    if not severity:
        return 0
    return SEVERITY_ORDER.get(severity.lower(), 0)


def sort_by_severity(items: list, key: str = "severity", reverse: bool = True) -> list:
    """
    Sort a list of dicts or models by severity.

    The sort is stable, so items of equal severity keep their input order.

    Args:
        items: List of dicts or objects with a severity field
        key: The key or attribute containing the severity value
        reverse: If True, most severe first (default)
    """
    return sorted(
        items,
        key=lambda x: get_severity_value(
            x.get(key) if isinstance(x, dict) else getattr(x, key, None)
        ),
        reverse=reverse,
    )


# Health levels by minimum score percent, checked top to bottom
HEALTH_THRESHOLDS: List[Tuple[float, str]] = [
    (95.0, "excellent"),
    (85.0, "good"),
    (70.0, "warning"),
    (50.0, "critical"),
    (0.0, "severe"),
]

HEALTH_UNKNOWN = "unknown"

# Issue identity separator used by the diff engine; resources are not escaped
ISSUE_KEY_SEPARATOR = "|"

# Score explanation: list every affected resource up to this many, otherwise
# show the first AFFECTED_LIST_PREVIEW and a remainder count
AFFECTED_LIST_FULL_LIMIT = 20
AFFECTED_LIST_PREVIEW = 15

COMPARISON_PLACEHOLDER = "No previous run to compare with"
SINGLE_RUN_TIME_RANGE = "Single run"
