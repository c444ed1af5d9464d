"""
Shared utility functions for normalizers.

These helpers give every tool normalizer the same severity policy and the
same lookup behaviour for tool-native identifiers.
"""

from typing import Optional, Union

from spectrehub.models.issue import Category, Severity, ToolType
from spectrehub.services.normalizers.mappings import (
    DEFAULT_FINDING_CATEGORY,
    DEFAULT_GENERIC_SEVERITY,
    DEFAULT_POLICY_SEVERITY,
    FINDING_ID_CATEGORIES,
    GENERIC_SEVERITIES,
    SEVERITY_BY_CATEGORY,
    SEVERITY_OVERRIDES,
)


def _as_category(value: Union[Category, str]) -> Optional[Category]:
    try:
        return Category(value)
    except ValueError:
        return None


def _as_tool(value: Union[ToolType, str]) -> ToolType:
    try:
        return ToolType(value)
    except ValueError:
        return ToolType.UNKNOWN


def determine_severity(category: Union[Category, str], tool: Union[ToolType, str]) -> Severity:
    """
    Policy severity for tools that do not report one themselves.

    Looks for a ``(category, tool)`` override first, then the per-category
    default. Unknown categories fall back to LOW.

    Args:
        category: Normalized issue category
        tool: Producing tool

    Returns:
        Severity enum value, never raises
    """
    cat = _as_category(category)
    if cat is None:
        return DEFAULT_POLICY_SEVERITY

    override = SEVERITY_OVERRIDES.get((cat, _as_tool(tool)))
    if override is not None:
        return override

    return SEVERITY_BY_CATEGORY.get(cat, DEFAULT_POLICY_SEVERITY)


def map_generic_severity(value: Optional[str]) -> Severity:
    """Map a native severity string (critical/high/medium/low/info) to Severity.

    "info" is folded into LOW; anything unrecognised becomes MEDIUM.
    """
    if not value:
        return DEFAULT_GENERIC_SEVERITY
    return GENERIC_SEVERITIES.get(value.strip().lower(), DEFAULT_GENERIC_SEVERITY)


def map_finding_id_to_category(finding_id: Optional[str]) -> Category:
    """Map a spectre/v1 finding ID to a Category. Unknown IDs map to ERROR."""
    if not finding_id:
        return DEFAULT_FINDING_CATEGORY
    return FINDING_ID_CATEGORIES.get(finding_id.strip().upper(), DEFAULT_FINDING_CATEGORY)


def join_resource(*parts: Optional[str]) -> str:
    """Join the non-empty parts of a resource path with dots.

    ``join_resource("public", "users", "", "idx_email")`` gives
    ``"public.users.idx_email"``.
    """
    return ".".join(p for p in parts if p)
