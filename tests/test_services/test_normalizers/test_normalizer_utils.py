"""Tests for normalizer mapping helpers and tables."""

import pytest

from spectrehub.models.issue import Category, Severity, ToolType
from spectrehub.services.normalizers.mappings import (
    FINDING_ID_CATEGORIES,
    SEVERITY_BY_CATEGORY,
)
from spectrehub.services.normalizers.utils import (
    determine_severity,
    join_resource,
    map_finding_id_to_category,
    map_generic_severity,
)


class TestDetermineSeverity:
    @pytest.mark.parametrize(
        "category,expected",
        [
            ("missing", "critical"),
            ("error", "critical"),
            ("access_denied", "high"),
            ("invalid", "high"),
            ("drift", "medium"),
            ("misconfig", "medium"),
            ("stale", "low"),
            ("unused", "low"),
        ],
    )
    def test_category_defaults(self, category, expected):
        assert determine_severity(category, ToolType.S3) == expected

    def test_stale_is_low_for_every_tool(self):
        assert determine_severity(Category.STALE, ToolType.VAULT) == Severity.LOW
        assert determine_severity(Category.STALE, "vaultspectre") == Severity.LOW
        assert determine_severity(Category.STALE, ToolType.S3) == Severity.LOW

    def test_unknown_category_is_low(self):
        assert determine_severity("bogus", ToolType.S3) == Severity.LOW

    def test_unknown_tool_uses_category_default(self):
        assert determine_severity("missing", "nonexistent") == Severity.CRITICAL

    def test_every_category_has_policy(self):
        assert set(SEVERITY_BY_CATEGORY) == set(Category)


class TestMapGenericSeverity:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("critical", "critical"),
            ("high", "high"),
            ("medium", "medium"),
            ("low", "low"),
            ("info", "low"),
            ("HIGH", "high"),
            ("unknown", "medium"),
            ("", "medium"),
            (None, "medium"),
        ],
    )
    def test_mapping(self, value, expected):
        assert map_generic_severity(value) == expected


class TestMapFindingIdToCategory:
    def test_known_ids(self):
        assert map_finding_id_to_category("MISSING_BUCKET") == Category.MISSING
        assert map_finding_id_to_category("IDLE_EC2") == Category.UNUSED
        assert map_finding_id_to_category("STALE_ACCESS_KEY") == Category.STALE
        assert map_finding_id_to_category("NO_MFA") == Category.MISCONFIG
        assert map_finding_id_to_category("FAILED_AUTH_ONLY") == Category.ACCESS_DENIED
        assert map_finding_id_to_category("SCHEMA_DRIFT") == Category.DRIFT

    def test_unknown_id_is_error(self):
        assert map_finding_id_to_category("NEVER_HEARD_OF_IT") == Category.ERROR
        assert map_finding_id_to_category("") == Category.ERROR

    def test_table_values_are_categories(self):
        assert all(isinstance(v, Category) for v in FINDING_ID_CATEGORIES.values())


class TestJoinResource:
    def test_skips_empty_parts(self):
        assert join_resource("public", "users", "", "idx") == "public.users.idx"

    def test_all_empty(self):
        assert join_resource("", None) == ""
