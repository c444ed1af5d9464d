"""Tests for the MongoSpectre normalizer."""

from spectrehub.services.normalizers import normalize_mongo
from tests.mocks.reports import make_tool_report, mongo_payload


class TestNormalizeMongo:
    def test_collection_and_index_findings(self):
        payload = mongo_payload(
            [
                {"type": "UNUSED_COLLECTION", "severity": "medium", "database": "app", "collection": "legacy"},
                {"type": "UNUSED_INDEX", "severity": "low", "database": "app", "collection": "users", "index": "age_1"},
                {"type": "MISSING_COLLECTION", "severity": "high", "database": "app", "collection": "audit"},
            ]
        )
        issues = normalize_mongo(make_tool_report("mongospectre", payload))
        assert [i.resource for i in issues] == ["app.legacy", "app.users.age_1", "app.audit"]
        assert [i.category for i in issues] == ["unused", "unused", "missing"]

    def test_unknown_type_is_error(self):
        payload = mongo_payload([{"type": "BRAND_NEW_CHECK", "severity": "high", "database": "d", "collection": "c"}])
        issues = normalize_mongo(make_tool_report("mongospectre", payload))
        assert issues[0].category == "error"
        assert issues[0].severity == "high"
