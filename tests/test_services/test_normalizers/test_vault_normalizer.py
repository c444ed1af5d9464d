"""Tests for the VaultSpectre normalizer."""

import pytest

from spectrehub.core.exceptions import PayloadShapeError
from spectrehub.schemas import S3Report
from spectrehub.services.normalizers import normalize_vault
from tests.mocks.reports import RUN_TIME, make_tool_report, vault_payload, vault_secret


class TestNormalizeVault:
    def test_ok_secrets_are_skipped(self):
        payload = vault_payload({"secret/data/ok": vault_secret("ok")})
        assert normalize_vault(make_tool_report("vaultspectre", payload)) == []

    def test_missing_secret(self):
        payload = vault_payload({"secret/data/db": vault_secret("missing", references=3)})
        issues = normalize_vault(make_tool_report("vaultspectre", payload))
        assert len(issues) == 1
        issue = issues[0]
        assert issue.tool == "vaultspectre"
        assert issue.category == "missing"
        assert issue.severity == "critical"
        assert issue.resource == "secret/data/db"
        assert issue.count == 3
        assert issue.evidence == "status: missing"
        assert issue.first_seen == RUN_TIME
        assert issue.last_seen == RUN_TIME

    def test_status_mapping(self):
        payload = vault_payload(
            {
                "a": vault_secret("access_denied"),
                "b": vault_secret("invalid"),
                "c": vault_secret("error"),
                "d": vault_secret("stale"),
                "e": vault_secret("dynamic"),
            }
        )
        issues = {i.resource: i for i in normalize_vault(make_tool_report("vaultspectre", payload))}
        assert (issues["a"].category, issues["a"].severity) == ("access_denied", "high")
        assert (issues["b"].category, issues["b"].severity) == ("invalid", "high")
        assert (issues["c"].category, issues["c"].severity) == ("error", "critical")
        assert (issues["d"].category, issues["d"].severity) == ("stale", "low")
        # Unknown statuses fall back to error
        assert issues["e"].category == "error"

    def test_error_message_is_evidence(self):
        payload = vault_payload({"p": vault_secret("error", error_msg="permission denied on mount")})
        issues = normalize_vault(make_tool_report("vaultspectre", payload))
        assert issues[0].evidence == "permission denied on mount"

    def test_stale_evidence_includes_last_access(self):
        payload = vault_payload({"p": vault_secret("stale", is_stale=True, last_accessed="2025-01-01")})
        issues = normalize_vault(make_tool_report("vaultspectre", payload))
        assert issues[0].evidence == "stale (last accessed: 2025-01-01)"

    def test_output_is_sorted_by_path(self):
        payload = vault_payload({"z/path": vault_secret("missing"), "a/path": vault_secret("missing")})
        issues = normalize_vault(make_tool_report("vaultspectre", payload))
        assert [i.resource for i in issues] == ["a/path", "z/path"]

    def test_wrong_payload_shape_raises(self):
        report = make_tool_report("vaultspectre", S3Report(buckets={}))
        with pytest.raises(PayloadShapeError, match="unrecognized payload shape") as exc:
            normalize_vault(report)
        assert exc.value.tool == "vaultspectre"
        assert "S3Report" in str(exc.value)
