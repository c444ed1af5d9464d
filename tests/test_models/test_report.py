"""Tests for ToolReport payload hydration and report defaults."""

from spectrehub.models import AggregatedReport, ToolReport
from spectrehub.schemas import PgReport, SpectreV1Report, VaultReport
from tests.mocks.reports import pg_payload, v1_payload, vault_payload


class TestToolReport:
    def test_dict_payload_is_typed(self):
        report = ToolReport(tool="vaultspectre", raw_data=vault_payload(total_references=4))
        assert isinstance(report.raw_data, VaultReport)
        assert report.raw_data.summary.total_references == 4

    def test_envelope_wins_over_tool_model(self):
        report = ToolReport(tool="pgspectre", raw_data=v1_payload("pgspectre"))
        assert isinstance(report.raw_data, SpectreV1Report)

    def test_typed_payload_passes_through(self):
        payload = PgReport.model_validate(pg_payload(tables=2))
        report = ToolReport(tool="vaultspectre", raw_data=payload)
        assert report.raw_data is payload

    def test_unknown_tool_keeps_dict(self):
        report = ToolReport(tool="iamspectre", raw_data={"anything": 1}, is_supported=False)
        assert report.raw_data == {"anything": 1}

    def test_defaults(self):
        report = ToolReport(tool="s3spectre")
        assert report.version == "unknown"
        assert report.issue_count == 0
        assert report.timestamp.tzinfo is not None


class TestAggregatedReport:
    def test_empty_defaults(self):
        report = AggregatedReport()
        assert report.issues == []
        assert report.trend is None
        assert report.summary.health_score == "unknown"
        assert report.summary.total_issues == 0
