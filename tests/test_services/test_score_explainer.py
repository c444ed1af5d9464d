"""Tests for health score explanation."""

from spectrehub.services.aggregator import Aggregator
from spectrehub.services.score_explainer import explain_score, render_score_explanation
from tests.mocks.reports import RUN_TIME, make_tool_report, s3_payload, vault_payload, vault_secret


class TestExplainScore:
    def setup_method(self):
        self.agg = Aggregator()
        self.report = self.agg.aggregate(
            [
                make_tool_report(
                    "vaultspectre",
                    vault_payload(
                        {"secret/b": vault_secret("missing"), "secret/a": vault_secret("missing")},
                        total_references=8,
                    ),
                ),
                make_tool_report("s3spectre", s3_payload({"old": {"status": "UNUSED_BUCKET"}}, total_buckets=2)),
                make_tool_report("iamspectre", {}, is_supported=False),
            ],
            timestamp=RUN_TIME,
        )

    def test_breakdown(self):
        explanation = explain_score(self.report)
        assert [tc.tool for tc in explanation.per_tool] == ["s3spectre", "vaultspectre"]
        vault = explanation.per_tool[1]
        assert (vault.resources, vault.issues, vault.affected) == (8, 2, 2)
        assert explanation.total_resources == 10
        assert explanation.affected_resources == ["s3://old", "secret/a", "secret/b"]
        assert explanation.affected_count == 3
        assert explanation.formula == "(10 - 3) / 10 * 100 = 70.0"
        assert explanation.health == "warning"
        assert [t.label for t in explanation.thresholds] == ["excellent", "good", "warning", "critical", "severe"]

    def test_render(self):
        text = render_score_explanation(explain_score(self.report))
        assert "Health Score Breakdown" in text
        assert "2. Affected resources: 3 distinct" in text
        assert "   - secret/a" in text
        assert "   → ≥ 70%  warning" in text
        assert "   critical    2" in text
        assert text.rstrip().endswith("Result: WARNING (70.0%)")

    def test_long_affected_list_is_truncated(self):
        payload = vault_payload({f"secret/{i:02d}": vault_secret("missing") for i in range(25)}, total_references=100)
        report = self.agg.aggregate([make_tool_report("vaultspectre", payload)])
        text = render_score_explanation(explain_score(report))
        assert "   - secret/14" in text
        assert "   - secret/15" not in text
        assert "   ... +10 more" in text
