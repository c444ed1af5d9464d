"""Tests for LocalRunStorage."""

from datetime import timedelta

import pytest

from spectrehub.core.config import settings
from spectrehub.core.exceptions import RunNotFoundError
from spectrehub.repositories.runs import format_run_timestamp, parse_run_timestamp
from spectrehub.schemas import KafkaReport, SpectreV1Report, VaultReport
from tests.mocks.reports import RUN_TIME, kafka_payload, make_issue, make_run, make_tool_report, v1_payload, vault_payload


class TestRunTimestamps:
    def test_format(self):
        assert format_run_timestamp(RUN_TIME) == "2026-03-01T12-00-00"

    def test_parse_round_trip(self):
        assert parse_run_timestamp("2026-03-01T12-00-00") == RUN_TIME

    def test_parse_garbage(self):
        assert parse_run_timestamp("latest") is None


class TestLocalRunStorage:
    def test_save_writes_expected_file(self, storage):
        storage.save_aggregated_report(make_run(timestamp=RUN_TIME))
        path = storage.runs_dir / "2026-03-01T12-00-00-aggregated.json"
        assert path.is_file()
        assert path.read_text().startswith("{\n  ")

    def test_load_restores_typed_payloads(self, storage, aggregator):
        report = aggregator.aggregate(
            [
                make_tool_report("vaultspectre", vault_payload(total_references=3)),
                make_tool_report("kafkaspectre", kafka_payload(total_topics=12)),
                make_tool_report("awsspectre", v1_payload("awsspectre")),
            ],
            timestamp=RUN_TIME,
        )
        storage.save_aggregated_report(report)

        loaded = storage.load_aggregated_report(RUN_TIME)
        assert isinstance(loaded.tool_reports["vaultspectre"].raw_data, VaultReport)
        kafka = loaded.tool_reports["kafkaspectre"].raw_data
        assert isinstance(kafka, KafkaReport)
        assert kafka.summary.total_topics == 12
        assert isinstance(loaded.tool_reports["awsspectre"].raw_data, SpectreV1Report)
        assert loaded.summary == report.summary

    def test_latest_run(self, storage):
        storage.save_aggregated_report(make_run([make_issue()], timestamp=RUN_TIME))
        storage.save_aggregated_report(make_run(timestamp=RUN_TIME + timedelta(days=1)))
        latest = storage.get_latest_run()
        assert latest.timestamp == RUN_TIME + timedelta(days=1)

    def test_latest_run_empty(self, storage):
        with pytest.raises(RunNotFoundError, match="no runs found"):
            storage.get_latest_run()

    def test_last_n_runs_oldest_first(self, storage):
        for day in range(4):
            storage.save_aggregated_report(make_run(timestamp=RUN_TIME + timedelta(days=day), total_issues=day))
        runs = storage.get_last_n_runs(2)
        assert [r.summary.total_issues for r in runs] == [2, 3]

    def test_last_n_runs_skips_corrupt_files(self, storage):
        storage.save_aggregated_report(make_run(timestamp=RUN_TIME))
        storage.ensure_directory_exists()
        (storage.runs_dir / "2026-03-02T12-00-00-aggregated.json").write_text("{broken")
        runs = storage.get_last_n_runs(5)
        assert len(runs) == 1

    def test_last_n_runs_empty(self, storage):
        with pytest.raises(RunNotFoundError):
            storage.get_last_n_runs(3)

    def test_list_runs_ignores_foreign_files(self, storage):
        storage.ensure_directory_exists()
        (storage.runs_dir / "notes-aggregated.json").write_text("{}")
        (storage.runs_dir / "README.md").write_text("hi")
        storage.save_aggregated_report(make_run(timestamp=RUN_TIME))
        assert storage.list_runs() == [RUN_TIME]

    def test_same_second_last_write_wins(self, storage):
        storage.save_aggregated_report(make_run(timestamp=RUN_TIME, total_issues=1))
        storage.save_aggregated_report(make_run(timestamp=RUN_TIME + timedelta(microseconds=500), total_issues=2))
        assert storage.get_latest_run().summary.total_issues == 2
        assert len(storage.list_runs()) == 1

    def test_last_n_defaults_to_setting(self, storage, monkeypatch):
        monkeypatch.setattr(settings, "LAST_RUNS", 2)
        for day in range(3):
            storage.save_aggregated_report(make_run(timestamp=RUN_TIME + timedelta(days=day)))
        assert len(storage.get_last_n_runs()) == 2
