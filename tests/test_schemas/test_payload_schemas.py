"""Tests for tool payload schemas and payload coercion."""

import pytest
from pydantic import ValidationError

from spectrehub.schemas import (
    KafkaReport,
    MongoReport,
    PgReport,
    S3Report,
    SpectreV1Report,
    VaultReport,
    coerce_payload,
    is_spectre_v1_payload,
    payload_model_for,
)
from tests.mocks.reports import kafka_payload, mongo_payload, pg_payload, s3_payload, v1_payload, vault_payload


class TestKafkaSchema:
    def test_summary_aliases(self):
        payload = kafka_payload(total_topics=9)
        payload["summary"]["internal_topics_excluded"] = 4
        report = KafkaReport.model_validate(payload)
        assert report.summary.total_topics == 9
        assert report.summary.internal_topics == 4
        assert report.cluster_metadata.fetched_at == "2026-03-01 12:00:00 UTC"

    def test_summary_optional(self):
        assert KafkaReport.model_validate({"unused_topics": []}).summary is None


class TestSpectreV1Schema:
    def test_schema_alias(self):
        report = SpectreV1Report.model_validate(v1_payload("awsspectre"))
        assert report.schema_id == "spectre/v1"
        assert report.model_dump(by_alias=True)["schema"] == "spectre/v1"

    def test_detection(self):
        assert is_spectre_v1_payload(v1_payload("s3spectre"))
        assert is_spectre_v1_payload(SpectreV1Report(tool="s3spectre"))
        assert not is_spectre_v1_payload({"schema": "spectre/v2"})
        assert not is_spectre_v1_payload(["spectre/v1"])


class TestCoercePayload:
    def test_validates_dicts(self):
        payload = coerce_payload("kafkaspectre", kafka_payload())
        assert isinstance(payload, KafkaReport)

    def test_invalid_dict_is_left_alone(self):
        bad = {"buckets": "not-a-map"}
        assert coerce_payload("s3spectre", bad) is bad

    def test_typed_value_untouched(self):
        report = S3Report(buckets={})
        assert coerce_payload("vaultspectre", report) is report

    def test_unknown_tool(self):
        assert payload_model_for("iamspectre") is None
        assert coerce_payload("iamspectre", {"a": 1}) == {"a": 1}


class TestToolStructure:
    def test_structure_keys_are_required(self):
        with pytest.raises(ValidationError):
            VaultReport.model_validate({"summary": {"total_references": 3}})
        with pytest.raises(ValidationError):
            KafkaReport.model_validate({"summary": {"cluster_name": "c"}})

    def test_named_producer_must_match(self):
        payload = vault_payload()
        payload["buckets"] = {}
        with pytest.raises(ValidationError, match="produced by vaultspectre"):
            S3Report.model_validate(payload)

    def test_postgres_and_mongo_do_not_cross(self):
        with pytest.raises(ValidationError, match="produced by pgspectre"):
            MongoReport.model_validate(pg_payload())
        with pytest.raises(ValidationError, match="not written by pgspectre"):
            PgReport.model_validate(mongo_payload())

    def test_foreign_document_left_as_dict(self):
        payload = s3_payload({"b": {"status": "MISSING_BUCKET"}}, total_buckets=3)
        assert coerce_payload("vaultspectre", payload) is payload
