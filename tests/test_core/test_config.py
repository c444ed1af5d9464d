"""Tests for settings."""

from spectrehub.core.config import Settings


class TestSettings:
    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("SPECTREHUB_LAST_RUNS", "14")
        assert Settings().LAST_RUNS == 14

    def test_threshold_disabled(self):
        assert not Settings(FAIL_THRESHOLD=0).should_fail_on_threshold(1000)

    def test_threshold(self):
        s = Settings(FAIL_THRESHOLD=5)
        assert not s.should_fail_on_threshold(5)
        assert s.should_fail_on_threshold(6)
