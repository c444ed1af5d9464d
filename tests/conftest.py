"""
Shared test fixtures and configuration.

Environment variables are set BEFORE any spectrehub imports so the
settings singleton never picks up a developer's local .env values.
"""

import os

os.environ["SPECTREHUB_LOG_LEVEL"] = "DEBUG"
os.environ["SPECTREHUB_FAIL_THRESHOLD"] = "0"

import pytest  # noqa: E402

from spectrehub.repositories import LocalRunStorage  # noqa: E402
from spectrehub.services.aggregator import Aggregator  # noqa: E402


@pytest.fixture
def aggregator():
    return Aggregator()


@pytest.fixture
def storage(tmp_path):
    """Run storage rooted in a per-test temporary directory."""
    return LocalRunStorage(tmp_path / ".spectre")
