"""
Run Storage Contract

Historical aggregated runs are consumed through this small load/store
interface so trend and diff computations never depend on where runs live.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List

from spectrehub.core.exceptions import RunNotFoundError
from spectrehub.models.report import AggregatedReport


class RunStorage(ABC):
    """
    Store of aggregated reports keyed by run timestamp.

    Usage:
        class S3RunStorage(RunStorage):
            def save_aggregated_report(self, report): ...
    """

    @abstractmethod
    def save_aggregated_report(self, report: AggregatedReport) -> None:
        """Persist a run. A run with the same timestamp is overwritten."""

    @abstractmethod
    def load_aggregated_report(self, timestamp: datetime) -> AggregatedReport:
        """Load the run stored for ``timestamp``."""

    @abstractmethod
    def list_runs(self) -> List[datetime]:
        """Timestamps of all stored runs, oldest first."""

    def get_latest_run(self) -> AggregatedReport:
        """The most recent run.

        Raises:
            RunNotFoundError: nothing is stored
        """
        timestamps = self.list_runs()
        if not timestamps:
            raise RunNotFoundError("no runs found")
        return self.load_aggregated_report(timestamps[-1])

    @abstractmethod
    def get_last_n_runs(self, n: int) -> List[AggregatedReport]:
        """Up to ``n`` most recent runs, oldest first."""
