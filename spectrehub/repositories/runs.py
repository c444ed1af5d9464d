import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Union

from pydantic import ValidationError

from spectrehub.core.config import settings
from spectrehub.core.exceptions import RunNotFoundError, StorageError
from spectrehub.models.report import AggregatedReport
from spectrehub.repositories.base import RunStorage

logger = logging.getLogger(__name__)

RUNS_DIR = "runs"
RUN_FILE_SUFFIX = "-aggregated.json"
RUN_TIMESTAMP_FORMAT = "%Y-%m-%dT%H-%M-%S"


def format_run_timestamp(ts: datetime) -> str:
    """File-name stem for a run; aware timestamps are converted to UTC."""
    if ts.tzinfo is not None:
        ts = ts.astimezone(timezone.utc)
    return ts.strftime(RUN_TIMESTAMP_FORMAT)


def parse_run_timestamp(stem: str) -> Optional[datetime]:
    try:
        return datetime.strptime(stem, RUN_TIMESTAMP_FORMAT).replace(tzinfo=timezone.utc)
    except ValueError:
        return None


class LocalRunStorage(RunStorage):
    """
    Aggregated runs as pretty-printed JSON files.

    Layout: ``<base_dir>/runs/<YYYY-MM-DDTHH-MM-SS>-aggregated.json``. Two
    runs within the same second share a file and the last write wins.
    """

    def __init__(self, base_dir: Union[str, Path, None] = None):
        self.base_dir = Path(base_dir if base_dir is not None else settings.STORAGE_DIR)

    @property
    def runs_dir(self) -> Path:
        return self.base_dir / RUNS_DIR

    def _path_for(self, timestamp: datetime) -> Path:
        return self.runs_dir / f"{format_run_timestamp(timestamp)}{RUN_FILE_SUFFIX}"

    def ensure_directory_exists(self) -> None:
        try:
            self.runs_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(f"failed to create runs directory: {e}") from e

    def save_aggregated_report(self, report: AggregatedReport) -> None:
        self.ensure_directory_exists()
        path = self._path_for(report.timestamp)
        try:
            path.write_text(report.model_dump_json(by_alias=True, indent=2), encoding="utf-8")
        except OSError as e:
            raise StorageError(f"failed to write {path}: {e}") from e
        logger.info(f"Stored run {path.name}")

    def load_aggregated_report(self, timestamp: datetime) -> AggregatedReport:
        path = self._path_for(timestamp)
        if not path.is_file():
            raise RunNotFoundError(f"report not found: {path}")
        try:
            return AggregatedReport.model_validate_json(path.read_text(encoding="utf-8"))
        except OSError as e:
            raise StorageError(f"failed to read {path}: {e}") from e
        except ValidationError as e:
            raise StorageError(f"failed to load {path}: {e.error_count()} validation error(s)") from e

    def list_runs(self) -> List[datetime]:
        if not self.runs_dir.is_dir():
            return []

        timestamps = []
        for entry in self.runs_dir.iterdir():
            if not entry.is_file() or not entry.name.endswith(RUN_FILE_SUFFIX):
                continue
            ts = parse_run_timestamp(entry.name[: -len(RUN_FILE_SUFFIX)])
            if ts is not None:
                timestamps.append(ts)

        return sorted(timestamps)

    def get_last_n_runs(self, n: Optional[int] = None) -> List[AggregatedReport]:
        """
        Up to ``n`` most recent runs, oldest first. ``n`` defaults to
        ``settings.LAST_RUNS``.

        Runs that fail to load are skipped with a warning, so fewer than
        ``n`` reports may come back.

        Raises:
            RunNotFoundError: nothing is stored
        """
        if n is None:
            n = settings.LAST_RUNS

        timestamps = self.list_runs()
        if not timestamps:
            raise RunNotFoundError("no runs found")

        selected = timestamps[-n:] if n > 0 else []
        reports = []
        for ts in selected:
            try:
                reports.append(self.load_aggregated_report(ts))
            except StorageError as e:
                logger.warning(f"Skipping stored run {format_run_timestamp(ts)}: {e}")
        return reports
