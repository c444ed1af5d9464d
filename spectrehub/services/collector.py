"""
Report collection.

Reads Spectre tool output from disk, works out which tool produced each
file and wraps the parsed payload in a ``ToolReport``. Detection runs in
phases:

0. spectre/v1 envelope: the envelope's ``tool`` field
1. top-level ``tool`` field
2. ``metadata.tool`` (pgspectre)
3. structural fingerprints for tools that do not name themselves
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import TypeAdapter, ValidationError

from spectrehub.core import ensure_utc, utc_now
from spectrehub.core.exceptions import CollectionError, PayloadParseError, ToolDetectionError
from spectrehub.models.issue import ToolType, is_supported_tool
from spectrehub.models.report import ToolReport
from spectrehub.schemas import SPECTRE_V1_SCHEMA, SpectreV1Report, payload_model_for

logger = logging.getLogger(__name__)

_datetime_adapter = TypeAdapter(datetime)

# cluster_metadata.fetched_at as written by kafkaspectre
KAFKA_FETCHED_AT_FORMAT = "%Y-%m-%d %H:%M:%S %Z"

KNOWN_TOOL_NAMES = {t.value for t in ToolType if t is not ToolType.UNKNOWN}


def is_spectre_v1(data: Dict[str, Any]) -> bool:
    return isinstance(data, dict) and data.get("schema") == SPECTRE_V1_SCHEMA


def _map_tool_name(name: str) -> ToolType:
    if name not in KNOWN_TOOL_NAMES:
        raise ToolDetectionError(f"unknown tool: {name}")
    return ToolType(name)


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _detect_by_structure(data: Dict[str, Any]) -> ToolType:
    summary = _as_dict(data.get("summary"))
    metadata = _as_dict(data.get("metadata"))

    if "summary" in data and "unused_topics" in data:
        if "cluster_name" in summary and "total_brokers" in summary:
            return ToolType.KAFKA

    if "metadata" in data and "tables" in data and "cleanup_recommendations" in data:
        if "clickhouse_host" in metadata:
            return ToolType.CLICKHOUSE

    if "secrets" in data and "summary" in data:
        if "status_missing" in summary and "status_ok" in summary:
            return ToolType.VAULT

    if "buckets" in data and "summary" in data:
        if "total_buckets" in summary or "missing_buckets" in summary:
            return ToolType.S3

    if "metadata" in data and "findings" in data and "summary" in data:
        if metadata.get("tool") == ToolType.POSTGRES.value:
            return ToolType.POSTGRES
        scanned = _as_dict(data.get("scanned"))
        if "tables" in scanned and "indexes" in scanned:
            return ToolType.POSTGRES

        if {"mongodbVersion", "uriHash", "repoPath"} & metadata.keys():
            return ToolType.MONGO
        findings = data.get("findings")
        if isinstance(findings, list) and findings and isinstance(findings[0], dict):
            if "database" in findings[0] and "collection" in findings[0]:
                return ToolType.MONGO

    raise ToolDetectionError("unable to detect tool type from structure")


def detect_tool_type(data: Dict[str, Any]) -> ToolType:
    """
    Identify the tool that produced a decoded report.

    Raises:
        ToolDetectionError: the tool is named but unknown, or nothing in the
            document identifies it
    """
    if not isinstance(data, dict):
        raise ToolDetectionError(f"expected a JSON object, got {type(data).__name__}")

    if is_spectre_v1(data):
        tool = data.get("tool")
        if not tool:
            raise ToolDetectionError("spectre/v1 envelope missing tool field")
        return _map_tool_name(tool)

    tool = data.get("tool")
    if isinstance(tool, str) and tool:
        return _map_tool_name(tool)

    if _as_dict(data.get("metadata")).get("tool") == ToolType.POSTGRES.value:
        return ToolType.POSTGRES

    return _detect_by_structure(data)


def parse_payload(data: Dict[str, Any], tool: ToolType) -> Any:
    """
    Validate decoded JSON into the payload model for ``tool``.

    Tools without a bespoke model keep the plain dict.

    Raises:
        PayloadParseError: the document does not match the tool's schema
    """
    model = SpectreV1Report if is_spectre_v1(data) else payload_model_for(tool.value)
    if model is None:
        return data

    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise PayloadParseError(f"failed to parse {tool.value} report: {e}") from e


def extract_version(data: Dict[str, Any]) -> str:
    version = data.get("version")
    if isinstance(version, str) and version:
        return version
    version = _as_dict(data.get("metadata")).get("version")
    if isinstance(version, str) and version:
        return version
    return "unknown"


def _parse_datetime(value: Any) -> Optional[datetime]:
    if not value:
        return None
    try:
        return ensure_utc(_datetime_adapter.validate_python(value))
    except ValidationError:
        return None


def extract_timestamp(data: Dict[str, Any]) -> datetime:
    """When the tool ran. Falls back to the current UTC time."""
    metadata = _as_dict(data.get("metadata"))
    for candidate in (data.get("timestamp"), metadata.get("generated_at"), metadata.get("timestamp")):
        parsed = _parse_datetime(candidate)
        if parsed is not None:
            return parsed

    fetched_at = _as_dict(data.get("cluster_metadata")).get("fetched_at")
    if isinstance(fetched_at, str) and fetched_at:
        try:
            return ensure_utc(datetime.strptime(fetched_at, KAFKA_FETCHED_AT_FORMAT))
        except ValueError:
            logger.debug(f"Unparseable kafka fetched_at: {fetched_at}")

    return utc_now()


def build_tool_report(data: Dict[str, Any]) -> ToolReport:
    """Detect, parse and wrap one decoded tool report."""
    tool = detect_tool_type(data)
    payload = parse_payload(data, tool)
    supported = is_supported_tool(tool.value)

    return ToolReport(
        tool=tool.value,
        version=extract_version(data),
        timestamp=extract_timestamp(data),
        raw_data=payload,
        status="supported" if supported else "unsupported",
        is_supported=supported,
    )


def load_tool_report(path: Union[str, Path]) -> ToolReport:
    """Read a JSON file and build its ``ToolReport``."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise PayloadParseError(f"failed to read {path}: {e}") from e
    return build_tool_report(data)


class Collector:
    """Collects tool reports from a directory tree of JSON files."""

    def find_json_files(self, directory: Union[str, Path]) -> List[Path]:
        root = Path(directory)
        if not root.is_dir():
            raise CollectionError(f"not a directory: {root}")
        return sorted(p for p in root.rglob("*.json") if p.is_file())

    def collect_from_directory(self, directory: Union[str, Path]) -> List[ToolReport]:
        """
        Build a ``ToolReport`` for every JSON file under ``directory``.

        Files that cannot be read, detected or parsed are logged and
        skipped.

        Raises:
            CollectionError: there are no JSON files, or every file failed
        """
        files = self.find_json_files(directory)
        if not files:
            raise CollectionError(f"no JSON files found in directory: {directory}")

        logger.info(f"Found {len(files)} JSON file(s) to process")

        reports: List[ToolReport] = []
        failures = 0
        for path in files:
            try:
                report = load_tool_report(path)
            except (ToolDetectionError, PayloadParseError) as e:
                failures += 1
                logger.warning(f"Error processing {path}: {e}")
                continue
            reports.append(report)
            logger.debug(f"Collected {report.tool} from {path.name}")

        if failures and not reports:
            raise CollectionError(f"all files failed to process ({failures} errors)")
        if failures:
            logger.warning(f"{failures} file(s) failed to process")

        return reports
