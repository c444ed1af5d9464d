"""
Tool payload schemas.

Each Spectre tool emits its own JSON shape. ``ToolReport.raw_data`` holds
exactly one of the models below, or the plain decoded JSON when no model
fits, so the payload is a tagged union keyed by tool name plus the
``spectre/v1`` schema marker. The per-tool models only accept their own
tool's document structure.
"""

import logging
from typing import Any, Dict, Optional, Type

from pydantic import BaseModel, ValidationError

from spectrehub.schemas.base import ToolPayloadModel
from spectrehub.schemas.clickhouse import ClickHouseReport
from spectrehub.schemas.kafka import KafkaReport
from spectrehub.schemas.mongo import MongoReport
from spectrehub.schemas.postgres import PgReport
from spectrehub.schemas.s3 import S3Report
from spectrehub.schemas.spectre_v1 import SPECTRE_V1_SCHEMA, SpectreV1Report
from spectrehub.schemas.vault import VaultReport

logger = logging.getLogger(__name__)

# Bespoke payload model per tool name. Tools missing here only speak the
# spectre/v1 envelope.
PAYLOAD_MODELS: Dict[str, Type[ToolPayloadModel]] = {
    model.TOOL: model
    for model in (VaultReport, S3Report, KafkaReport, ClickHouseReport, PgReport, MongoReport)
}


def is_spectre_v1_payload(value: Any) -> bool:
    if isinstance(value, SpectreV1Report):
        return True
    if isinstance(value, dict):
        marker = value.get("schema") or value.get("schema_id")
        return marker == SPECTRE_V1_SCHEMA
    return False


def payload_model_for(tool: str) -> Optional[Type[ToolPayloadModel]]:
    return PAYLOAD_MODELS.get(tool)


def coerce_payload(tool: str, value: Any) -> Any:
    """
    Turn decoded JSON into the typed payload for ``tool``.

    Typed payloads pass through untouched, whatever their type: deciding
    whether a payload fits its tool is the normalizer's job. A dict that
    does not validate against the tool's model, such as another tool's
    document, is also left as-is so the normalizer reports it as a payload
    shape mismatch.
    """
    if not isinstance(value, dict):
        return value

    if is_spectre_v1_payload(value):
        model: Optional[Type[BaseModel]] = SpectreV1Report
    else:
        model = payload_model_for(tool)

    if model is None:
        return value

    try:
        return model.model_validate(value)
    except ValidationError as e:
        logger.debug(f"Payload for {tool} does not match {model.__name__}: {e.error_count()} error(s)")
        return value


__all__ = [
    "ClickHouseReport",
    "KafkaReport",
    "MongoReport",
    "PAYLOAD_MODELS",
    "PgReport",
    "S3Report",
    "SPECTRE_V1_SCHEMA",
    "SpectreV1Report",
    "ToolPayloadModel",
    "VaultReport",
    "coerce_payload",
    "is_spectre_v1_payload",
    "payload_model_for",
]
