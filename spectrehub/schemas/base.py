from typing import Any, ClassVar, FrozenSet

from pydantic import BaseModel, ConfigDict, model_validator


class ToolPayloadModel(BaseModel):
    """
    Base for the payloads of tools that emit their own JSON shape.

    Every subclass declares the keys that make up its tool's structure as
    required fields, so a document from another tool does not validate.
    Documents that name their producer (top-level ``tool`` or
    ``metadata.tool``) must name ``TOOL``.
    """

    TOOL: ClassVar[str] = ""

    # metadata keys only another tool writes
    FOREIGN_METADATA_KEYS: ClassVar[FrozenSet[str]] = frozenset()

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _check_producer(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        metadata = data.get("metadata")
        metadata = metadata if isinstance(metadata, dict) else {}

        producer = data.get("tool") or metadata.get("tool")
        if isinstance(producer, str) and producer and producer != cls.TOOL:
            raise ValueError(f"payload was produced by {producer}, not {cls.TOOL}")

        foreign = cls.FOREIGN_METADATA_KEYS & metadata.keys()
        if foreign:
            raise ValueError(f"metadata carries keys not written by {cls.TOOL}: {sorted(foreign)}")
        return data
