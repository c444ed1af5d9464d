"""
SpectreHub exceptions.

Centralized exception definitions. Normalization errors are never
swallowed by the aggregator: a payload that does not match its tool, or a
supported report from a tool nobody knows how to normalize, aborts the
whole batch.
"""

from typing import Optional

__all__ = [
    "SpectreHubError",
    "NormalizationError",
    "PayloadShapeError",
    "UnknownToolError",
    "ToolDetectionError",
    "PayloadParseError",
    "CollectionError",
    "StorageError",
    "RunNotFoundError",
]


class SpectreHubError(Exception):
    """Base exception for all SpectreHub errors"""

    pass


class NormalizationError(SpectreHubError):
    """Raised when a tool report cannot be converted into normalized issues"""

    def __init__(self, tool: str, message: str):
        self.tool = tool
        super().__init__(f"failed to normalize {tool}: {message}")


class PayloadShapeError(NormalizationError):
    """Raised when a report's raw data is not the shape its tool emits"""

    def __init__(self, tool: str, expected: str, actual: Optional[str] = None):
        self.expected = expected
        self.actual = actual
        detail = f"unrecognized payload shape (expected {expected}"
        if actual:
            detail += f", got {actual}"
        detail += ")"
        super().__init__(tool, detail)


class UnknownToolError(NormalizationError):
    """Raised when a supported report names a tool with no normalizer"""

    def __init__(self, tool: str):
        super().__init__(tool, f"unknown tool type: {tool}")


class ToolDetectionError(SpectreHubError):
    """Raised when the producing tool cannot be identified from report JSON"""

    pass


class PayloadParseError(SpectreHubError):
    """Raised when report JSON does not validate against its tool schema"""

    pass


class CollectionError(SpectreHubError):
    """Raised when no usable report could be collected"""

    pass


class StorageError(SpectreHubError):
    """Raised when stored runs cannot be read or written"""

    pass


class RunNotFoundError(StorageError):
    """Raised when a requested run does not exist in storage"""

    pass
