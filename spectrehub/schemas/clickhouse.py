from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from spectrehub.schemas.base import ToolPayloadModel


class ClickMetadata(BaseModel):
    generated_at: Optional[datetime] = None
    lookback_days: int = 0
    clickhouse_host: str = ""
    total_queries_analyzed: int = 0
    analysis_duration: str = ""
    version: str = ""
    k8s_resolution_enabled: bool = False


class ClickTimeSeriesPoint(BaseModel):
    timestamp: Optional[datetime] = None
    value: int = 0


class ClickTable(BaseModel):
    name: str = ""
    database: str = ""
    full_name: str = ""
    reads: int = 0
    writes: int = 0
    last_access: Optional[datetime] = None
    first_seen: Optional[datetime] = None
    sparkline: List[ClickTimeSeriesPoint] = []
    score: float = 0.0
    category: str = ""  # active, unused, suspect
    is_mv: bool = Field(False, alias="is_materialized_view")
    mv_dependency: List[str] = Field(default_factory=list, alias="mv_dependencies")
    engine: str = ""
    is_replicated: bool = False
    total_bytes: int = 0
    total_rows: int = 0
    create_time: Optional[datetime] = None
    zero_usage: bool = False

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ClickService(BaseModel):
    ip: str = ""
    k8s_service: str = ""
    k8s_namespace: str = ""
    k8s_pod: str = ""
    tables_used: List[str] = []
    query_count: int = 0
    last_seen: Optional[datetime] = None


class ClickEdge(BaseModel):
    service_ip: str = Field("", alias="service")
    service_name: str = ""
    table_name: str = Field("", alias="table")
    reads: int = 0
    writes: int = 0
    last_activity: Optional[datetime] = None

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ClickAnomaly(BaseModel):
    type: str = ""
    description: str = ""
    severity: str = ""  # low, medium, high
    affected_table: str = ""
    affected_service: str = ""
    detected_at: Optional[datetime] = None


class ClickTableRecommendation(BaseModel):
    name: str = ""
    database: str = ""
    engine: str = ""
    is_replicated: bool = False
    size_mb: float = 0.0
    rows: int = 0


class ClickCleanupRecommendations(BaseModel):
    zero_usage_non_replicated: List[ClickTableRecommendation] = []
    zero_usage_replicated: List[ClickTableRecommendation] = []
    safe_to_drop: List[str] = []
    likely_safe: List[str] = []
    keep: List[str] = []


class ClickHouseReport(ToolPayloadModel):
    """ClickSpectre output: table usage, service edges and anomalies."""

    TOOL = "clickspectre"

    metadata: ClickMetadata = ClickMetadata()
    tables: List[ClickTable]
    services: List[ClickService] = []
    edges: List[ClickEdge] = []
    anomalies: List[ClickAnomaly] = []
    cleanup_recommendations: ClickCleanupRecommendations = ClickCleanupRecommendations()
