from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from spectrehub.schemas.base import ToolPayloadModel


class KafkaSummary(BaseModel):
    # Cluster overview
    cluster_name: str = ""
    total_brokers: int = 0

    # Topics; internal topics are excluded from total_topics
    total_topics_including_internal: int = 0
    total_topics: int = Field(0, alias="total_topics_analyzed")
    unused_topics: int = 0
    active_topics: int = 0
    internal_topics: int = Field(0, alias="internal_topics_excluded")
    unused_percentage: float = 0.0

    # Partitions
    total_partitions: int = 0
    unused_partitions: int = 0
    active_partitions: int = 0
    unused_partitions_percent: float = Field(0.0, alias="unused_partitions_percentage")

    total_consumer_groups: int = 0

    high_risk_count: int = 0
    medium_risk_count: int = 0
    low_risk_count: int = 0

    recommended_cleanup: List[str] = Field(default_factory=list, alias="recommended_cleanup_topics")
    cluster_health_score: str = ""
    potential_savings_info: str = ""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class UnusedTopic(BaseModel):
    name: str = ""
    partitions: int = 0
    replication_factor: int = 0
    retention_ms: str = ""
    retention_human: str = ""
    cleanup_policy: str = ""
    min_insync_replicas: str = ""
    interesting_config: Dict[str, str] = {}
    reason: str = ""
    recommendation: str = ""
    risk: str = ""
    cleanup_priority: int = 0


class ActiveTopic(BaseModel):
    name: str = ""
    partitions: int = 0
    replication_factor: int = 0
    consumer_groups: List[str] = []
    consumer_count: int = 0


class BrokerInfo(BaseModel):
    id: int = 0
    host: str = ""
    port: int = 0


class ClusterMetadata(BaseModel):
    brokers: List[BrokerInfo] = []
    consumer_count: int = Field(0, alias="consumer_groups_count")
    fetched_at: str = ""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class KafkaReport(ToolPayloadModel):
    """KafkaSpectre output. It carries no top-level tool/version/timestamp."""

    TOOL = "kafkaspectre"

    summary: Optional[KafkaSummary] = None
    unused_topics: List[UnusedTopic]
    active_topics: List[ActiveTopic] = []
    cluster_metadata: Optional[ClusterMetadata] = None
