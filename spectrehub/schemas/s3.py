from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel

from spectrehub.schemas.base import ToolPayloadModel


class S3Config(BaseModel):
    repo_path: str = ""
    aws_profile: str = ""
    aws_region: str = ""
    stale_threshold_days: int = 0


class S3Summary(BaseModel):
    total_buckets: int = 0
    ok_buckets: int = 0
    missing_buckets: List[str] = []
    unused_buckets: List[str] = []
    missing_prefixes: List[str] = []
    stale_prefixes: List[str] = []
    version_sprawl: List[str] = []
    lifecycle_misconfig: List[str] = []


class PrefixAnalysis(BaseModel):
    prefix: str = ""
    status: str = ""
    message: str = ""
    object_count: int = 0
    days_since_modified: int = 0


class UnusedScore(BaseModel):
    total: int = 0
    reasons: List[str] = []
    is_unused: bool = False
    not_in_code: int = 0
    empty: int = 0
    old_bucket: int = 0
    deprecated_tag: int = 0


class BucketAnalysis(BaseModel):
    name: str = ""
    status: str = ""
    message: str = ""
    referenced_in_code: bool = False
    exists_in_aws: bool = False
    versioning_enabled: bool = False
    lifecycle_rules: int = 0
    prefixes: List[PrefixAnalysis] = []
    unused_score: Optional[UnusedScore] = None


class S3Reference(BaseModel):
    file: str = ""
    line: int = 0
    bucket: str = ""
    prefix: str = ""


class S3Report(ToolPayloadModel):
    """S3Spectre output: buckets and prefixes referenced in code vs. AWS."""

    TOOL = "s3spectre"

    tool: str = "s3spectre"
    version: str = ""
    timestamp: Optional[datetime] = None
    config: S3Config = S3Config()
    summary: S3Summary = S3Summary()
    buckets: Dict[str, BucketAnalysis]
    references: List[S3Reference] = []
