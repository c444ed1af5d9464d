"""
Category and severity lookup tables.

Pure data: every tool-native status, risk level, finding type and
spectre/v1 finding ID that SpectreHub understands is listed here. Lookups
that miss fall back to the defaults next to each table.
"""

from typing import Dict, FrozenSet, Tuple

from spectrehub.models.issue import Category, Severity, ToolType

# ── Policy severity (tools without a native severity) ────────────────

SEVERITY_BY_CATEGORY: Dict[Category, Severity] = {
    Category.MISSING: Severity.CRITICAL,
    Category.ERROR: Severity.CRITICAL,
    Category.ACCESS_DENIED: Severity.HIGH,
    Category.INVALID: Severity.HIGH,
    Category.DRIFT: Severity.MEDIUM,
    Category.MISCONFIG: Severity.MEDIUM,
    Category.STALE: Severity.LOW,
    Category.UNUSED: Severity.LOW,
}

# (category, tool) pairs that deviate from SEVERITY_BY_CATEGORY. Empty:
# policy severity depends on the category alone.
SEVERITY_OVERRIDES: Dict[Tuple[Category, ToolType], Severity] = {}

DEFAULT_POLICY_SEVERITY = Severity.LOW

# ── VaultSpectre ─────────────────────────────────────────────────────

VAULT_OK_STATUSES: FrozenSet[str] = frozenset({"ok"})

VAULT_STATUS_CATEGORIES: Dict[str, Category] = {
    "missing": Category.MISSING,
    "access_denied": Category.ACCESS_DENIED,
    "invalid": Category.INVALID,
    "error": Category.ERROR,
    "stale": Category.STALE,
}

# ── S3Spectre ────────────────────────────────────────────────────────

S3_OK_STATUSES: FrozenSet[str] = frozenset({"OK"})

S3_STATUS_CATEGORIES: Dict[str, Category] = {
    "MISSING_BUCKET": Category.MISSING,
    "MISSING_PREFIX": Category.MISSING,
    "UNUSED_BUCKET": Category.UNUSED,
    "STALE_PREFIX": Category.STALE,
    "VERSION_SPRAWL": Category.MISCONFIG,
    "LIFECYCLE_MISCONFIG": Category.MISCONFIG,
}

# ── KafkaSpectre ─────────────────────────────────────────────────────

KAFKA_RISK_SEVERITIES: Dict[str, Severity] = {
    "high": Severity.HIGH,
    "medium": Severity.MEDIUM,
    "low": Severity.LOW,
}

DEFAULT_KAFKA_SEVERITY = Severity.MEDIUM

# ── ClickSpectre ─────────────────────────────────────────────────────

CLICKHOUSE_ANOMALY_CATEGORIES: Dict[str, Category] = {
    "configuration": Category.MISCONFIG,
}

DEFAULT_CLICKHOUSE_ANOMALY_CATEGORY = Category.DRIFT

CLICKHOUSE_ANOMALY_SEVERITIES: Dict[str, Severity] = {
    "critical": Severity.CRITICAL,
    "high": Severity.HIGH,
    "medium": Severity.MEDIUM,
    "low": Severity.LOW,
}

DEFAULT_CLICKHOUSE_ANOMALY_SEVERITY = Severity.MEDIUM

# Zero-usage tables: dropping a replicated table touches every replica
CLICKHOUSE_UNUSED_SEVERITY: Dict[bool, Severity] = {
    True: Severity.MEDIUM,
    False: Severity.LOW,
}

# ── PgSpectre ────────────────────────────────────────────────────────

PG_OK_TYPES: FrozenSet[str] = frozenset({"OK"})

PG_FINDING_CATEGORIES: Dict[str, Category] = {
    "MISSING_TABLE": Category.MISSING,
    "MISSING_COLUMN": Category.MISSING,
    "MISSING_INDEX": Category.MISSING,
    "MISSING_SCHEMA": Category.MISSING,
    "UNUSED_TABLE": Category.UNUSED,
    "UNUSED_COLUMN": Category.UNUSED,
    "UNUSED_INDEX": Category.UNUSED,
    "UNREFERENCED_TABLE": Category.UNUSED,
    "EMPTY_TABLE": Category.UNUSED,
    "STALE_STATS": Category.STALE,
    "STALE_TABLE": Category.STALE,
    "DUPLICATE_INDEX": Category.MISCONFIG,
    "NO_PRIMARY_KEY": Category.MISCONFIG,
    "UNINDEXED_FOREIGN_KEY": Category.MISCONFIG,
    "BLOATED_INDEX": Category.MISCONFIG,
    "INVALID_INDEX": Category.INVALID,
    "SCHEMA_DRIFT": Category.DRIFT,
    "COLUMN_TYPE_DRIFT": Category.DRIFT,
    "PERMISSION_DENIED": Category.ACCESS_DENIED,
}

# ── MongoSpectre ─────────────────────────────────────────────────────

MONGO_OK_TYPES: FrozenSet[str] = frozenset({"OK"})

MONGO_FINDING_CATEGORIES: Dict[str, Category] = {
    "MISSING_COLLECTION": Category.MISSING,
    "MISSING_INDEX": Category.MISSING,
    "MISSING_DATABASE": Category.MISSING,
    "UNUSED_COLLECTION": Category.UNUSED,
    "UNUSED_INDEX": Category.UNUSED,
    "EMPTY_COLLECTION": Category.UNUSED,
    "UNUSED_FIELD": Category.UNUSED,
    "STALE_COLLECTION": Category.STALE,
    "INACTIVE_USER": Category.STALE,
    "DUPLICATE_INDEX": Category.MISCONFIG,
    "OVERSIZED_INDEX": Category.MISCONFIG,
    "NO_AUTH": Category.MISCONFIG,
    "WEAK_PASSWORD": Category.MISCONFIG,
    "ADMIN_ACCESS": Category.MISCONFIG,
    "FAILED_AUTH_ONLY": Category.ACCESS_DENIED,
    "INDEX_DRIFT": Category.DRIFT,
    "VALIDATOR_DRIFT": Category.DRIFT,
}

# ── Native severities shared by pgspectre, mongospectre and spectre/v1 ──

GENERIC_SEVERITIES: Dict[str, Severity] = {
    "critical": Severity.CRITICAL,
    "high": Severity.HIGH,
    "medium": Severity.MEDIUM,
    "low": Severity.LOW,
    "info": Severity.LOW,
}

DEFAULT_GENERIC_SEVERITY = Severity.MEDIUM

# ── spectre/v1 finding IDs ───────────────────────────────────────────

FINDING_ID_CATEGORIES: Dict[str, Category] = {
    # s3spectre / gcsspectre
    "MISSING_BUCKET": Category.MISSING,
    "MISSING_PREFIX": Category.MISSING,
    "UNUSED_BUCKET": Category.UNUSED,
    "STALE_PREFIX": Category.STALE,
    "VERSION_SPRAWL": Category.MISCONFIG,
    "LIFECYCLE_MISCONFIG": Category.MISCONFIG,
    "PUBLIC_BUCKET": Category.MISCONFIG,
    "UNENCRYPTED": Category.MISCONFIG,
    "NO_LIFECYCLE": Category.MISCONFIG,
    # pgspectre
    "MISSING_TABLE": Category.MISSING,
    "MISSING_COLUMN": Category.MISSING,
    "MISSING_INDEX": Category.MISSING,
    "UNUSED_TABLE": Category.UNUSED,
    "UNUSED_COLUMN": Category.UNUSED,
    "UNUSED_INDEX": Category.UNUSED,
    "DUPLICATE_INDEX": Category.MISCONFIG,
    "NO_PRIMARY_KEY": Category.MISCONFIG,
    "UNINDEXED_FOREIGN_KEY": Category.MISCONFIG,
    "SCHEMA_DRIFT": Category.DRIFT,
    # mongospectre
    "MISSING_COLLECTION": Category.MISSING,
    "UNUSED_COLLECTION": Category.UNUSED,
    "INDEX_DRIFT": Category.DRIFT,
    "NO_AUTH": Category.MISCONFIG,
    "WEAK_PASSWORD": Category.MISCONFIG,
    "FAILED_AUTH_ONLY": Category.ACCESS_DENIED,
    "INACTIVE_USER": Category.STALE,
    "INACTIVE_PRIVILEGED_USER": Category.STALE,
    # kafkaspectre
    "UNUSED_TOPIC": Category.UNUSED,
    "MISSING_TOPIC": Category.MISSING,
    "UNDER_REPLICATED": Category.MISCONFIG,
    # clickspectre
    "UNUSED_CLICKHOUSE_TABLE": Category.UNUSED,
    "ZERO_USAGE_TABLE": Category.UNUSED,
    "ACCESS_ANOMALY": Category.DRIFT,
    # vaultspectre
    "MISSING_SECRET": Category.MISSING,
    "STALE_SECRET": Category.STALE,
    "ACCESS_DENIED": Category.ACCESS_DENIED,
    "INVALID_SECRET": Category.INVALID,
    "SECRET_ERROR": Category.ERROR,
    # awsspectre
    "IDLE_EC2": Category.UNUSED,
    "STOPPED_EC2": Category.UNUSED,
    "DETACHED_EBS": Category.UNUSED,
    "IDLE_RDS": Category.UNUSED,
    "IDLE_ALB": Category.UNUSED,
    "IDLE_NLB": Category.UNUSED,
    "IDLE_NAT_GATEWAY": Category.UNUSED,
    "IDLE_LAMBDA": Category.UNUSED,
    "UNUSED_EIP": Category.UNUSED,
    "UNUSED_SECURITY_GROUP": Category.UNUSED,
    "OLD_SNAPSHOT": Category.STALE,
    # gcpspectre
    "IDLE_VM": Category.UNUSED,
    "STOPPED_VM": Category.UNUSED,
    "UNATTACHED_DISK": Category.UNUSED,
    "IDLE_SQL": Category.UNUSED,
    # iamspectre
    "STALE_ACCESS_KEY": Category.STALE,
    "INACTIVE_ACCESS_KEY": Category.STALE,
    "UNUSED_ACCESS_KEY": Category.UNUSED,
    "UNUSED_ROLE": Category.UNUSED,
    "INACTIVE_ROLE": Category.STALE,
    "NO_MFA": Category.MISCONFIG,
    "MFA_NOT_ENABLED": Category.MISCONFIG,
    "ADMIN_ACCESS": Category.MISCONFIG,
    "OVERPRIVILEGED_USER": Category.MISCONFIG,
    "ROOT_ACCESS_KEY": Category.MISCONFIG,
    "ROOT_MFA_DISABLED": Category.MISCONFIG,
}

DEFAULT_FINDING_CATEGORY = Category.ERROR

# Human labels for recommendation text
TOOL_RESOURCE_NAMES: Dict[str, str] = {
    ToolType.VAULT.value: "Vault secrets",
    ToolType.S3.value: "S3 buckets/prefixes",
    ToolType.KAFKA.value: "Kafka topics",
    ToolType.CLICKHOUSE.value: "ClickHouse tables",
    ToolType.POSTGRES.value: "Postgres tables/indexes",
    ToolType.MONGO.value: "MongoDB collections/indexes",
}

DEFAULT_RESOURCE_NAME = "resources"
