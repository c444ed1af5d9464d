from datetime import datetime, timezone
from typing import Optional


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """Ensure a datetime is timezone-aware (UTC).

    Tool reports are not consistent about offsets: some emit RFC 3339 with
    ``Z``, others naive local-looking strings. Naive values are treated as
    UTC so timestamps from different tools compare safely.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
