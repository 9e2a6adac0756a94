from __future__ import annotations

from datetime import datetime, timezone
from typing import Any


def feed_timestamp(payload: dict[str, Any]) -> datetime | None:
    timestamp = payload.get("last_updated")
    if timestamp is None:
        return None
    try:
        return datetime.fromtimestamp(int(timestamp), tz=timezone.utc)
    except (TypeError, ValueError, OverflowError, OSError):
        return None
