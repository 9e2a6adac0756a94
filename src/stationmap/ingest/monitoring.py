from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class FeedStatus:
    lag_seconds: float
    is_stale: bool


def compute_status(
    now: datetime, feed_ts: datetime, stale_after: float = 300
) -> FeedStatus:
    lag_seconds = (now - feed_ts).total_seconds()
    return FeedStatus(lag_seconds=lag_seconds, is_stale=lag_seconds > stale_after)
