from __future__ import annotations

from datetime import datetime, timezone


def local_now() -> datetime:
    return datetime.now(tz=timezone.utc).astimezone()


def clock_label(value: datetime) -> str:
    return value.strftime("%I:%M:%S %p").lstrip("0")
