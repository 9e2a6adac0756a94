from __future__ import annotations

import math
from typing import Any

from .models import StationInfo, StationStatus


def station_information_data(payload: dict[str, Any]) -> list[dict[str, Any]]:
    return _stations(payload)


def station_status_data(payload: dict[str, Any]) -> list[dict[str, Any]]:
    return _stations(payload)


def parse_station_info(row: dict[str, Any]) -> StationInfo | None:
    station_id = row.get("station_id")
    if station_id is None:
        return None
    name = row.get("name")
    return StationInfo(
        station_id=str(station_id),
        name=name if isinstance(name, str) else "",
        lat=_float(row.get("lat")),
        lon=_float(row.get("lon")),
        is_installed=_truthy(row.get("is_installed")),
    )


def parse_station_status(row: dict[str, Any]) -> StationStatus | None:
    station_id = row.get("station_id")
    if station_id is None:
        return None
    return StationStatus(
        station_id=str(station_id),
        num_bikes_available=_count(row.get("num_bikes_available")),
        is_renting=bool(row.get("is_renting")),
        is_installed=_truthy(row.get("is_installed")),
    )


def parse_station_infos(payload: dict[str, Any]) -> list[StationInfo]:
    records = (parse_station_info(row) for row in station_information_data(payload))
    return [record for record in records if record is not None]


def parse_station_statuses(payload: dict[str, Any]) -> list[StationStatus]:
    records = (parse_station_status(row) for row in station_status_data(payload))
    return [record for record in records if record is not None]


def _stations(payload: dict[str, Any]) -> list[dict[str, Any]]:
    data = payload.get("data", {})
    if not isinstance(data, dict):
        return []
    stations = data.get("stations", [])
    if not isinstance(stations, list):
        return []
    return [row for row in stations if isinstance(row, dict)]


def _float(value: object) -> float:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    return 0.0


def _count(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    if not math.isfinite(value) or value < 0:
        return 0
    return int(value)


def _truthy(value: object) -> bool | None:
    if value is None:
        return None
    return bool(value)
