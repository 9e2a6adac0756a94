from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class FeedSnapshot:
    station_information: dict[str, Any]
    station_status: dict[str, Any]


@dataclass(frozen=True)
class StationInfo:
    station_id: str
    name: str
    lat: float
    lon: float
    is_installed: bool | None = None


@dataclass(frozen=True)
class StationStatus:
    station_id: str
    num_bikes_available: int
    is_renting: bool
    # GBFS publishes the installed flag here; it takes precedence when set.
    is_installed: bool | None = None


@dataclass(frozen=True)
class CombinedStation:
    station_id: str
    name: str
    lat: float
    lon: float
    is_installed: bool
    num_bikes_available: int
    is_renting: bool

    @classmethod
    def from_records(cls, info: StationInfo, status: StationStatus) -> CombinedStation:
        is_installed = (
            status.is_installed if status.is_installed is not None else info.is_installed
        )
        return cls(
            station_id=info.station_id,
            name=info.name,
            lat=info.lat,
            lon=info.lon,
            is_installed=bool(is_installed),
            num_bikes_available=status.num_bikes_available,
            is_renting=status.is_renting,
        )
