from __future__ import annotations

from pydantic import BaseModel

from ...core.classify import StatusCategory


class Station(BaseModel):
    station_id: str
    name: str
    lat: float
    lon: float
    is_installed: bool
    num_bikes_available: int
    is_renting: bool
    category: StatusCategory
    status: str


class LegendEntry(BaseModel):
    category: StatusCategory
    layer_name: str
    color: str
