from __future__ import annotations

from dataclasses import dataclass

from .. import config
from ..core.classify import LOW_BIKE_THRESHOLD


@dataclass(frozen=True)
class RenderContext:
    center: tuple[float, float] = (40.73, -74.0059)
    zoom_start: int = 12
    tiles: str = "OpenStreetMap"
    icon_url: str = config.CITIBIKE_ICON_URL
    icon_size: tuple[int, int] = (120, 60)
    icon_anchor: tuple[int, int] = (16, 32)
    popup_anchor: tuple[int, int] = (0, -32)
    icon_class: str = "citi-bike-icon"
    low_threshold: int = LOW_BIKE_THRESHOLD

    @classmethod
    def from_env(cls) -> RenderContext:
        return cls(
            center=config.map_center(),
            zoom_start=config.map_zoom(),
            tiles=config.map_tiles(),
            icon_url=config.map_icon_url(),
        )
