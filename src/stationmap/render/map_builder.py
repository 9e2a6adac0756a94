from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime

import folium

from ..core.classify import StatusCategory, group_by_category, style_for
from ..ingest.models import CombinedStation
from .context import RenderContext
from .legend import build_legend
from .markers import build_marker

_logger = logging.getLogger(__name__)


def render_stations(
    stations: Iterable[CombinedStation],
    context: RenderContext,
    now: datetime | None = None,
) -> folium.Map:
    station_map = folium.Map(
        location=list(context.center),
        zoom_start=context.zoom_start,
        tiles=context.tiles,
    )

    groups = group_by_category(stations, context.low_threshold)
    for category in StatusCategory:
        layer = folium.FeatureGroup(name=style_for(category).layer_name, show=True)
        for station in groups[category]:
            build_marker(station, category, context).add_to(layer)
        layer.add_to(station_map)

    folium.LayerControl(collapsed=True).add_to(station_map)
    station_map.get_root().html.add_child(build_legend(now))

    _logger.info(
        "Rendered %d stations (%s)",
        sum(len(members) for members in groups.values()),
        ", ".join(f"{category.value}={len(groups[category])}" for category in StatusCategory),
    )
    return station_map


def render_html(station_map: folium.Map) -> str:
    return station_map.get_root().render()
