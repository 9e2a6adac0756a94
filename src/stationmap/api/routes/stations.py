from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from ...core.classify import LEGEND_ORDER, classify, style_for
from ...exceptions import FeedFetchError
from ...pipeline import FeedFetcher, load_stations
from ...render.context import RenderContext
from ..dependencies import get_feed_fetcher, get_render_context
from ..schemas.stations import LegendEntry, Station

_logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/stations", response_model=list[Station])
def list_stations(
    fetch: FeedFetcher = Depends(get_feed_fetcher),
    context: RenderContext = Depends(get_render_context),
) -> list[Station]:
    try:
        stations = load_stations(fetch)
    except FeedFetchError as exc:
        _logger.error("Error fetching data: %s", exc)
        raise HTTPException(status_code=502, detail=str(exc)) from exc

    result = []
    for station in stations:
        category = classify(station, context.low_threshold)
        result.append(
            Station(
                station_id=station.station_id,
                name=station.name,
                lat=station.lat,
                lon=station.lon,
                is_installed=station.is_installed,
                num_bikes_available=station.num_bikes_available,
                is_renting=station.is_renting,
                category=category,
                status=style_for(category).status_text,
            )
        )
    return result


@router.get("/legend", response_model=list[LegendEntry])
def get_legend() -> list[LegendEntry]:
    return [
        LegendEntry(
            category=category,
            layer_name=style_for(category).layer_name,
            color=style_for(category).color,
        )
        for category in LEGEND_ORDER
    ]
