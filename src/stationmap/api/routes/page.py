from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse

from ...pipeline import FeedFetcher, run_pipeline
from ...render.context import RenderContext
from ...render.map_builder import render_html
from ..dependencies import get_feed_fetcher, get_render_context


router = APIRouter()


@router.get("/map", response_class=HTMLResponse)
def get_map(
    fetch: FeedFetcher = Depends(get_feed_fetcher),
    context: RenderContext = Depends(get_render_context),
) -> HTMLResponse:
    station_map = run_pipeline(context, fetch=fetch)
    if station_map is None:
        raise HTTPException(status_code=502, detail="Station feeds unavailable")
    return HTMLResponse(render_html(station_map))
