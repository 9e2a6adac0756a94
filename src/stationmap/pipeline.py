from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone

import folium

from . import config
from .exceptions import FeedFetchError
from .ingest.gbfs_client import fetch_feeds
from .ingest.merge import merge_payloads
from .ingest.models import CombinedStation, FeedSnapshot
from .ingest.monitoring import compute_status
from .ingest.validators import feed_timestamp
from .render.context import RenderContext
from .render.map_builder import render_stations

_logger = logging.getLogger(__name__)

FeedFetcher = Callable[[], FeedSnapshot]


def load_stations(fetch: FeedFetcher = fetch_feeds) -> list[CombinedStation]:
    snapshot = fetch()
    check_freshness(snapshot)
    stations = merge_payloads(snapshot)
    _logger.info("Merged %d stations", len(stations))
    return stations


def run_pipeline(
    context: RenderContext,
    fetch: FeedFetcher = fetch_feeds,
    now: datetime | None = None,
) -> folium.Map | None:
    try:
        stations = load_stations(fetch)
    except FeedFetchError as exc:
        _logger.error("Error fetching data: %s", exc)
        return None
    return render_stations(stations, context, now=now)


def check_freshness(snapshot: FeedSnapshot, now: datetime | None = None) -> bool:
    feed_ts = feed_timestamp(snapshot.station_status)
    if feed_ts is None:
        return True
    status = compute_status(
        now or datetime.now(tz=timezone.utc), feed_ts, stale_after=config.stale_after()
    )
    if status.is_stale:
        _logger.warning(
            "station_status feed is stale: last updated %.0f seconds ago",
            status.lag_seconds,
        )
    return not status.is_stale
