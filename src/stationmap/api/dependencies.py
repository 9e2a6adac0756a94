from __future__ import annotations

from ..ingest.gbfs_client import fetch_feeds
from ..pipeline import FeedFetcher
from ..render.context import RenderContext


def get_feed_fetcher() -> FeedFetcher:
    return fetch_feeds


def get_render_context() -> RenderContext:
    return RenderContext.from_env()
