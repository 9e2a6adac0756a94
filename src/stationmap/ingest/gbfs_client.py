from __future__ import annotations

import json
import logging
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from typing import Any
from urllib.error import HTTPError, URLError
from urllib.request import urlopen

from ..config import fetch_timeout, station_information_url, station_status_url
from ..exceptions import FeedFetchError
from .models import FeedSnapshot

_logger = logging.getLogger(__name__)

JsonFetcher = Callable[[str], dict[str, Any]]


def fetch_json(url: str, timeout: float | None = None) -> dict[str, Any]:
    _logger.debug("GET %s", url)
    try:
        with urlopen(url, timeout=timeout or fetch_timeout()) as response:
            payload = response.read()
    except HTTPError as exc:
        raise FeedFetchError(
            f"{url} returned HTTP {exc.code}", url=url, status_code=exc.code
        ) from exc
    except (URLError, OSError) as exc:
        raise FeedFetchError(f"Could not reach {url}: {exc}", url=url) from exc

    try:
        document = json.loads(payload)
    except ValueError as exc:
        raise FeedFetchError(f"Malformed JSON from {url}", url=url) from exc
    if not isinstance(document, dict):
        raise FeedFetchError(f"Expected a JSON object from {url}", url=url)
    return document


def fetch_feeds(
    info_url: str | None = None,
    status_url: str | None = None,
    fetch: JsonFetcher = fetch_json,
) -> FeedSnapshot:
    info_url = info_url or station_information_url()
    status_url = status_url or station_status_url()

    with ThreadPoolExecutor(max_workers=2) as executor:
        info_future = executor.submit(_fetch_one, fetch, info_url)
        status_future = executor.submit(_fetch_one, fetch, status_url)
        station_information = info_future.result()
        station_status = status_future.result()

    return FeedSnapshot(
        station_information=station_information,
        station_status=station_status,
    )


def _fetch_one(fetch: JsonFetcher, url: str) -> dict[str, Any]:
    try:
        return fetch(url)
    except FeedFetchError:
        raise
    except Exception as exc:
        raise FeedFetchError(f"Fetching {url} failed: {exc}", url=url) from exc
