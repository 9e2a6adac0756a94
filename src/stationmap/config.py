from __future__ import annotations

import os

CITIBIKE_ICON_URL = (
    "https://images.ctfassets.net/p6ae3zqfb1e3/1rbjR48QnBe6cL8Ti6tPmV/"
    "08f9e1a62a6ef6ec1cddc4bc5a12f8d1/imageedit_2_9337177880.png?w=1500&q=60&fm="
)


def _get_env(name: str, default: str | None = None) -> str:
    value = os.getenv(name, default)
    if value is None:
        raise ValueError(f"Missing required environment variable: {name}")
    return value


def station_information_url() -> str:
    return _get_env(
        "GBFS_STATION_INFORMATION_URL",
        "https://gbfs.citibikenyc.com/gbfs/en/station_information.json",
    )


def station_status_url() -> str:
    return _get_env(
        "GBFS_STATION_STATUS_URL",
        "https://gbfs.citibikenyc.com/gbfs/en/station_status.json",
    )


def fetch_timeout() -> float:
    return float(_get_env("GBFS_FETCH_TIMEOUT", "30"))


def stale_after() -> float:
    return float(_get_env("GBFS_STALE_AFTER", "300"))


def map_center() -> tuple[float, float]:
    return (
        float(_get_env("MAP_CENTER_LAT", "40.73")),
        float(_get_env("MAP_CENTER_LON", "-74.0059")),
    )


def map_zoom() -> int:
    return int(_get_env("MAP_ZOOM", "12"))


def map_tiles() -> str:
    return _get_env("MAP_TILES", "OpenStreetMap")


def map_icon_url() -> str:
    return _get_env("MAP_ICON_URL", CITIBIKE_ICON_URL)


def map_output_path() -> str:
    return _get_env("MAP_OUTPUT_PATH", "station_map.html")
