from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from .models import CombinedStation, FeedSnapshot, StationInfo, StationStatus
from .parser import parse_station_infos, parse_station_statuses

_logger = logging.getLogger(__name__)


def index_status(statuses: Iterable[StationStatus]) -> dict[str, StationStatus]:
    index: dict[str, StationStatus] = {}
    for status in statuses:
        # first record for an identifier wins
        index.setdefault(status.station_id, status)
    return index


def merge_stations(
    infos: Sequence[StationInfo],
    statuses: Iterable[StationStatus],
) -> list[CombinedStation]:
    index = index_status(statuses)
    combined = [
        CombinedStation.from_records(info, index[info.station_id])
        for info in infos
        if info.station_id in index
    ]
    dropped = len(infos) - len(combined)
    if dropped:
        _logger.info("Dropped %d stations without live status", dropped)
    return combined


def merge_payloads(snapshot: FeedSnapshot) -> list[CombinedStation]:
    return merge_stations(
        parse_station_infos(snapshot.station_information),
        parse_station_statuses(snapshot.station_status),
    )
