from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from ..ingest.models import CombinedStation

LOW_BIKE_THRESHOLD = 5


class StatusCategory(str, Enum):
    COMING_SOON = "coming_soon"
    EMPTY = "empty"
    OUT_OF_ORDER = "out_of_order"
    LOW = "low"
    HEALTHY = "healthy"


@dataclass(frozen=True)
class CategoryStyle:
    layer_name: str
    status_text: str
    color: str
    icon_filter: str


CATEGORY_STYLES: dict[StatusCategory, CategoryStyle] = {
    StatusCategory.COMING_SOON: CategoryStyle(
        layer_name="Coming Soon",
        status_text="Coming Soon",
        color="blue",
        icon_filter="",
    ),
    StatusCategory.EMPTY: CategoryStyle(
        layer_name="Empty Stations",
        status_text="Empty Station",
        color="purple",
        icon_filter="grayscale(100%) sepia(100%) hue-rotate(-90deg)",
    ),
    StatusCategory.OUT_OF_ORDER: CategoryStyle(
        layer_name="Out of Order",
        status_text="Out of Order",
        color="black",
        icon_filter="grayscale(100%) sepia(100%) hue-rotate(180deg)",
    ),
    StatusCategory.LOW: CategoryStyle(
        layer_name="Low Stations",
        status_text="Low Station",
        color="orange",
        icon_filter="grayscale(100%) sepia(100%) hue-rotate(30deg)",
    ),
    StatusCategory.HEALTHY: CategoryStyle(
        layer_name="Healthy Stations",
        status_text="Healthy Station",
        color="green",
        icon_filter="grayscale(100%) sepia(100%) hue-rotate(90deg)",
    ),
}

# Legend rows are listed in this order, which differs from the layer order.
LEGEND_ORDER = (
    StatusCategory.COMING_SOON,
    StatusCategory.EMPTY,
    StatusCategory.LOW,
    StatusCategory.OUT_OF_ORDER,
    StatusCategory.HEALTHY,
)


def classify(
    station: CombinedStation, low_threshold: int = LOW_BIKE_THRESHOLD
) -> StatusCategory:
    if not station.is_installed:
        return StatusCategory.COMING_SOON
    if station.num_bikes_available == 0:
        return StatusCategory.EMPTY
    if not station.is_renting:
        return StatusCategory.OUT_OF_ORDER
    if station.num_bikes_available < low_threshold:
        return StatusCategory.LOW
    return StatusCategory.HEALTHY


def group_by_category(
    stations: Iterable[CombinedStation], low_threshold: int = LOW_BIKE_THRESHOLD
) -> dict[StatusCategory, list[CombinedStation]]:
    groups: dict[StatusCategory, list[CombinedStation]] = {
        category: [] for category in StatusCategory
    }
    for station in stations:
        groups[classify(station, low_threshold)].append(station)
    return groups


def style_for(category: StatusCategory) -> CategoryStyle:
    return CATEGORY_STYLES[category]
