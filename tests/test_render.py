from __future__ import annotations

from datetime import datetime

import folium

from stationmap.core.classify import StatusCategory
from stationmap.ingest.models import CombinedStation
from stationmap.render.context import RenderContext
from stationmap.render.legend import legend_html
from stationmap.render.map_builder import render_html, render_stations
from stationmap.render.markers import build_marker, popup_html

RENDERED_AT = datetime(2024, 1, 1, 15, 4, 5)


def _station(
    station_id: str,
    name: str,
    num_bikes_available: int,
    is_installed: bool = True,
    is_renting: bool = True,
) -> CombinedStation:
    return CombinedStation(
        station_id=station_id,
        name=name,
        lat=40.7,
        lon=-74.0,
        is_installed=is_installed,
        num_bikes_available=num_bikes_available,
        is_renting=is_renting,
    )


def _layers(station_map: folium.Map) -> dict[str, folium.FeatureGroup]:
    return {
        child.layer_name: child
        for child in station_map._children.values()
        if isinstance(child, folium.FeatureGroup)
    }


def _marker_count(layer: folium.FeatureGroup) -> int:
    return sum(isinstance(child, folium.Marker) for child in layer._children.values())


def test_render_creates_five_visible_layers() -> None:
    station_map = render_stations([], RenderContext(), now=RENDERED_AT)

    layers = _layers(station_map)

    assert list(layers) == [
        "Coming Soon",
        "Empty Stations",
        "Out of Order",
        "Low Stations",
        "Healthy Stations",
    ]
    assert all(layer.show for layer in layers.values())
    assert any(
        isinstance(child, folium.LayerControl) for child in station_map._children.values()
    )


def test_render_places_markers_in_category_layer() -> None:
    stations = [
        _station("1", "Soon", 3, is_installed=False),
        _station("2", "Dry", 0),
        _station("3", "Broken", 6, is_renting=False),
        _station("4", "Sparse", 2),
        _station("5", "Full", 15),
        _station("6", "Fuller", 25),
    ]

    layers = _layers(render_stations(stations, RenderContext(), now=RENDERED_AT))

    assert _marker_count(layers["Coming Soon"]) == 1
    assert _marker_count(layers["Empty Stations"]) == 1
    assert _marker_count(layers["Out of Order"]) == 1
    assert _marker_count(layers["Low Stations"]) == 1
    assert _marker_count(layers["Healthy Stations"]) == 2


def test_rendered_page_contains_popups_and_legend() -> None:
    stations = [_station("1", "W 52 St & 11 Ave", 0)]

    html = render_html(render_stations(stations, RenderContext(), now=RENDERED_AT))

    assert "W 52 St &amp; 11 Ave" in html
    assert "Status: Empty Station" in html
    assert "Bikes Available: 0" in html
    assert "hue-rotate(-90deg)" in html
    assert "Updated: 3:04:05 PM" in html


def test_popup_escapes_station_name() -> None:
    html = popup_html(_station("1", "<b>Main</b>", 4), "Low Station")

    assert "&lt;b&gt;Main&lt;/b&gt;" in html
    assert "<p>Bikes Available: 4</p>" in html


def test_marker_carries_category_style_up_front() -> None:
    station_map = folium.Map(location=[40.7, -74.0])
    marker = build_marker(_station("1", "Main", 2), StatusCategory.LOW, RenderContext())
    marker.add_to(station_map)

    html = render_html(station_map)

    assert marker.location == [40.7, -74.0]
    assert "hue-rotate(30deg)" in html
    assert "citi-bike-icon low" in html
    assert "Status: Low Station" in html


def test_legend_lists_categories_with_colours() -> None:
    html = legend_html(RENDERED_AT)

    assert html.index("Coming Soon") < html.index("Empty Stations")
    assert html.index("Low Stations") < html.index("Out of Order")
    assert "background: purple" in html
    assert "background: black" in html
    assert "Updated: 3:04:05 PM" in html


def test_tooltip_escapes_station_name() -> None:
    stations = [_station("1", "<img src=x onerror=alert(1)> `Pier`", 8)]

    html = render_html(render_stations(stations, RenderContext(), now=RENDERED_AT))

    assert "<img src=x onerror=alert(1)>" not in html
    assert "`Pier`" not in html
    assert "&lt;img src=x onerror=alert(1)&gt; &#96;Pier&#96;" in html


def test_legend_clock_covers_midnight_and_morning() -> None:
    assert "Updated: 12:00:09 AM" in legend_html(datetime(2024, 1, 1, 0, 0, 9))
    assert "Updated: 10:30:00 AM" in legend_html(datetime(2024, 1, 1, 10, 30, 0))
