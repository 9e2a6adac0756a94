from __future__ import annotations

from html import escape

import folium

from ..core.classify import StatusCategory, style_for
from ..ingest.models import CombinedStation
from .context import RenderContext


def label_text(value: str) -> str:
    return escape(value).replace("`", "&#96;")


def popup_html(station: CombinedStation, status_text: str) -> str:
    return (
        f"<h3>{label_text(station.name)}</h3>"
        f"<p>Status: {escape(status_text)}</p>"
        f"<p>Bikes Available: {station.num_bikes_available}</p>"
    )


def icon_html(context: RenderContext, icon_filter: str) -> str:
    width, height = context.icon_size
    style = f"width: {width}px; height: {height}px;"
    if icon_filter:
        style += f" filter: {icon_filter};"
    return f'<img src="{escape(context.icon_url)}" style="{style}">'


def build_marker(
    station: CombinedStation,
    category: StatusCategory,
    context: RenderContext,
) -> folium.Marker:
    style = style_for(category)
    icon = folium.DivIcon(
        html=icon_html(context, style.icon_filter),
        icon_size=context.icon_size,
        icon_anchor=context.icon_anchor,
        popup_anchor=context.popup_anchor,
        class_name=f"{context.icon_class} {category.value}",
    )
    return folium.Marker(
        location=[station.lat, station.lon],
        icon=icon,
        tooltip=label_text(station.name),
        popup=folium.Popup(popup_html(station, style.status_text)),
    )
