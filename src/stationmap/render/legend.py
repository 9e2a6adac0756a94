from __future__ import annotations

from datetime import datetime

import folium

from ..core.classify import LEGEND_ORDER, style_for
from ..utils.time import clock_label, local_now

LEGEND_CSS = (
    "position: fixed; bottom: 30px; right: 10px; z-index: 1000; "
    "background: white; padding: 6px 8px; border-radius: 5px; "
    "box-shadow: 0 0 15px rgba(0, 0, 0, 0.2); font: 14px/18px Arial, sans-serif;"
)
SWATCH_CSS = (
    "display: inline-block; width: 18px; height: 18px; "
    "margin-right: 8px; opacity: 0.7; vertical-align: middle;"
)


def legend_html(now: datetime) -> str:
    rows = "".join(
        f'<i style="background: {style.color}; {SWATCH_CSS}"></i> {style.layer_name}<br>'
        for style in (style_for(category) for category in LEGEND_ORDER)
    )
    return (
        f'<div class="info legend" style="{LEGEND_CSS}">'
        f"{rows}<br><span>Updated: {clock_label(now)}</span></div>"
    )


def build_legend(now: datetime | None = None) -> folium.Element:
    return folium.Element(legend_html(now or local_now()))
