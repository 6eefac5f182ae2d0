"""Weather summary card with the sweater-weather verdict."""

import html

import streamlit as st

from sweather.domain.models import WeatherInfo
from sweather.ui.utils import source_links, verdict_text


def render_weather_card(weather: WeatherInfo) -> None:
    """Render location, temperature, summary, sources and verdict.

    Args:
        weather: Weather block of a recommendation
    """
    headline, caption = verdict_text(weather)
    css_class = "sweater" if weather.is_sweater_weather else "no-sweater"

    links = "".join(
        f'<a class="source-chip" href="{html.escape(uri, quote=True)}" target="_blank" '
        f'rel="noopener noreferrer">🔗 {label}</a>'
        for label, uri in source_links(weather.sources)
    )

    st.markdown(
        f'<div class="weather-card {css_class}">'
        f'<div style="display: flex; justify-content: space-between; align-items: center; gap: 1.5rem; flex-wrap: wrap;">'
        f'<div>'
        f'<div class="weather-location">📍 {html.escape(weather.location)}</div>'
        f'<div class="weather-temperature">{html.escape(weather.temperature)}</div>'
        f'<div class="weather-summary">{html.escape(weather.summary)}</div>'
        f'<div>{links}</div>'
        f'</div>'
        f'<div class="verdict-box">'
        f'<div class="verdict-label">Verdict</div>'
        f'<div class="verdict-value">{headline}</div>'
        f'<div style="font-size: 0.75rem; opacity: 0.8;">{caption}</div>'
        f'</div>'
        f'</div>'
        f'</div>',
        unsafe_allow_html=True,
    )
