"""Dashboard view: location input, weather verdict and outfit suggestion."""

from typing import Optional

import streamlit as st
from streamlit_js_eval import get_geolocation

from sweather.gateway.gemini_gateway import GeminiGateway
from sweather.ui.components import confirm_delete_dialog, render_clothing_card, render_weather_card
from sweather.ui.state_manager import AppState, request_recommendation
from sweather.ui.utils import parse_geolocation, recommended_items
from sweather.utils.exceptions import AppException, GeolocationError
from sweather.utils.logger import get_logger, log_exception

logger = get_logger(__name__)

RECOMMENDATION_FAILED_MESSAGE = "Could not get recommendation. Please check your connection or API Key."
LOCATION_KEY = "location_input"


def _handle_geolocation(state: AppState) -> None:
    """Poll the browser for a position while a lookup is pending.

    Must run before the location widget is created so the widget can be
    updated in the same run.
    """
    if not state.geolocation_requested:
        return

    try:
        coords = parse_geolocation(get_geolocation(component_key="sweather_geolocation"))
    except GeolocationError as e:
        state.geolocation_requested = False
        log_exception(logger, "geolocation", e)
        st.error(e.message)
        return

    if coords is None:
        st.caption("Waiting for your browser to share its location...")
        return

    state.apply_geolocation(*coords)
    st.session_state[LOCATION_KEY] = state.location
    logger.info(f"Using browser location {state.location}")


def _submit(state: AppState, gateway: Optional[GeminiGateway]) -> None:
    if gateway is None:
        st.error(RECOMMENDATION_FAILED_MESSAGE)
        return

    with st.spinner("Checking the weather and your wardrobe..."):
        try:
            request_recommendation(state, gateway)
        except AppException as e:
            log_exception(logger, "get recommendation", e)
            st.error(RECOMMENDATION_FAILED_MESSAGE)


def _render_result(state: AppState) -> None:
    recommendation = state.recommendation
    render_weather_card(recommendation.weather)

    st.markdown("#### Assistant's Advice")
    st.info(recommendation.reasoning or "No advice given.")

    st.markdown("#### Suggested Outfit")
    items = recommended_items(state.wardrobe, recommendation)
    if not items:
        st.markdown(
            '<div class="empty-state">No suitable items found in your wardrobe.</div>',
            unsafe_allow_html=True,
        )
        return

    cols = st.columns(3)
    for idx, item in enumerate(items):
        with cols[idx % 3]:
            if render_clothing_card(item, selected=True, key_prefix="outfit_"):
                confirm_delete_dialog(state, item)


def render_dashboard(state: AppState, gateway: Optional[GeminiGateway]) -> None:
    """Render the assistant dashboard.

    Args:
        state: Application state
        gateway: AI gateway, or None when no API key is configured
    """
    st.markdown("## Is it Sweater Weather?")
    st.markdown("I'll check the forecast and pick the perfect outfit from your wardrobe.")

    _handle_geolocation(state)

    if LOCATION_KEY not in st.session_state:
        st.session_state[LOCATION_KEY] = state.location

    with st.form("location_form", border=False):
        col_input, col_submit = st.columns([4, 1])
        with col_input:
            location = st.text_input(
                "Location",
                key=LOCATION_KEY,
                placeholder="Enter city (e.g. London, NY)",
                label_visibility="collapsed",
            )
        with col_submit:
            submitted = st.form_submit_button(
                "Check",
                type="primary",
                width="stretch",
                disabled=state.loading,
            )

    if st.button("📍 Use my current location", key="use_geolocation", disabled=state.geolocation_requested):
        state.geolocation_requested = True
        st.rerun()

    if submitted:
        state.set_location(location)
        _submit(state, gateway)

    if state.recommendation is not None:
        _render_result(state)
    elif not state.loading:
        st.markdown(
            '<div class="empty-state">'
            '<div style="font-size: 3rem;">🌤️</div>'
            '<p>Ready to check the weather.</p>'
            '</div>',
            unsafe_allow_html=True,
        )
