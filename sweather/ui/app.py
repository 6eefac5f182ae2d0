"""Sweather Streamlit UI - Main Application.

Checks the current weather for a location, decides whether it is sweater
weather, and picks an outfit from the user's own wardrobe.
"""

import streamlit as st

from sweather.domain.models import AppView
from sweather.gateway import get_gemini_gateway
from sweather.storage import get_wardrobe_repository
from sweather.ui.components import add_item_dialog, render_navigation
from sweather.ui.state_manager import initialize_session_state, queue_alert
from sweather.ui.styles import get_custom_css
from sweather.ui.views import render_dashboard, render_wardrobe
from sweather.utils import get_config, get_logger, log_exception
from sweather.utils.exceptions import ConfigurationError

logger = get_logger(__name__)


# Cache config, repository and gateway across reruns
@st.cache_resource
def initialize_services():
    """Initialize and cache the repository and AI gateway.

    Returns:
        Tuple of (config, repository, gateway); gateway is None without an API key
    """
    try:
        config = get_config()
        repository = get_wardrobe_repository(config.storage, notify=queue_alert)
    except Exception as e:
        log_exception(logger, "initialize services", e)
        st.error(f"Failed to initialize Sweather: {e}")
        st.stop()

    try:
        gateway = get_gemini_gateway(config.gemini)
    except ConfigurationError as e:
        log_exception(logger, "initialize gateway", e)
        gateway = None

    return config, repository, gateway


def main():
    """Main application entry point."""

    # Page configuration
    st.set_page_config(
        page_title="Sweather",
        page_icon="🧣",
        layout="wide",
    )

    # Inject custom CSS
    st.markdown(get_custom_css(), unsafe_allow_html=True)

    config, repository, gateway = initialize_services()
    state = initialize_session_state(repository)

    # ==================== HEADER ====================
    if render_navigation(state):
        add_item_dialog(state, gateway, config.images)

    for message in state.take_alerts():
        st.warning(f"⚠️ {message}")

    if gateway is None:
        st.warning(
            f"⚠️ **No API key configured.** Set `{config.gemini.api_key_env}` "
            "to enable recommendations and Auto-Fill."
        )

    st.markdown("---")

    # ==================== MAIN PANEL ====================
    if state.view == AppView.WARDROBE:
        render_wardrobe(state)
    else:
        render_dashboard(state, gateway)

    # ==================== FOOTER ====================
    st.markdown("---")
    st.markdown(
        """
        <div style="text-align: center; color: #666; padding: 1rem;">
            <small>Sweather | Powered by Gemini | Built with Streamlit</small>
        </div>
        """,
        unsafe_allow_html=True
    )


if __name__ == "__main__":
    main()
