"""Header with view switching and the add-item entry point."""

import streamlit as st

from sweather.domain.models import AppView
from sweather.ui.state_manager import AppState


def render_navigation(state: AppState) -> bool:
    """Render the header navigation.

    Args:
        state: Application state

    Returns:
        True if "Add Item" was clicked
    """
    col_brand, col_assistant, col_wardrobe, col_add = st.columns([3, 2, 2, 2])

    with col_brand:
        st.markdown("### 🧣 Sweather")

    with col_assistant:
        if st.button(
            "Assistant",
            width="stretch",
            type="primary" if state.view == AppView.DASHBOARD else "secondary",
            key="nav_dashboard",
        ):
            state.set_view(AppView.DASHBOARD)
            st.rerun()

    with col_wardrobe:
        if st.button(
            f"My Wardrobe ({len(state.wardrobe)})",
            width="stretch",
            type="primary" if state.view == AppView.WARDROBE else "secondary",
            key="nav_wardrobe",
        ):
            state.set_view(AppView.WARDROBE)
            st.rerun()

    with col_add:
        return st.button("➕ Add Item", width="stretch", key="nav_add")
