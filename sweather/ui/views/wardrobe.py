"""Wardrobe grid view."""

import streamlit as st

from sweather.ui.components import confirm_delete_dialog, render_clothing_card
from sweather.ui.state_manager import AppState

ITEMS_PER_ROW = 4


def render_wardrobe(state: AppState) -> None:
    """Render every wardrobe item as a card grid, or the empty state."""
    st.markdown("## My Wardrobe")

    if not state.wardrobe:
        st.markdown(
            """
            <div class="empty-state">
                <div style="font-size: 4rem;">👕</div>
                <h3>Your wardrobe is empty</h3>
                <p>Add some clothes so I can help you decide what to wear.</p>
            </div>
            """,
            unsafe_allow_html=True,
        )
        return

    for i in range(0, len(state.wardrobe), ITEMS_PER_ROW):
        cols = st.columns(ITEMS_PER_ROW)
        for j, col in enumerate(cols):
            if i + j >= len(state.wardrobe):
                break
            item = state.wardrobe[i + j]
            with col:
                if render_clothing_card(item, key_prefix="wardrobe_"):
                    confirm_delete_dialog(state, item)
