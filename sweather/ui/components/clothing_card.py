"""Clothing card component for wardrobe items."""

import html

import streamlit as st

from sweather.domain.models import ClothingItem
from sweather.ui.utils import insulation_badge, truncate_text


def render_clothing_card(
    item: ClothingItem,
    selected: bool = False,
    key_prefix: str = "",
) -> bool:
    """Render a wardrobe item with image, warmth badge, tags and delete button.

    Args:
        item: Item to render
        selected: Highlight as part of a suggested outfit
        key_prefix: Prefix for component keys

    Returns:
        True if the delete button was clicked
    """
    with st.container(border=True):
        if selected:
            st.markdown('<div class="selected-card">✨ Suggested</div>', unsafe_allow_html=True)

        if item.image_data:
            st.image(item.image_data, width="stretch")
        else:
            st.markdown('<div class="no-image">No Image</div>', unsafe_allow_html=True)

        st.markdown(
            f'<span class="insulation-badge">{insulation_badge(item.insulation)}</span>',
            unsafe_allow_html=True,
        )
        st.markdown(f"**{html.escape(truncate_text(item.name, 40))}**")

        if item.tags:
            chips = "".join(f'<span class="tag-chip">{html.escape(tag)}</span>' for tag in item.tags[:3])
            st.markdown(chips, unsafe_allow_html=True)

        return st.button(
            "🗑️ Delete",
            key=f"{key_prefix}delete_{item.id}",
            help="Delete Item",
            width="stretch",
        )
