"""Confirmation dialog for deleting a wardrobe item."""

import streamlit as st

from sweather.domain.models import ClothingItem
from sweather.ui.state_manager import AppState


@st.dialog("Delete Item")
def confirm_delete_dialog(state: AppState, item: ClothingItem) -> None:
    st.write("Remove this item?")
    st.caption(item.name)

    col_remove, col_cancel = st.columns(2)
    with col_remove:
        if st.button("Remove", type="primary", width="stretch", key="confirm_remove"):
            state.remove_item(item.id)
            st.rerun()
    with col_cancel:
        if st.button("Cancel", width="stretch", key="cancel_remove"):
            st.rerun()
