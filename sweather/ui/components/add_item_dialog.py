"""Add-item dialog: upload, optional AI auto-fill, manual fields."""

from typing import Optional

import streamlit as st

from sweather.gateway.gemini_gateway import GeminiGateway
from sweather.ui.state_manager import AppState, ItemDraft, reset_item_draft
from sweather.utils.config import ImageConfig
from sweather.utils.exceptions import AppException
from sweather.utils.image_utils import encode_file, resize_data_uri
from sweather.utils.logger import get_logger, log_exception

logger = get_logger(__name__)

ANALYZE_FAILED_MESSAGE = "Failed to analyze image. Please try again or fill manually."
IMAGE_FAILED_MESSAGE = "Error processing image"


def _widget_keys(generation: int) -> dict[str, str]:
    return {
        "upload": f"draft_upload_{generation}",
        "name": f"draft_name_{generation}",
        "type": f"draft_type_{generation}",
        "insulation": f"draft_insulation_{generation}",
        "tags": f"draft_tags_{generation}",
    }


def _handle_upload(draft: ItemDraft, uploaded_file, image_config: ImageConfig) -> None:
    """Encode and downsample a newly uploaded photo into the draft."""
    if uploaded_file is None:
        draft.image_data = None
        st.session_state.draft_source = None
        return

    source = (uploaded_file.name, uploaded_file.size)
    if st.session_state.get("draft_source") == source:
        return

    try:
        data_uri = encode_file(uploaded_file)
    except AppException as e:
        log_exception(logger, "read upload", e)
        st.error(IMAGE_FAILED_MESSAGE)
        return

    draft.image_data = resize_data_uri(
        data_uri,
        max_width=image_config.max_width,
        quality=image_config.jpeg_quality,
    )
    st.session_state.draft_source = source
    logger.debug(f"Loaded upload {uploaded_file.name} ({uploaded_file.size} bytes)")


def _auto_fill(draft: ItemDraft, gateway: GeminiGateway, keys: dict[str, str]) -> None:
    """Classify the draft photo and push the result into the form widgets."""
    with st.spinner("Analyzing..."):
        try:
            result = gateway.classify_image(draft.image_data)
        except AppException as e:
            log_exception(logger, "classify image", e)
            st.error(ANALYZE_FAILED_MESSAGE)
            return

    draft.apply_analysis(result)

    # Widgets below have not been created yet in this run
    st.session_state[keys["name"]] = draft.name
    st.session_state[keys["insulation"]] = draft.insulation
    st.session_state[keys["tags"]] = draft.tags_text


@st.dialog("Add to Wardrobe")
def add_item_dialog(state: AppState, gateway: Optional[GeminiGateway], image_config: ImageConfig) -> None:
    """Dialog for adding a clothing item.

    Args:
        state: Application state
        gateway: AI gateway, or None when no API key is configured
        image_config: Downsampling settings for uploads
    """
    draft: ItemDraft = st.session_state.item_draft
    keys = _widget_keys(st.session_state.draft_generation)

    uploaded_file = st.file_uploader(
        "Photo",
        type=["jpg", "jpeg", "png", "webp"],
        key=keys["upload"],
        help="Upload a photo of the clothing item",
    )
    _handle_upload(draft, uploaded_file, image_config)

    if draft.image_data:
        st.image(draft.image_data, width="stretch")

        if st.button(
            "✨ Auto-Fill",
            width="stretch",
            disabled=gateway is None,
            help="Let AI fill in the details" if gateway else "Set an API key to enable Auto-Fill",
        ):
            _auto_fill(draft, gateway, keys)

    st.session_state.setdefault(keys["name"], draft.name)
    st.session_state.setdefault(keys["type"], draft.type)
    st.session_state.setdefault(keys["insulation"], draft.insulation)
    st.session_state.setdefault(keys["tags"], draft.tags_text)

    draft.name = st.text_input("Name", key=keys["name"], placeholder="e.g. Favorite Grey Hoodie")
    draft.type = st.text_input("Type", key=keys["type"])

    # Auto-filled values outside 1-10 widen the slider rather than being clamped
    current = st.session_state[keys["insulation"]]
    draft.insulation = st.slider(
        "Insulation (warmth)",
        min_value=min(1, current),
        max_value=max(10, current),
        key=keys["insulation"],
        help="1 = very light, 10 = heavy winter wear",
    )
    draft.tags_text = st.text_input("Tags", key=keys["tags"], placeholder="hoodie, cotton, grey")

    if st.button("Add Item", type="primary", width="stretch", disabled=not draft.can_submit):
        state.add_item(draft.to_item())
        reset_item_draft()
        st.session_state.draft_source = None
        st.rerun()
