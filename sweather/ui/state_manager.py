"""Application state for the Sweather Streamlit UI.

All view state lives in one ``AppState`` object kept in
``st.session_state``. Render functions receive it by reference and change
it only through its methods.
"""

import uuid
from dataclasses import dataclass, field
from typing import Optional

import streamlit as st

from sweather.domain.models import AnalysisResult, AppView, ClothingItem, Recommendation
from sweather.gateway.cancellation import CancellationToken
from sweather.gateway.gemini_gateway import GeminiGateway
from sweather.storage.wardrobe_repository import WardrobeRepository
from sweather.ui.utils import format_coordinates, parse_tags
from sweather.utils.exceptions import RequestCancelledError
from sweather.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_INSULATION = 5


@dataclass
class ItemDraft:
    """Contents of the add-item form."""

    image_data: Optional[str] = None
    name: str = ""
    type: str = "Custom"
    insulation: int = DEFAULT_INSULATION
    tags_text: str = ""

    @property
    def can_submit(self) -> bool:
        """An item needs both a photo and a name."""
        return bool(self.image_data) and bool(self.name.strip())

    def apply_analysis(self, result: AnalysisResult) -> None:
        """Copy classified attributes into the draft as-is."""
        self.name = result.name
        self.insulation = result.insulation
        self.tags_text = ", ".join(result.tags)

    def to_item(self, item_id: Optional[str] = None) -> ClothingItem:
        """Build the ClothingItem to store."""
        return ClothingItem(
            id=item_id or uuid.uuid4().hex,
            image_data=self.image_data or "",
            name=self.name.strip(),
            type=self.type.strip() or "Custom",
            insulation=self.insulation,
            tags=parse_tags(self.tags_text),
        )


@dataclass
class AppState:
    """
    View state for one browser session.

    Attributes:
        repository: Persistence adapter for the wardrobe
        view: Current top-level view
        wardrobe: In-memory wardrobe, replaced after every add/remove
        location: Location text typed (or geolocated) by the user
        loading: True while a recommendation request is in flight
        recommendation: Last recommendation, or None
        geolocation_requested: Waiting for the browser to report a position
        pending_token: Token of the in-flight request
        alerts: Warnings waiting to be shown on the next full render
    """

    repository: WardrobeRepository = field(repr=False)
    view: AppView = AppView.DASHBOARD
    wardrobe: list[ClothingItem] = field(default_factory=list)
    location: str = ""
    loading: bool = False
    recommendation: Optional[Recommendation] = None
    geolocation_requested: bool = False
    pending_token: Optional[CancellationToken] = field(default=None, repr=False)
    alerts: list[str] = field(default_factory=list)

    # =========================================
    # Wardrobe
    # =========================================

    def load_wardrobe(self) -> list[ClothingItem]:
        self.wardrobe = self.repository.load()
        return self.wardrobe

    def add_item(self, item: ClothingItem) -> list[ClothingItem]:
        self.wardrobe = self.repository.add(item)
        logger.info(f"Added '{item.name}' ({item.id}); wardrobe has {len(self.wardrobe)} items")
        return self.wardrobe

    def remove_item(self, item_id: str) -> list[ClothingItem]:
        self.wardrobe = self.repository.remove(item_id)
        logger.info(f"Removed item {item_id}; wardrobe has {len(self.wardrobe)} items")
        return self.wardrobe

    # =========================================
    # Alerts
    # =========================================

    def queue_alert(self, message: str) -> None:
        if message not in self.alerts:
            self.alerts.append(message)

    def take_alerts(self) -> list[str]:
        """Return queued alerts and clear the queue."""
        alerts, self.alerts = self.alerts, []
        return alerts

    # =========================================
    # Navigation & input
    # =========================================

    def set_view(self, view: AppView) -> None:
        """Switch views; leaving the dashboard abandons an in-flight request."""
        if view != AppView.DASHBOARD and self.loading:
            self._cancel_pending()
            self.loading = False
        self.view = view

    def set_location(self, location: str) -> None:
        self.location = location

    def apply_geolocation(self, latitude: float, longitude: float) -> None:
        self.location = format_coordinates(latitude, longitude)
        self.geolocation_requested = False

    # =========================================
    # Recommendation lifecycle
    # =========================================

    def _cancel_pending(self) -> None:
        if self.pending_token is not None:
            self.pending_token.cancel()
            logger.debug("Cancelled in-flight recommendation")
        self.pending_token = None

    def begin_recommendation(self) -> Optional[CancellationToken]:
        """Start a request.

        Returns:
            Token for the new request, or None if the submit is suppressed
            (blank location or a request already in flight)
        """
        if not self.location.strip() or self.loading:
            return None

        self._cancel_pending()
        self.loading = True
        self.recommendation = None
        self.pending_token = CancellationToken()
        return self.pending_token

    def _is_current(self, token: CancellationToken) -> bool:
        return token is self.pending_token and not token.cancelled

    def finish_recommendation(self, token: CancellationToken, result: Optional[Recommendation]) -> bool:
        """Apply a finished request's result unless the request is stale.

        Returns:
            True if the result was applied
        """
        if not self._is_current(token):
            logger.info("Dropping stale recommendation result")
            return False

        self.set_recommendation(result)
        self.loading = False
        self.pending_token = None
        return True

    def fail_recommendation(self, token: CancellationToken) -> bool:
        """Clear the busy flag after a failed request unless the request is stale."""
        if not self._is_current(token):
            return False

        self.loading = False
        self.pending_token = None
        return True

    def set_recommendation(self, result: Optional[Recommendation]) -> None:
        self.recommendation = result

    def clear_recommendation(self) -> None:
        self.recommendation = None


def request_recommendation(state: AppState, gateway: GeminiGateway) -> Optional[Recommendation]:
    """Run one recommendation request against the gateway.

    Gateway errors propagate after the busy flag is cleared. A cancelled
    request returns None.

    Args:
        state: Application state
        gateway: AI gateway

    Returns:
        The applied recommendation, or None if suppressed, cancelled or stale
    """
    token = state.begin_recommendation()
    if token is None:
        return None

    result: Optional[Recommendation] = None
    try:
        result = gateway.recommend(state.location, list(state.wardrobe), cancel_token=token)
    except RequestCancelledError:
        logger.info(f"Recommendation for {state.location!r} cancelled")
    finally:
        if result is None:
            state.fail_recommendation(token)

    if result is not None and state.finish_recommendation(token, result):
        return result
    return None


# ============================================
# Session state wiring
# ============================================


def initialize_session_state(repository: WardrobeRepository) -> AppState:
    """Create the session's AppState on first run and return it.

    The wardrobe is loaded from the repository once per session.
    """
    if "app_state" not in st.session_state:
        state = AppState(repository=repository)
        state.load_wardrobe()
        st.session_state.app_state = state

    if "draft_generation" not in st.session_state:
        st.session_state.draft_generation = 0

    if "item_draft" not in st.session_state:
        st.session_state.item_draft = ItemDraft()

    return st.session_state.app_state


def get_app_state() -> AppState:
    """Return the session's AppState."""
    return st.session_state.app_state


def reset_item_draft() -> None:
    """Start a fresh add-item form (new widget keys)."""
    st.session_state.item_draft = ItemDraft()
    st.session_state.draft_generation = (st.session_state.draft_generation or 0) + 1


def queue_alert(message: str) -> None:
    """Hold a warning for the current session until the page renders it.

    Dialogs close on ``st.rerun()``, so a warning drawn inside one is lost.
    Before the session has an AppState the warning is drawn directly.
    """
    if "app_state" not in st.session_state:
        st.warning(message)
        return
    st.session_state.app_state.queue_alert(message)
