"""Utility functions for the Sweather Streamlit UI."""

from typing import Any, Optional

from sweather.domain.models import ClothingItem, Recommendation, WeatherInfo
from sweather.utils.exceptions import GeolocationError


def parse_tags(text: str) -> list[str]:
    """Split comma-separated tags, trimming whitespace and dropping empties.

    Args:
        text: Raw tags input (e.g. "hoodie, cotton, grey")

    Returns:
        List of tags
    """
    return [tag.strip() for tag in text.split(",") if tag.strip()]


def format_coordinates(latitude: float, longitude: float) -> str:
    """Format a position as ``"lat, lon"`` with three decimals."""
    return f"{latitude:.3f}, {longitude:.3f}"


def parse_geolocation(payload: Any) -> Optional[tuple[float, float]]:
    """Interpret the browser's geolocation result.

    Args:
        payload: Value returned by ``streamlit_js_eval.get_geolocation``

    Returns:
        (latitude, longitude), or None while the browser has not answered yet

    Raises:
        GeolocationError: If the browser reported an error or the payload is unusable
    """
    if payload is None:
        return None

    if not isinstance(payload, dict):
        raise GeolocationError("Geolocation failed. Please enter manually.", reason=f"unexpected payload {payload!r}")

    if "error" in payload:
        error = payload["error"] or {}
        message = str(error.get("message", "")) if isinstance(error, dict) else str(error)
        if "not supported" in message.lower():
            raise GeolocationError("Geolocation not supported", reason=message)
        raise GeolocationError("Geolocation failed. Please enter manually.", reason=message or "denied")

    coords = payload.get("coords") or {}
    try:
        return float(coords["latitude"]), float(coords["longitude"])
    except (KeyError, TypeError, ValueError) as e:
        raise GeolocationError("Geolocation failed. Please enter manually.", reason=f"missing coordinates: {e}") from e


def recommended_items(
    wardrobe: list[ClothingItem],
    recommendation: Optional[Recommendation],
) -> list[ClothingItem]:
    """Wardrobe items selected by a recommendation, in wardrobe order.

    Ids that no longer match an item are skipped.
    """
    if recommendation is None:
        return []
    selected = set(recommendation.selected_item_ids)
    return [item for item in wardrobe if item.id in selected]


def verdict_text(weather: WeatherInfo) -> tuple[str, str]:
    """Headline and caption for the sweater-weather verdict."""
    if weather.is_sweater_weather:
        return "Yes! 🧣", "It's sweater weather."
    return "No 👕", "Not sweater weather."


def insulation_badge(insulation: int) -> str:
    """Badge text for an item's warmth rating.

    Args:
        insulation: Warmth rating

    Returns:
        Icon plus level, e.g. "❄️ Lvl 9"
    """
    if insulation >= 8:
        icon = "❄️"
    elif insulation <= 3:
        icon = "☀️"
    else:
        icon = "🟢"
    return f"{icon} Lvl {insulation}"


def source_links(sources: Optional[list[str]]) -> list[tuple[str, str]]:
    """Numbered link labels for weather citations."""
    return [(f"Source {idx}", uri) for idx, uri in enumerate(sources or [], start=1)]


def truncate_text(text: str, max_length: int = 50) -> str:
    """Truncate text to maximum length with ellipsis.

    Args:
        text: Input text
        max_length: Maximum length

    Returns:
        Truncated text
    """
    if len(text) <= max_length:
        return text
    return text[:max_length - 3] + "..."
