"""UI components for the Sweather Streamlit app."""

from .add_item_dialog import add_item_dialog
from .clothing_card import render_clothing_card
from .confirm_delete import confirm_delete_dialog
from .navigation import render_navigation
from .weather_card import render_weather_card

__all__ = [
    "add_item_dialog",
    "confirm_delete_dialog",
    "render_clothing_card",
    "render_navigation",
    "render_weather_card",
]
