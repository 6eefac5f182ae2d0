"""Hosted model gateway for Sweather."""

from .cancellation import CancellationToken
from .gemini_gateway import GeminiGateway, extract_sources, get_gemini_gateway
from .schemas import WEATHER_UNAVAILABLE

__all__ = [
    "CancellationToken",
    "GeminiGateway",
    "extract_sources",
    "get_gemini_gateway",
    "WEATHER_UNAVAILABLE",
]
