"""Domain models for Sweather."""

from .models import (
    AnalysisResult,
    AppView,
    ClothingItem,
    Recommendation,
    RecommendationPayload,
    WeatherInfo,
    WeatherPayload,
    WeatherReport,
    summarize_wardrobe,
)

__all__ = [
    "AnalysisResult",
    "AppView",
    "ClothingItem",
    "Recommendation",
    "RecommendationPayload",
    "WeatherInfo",
    "WeatherPayload",
    "WeatherReport",
    "summarize_wardrobe",
]
