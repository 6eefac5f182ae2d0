"""Pydantic data models for wardrobe items and recommendations.

Attributes are snake_case in Python; the stored and wire form uses the
camelCase names (``imageData``, ``isSweaterWeather``, ``selectedItemIds``).
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    """Base model serializing to camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict:
        """Dump using the camelCase field names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class AppView(str, Enum):
    """Top-level views of the app."""

    DASHBOARD = "DASHBOARD"
    WARDROBE = "WARDROBE"


class ClothingItem(_CamelModel):
    """A single garment in the user's wardrobe.

    ``insulation`` is a 1-10 warmth rating by convention only; values outside
    that range are stored as given.
    """

    id: str = Field(..., min_length=1, description="Opaque unique identifier")
    image_data: str = Field(default="", description="Data URI (or URL for demo items)")
    name: str = Field(..., description="Display name")
    type: str = Field(default="Custom", description="Free-text category, e.g. 'Hoodie'")
    insulation: int = Field(..., description="Subjective warmth rating, nominally 1-10")
    tags: list[str] = Field(default_factory=list, description="Short descriptive keywords")


class WeatherInfo(_CamelModel):
    """Weather summary attached to a recommendation."""

    summary: str
    temperature: str
    is_sweater_weather: bool
    location: str = ""
    sources: Optional[list[str]] = None


class Recommendation(_CamelModel):
    """Outfit suggestion for the current weather."""

    weather: WeatherInfo
    selected_item_ids: list[str] = Field(default_factory=list)
    reasoning: str = ""


class AnalysisResult(_CamelModel):
    """Attributes extracted from a clothing photo."""

    model_config = ConfigDict(strict=True)

    name: str
    insulation: int
    tags: list[str]
    color: str


class WeatherReport(BaseModel):
    """Free-text weather plus grounding citations."""

    text: str
    sources: list[str] = Field(default_factory=list)


class WeatherPayload(_CamelModel):
    """Weather block as returned by the recommendation call."""

    model_config = ConfigDict(strict=True)

    summary: str
    temperature: str
    is_sweater_weather: bool
    location: Optional[str] = None


class RecommendationPayload(_CamelModel):
    """Raw recommendation response before local enrichment."""

    model_config = ConfigDict(strict=True)

    weather: WeatherPayload
    selected_item_ids: list[str]
    reasoning: str

    def to_recommendation(self, location: str, sources: list[str]) -> Recommendation:
        """Build a Recommendation with caller location and search sources."""
        return Recommendation(
            weather=WeatherInfo(
                summary=self.weather.summary,
                temperature=self.weather.temperature,
                is_sweater_weather=self.weather.is_sweater_weather,
                location=location,
                sources=list(sources),
            ),
            selected_item_ids=list(self.selected_item_ids),
            reasoning=self.reasoning,
        )


def summarize_wardrobe(items: list[ClothingItem]) -> list[dict]:
    """Reduce items to what the model needs (no image bytes)."""
    return [
        {
            "id": item.id,
            "name": item.name,
            "insulation": item.insulation,
            "tags": list(item.tags),
        }
        for item in items
    ]
