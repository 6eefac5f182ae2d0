"""Gemini-backed gateway for clothing classification and outfit advice.

Three single round-trip operations:
    - classify_image: photo -> AnalysisResult (schema-constrained JSON)
    - fetch_weather_text: location -> free text + search citations
    - recommend: location + wardrobe -> Recommendation (schema-constrained JSON)

No retries, timeouts or backoff. Any failure propagates to the caller.
"""

import base64
import json
import os
from datetime import date
from typing import Any, Optional

from google import genai
from google.genai import types
from pydantic import BaseModel, ValidationError

from sweather.domain.models import (
    AnalysisResult,
    ClothingItem,
    Recommendation,
    RecommendationPayload,
    WeatherReport,
    summarize_wardrobe,
)
from sweather.gateway.cancellation import CancellationToken
from sweather.gateway.schemas import (
    CLASSIFY_PROMPT,
    RECOMMEND_PROMPT,
    WEATHER_UNAVAILABLE,
    classify_config,
    recommend_config,
    weather_config,
    weather_prompt,
)
from sweather.utils.config import GeminiConfig
from sweather.utils.exceptions import (
    ConfigurationError,
    EmptyResponseError,
    GatewayTransportError,
    ImageReadError,
    ResponseSchemaError,
)
from sweather.utils.image_utils import decode_data_uri, strip_data_uri_header
from sweather.utils.logger import get_logger, log_execution_time

logger = get_logger(__name__)

# The resize step always emits JPEG
IMAGE_MIME_TYPE = "image/jpeg"


def extract_sources(response: Any) -> list[str]:
    """Collect unique grounding URIs from a response, in first-seen order.

    Args:
        response: generate_content response

    Returns:
        List of URIs (empty if the response carries no grounding metadata)
    """
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return []

    metadata = getattr(candidates[0], "grounding_metadata", None)
    chunks = getattr(metadata, "grounding_chunks", None) or []

    sources: list[str] = []
    for chunk in chunks:
        web = getattr(chunk, "web", None)
        uri = getattr(web, "uri", None)
        if uri and uri not in sources:
            sources.append(uri)
    return sources


def _image_bytes(image_data_uri: str) -> bytes:
    payload = strip_data_uri_header(image_data_uri)
    if payload.startswith("data:"):
        # Non-image MIME header, e.g. application/octet-stream
        return decode_data_uri(payload)
    return base64.b64decode(payload, validate=True)


class GeminiGateway:
    """
    Request/response operations against a hosted Gemini model.

    Args:
        client: ``google.genai.Client`` (anything exposing ``models.generate_content``)
        model: Model name used for every call

    Usage:
        >>> gateway = GeminiGateway(genai.Client(api_key=key))
        >>> result = gateway.recommend("Oslo", wardrobe)
    """

    def __init__(self, client: Any, model: str = "gemini-2.5-flash"):
        self.client = client
        self.model = model

    def _generate(self, operation: str, contents: Any, config: types.GenerateContentConfig) -> Any:
        try:
            with log_execution_time(logger, f"gemini {operation}"):
                return self.client.models.generate_content(
                    model=self.model,
                    contents=contents,
                    config=config,
                )
        except Exception as e:
            raise GatewayTransportError(f"{operation} request failed: {e}", operation=operation) from e

    @staticmethod
    def _parse(operation: str, text: Optional[str], model_cls: type[BaseModel]) -> Any:
        if not text:
            raise EmptyResponseError(f"{operation}: model returned no text", operation=operation)
        try:
            return model_cls.model_validate_json(text)
        except ValidationError as e:
            raise ResponseSchemaError(
                f"{operation}: response does not match {model_cls.__name__} ({e.error_count()} errors)",
                operation=operation,
                payload=text,
            ) from e

    def classify_image(self, image_data_uri: str) -> AnalysisResult:
        """Classify a clothing photo.

        Args:
            image_data_uri: Image as a data URI (or bare base64)

        Returns:
            AnalysisResult with name, insulation, tags and color

        Raises:
            EmptyResponseError: If the model returned no text
            ResponseSchemaError: If the payload is not a valid AnalysisResult
            GatewayTransportError: If the request failed
            ImageReadError: If the image is not base64 data
        """
        try:
            data = _image_bytes(image_data_uri)
        except ValueError as e:
            raise ImageReadError(f"Image is not base64 data: {e}", source="classify_image") from e

        contents = [
            types.Part.from_bytes(data=data, mime_type=IMAGE_MIME_TYPE),
            CLASSIFY_PROMPT,
        ]
        response = self._generate("classify_image", contents, classify_config())
        result = self._parse("classify_image", response.text, AnalysisResult)

        logger.info(f"Classified image as '{result.name}' (insulation {result.insulation})")
        return result

    def fetch_weather_text(self, location: str, today: Optional[date] = None) -> WeatherReport:
        """Look up current weather with search grounding.

        Args:
            location: Free-text location or "lat, lon"
            today: Date to mention in the query (default: today)

        Returns:
            WeatherReport with text (placeholder if none) and unique source URIs
        """
        prompt = weather_prompt(location, today or date.today())
        response = self._generate("fetch_weather_text", prompt, weather_config())

        text = response.text or WEATHER_UNAVAILABLE
        sources = extract_sources(response)

        logger.debug(f"Weather for {location!r}: {len(text)} chars, {len(sources)} sources")
        return WeatherReport(text=text, sources=sources)

    def recommend(
        self,
        location: str,
        wardrobe: list[ClothingItem],
        cancel_token: Optional[CancellationToken] = None,
        today: Optional[date] = None,
    ) -> Recommendation:
        """Fetch weather, then ask the model to pick an outfit.

        Args:
            location: Location typed by the user
            wardrobe: Current wardrobe items
            cancel_token: Checked before each model call and before returning
            today: Date used for the weather query

        Returns:
            Recommendation with the caller's location and the weather sources

        Raises:
            RequestCancelledError: If ``cancel_token`` was cancelled
            EmptyResponseError: If the recommendation call returned no text
            ResponseSchemaError: If the payload does not match the schema
            GatewayTransportError: If either request failed
        """
        if cancel_token is not None:
            cancel_token.raise_if_cancelled()

        report = self.fetch_weather_text(location, today=today)

        if cancel_token is not None:
            cancel_token.raise_if_cancelled()

        prompt = RECOMMEND_PROMPT.format(
            location=location,
            weather_text=report.text,
            wardrobe_json=json.dumps(summarize_wardrobe(wardrobe), separators=(",", ":"), ensure_ascii=False),
        )
        response = self._generate("recommend", prompt, recommend_config())
        payload = self._parse("recommend", response.text, RecommendationPayload)

        if cancel_token is not None:
            cancel_token.raise_if_cancelled()

        recommendation = payload.to_recommendation(location=location, sources=report.sources)
        logger.info(
            f"Recommendation for {location!r}: sweater weather={recommendation.weather.is_sweater_weather}, "
            f"{len(recommendation.selected_item_ids)} items"
        )
        return recommendation


def get_gemini_gateway(config: GeminiConfig) -> GeminiGateway:
    """Create a gateway with a real Gemini client.

    Args:
        config: Gemini configuration

    Returns:
        GeminiGateway instance

    Raises:
        ConfigurationError: If the API key environment variable is unset
    """
    api_key = os.environ.get(config.api_key_env)
    if not api_key:
        raise ConfigurationError(
            f"Gemini API key not found. Set the {config.api_key_env} environment variable.",
            context={"env": config.api_key_env},
        )

    client = genai.Client(api_key=api_key)
    logger.info(f"Gemini gateway ready (model={config.model})")
    return GeminiGateway(client, model=config.model)
