"""Prompts and declared response schemas for the Gemini calls."""

from datetime import date

from google.genai import types


WEATHER_UNAVAILABLE = "Weather information unavailable."

CLASSIFY_PROMPT = """Analyze this clothing item. Provide a JSON object with:
- name: A short descriptive name (e.g. "Blue Denim Jacket").
- insulation: An integer 1-10 where 1 is a thin t-shirt/tank top and 10 is a heavy winter expedition parka.
- tags: An array of 3-5 keywords describing style, material, and usage.
- color: The primary color."""

RECOMMEND_PROMPT = """Context:
Current Weather in {location}: "{weather_text}"

User's Wardrobe (JSON):
{wardrobe_json}

Task:
1. Determine if it is "sweater weather" (generally below 20°C/68°F but above 10°C/50°F, or just chilly enough for layers).
2. Select the best combination of items from the wardrobe for this weather. You can select multiple items for layering.
3. Provide a reasoning summary.
4. Extract the temperature and short summary from the weather text.

Output JSON format."""


def weather_prompt(location: str, today: date) -> str:
    """Build the search-grounded weather question.

    The date is included so the search targets current conditions.
    """
    return (
        f"Today is {today.strftime('%a %b %d %Y')}. "
        f"What is the current temperature and weather condition in {location}? Be specific."
    )


ANALYSIS_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "name": types.Schema(type=types.Type.STRING),
        "insulation": types.Schema(type=types.Type.INTEGER),
        "tags": types.Schema(type=types.Type.ARRAY, items=types.Schema(type=types.Type.STRING)),
        "color": types.Schema(type=types.Type.STRING),
    },
    required=["name", "insulation", "tags", "color"],
)

RECOMMENDATION_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "weather": types.Schema(
            type=types.Type.OBJECT,
            properties={
                "summary": types.Schema(type=types.Type.STRING),
                "temperature": types.Schema(type=types.Type.STRING),
                "isSweaterWeather": types.Schema(type=types.Type.BOOLEAN),
                "location": types.Schema(type=types.Type.STRING),
            },
            required=["summary", "temperature", "isSweaterWeather"],
        ),
        "selectedItemIds": types.Schema(type=types.Type.ARRAY, items=types.Schema(type=types.Type.STRING)),
        "reasoning": types.Schema(type=types.Type.STRING),
    },
    required=["weather", "selectedItemIds", "reasoning"],
)


def classify_config() -> types.GenerateContentConfig:
    return types.GenerateContentConfig(
        response_mime_type="application/json",
        response_schema=ANALYSIS_SCHEMA,
    )


def weather_config() -> types.GenerateContentConfig:
    return types.GenerateContentConfig(
        tools=[types.Tool(google_search=types.GoogleSearch())],
    )


def recommend_config() -> types.GenerateContentConfig:
    return types.GenerateContentConfig(
        response_mime_type="application/json",
        response_schema=RECOMMENDATION_SCHEMA,
    )
