# ABOUTME: Prompt template asking Gemini for place, weather, and nearby attractions at given coordinates.
# ABOUTME: Structured output cannot be combined with search/maps tools, so the prompt asks for a fenced JSON block.

from location_insights.config import DEFAULT_LANGUAGE
from location_insights.models import Coordinates

PROMPT_TEMPLATE = """\
My current position is Latitude: {latitude}, Longitude: {longitude}.

Use Google Search and Google Maps to complete the following tasks. Answer in {language}.
1. Identify the specific place name and street I am at (address and location name).
2. Look up the real-time weather at this position (temperature, condition, wind speed, wind direction).
3. Find 4-5 nearby attractions or landmarks worth visiting.
4. For each attraction, calculate or estimate its direction relative to my position \
(for example: northeast, south, northwest) and its approximate distance.

Output the result as pure JSON in exactly this shape, with no text outside the markdown block:
```json
{{
  "locationName": "current place name",
  "address": "current full address",
  "weather": {{
    "temperature": "25°C",
    "condition": "cloudy",
    "windSpeed": "15 km/h",
    "windDirection": "northwest"
  }},
  "attractions": [
    {{
      "name": "attraction name",
      "description": "short description (under 20 words)",
      "bearing": "direction (e.g. northeast)",
      "distance": "distance (e.g. 500m)",
      "type": "category (e.g. park, restaurant, museum)"
    }}
  ]
}}
```
"""


def build_prompt(coords: Coordinates, language: str = DEFAULT_LANGUAGE) -> str:
    """Fill the insights prompt template with the user's coordinates."""
    return PROMPT_TEMPLATE.format(latitude=coords.latitude, longitude=coords.longitude, language=language)
