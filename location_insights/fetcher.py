# ABOUTME: Fetches place, weather, and nearby attraction insights for coordinates from Gemini.
# ABOUTME: One grounded generate_content call per request; the JSON payload and citations are parsed from the reply.

import logging

import httpx
from google import genai
from google.genai import errors, types

from location_insights.config import DEFAULT_LANGUAGE, DEFAULT_MODEL, InsightsConfig
from location_insights.deps import create_genai_client
from location_insights.models import Coordinates, GeminiResponse
from location_insights.parsing import extract_grounding_sources, parse_location_data
from location_insights.prompts import build_prompt

logger = logging.getLogger(__name__)


class ProviderError(Exception):
    """The Gemini request itself failed (network, auth, quota, or service error)."""


def build_generate_config(coords: Coordinates) -> types.GenerateContentConfig:
    """Enable Google Search and Google Maps grounding, anchored at the user's coordinates.

    response_schema / response_mime_type are not allowed together with tools, so none is set.
    """
    return types.GenerateContentConfig(
        tools=[
            types.Tool(google_search=types.GoogleSearch()),
            types.Tool(google_maps=types.GoogleMaps()),
        ],
        tool_config=types.ToolConfig(
            retrieval_config=types.RetrievalConfig(
                lat_lng=types.LatLng(latitude=coords.latitude, longitude=coords.longitude),
            ),
        ),
    )


class InsightFetcher:
    """Client for location insights backed by a Gemini model with search and maps tools."""

    def __init__(self, client: genai.Client, model: str = DEFAULT_MODEL, language: str = DEFAULT_LANGUAGE):
        self.client = client
        self.model = model
        self.language = language

    @classmethod
    def from_config(cls, config: InsightsConfig) -> "InsightFetcher":
        """Build a fetcher with its own GenAI client, model, and language from config."""
        return cls(create_genai_client(config), model=config.model, language=config.language)

    async def fetch_location_insights(self, coords: Coordinates) -> GeminiResponse:
        """Ask Gemini about the given coordinates and parse its reply.

        Args:
            coords: Position to describe.

        Returns:
            GeminiResponse with the parsed payload (None if the reply held no usable JSON),
            grounding sources, and the raw reply text.

        Raises:
            ProviderError: The request to Gemini failed. Nothing is retried.
        """
        try:
            response = await self.client.aio.models.generate_content(
                model=self.model,
                contents=build_prompt(coords, self.language),
                config=build_generate_config(coords),
            )
        except (errors.APIError, httpx.HTTPError) as e:
            logger.exception("Gemini request failed for (%s, %s)", coords.latitude, coords.longitude)
            raise ProviderError(f"Gemini request failed: {e}") from e

        text = response.text or ""
        sources = extract_grounding_sources(response)
        data = parse_location_data(text)
        logger.debug("Gemini reply parsed: data=%s, sources=%d", data is not None, len(sources))
        return GeminiResponse(data=data, sources=sources, raw_text=text)


async def fetch_location_insights(coords: Coordinates, config: InsightsConfig | None = None) -> GeminiResponse:
    """Fetch insights with a fetcher built from config, or from the environment when omitted."""
    fetcher = InsightFetcher.from_config(config or InsightsConfig.from_env())
    return await fetcher.fetch_location_insights(coords)
