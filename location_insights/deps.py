# ABOUTME: Factory for the Google GenAI client injected into the insights fetcher.
# ABOUTME: Pins the SDK to an httpx transport without retries, so every network failure is an httpx.HTTPError.

import httpx
from google import genai
from google.genai import types

from location_insights.config import API_KEY_VARS, InsightsConfig


def create_genai_client(config: InsightsConfig) -> genai.Client:
    """Create a GenAI client authenticated with the configured API key.

    The SDK would switch to aiohttp whenever it is importable; passing our own httpx client keeps
    transport errors in one exception family. One attempt per request, nothing is retried.
    """
    if not config.api_key:
        raise ValueError(f"Gemini API key is missing, set one of: {', '.join(API_KEY_VARS)}")
    return genai.Client(
        api_key=config.api_key,
        http_options=types.HttpOptions(
            base_url=config.base_url,
            retry_options=types.HttpRetryOptions(attempts=1),
            httpx_async_client=httpx.AsyncClient(),
        ),
    )
