# ABOUTME: Runtime configuration for the location insights client.
# ABOUTME: Loads the Gemini API key, endpoint, model id, and answer language from the environment or a .env file.

import os

from dotenv import load_dotenv
from pydantic import BaseModel

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_LANGUAGE = "Traditional Chinese (Cantonese)"

# Checked in order; the first non-empty value wins.
API_KEY_VARS = ("GEMINI_API_KEY", "API_KEY", "GOOGLE_API_KEY")


class InsightsConfig(BaseModel):
    """Settings passed to the fetcher and the GenAI client factory."""

    api_key: str = ""
    model: str = DEFAULT_MODEL
    language: str = DEFAULT_LANGUAGE
    # Overrides the Gemini endpoint, e.g. for a proxy.
    base_url: str | None = None

    @classmethod
    def from_env(cls) -> "InsightsConfig":
        """Read settings from the process environment, loading .env first."""
        load_dotenv()
        api_key = next((os.environ[name] for name in API_KEY_VARS if os.environ.get(name)), "")
        return cls(
            api_key=api_key,
            model=os.environ.get("GEMINI_MODEL") or DEFAULT_MODEL,
            language=os.environ.get("INSIGHTS_LANGUAGE") or DEFAULT_LANGUAGE,
            base_url=os.environ.get("GEMINI_BASE_URL") or None,
        )
