# ABOUTME: Shared test fixtures for the location insights test suite.
# ABOUTME: Strips Gemini credentials from the environment so no test can reach the real service.

import pytest

from location_insights.config import API_KEY_VARS


@pytest.fixture(autouse=True)
def _no_credentials(monkeypatch):
    # Prevent accidental Gemini calls during testing
    for name in (*API_KEY_VARS, "GEMINI_MODEL", "INSIGHTS_LANGUAGE", "GEMINI_BASE_URL"):
        monkeypatch.delenv(name, raising=False)
