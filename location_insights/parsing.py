# ABOUTME: Best-effort extraction of the JSON payload and grounding citations from a Gemini reply.
# ABOUTME: Parse failures are logged and return None; nothing in this module raises on bad model output.

import json
import logging
import re

from google.genai import types
from pydantic import ValidationError

from location_insights.models import GroundingSource, LocationData

logger = logging.getLogger(__name__)

FENCED_JSON_RE = re.compile(r"```json\s*([\s\S]*?)\s*```")
# Greedy: spans from the first "{" to the last "}" in the text.
BRACE_SPAN_RE = re.compile(r"\{[\s\S]*\}")


def extract_json_candidate(text: str) -> str | None:
    """Return the substring most likely to hold the JSON payload, or None.

    A ```json fenced block takes priority; otherwise the first-"{"-to-last-"}" span is used.
    """
    fenced = FENCED_JSON_RE.search(text)
    if fenced:
        return fenced.group(1)
    span = BRACE_SPAN_RE.search(text)
    if span:
        return span.group(0)
    return None


def parse_location_data(text: str) -> LocationData | None:
    """Parse the JSON object embedded in text into LocationData.

    Returns None when no candidate is found, the candidate is not valid JSON, or it is not an
    object. An object whose fields do not fit the typed shape is still returned, with those
    fields left as raw JSON values.
    """
    candidate = extract_json_candidate(text)
    if candidate is None:
        logger.warning("No JSON block found in Gemini response")
        return None

    try:
        payload = json.loads(candidate)
    except ValueError as e:
        logger.warning("Failed to parse JSON from Gemini response: %s", e)
        return None

    if not isinstance(payload, dict):
        logger.warning("Gemini response JSON is a %s, not an object", type(payload).__name__)
        return None

    try:
        return LocationData.model_validate(payload)
    except ValidationError as e:
        logger.warning("Gemini JSON does not match the location shape, keeping invalid fields raw: %s", e)
        return _validate_fields(payload)


def _validate_fields(payload: dict) -> LocationData:
    """Validate each key on its own so one bad field does not untype the others.

    Fields that fail keep their raw JSON value. Extra keys never fail validation.
    """
    valid, invalid = {}, {}
    for key, value in payload.items():
        try:
            LocationData.model_validate({key: value})
        except ValidationError:
            invalid[key] = value
        else:
            valid[key] = value

    data = LocationData.model_validate(valid)
    for key, value in invalid.items():
        name = next(n for n, field in LocationData.model_fields.items() if key in (n, field.alias))
        setattr(data, name, value)
    return data


def extract_grounding_sources(response: types.GenerateContentResponse) -> list[GroundingSource]:
    """Collect web and maps citations from the first candidate's grounding metadata.

    A chunk can yield a web source, a maps source, both, or neither. Order follows the chunks;
    duplicates are kept.
    """
    if not response.candidates:
        return []
    metadata = response.candidates[0].grounding_metadata
    if metadata is None or not metadata.grounding_chunks:
        return []

    sources = []
    for chunk in metadata.grounding_chunks:
        if chunk.web and chunk.web.uri and chunk.web.title:
            sources.append(GroundingSource(title=chunk.web.title, uri=chunk.web.uri))
        if chunk.maps and chunk.maps.uri and chunk.maps.title:
            sources.append(GroundingSource(title=chunk.maps.title, uri=chunk.maps.uri))
    return sources
