# ABOUTME: Pydantic BaseModels for coordinates, parsed location payloads, and fetch results.
# ABOUTME: Field names are snake_case in Python and camelCase on the wire, matching the model's JSON payload.

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, coerce_numbers_to_str=True)


class Coordinates(BaseModel):
    """Latitude/longitude pair the insights are requested for."""

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float


class WeatherInfo(_CamelModel):
    """Current weather as free text (e.g. "25°C", "15 km/h"). Values are not parsed."""

    temperature: str | None = None
    condition: str | None = None
    wind_speed: str | None = None
    wind_direction: str | None = None


class Attraction(_CamelModel):
    """A nearby point of interest with its bearing and distance from the user."""

    name: str | None = None
    description: str | None = None
    bearing: str | None = None
    distance: str | None = None
    type: str | None = None


class LocationData(_CamelModel):
    """Structured payload extracted from the model's reply.

    Every field may be missing: the shape is only requested in the prompt, never enforced.
    """

    model_config = ConfigDict(extra="allow")

    location_name: str | None = None
    address: str | None = None
    weather: WeatherInfo | None = None
    attractions: list[Attraction] = []


class GroundingSource(BaseModel):
    """A web or maps citation the model used to ground its answer."""

    title: str
    uri: str


class GeminiResponse(_CamelModel):
    """Result of one insights request.

    raw_text always holds the model's reply verbatim, so callers can show it when data is None.
    """

    data: LocationData | None = None
    sources: list[GroundingSource] = Field(default_factory=list)
    raw_text: str = ""
