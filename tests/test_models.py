# ABOUTME: Contract tests for Pydantic models used in location insights parsing.
# ABOUTME: Validates camelCase aliasing, optional fields, and immutability of the data models.

import pydantic
import pytest

from location_insights.models import Attraction, Coordinates, GeminiResponse, LocationData, WeatherInfo


class TestCoordinates:
    def test_valid_coordinates_parse(self):
        """Coordinates stores latitude and longitude as floats.

        Implementation: Constructs Coordinates for Hong Kong.
        Passing implies: The model correctly stores lat and lon.
        """
        coords = Coordinates(latitude=22.28, longitude=114.15)
        assert coords.latitude == 22.28
        assert coords.longitude == 114.15

    def test_coordinates_are_immutable(self):
        """Coordinates cannot be modified after construction.

        Implementation: Attempts to assign to latitude on a frozen model.
        Passing implies: Input coordinates stay unchanged for the whole request.
        """
        coords = Coordinates(latitude=22.28, longitude=114.15)
        with pytest.raises(pydantic.ValidationError):
            coords.latitude = 0.0


class TestLocationData:
    def test_parses_camel_case_payload(self):
        """LocationData accepts the camelCase keys the model is asked to emit.

        Implementation: Validates a full payload dict with nested weather and attractions.
        Passing implies: Wire names map onto snake_case attributes, including nested models.
        """
        data = LocationData.model_validate(
            {
                "locationName": "Central",
                "address": "Queen's Road Central, Hong Kong",
                "weather": {"temperature": "28°C", "condition": "Sunny", "windSpeed": "10 km/h", "windDirection": "E"},
                "attractions": [
                    {"name": "Victoria Peak", "description": "View", "bearing": "S", "distance": "2km", "type": "park"}
                ],
            }
        )
        assert data.location_name == "Central"
        assert isinstance(data.weather, WeatherInfo)
        assert data.weather.wind_speed == "10 km/h"
        assert data.weather.wind_direction == "E"
        assert isinstance(data.attractions[0], Attraction)
        assert data.attractions[0].bearing == "S"

    def test_all_fields_optional(self):
        """LocationData validates an empty object.

        Implementation: Validates an empty dict.
        Passing implies: Missing fields default to None or an empty list.
        """
        data = LocationData.model_validate({})
        assert data.location_name is None
        assert data.address is None
        assert data.weather is None
        assert data.attractions == []

    def test_numbers_are_kept_as_text(self):
        """Numeric weather values are coerced to strings rather than rejected.

        Implementation: Validates weather with an integer temperature.
        Passing implies: Weather fields stay free text and are never parsed numerically.
        """
        weather = WeatherInfo.model_validate({"temperature": 25})
        assert weather.temperature == "25"

    def test_unknown_keys_are_kept(self):
        """Extra keys in the payload survive parsing.

        Implementation: Validates a payload with an unexpected key.
        Passing implies: Nothing the model returned is silently dropped.
        """
        data = LocationData.model_validate({"locationName": "X", "district": "Central and Western"})
        assert data.model_extra == {"district": "Central and Western"}


class TestGeminiResponse:
    def test_defaults(self):
        """GeminiResponse defaults to no data, no sources, and empty text.

        Implementation: Constructs GeminiResponse without arguments.
        Passing implies: sources defaults to an empty list, not None.
        """
        resp = GeminiResponse()
        assert resp.data is None
        assert resp.sources == []
        assert resp.raw_text == ""

    def test_serializes_with_wire_names(self):
        """GeminiResponse dumps rawText and nested locationName when dumped by alias.

        Implementation: Dumps a response by alias.
        Passing implies: Callers can forward the result in its camelCase wire shape.
        """
        resp = GeminiResponse(data=LocationData(location_name="X"), raw_text="hello")
        dumped = resp.model_dump(by_alias=True)
        assert dumped["rawText"] == "hello"
        assert dumped["data"]["locationName"] == "X"
