import pytest

from weather_app.errors import (
    ExternalAPIError,
    ForecastProviderError,
    LocationNotFoundError,
)
from weather_app.models.forecast import ForecastSummary
from weather_app.models.location import GeocodeResult
from weather_app.models.weather import WeatherError, WeatherReport
from weather_app.weather_service.weather import lookup_weather

SEATTLE = GeocodeResult(latitude=47.6, longitude=-122.3, location_name="Seattle, WA")
SUNNY = ForecastSummary(
    description=(
        "Sunny. It is currently 72 degrees and it feels like 70 degrees out. "
        "The humidity is 40% with a 10% chance of rain."
    )
)


class FakeProviders:
    """Records calls in order and returns canned results or errors."""

    def __init__(self, location=SEATTLE, summary=SUNNY, geocode_error=None, forecast_error=None):
        self.location = location
        self.summary = summary
        self.geocode_error = geocode_error
        self.forecast_error = forecast_error
        self.calls = []

    async def geocode(self, address: str):
        self.calls.append(("geocode", address))
        if self.geocode_error:
            raise self.geocode_error
        return self.location

    async def forecast(self, latitude: float, longitude: float):
        self.calls.append(("forecast", latitude, longitude))
        if self.forecast_error:
            raise self.forecast_error
        return self.summary

    async def lookup(self, address):
        return await lookup_weather(
            address, geocoder=self.geocode, forecaster=self.forecast
        )


@pytest.mark.anyio
@pytest.mark.parametrize("address", [None, "", "   "])
async def test_missing_address_makes_no_calls(address):
    providers = FakeProviders()
    result = await providers.lookup(address)
    assert result == WeatherError(error="You must provide an address")
    assert providers.calls == []


@pytest.mark.anyio
async def test_geocode_connection_error_skips_forecast():
    providers = FakeProviders(
        geocode_error=ExternalAPIError("Unable to connect to location services!")
    )
    result = await providers.lookup("Seattle")
    assert result == WeatherError(error="Unable to connect to location services!")
    assert providers.calls == [("geocode", "Seattle")]


@pytest.mark.anyio
async def test_geocode_not_found():
    providers = FakeProviders(
        geocode_error=LocationNotFoundError("Unable to find location. Try another search")
    )
    result = await providers.lookup("Xyzzyville")
    assert result == WeatherError(error="Unable to find location. Try another search")
    assert [call[0] for call in providers.calls] == ["geocode"]


@pytest.mark.anyio
async def test_forecast_connection_error():
    providers = FakeProviders(
        forecast_error=ExternalAPIError("Unable to connect to weather service!")
    )
    result = await providers.lookup("Seattle")
    assert result == WeatherError(error="Unable to connect to weather service!")


@pytest.mark.anyio
async def test_forecast_provider_error():
    providers = FakeProviders(forecast_error=ForecastProviderError("Unable to find location"))
    result = await providers.lookup("Seattle")
    assert result == WeatherError(error="Unable to find location")


@pytest.mark.anyio
async def test_successful_lookup():
    providers = FakeProviders()
    result = await providers.lookup("Seattle")
    assert result == WeatherReport(
        forecast=(
            "Sunny. It is currently 72 degrees and it feels like 70 degrees out. "
            "The humidity is 40% with a 10% chance of rain."
        ),
        location="Seattle, WA",
        address="Seattle",
    )
    assert result.model_dump() == {
        "forecast": SUNNY.description,
        "location": "Seattle, WA",
        "address": "Seattle",
    }


@pytest.mark.anyio
@pytest.mark.parametrize("address", ["seattle", "  Seattle, wa ", "Seattle%20WA"])
async def test_address_is_returned_verbatim(address):
    providers = FakeProviders()
    result = await providers.lookup(address)
    assert result.address == address
    assert providers.calls[0] == ("geocode", address)


@pytest.mark.anyio
async def test_forecast_uses_geocoded_coordinates_after_geocoding():
    providers = FakeProviders()
    await providers.lookup("Seattle")
    assert providers.calls == [
        ("geocode", "Seattle"),
        ("forecast", 47.6, -122.3),
    ]
