"""Weather lookup: geocode an address, then fetch its current conditions."""

from typing import Awaitable, Callable

from prometheus_client import Counter

from weather_app.errors import MissingAddressError, WeatherServiceError
from weather_app.forecast.forecast import forecast
from weather_app.geocoding.geocode import geocode
from weather_app.logging_config import logger
from weather_app.models.forecast import ForecastSummary
from weather_app.models.location import GeocodeResult
from weather_app.models.weather import WeatherError, WeatherReport, WeatherResponse

Geocoder = Callable[[str], Awaitable[GeocodeResult]]
Forecaster = Callable[[float, float], Awaitable[ForecastSummary]]

LOOKUP_COUNT = Counter(
    "weather_lookups_total", "Weather lookups by outcome", ["outcome"]
)


async def lookup_weather(
    address: str | None,
    *,
    geocoder: Geocoder | None = None,
    forecaster: Forecaster | None = None,
) -> WeatherResponse:
    """Return the current weather for an address, or a user-facing error.

    Geocoding and forecasting run strictly in sequence: the forecast is only
    requested once geocoding has succeeded. Domain failures never raise.
    A whitespace-only address counts as missing and is never sent to the
    geocoder; any other address is passed through and echoed back verbatim.

    Args:
        address: Raw address from the query string.
        geocoder: Replacement for the geocoding client.
        forecaster: Replacement for the forecast client.

    Returns:
        A WeatherReport on success, otherwise a WeatherError.
    """
    geocoder = geocoder or geocode
    forecaster = forecaster or forecast

    try:
        if not address or not address.strip():
            raise MissingAddressError()
        location = await geocoder(address)
        summary = await forecaster(location.latitude, location.longitude)
    except WeatherServiceError as exc:
        logger.info(
            "WEATHER_LOOKUP_FAILED",
            address=address,
            reason=type(exc).__name__,
            error=str(exc),
        )
        LOOKUP_COUNT.labels(outcome=type(exc).__name__).inc()
        return WeatherError(error=str(exc))

    logger.info(
        "WEATHER_LOOKUP_OK", address=address, location=location.location_name
    )
    LOOKUP_COUNT.labels(outcome="ok").inc()
    return WeatherReport(
        forecast=summary.description,
        location=location.location_name,
        address=address,
    )
