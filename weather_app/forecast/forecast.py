"""Weather provider client: coordinates to a current-conditions sentence."""

import httpx
from pydantic import ValidationError

from weather_app import config
from weather_app.errors import ExternalAPIError, ForecastProviderError
from weather_app.http_client import get_json
from weather_app.logging_config import logger
from weather_app.models.forecast import ForecastSummary

CONNECTION_ERROR_MESSAGE = "Unable to connect to weather service!"
PROVIDER_ERROR_MESSAGE = "Unable to find location"
UNITS = "f"


async def forecast(
    latitude: float, longitude: float, *, client: httpx.AsyncClient | None = None
) -> ForecastSummary:
    """Fetch current conditions for a coordinate pair, in Fahrenheit.

    Args:
        latitude: Latitude in decimal degrees.
        longitude: Longitude in decimal degrees.
        client: Optional HTTP client, mainly for tests.

    Returns:
        A ForecastSummary with the formatted conditions sentence.

    Raises:
        ForecastProviderError: If the provider answers with an error payload.
        ExternalAPIError: If the provider is unreachable or the payload is invalid.
    """
    log_context = {"latitude": latitude, "longitude": longitude}
    payload = await get_json(
        url=config.WEATHER_URL,
        params={
            "access_key": config.WEATHERSTACK_ACCESS_KEY,
            "query": f"{latitude},{longitude}",
            "units": UNITS,
        },
        event_prefix="FORECAST",
        log_context=log_context,
        error_message=CONNECTION_ERROR_MESSAGE,
        client=client,
    )

    if isinstance(payload, dict) and payload.get("error"):
        logger.error("FORECAST_PROVIDER_ERROR", **log_context, error=payload["error"])
        raise ForecastProviderError(PROVIDER_ERROR_MESSAGE)

    try:
        return ForecastSummary.from_api_response(payload)
    except (TypeError, KeyError, ValidationError) as exc:
        logger.error("FORECAST_BAD_PAYLOAD", **log_context, error=str(exc))
        raise ExternalAPIError(CONNECTION_ERROR_MESSAGE) from exc
