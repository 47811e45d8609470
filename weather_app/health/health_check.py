"""Health checks for the external geocoding and weather providers."""

import httpx

from weather_app import config
from weather_app.geocoding.geocode import build_geocode_url
from weather_app.logging_config import logger
from weather_app.models.health import ServiceStatus

PROBE_ADDRESS = "London"
PROBE_QUERY = "51.5,-0.12"


async def _probe(url: str, params: dict, expected_key: str) -> bool:
    try:
        async with httpx.AsyncClient(timeout=config.REQUEST_TIMEOUT_S) as client:
            response = await client.get(url, params=params)
            return response.status_code == 200 and expected_key in response.json()
    except (httpx.HTTPError, ValueError) as exc:
        logger.error("HEALTH_PROBE_FAILED", url=url, error=str(exc))
        return False


async def is_geocoding_api_available() -> ServiceStatus:
    """Check the geocoding provider for availability.

    Returns:
        ServiceStatus.available if the API answers with a features list.
    """
    available = await _probe(
        build_geocode_url(PROBE_ADDRESS),
        {"access_token": config.MAPBOX_ACCESS_TOKEN, "limit": 1},
        "features",
    )
    return ServiceStatus.available if available else ServiceStatus.not_available


async def is_weather_api_available() -> ServiceStatus:
    """Check the weather provider for availability.

    Returns:
        ServiceStatus.available if the API answers with current conditions.
    """
    available = await _probe(
        config.WEATHER_URL,
        {
            "access_key": config.WEATHERSTACK_ACCESS_KEY,
            "query": PROBE_QUERY,
            "units": "f",
        },
        "current",
    )
    return ServiceStatus.available if available else ServiceStatus.not_available
