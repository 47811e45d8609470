"""Geocoding client: free-text address to coordinates."""

from urllib.parse import quote

import httpx

from weather_app import config
from weather_app.errors import ExternalAPIError, LocationNotFoundError
from weather_app.http_client import get_json
from weather_app.logging_config import logger
from weather_app.models.location import GeocodeResult

CONNECTION_ERROR_MESSAGE = "Unable to connect to location services!"
NOT_FOUND_MESSAGE = "Unable to find location. Try another search"


def build_geocode_url(address: str) -> str:
    """Return the provider URL for an address, percent-encoded as one path segment."""
    return f"{config.GEOCODING_URL}/{quote(address, safe='')}.json"


async def geocode(
    address: str, *, client: httpx.AsyncClient | None = None
) -> GeocodeResult:
    """Resolve an address to the first matching location.

    Args:
        address: Free-text place description, non-empty.
        client: Optional HTTP client, mainly for tests.

    Returns:
        A GeocodeResult for the first candidate.

    Raises:
        LocationNotFoundError: If the provider returns no candidates.
        ExternalAPIError: If the provider is unreachable or the payload is invalid.
    """
    payload = await get_json(
        url=build_geocode_url(address),
        params={"access_token": config.MAPBOX_ACCESS_TOKEN, "limit": 1},
        event_prefix="GEOCODE",
        log_context={"address": address},
        error_message=CONNECTION_ERROR_MESSAGE,
        client=client,
    )

    try:
        features = payload["features"]
        if not features:
            logger.info("GEOCODE_NO_MATCH", address=address)
            raise LocationNotFoundError(NOT_FOUND_MESSAGE)
        return GeocodeResult.from_feature(features[0])
    except (TypeError, KeyError, IndexError, ValueError) as exc:
        logger.error("GEOCODE_BAD_PAYLOAD", address=address, error=str(exc))
        raise ExternalAPIError(CONNECTION_ERROR_MESSAGE) from exc
