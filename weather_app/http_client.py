"""Single-shot HTTP GET against the external providers with consistent logging."""

import httpx

from weather_app.config import REQUEST_TIMEOUT_S
from weather_app.errors import ExternalAPIError
from weather_app.logging_config import logger


async def _send(
    client: httpx.AsyncClient | None, url: str, params: dict
) -> httpx.Response:
    if client is not None:
        return await client.get(url, params=params)
    async with httpx.AsyncClient(timeout=REQUEST_TIMEOUT_S) as owned_client:
        return await owned_client.get(url, params=params)


async def get_json(
    *,
    url: str,
    params: dict,
    event_prefix: str,
    log_context: dict,
    error_message: str,
    client: httpx.AsyncClient | None = None,
):
    """Execute one HTTP GET and decode the JSON body.

    There is no retry: every failure is terminal for the calling request.

    Args:
        url: The URL to call.
        params: Query parameters to include in the request.
        event_prefix: Log event prefix for consistent names.
        log_context: Extra log fields for all events.
        error_message: User-facing message wrapped in ExternalAPIError.
        client: Optional client to reuse; a short-lived one is opened otherwise.

    Returns:
        The decoded JSON payload.

    Raises:
        ExternalAPIError: On transport errors, bad statuses, or non-JSON bodies.
    """
    try:
        response = await _send(client, url, params)
        logger.info(
            f"{event_prefix}_RESPONSE", **log_context, status=response.status_code
        )
        response.raise_for_status()
        return response.json()
    except httpx.HTTPStatusError as exc:
        logger.error(
            f"{event_prefix}_BAD_STATUS",
            **log_context,
            status=exc.response.status_code,
        )
        raise ExternalAPIError(error_message) from exc
    except httpx.RequestError as exc:
        logger.error(f"{event_prefix}_REQUEST_FAILED", **log_context, error=str(exc))
        raise ExternalAPIError(error_message) from exc
    except ValueError as exc:
        logger.error(f"{event_prefix}_BAD_PAYLOAD", **log_context, error=str(exc))
        raise ExternalAPIError(error_message) from exc
