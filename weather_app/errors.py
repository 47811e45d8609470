"""Exceptions raised by the provider clients.

The message of every exception is the text shown to the user, so the
orchestrator can turn any of them into an error response with ``str(exc)``.
"""


class WeatherServiceError(Exception):
    """Base exception for weather lookup failures."""
    pass


class MissingAddressError(WeatherServiceError):
    """Raised when no address was supplied."""

    def __init__(self, message: str = "You must provide an address"):
        super().__init__(message)


class ExternalAPIError(WeatherServiceError):
    """Raised when a provider cannot be reached or returns an unusable payload."""
    pass


class LocationNotFoundError(WeatherServiceError):
    """Raised when geocoding returns no candidates."""
    pass


class ForecastProviderError(WeatherServiceError):
    """Raised when the weather provider reports its own error."""
    pass
