"""Response models returned by the weather lookup endpoint."""

from pydantic import BaseModel


class WeatherReport(BaseModel):
    """Successful lookup: forecast text, resolved location, and the raw input."""

    forecast: str
    location: str
    address: str


class WeatherError(BaseModel):
    """Failed lookup with a user-facing message."""

    error: str


WeatherResponse = WeatherReport | WeatherError
