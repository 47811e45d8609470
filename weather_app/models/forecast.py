"""Current conditions model and forecast sentence formatting."""

from pydantic import BaseModel, Field


def _display(value: float) -> str:
    """Render whole numbers without a trailing ``.0``."""
    return str(int(value)) if float(value).is_integer() else str(value)


class CurrentConditions(BaseModel):
    """The ``current`` block of the weather provider payload."""

    weather_descriptions: list[str] = Field(min_length=1)
    temperature: float
    feelslike: float
    humidity: float
    precip: float

    def describe(self) -> str:
        """Format the conditions as a single human-readable sentence."""
        return (
            f"{self.weather_descriptions[0]}. "
            f"It is currently {_display(self.temperature)} degrees "
            f"and it feels like {_display(self.feelslike)} degrees out. "
            f"The humidity is {_display(self.humidity)}% "
            f"with a {_display(self.precip)}% chance of rain."
        )


class ForecastSummary(BaseModel):
    """Pre-formatted description of current conditions."""

    description: str

    @classmethod
    def from_api_response(cls, api_data: dict) -> "ForecastSummary":
        """Create a ForecastSummary from the weather provider payload.

        Args:
            api_data: API payload containing a ``current`` block.

        Returns:
            A ForecastSummary with the formatted sentence.
        """
        current = CurrentConditions.model_validate(api_data["current"])
        return cls(description=current.describe())
