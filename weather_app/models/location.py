"""Location model for geocoding results."""

from pydantic import BaseModel


class GeocodeResult(BaseModel):
    """Coordinates and display name of the best geocoding match."""

    latitude: float
    longitude: float
    location_name: str

    @classmethod
    def from_feature(cls, feature: dict) -> "GeocodeResult":
        """Create a GeocodeResult from a geocoding provider feature.

        The provider orders ``center`` as ``[longitude, latitude]``.

        Args:
            feature: One entry of the provider's ``features`` array.

        Returns:
            A populated GeocodeResult.
        """
        longitude, latitude = feature["center"]
        return cls(
            latitude=latitude,
            longitude=longitude,
            location_name=feature["place_name"],
        )
