"""Environment-driven settings for providers, logging, and the web server."""

import os

MAPBOX_ACCESS_TOKEN = os.getenv("MAPBOX_ACCESS_TOKEN", "")
WEATHERSTACK_ACCESS_KEY = os.getenv("WEATHERSTACK_ACCESS_KEY", "")

GEOCODING_URL = os.getenv(
    "GEOCODING_URL", "https://api.mapbox.com/geocoding/v5/mapbox.places"
)
WEATHER_URL = os.getenv("WEATHER_URL", "http://api.weatherstack.com/current")
REQUEST_TIMEOUT_S = float(os.getenv("REQUEST_TIMEOUT_S", "5"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

SITE_AUTHOR = os.getenv("SITE_AUTHOR", "Nga La")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
