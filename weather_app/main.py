"""FastAPI application routes, middleware, and metrics."""

import time
import uuid

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest
from structlog.contextvars import bind_contextvars, clear_contextvars

from weather_app import config, pages
from weather_app.errors import WeatherServiceError
from weather_app.health.health_check import (
    is_geocoding_api_available,
    is_weather_api_available,
)
from weather_app.logging_config import logger
from weather_app.models.health import Dependencies, HealthResponse, ServiceStatus
from weather_app.models.weather import WeatherResponse
from weather_app.weather_service.weather import lookup_weather

app = FastAPI(title="Weather App")
app.mount("/static", StaticFiles(directory=pages.STATIC_DIR), name="static")
app.include_router(pages.router)

REQUEST_COUNT = Counter(
    "http_requests_total", "Total HTTP requests", ["method", "path", "status_code"]
)
REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds", "HTTP request duration in seconds", ["path"]
)


def _route_label(request: Request) -> str:
    """Return the matched route template, or ``unmatched`` when no route matched."""
    route = request.scope.get("route")
    return getattr(route, "path", None) or "unmatched"


@app.middleware("http")
async def request_logging(request: Request, call_next):
    """Log request details, attach a request ID, and record metrics.

    Args:
        request: Incoming HTTP request.
        call_next: FastAPI handler for the next middleware/app.

    Returns:
        The response produced by the downstream handler.
    """
    request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
    bind_contextvars(request_id=request_id)
    start = time.perf_counter()
    response = None
    try:
        response = await call_next(request)
        response.headers["x-request-id"] = request_id
        return response
    finally:
        duration_s = time.perf_counter() - start
        duration_ms = round(duration_s * 1000, 2)
        status_code = getattr(response, "status_code", 500)
        logger.info(
            "HTTP_REQUEST",
            method=request.method,
            path=request.url.path,
            status_code=status_code,
            duration_ms=duration_ms,
        )
        route_path = _route_label(request)
        REQUEST_COUNT.labels(
            method=request.method, path=route_path, status_code=status_code
        ).inc()
        REQUEST_LATENCY.labels(path=route_path).observe(duration_s)
        clear_contextvars()


@app.exception_handler(WeatherServiceError)
async def weather_service_error_handler(request: Request, exc: WeatherServiceError):
    """Convert weather service errors that escape a route into 500 responses.

    Args:
        request: Incoming HTTP request.
        exc: Raised weather service error.

    Returns:
        A JSON response with a generic error message.
    """
    logger.error("UNHANDLED_WEATHER_ERROR", error=str(exc))
    return JSONResponse(status_code=500, content={"detail": "Unexpected error"})


@app.get("/weather")
async def get_weather_for_address(address: str | None = None) -> WeatherResponse:
    """Look up current weather for the requested address.

    Domain errors are reported in the body with status 200, so clients must
    check for the ``error`` field before reading ``forecast``.

    Args:
        address: Free-text address from the query parameter.

    Returns:
        A WeatherReport, or a WeatherError describing what failed.
    """
    return await lookup_weather(address)


@app.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Report API health and provider availability.

    Returns:
        A HealthResponse containing dependency status.
    """
    geocoding_api = await is_geocoding_api_available()
    weather_api = await is_weather_api_available()
    degraded = ServiceStatus.not_available in (geocoding_api, weather_api)
    return HealthResponse(
        status="degraded" if degraded else "ok",
        dependencies=Dependencies(geocoding_api=geocoding_api, weather_api=weather_api),
    )


@app.get("/metrics")
async def metrics():
    """Expose Prometheus metrics for scraping."""
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)


app.include_router(pages.catch_all_router)


def run():
    """Serve the application with uvicorn."""
    import uvicorn

    uvicorn.run("weather_app.main:app", host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    run()
