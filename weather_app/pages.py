"""Server-rendered HTML pages around the weather search form."""

from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from weather_app import config

TEMPLATES_DIR = Path(__file__).parent / "templates"
STATIC_DIR = Path(__file__).parent / "static"

templates = Jinja2Templates(directory=TEMPLATES_DIR)
router = APIRouter(default_response_class=HTMLResponse)


def render(request: Request, view: str, status_code: int = 200, **context):
    """Render a view with the site-wide context applied."""
    return templates.TemplateResponse(
        request,
        f"views/{view}.html",
        {"name": config.SITE_AUTHOR, **context},
        status_code=status_code,
    )


@router.get("/")
async def index(request: Request):
    """Render the home page with the weather search form."""
    return render(request, "index", title="Weather")


@router.get("/about")
async def about(request: Request):
    """Render the about page."""
    return render(request, "about", title="About Me")


@router.get("/help")
async def help_page(request: Request):
    """Render the help page."""
    return render(
        request, "help", title="Help", help_text="This is some helpful text."
    )


@router.get("/help/{article:path}")
async def help_article_not_found(request: Request, article: str):
    """Render the 404 page for an unknown help article."""
    return render(
        request,
        "404",
        status_code=404,
        title="404",
        error_message="Help article not found",
    )


# Registered last by the application so it only catches unmatched paths.
catch_all_router = APIRouter(default_response_class=HTMLResponse)


@catch_all_router.get("/{path:path}")
async def page_not_found(request: Request, path: str):
    """Render the 404 page for any path no other route matched."""
    return render(
        request, "404", status_code=404, title="404", error_message="Page not found"
    )
