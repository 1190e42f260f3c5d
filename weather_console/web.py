# ABOUTME: ASGI web entry point exposing the weather console as a small JSON API.
# ABOUTME: Builds a Starlette app whose lifespan wires the Open-Meteo client and runs the startup search.

import json
import logging
from contextlib import asynccontextmanager

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from weather_console.codes import describe_weather
from weather_console.config import Settings
from weather_console.console import WeatherConsole
from weather_console.deps import create_http_client
from weather_console.weather_service import OpenMeteoService

logger = logging.getLogger(__name__)


def serialize_state(console: WeatherConsole) -> dict:
    """Render the console's view state, derived phase, and attempt record as JSON-ready data."""
    view = console.view
    data = view.model_dump(mode="json")
    data["phase"] = view.phase.value
    data["attempts"] = console.attempts.model_dump()
    data["summary"] = describe_weather(view.weather, view.selected) if view.weather else None
    return data


async def _read_json(request: Request) -> dict:
    """Parse a JSON object body, treating anything else as empty."""
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return {}
    return body if isinstance(body, dict) else {}


async def get_state(request: Request) -> JSONResponse:
    return JSONResponse(serialize_state(request.app.state.console))


async def post_search(request: Request) -> JSONResponse:
    console: WeatherConsole = request.app.state.console
    body = await _read_json(request)
    query = body.get("query")
    await console.initiate_search(query if isinstance(query, str) else "")
    return JSONResponse(serialize_state(console))


async def post_select(request: Request) -> JSONResponse:
    console: WeatherConsole = request.app.state.console
    body = await _read_json(request)
    candidate_id = body.get("id")
    is_id = isinstance(candidate_id, int) and not isinstance(candidate_id, bool)
    candidate = console.find_candidate(candidate_id) if is_id else None
    if candidate is None:
        return JSONResponse({"detail": f"No listed location with id {candidate_id!r}"}, status_code=404)
    await console.select_location(candidate)
    return JSONResponse(serialize_state(console))


def create_app(console: WeatherConsole | None = None, settings: Settings | None = None) -> Starlette:
    """Build the ASGI app.

    When no console is given, one is created at startup against the live Open-Meteo
    APIs and its HTTP client is closed on shutdown.
    """
    settings = settings or Settings.from_env()

    @asynccontextmanager
    async def lifespan(app: Starlette):
        logging.basicConfig(level=settings.log_level.upper())
        http_client = None
        active = console
        if active is None:
            http_client = create_http_client(settings)
            service = OpenMeteoService(http_client, settings.search_count, settings.language)
            active = WeatherConsole(service, service, settings=settings)
        app.state.console = active
        await active.start()
        try:
            yield
        finally:
            if http_client is not None:
                await http_client.aclose()
                logger.info("HTTP client closed")

    return Starlette(
        routes=[
            Route("/api/state", get_state, methods=["GET"]),
            Route("/api/search", post_search, methods=["POST"]),
            Route("/api/select", post_select, methods=["POST"]),
        ],
        lifespan=lifespan,
    )


app = create_app()
