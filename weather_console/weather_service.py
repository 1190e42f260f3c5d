# ABOUTME: Service layer for Open-Meteo geocoding and current-weather calls.
# ABOUTME: Defines the service protocols the coordinators depend on and the httpx-backed implementation.

from typing import Protocol

import httpx

from weather_console.errors import NetworkError
from weather_console.models import CurrentConditions, LocationCandidate, WeatherSnapshot

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
FORECAST_URL = "https://api.open-meteo.com/v1/forecast"

CURRENT_PARAMS = (
    "temperature_2m,apparent_temperature,relative_humidity_2m,"
    "wind_speed_10m,weather_code,is_day"
)


class LocationSearchService(Protocol):
    async def search(self, query: str) -> list[LocationCandidate]: ...


class WeatherService(Protocol):
    async def get_current_weather(self, latitude: float, longitude: float) -> WeatherSnapshot: ...


async def search_locations(
    client: httpx.AsyncClient,
    query: str,
    count: int = 10,
    language: str = "en",
) -> list[LocationCandidate]:
    """Resolve a place name to candidate locations using the Open-Meteo geocoding API."""
    try:
        resp = await client.get(
            GEOCODING_URL,
            params={"name": query, "count": count, "language": language, "format": "json"},
        )
        resp.raise_for_status()
        data = resp.json()
        return parse_candidates(data.get("results") or [])
    except (httpx.HTTPError, ValueError, KeyError, TypeError, AttributeError) as e:
        raise NetworkError(f"Location search failed for {query!r}: {e}") from e


async def get_current_weather(client: httpx.AsyncClient, latitude: float, longitude: float) -> WeatherSnapshot:
    """Fetch the current conditions for a coordinate pair from the Open-Meteo forecast API."""
    try:
        resp = await client.get(
            FORECAST_URL,
            params={
                "latitude": latitude,
                "longitude": longitude,
                "current": CURRENT_PARAMS,
                "timezone": "auto",
            },
        )
        resp.raise_for_status()
        data = resp.json()
        return WeatherSnapshot(
            timezone=data.get("timezone", "UTC"),
            current=CurrentConditions.model_validate(data["current"]),
        )
    except (httpx.HTTPError, ValueError, KeyError, TypeError, AttributeError) as e:
        raise NetworkError(f"Weather fetch failed for ({latitude}, {longitude}): {e}") from e


def parse_candidates(results: list[dict]) -> list[LocationCandidate]:
    """Parse Open-Meteo geocoding results into candidates, keeping the API's ordering.

    Entries without coordinates cannot be used for a weather lookup and are dropped.
    """
    candidates = []
    for r in results:
        if r.get("latitude") is None or r.get("longitude") is None:
            continue
        candidates.append(
            LocationCandidate(
                id=r["id"],
                name=r["name"],
                admin1=r.get("admin1"),
                country=r.get("country"),
                latitude=r["latitude"],
                longitude=r["longitude"],
            )
        )
    return candidates


class OpenMeteoService:
    """Both lookup services backed by one shared httpx client."""

    def __init__(self, http_client: httpx.AsyncClient, search_count: int = 10, language: str = "en"):
        self.http_client = http_client
        self.search_count = search_count
        self.language = language

    async def search(self, query: str) -> list[LocationCandidate]:
        return await search_locations(self.http_client, query, self.search_count, self.language)

    async def get_current_weather(self, latitude: float, longitude: float) -> WeatherSnapshot:
        return await get_current_weather(self.http_client, latitude, longitude)
