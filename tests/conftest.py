# ABOUTME: Shared test fixtures for the weather console test suite.
# ABOUTME: Provides sample candidates and snapshots, a pinned clock, and contexts with mocked services.

from datetime import datetime
from unittest.mock import AsyncMock

import pytest

from weather_console.context import ConsoleContext
from weather_console.models import CurrentConditions, LocationCandidate, WeatherSnapshot
from weather_console.tracker import AttemptTracker

FIXED_TIME = datetime(2025, 1, 15, 9, 30, 5)


def fixed_clock() -> datetime:
    return FIXED_TIME


@pytest.fixture
def chennai_candidates() -> list[LocationCandidate]:
    return [
        LocationCandidate(
            id=1264527, name="Chennai", admin1="Tamil Nadu", country="India", latitude=13.08784, longitude=80.27847
        ),
        LocationCandidate(id=9000001, name="Chennai", country="India", latitude=12.9, longitude=80.1),
        LocationCandidate(
            id=9000002, name="Chennai", admin1="Kerala", country="India", latitude=10.5, longitude=76.2
        ),
    ]


@pytest.fixture
def snapshot() -> WeatherSnapshot:
    return WeatherSnapshot(
        timezone="Asia/Kolkata",
        current=CurrentConditions(
            temperature_2m=31.4,
            apparent_temperature=36.2,
            relative_humidity_2m=62,
            wind_speed_10m=14.8,
            weather_code=2,
            is_day=1,
        ),
    )


@pytest.fixture
def tracker() -> AttemptTracker:
    return AttemptTracker(clock=fixed_clock)


@pytest.fixture
def context(tracker) -> ConsoleContext:
    """Context whose services are AsyncMocks; tests set return_value or side_effect as needed."""
    search_service = AsyncMock()
    search_service.search.return_value = []
    weather_service = AsyncMock()
    return ConsoleContext(search_service=search_service, weather_service=weather_service, tracker=tracker)
