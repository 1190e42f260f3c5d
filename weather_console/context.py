# ABOUTME: Orchestration context shared by the search and selection coordinators.
# ABOUTME: Owns the attempt tracker, the view state, and the two lookup services.

from dataclasses import dataclass, field

from weather_console.models import ViewState
from weather_console.tracker import AttemptTracker
from weather_console.weather_service import LocationSearchService, WeatherService


@dataclass
class ConsoleContext:
    """Mutable state and collaborators passed explicitly into both coordinators."""

    search_service: LocationSearchService
    weather_service: WeatherService
    tracker: AttemptTracker = field(default_factory=AttemptTracker)
    view: ViewState = field(default_factory=ViewState)
