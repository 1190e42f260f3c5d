# ABOUTME: Facade wiring the search and selection coordinators to one shared context.
# ABOUTME: Exposes the user-facing actions and performs the startup auto-search.

import logging

from weather_console.config import Settings
from weather_console.context import ConsoleContext
from weather_console.coordinators import SearchCoordinator, SelectionCoordinator
from weather_console.models import AttemptRecord, LocationCandidate, Phase, ViewState
from weather_console.tracker import AttemptTracker
from weather_console.weather_service import LocationSearchService, WeatherService

logger = logging.getLogger(__name__)


class WeatherConsole:
    """The presentation layer's single entry point into the lookup workflow.

    Overlapping actions are not serialised: if a second search or selection starts
    before the first one's service call settles, whichever response arrives last
    overwrites the shared view state.
    """

    def __init__(
        self,
        search_service: LocationSearchService,
        weather_service: WeatherService,
        settings: Settings | None = None,
        tracker: AttemptTracker | None = None,
    ):
        self.settings = settings or Settings()
        self.context = ConsoleContext(
            search_service=search_service,
            weather_service=weather_service,
            tracker=tracker or AttemptTracker(),
        )
        self.searcher = SearchCoordinator(self.context)
        self.selector = SelectionCoordinator(self.context)
        self._started = False

    @property
    def view(self) -> ViewState:
        return self.context.view

    @property
    def phase(self) -> Phase:
        return self.context.view.phase

    @property
    def attempts(self) -> AttemptRecord:
        return self.context.tracker.get()

    async def start(self) -> None:
        """Run the one-off startup search for the configured default query."""
        if self._started:
            return
        self._started = True
        logger.info("Starting with default query %r", self.settings.default_query)
        await self.searcher.initiate_search(self.settings.default_query)

    async def initiate_search(self, query: str) -> None:
        await self.searcher.initiate_search(query)

    async def select_location(self, candidate: LocationCandidate) -> None:
        await self.selector.select_location(candidate)

    def find_candidate(self, candidate_id: int) -> LocationCandidate | None:
        """Look up a candidate in the currently listed results by its geocoding id."""
        for candidate in self.context.view.candidates:
            if candidate.id == candidate_id:
                return candidate
        return None
