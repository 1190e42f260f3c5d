# ABOUTME: Search and selection coordinators driving the two-stage lookup workflow.
# ABOUTME: Each validates input, counts the attempt, calls its service, and writes the outcome into the view state.

import logging

from weather_console.context import ConsoleContext
from weather_console.errors import NotFoundError, QueryValidationError
from weather_console.models import MIN_QUERY_LENGTH, LocationCandidate

logger = logging.getLogger(__name__)

SEARCH_FAILED = "search failed"
WEATHER_FETCH_FAILED = "weather fetch failed"
CHOOSE_LOCATION = "choose a location"
DONE = "done"


class SearchCoordinator:
    """Turns a raw query into a list of location candidates, or a reported error."""

    def __init__(self, context: ConsoleContext):
        self.context = context

    async def initiate_search(self, query: str) -> None:
        """Search for candidates matching `query` and record the outcome in the view state.

        Queries shorter than two characters after trimming never reach the service and
        leave everything but the error untouched.
        A service failure leaves the candidate list as it was. No error escapes.
        """
        view = self.context.view
        q = query.strip()
        if len(q) < MIN_QUERY_LENGTH:
            view.error = QueryValidationError.user_message
            return

        view.error = ""
        view.status = ""
        view.weather = None
        view.selected = None

        try:
            view.loading = True
            attempt = self.context.tracker.next_attempt()
            view.status = f"searching, attempt {attempt.count} (at {attempt.last_timestamp})"
            logger.info("Searching locations for %r (attempt %d)", q, attempt.count)

            results = await self.context.search_service.search(q)

            view.candidates = list(results)
            if results:
                view.status = CHOOSE_LOCATION
                view.error = ""
            else:
                logger.info("No locations found for %r", q)
                view.status = ""
                view.error = NotFoundError.user_message
        except Exception:
            logger.exception("Location search failed for %r", q)
            view.error = SEARCH_FAILED
        finally:
            view.loading = False


class SelectionCoordinator:
    """Fetches and stores current weather for the candidate the user picked."""

    def __init__(self, context: ConsoleContext):
        self.context = context

    async def select_location(self, candidate: LocationCandidate) -> None:
        view = self.context.view
        view.error = ""
        view.status = ""
        view.weather = None
        view.selected = candidate
        # The list is hidden as soon as a choice is made, even if the fetch fails.
        view.candidates = []

        try:
            view.loading = True
            attempt = self.context.tracker.next_attempt()
            view.status = f"fetching weather, attempt {attempt.count} (at {attempt.last_timestamp})"
            logger.info("Fetching weather for %s (attempt %d)", candidate.label, attempt.count)

            view.weather = await self.context.weather_service.get_current_weather(
                candidate.latitude, candidate.longitude
            )
            view.status = DONE
        except Exception:
            logger.exception("Weather fetch failed for %s", candidate.label)
            view.error = WEATHER_FETCH_FAILED
        finally:
            view.loading = False
