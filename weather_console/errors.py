# ABOUTME: Exception types for the weather console lookup workflow.
# ABOUTME: Each carries the user-facing message the coordinators write into the view state.


class WeatherConsoleError(Exception):
    """Base class for errors surfaced by the weather console."""

    user_message = "something went wrong"


class QueryValidationError(WeatherConsoleError):
    """Query is shorter than the minimum length after trimming."""

    user_message = "empty/too-short query"


class NotFoundError(WeatherConsoleError):
    """Search succeeded but produced no candidates."""

    user_message = "no matching locations found"


class NetworkError(WeatherConsoleError):
    """A location search or weather call failed in transport or returned an unusable payload."""

    user_message = "network request failed"
