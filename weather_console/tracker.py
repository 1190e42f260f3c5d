# ABOUTME: Attempt counter shared by the search and selection coordinators.
# ABOUTME: Counts every outbound action and stamps it with the local wall-clock time.

from collections.abc import Callable
from datetime import datetime

from weather_console.models import AttemptRecord

TIMESTAMP_FORMAT = "%H:%M:%S"


class AttemptTracker:
    """Counts API-triggering actions regardless of their outcome.

    The count only ever grows and is never reset.
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self._clock = clock
        self._count = 0
        self._last_timestamp: str | None = None

    def next_attempt(self) -> AttemptRecord:
        """Record a new attempt and return the updated record."""
        self._count += 1
        self._last_timestamp = self._clock().strftime(TIMESTAMP_FORMAT)
        return self.get()

    def get(self) -> AttemptRecord:
        return AttemptRecord(count=self._count, last_timestamp=self._last_timestamp)
