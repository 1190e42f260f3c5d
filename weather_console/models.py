# ABOUTME: Pydantic BaseModels for geocoding candidates, current weather, and console view state.
# ABOUTME: Defines the structured types shared by the Open-Meteo adapter, coordinators, and web layer.

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

MIN_QUERY_LENGTH = 2


class LocationCandidate(BaseModel):
    """One geocoding result for a free-text place query."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    admin1: str | None = None
    country: str | None = None
    latitude: float
    longitude: float

    @property
    def label(self) -> str:
        """Human-readable place label, e.g. "Chennai, Tamil Nadu, India"."""
        parts = [self.name]
        if self.admin1:
            parts.append(self.admin1)
        if self.country:
            parts.append(self.country)
        return ", ".join(parts)


class CurrentConditions(BaseModel):
    """The `current` block of an Open-Meteo forecast response."""

    temperature_2m: float
    apparent_temperature: float
    relative_humidity_2m: float
    wind_speed_10m: float
    weather_code: int
    is_day: int


class WeatherSnapshot(BaseModel):
    """Current-conditions weather for exactly one location and moment."""

    timezone: str
    current: CurrentConditions


class AttemptRecord(BaseModel):
    """Snapshot of the attempt counter."""

    model_config = ConfigDict(frozen=True)

    count: int = 0
    last_timestamp: str | None = None


class Phase(str, Enum):
    IDLE = "idle"
    SEARCHING = "searching"
    LISTING = "listing"
    NO_RESULTS = "no_results"
    FETCHING = "fetching"
    READY = "ready"
    ERRORED = "errored"


class ViewState(BaseModel):
    """Aggregate renderable state written by the search and selection coordinators.

    The phase is derived from the fields; nothing sets it directly.
    """

    status: str = ""
    error: str = ""
    loading: bool = False
    candidates: list[LocationCandidate] = Field(default_factory=list)
    selected: LocationCandidate | None = None
    weather: WeatherSnapshot | None = None

    @property
    def phase(self) -> Phase:
        if self.loading:
            return Phase.FETCHING if self.selected is not None else Phase.SEARCHING
        if self.weather is not None:
            return Phase.READY
        if self.candidates:
            return Phase.LISTING
        if self.error:
            return Phase.ERRORED if self.selected is not None else Phase.NO_RESULTS
        return Phase.IDLE

    def can_search(self, query: str) -> bool:
        """Whether a search for `query` should be offered right now."""
        return len(query.strip()) >= MIN_QUERY_LENGTH and not self.loading
