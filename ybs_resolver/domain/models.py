"""Immutable domain models for the YBS resolver.

All models are frozen dataclasses with slots. Stops and routes are
read-only snapshots of the transit data; path steps, search results
and extracted queries are created and discarded per query.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional


@dataclass(frozen=True, slots=True)
class Stop:
    """A named bus stop with its location.

    Routes refer to stops by ``name_mm``, not by ``id``.
    """

    id: int
    lat: float
    lng: float
    name_mm: str
    name_en: str = ""
    road_mm: str = ""
    road_en: str = ""
    township_mm: str = ""
    township_en: str = ""

    def __post_init__(self) -> None:
        """Validate coordinate ranges."""
        if not -90 <= self.lat <= 90:
            raise ValueError(f"Latitude must be between -90 and 90, got {self.lat}")
        if not -180 <= self.lng <= 180:
            raise ValueError(
                f"Longitude must be between -180 and 180, got {self.lng}"
            )


@dataclass(frozen=True, slots=True)
class Route:
    """A bus line and the ordered names of the stops it serves.

    The order is kept for display only; search treats a route as
    traversable between any two of its stops.

    Attributes:
        id: Route identifier (e.g., '36')
        color: Display color
        stops: Ordered stop names (``Stop.name_mm``)
        operator: Optional operator label
    """

    id: str
    color: str
    stops: tuple[str, ...]
    operator: Optional[str] = None

    def serves(self, stop_name: str) -> bool:
        return stop_name in self.stops

    @property
    def first_stop(self) -> Optional[str]:
        return self.stops[0] if self.stops else None

    @property
    def last_stop(self) -> Optional[str]:
        return self.stops[-1] if self.stops else None


@dataclass(frozen=True, slots=True)
class PathStep:
    """One ride on ``route`` from ``from_stop`` to ``to_stop``."""

    route: Route
    from_stop: str
    to_stop: str


@dataclass(frozen=True, slots=True)
class SearchResult:
    """An itinerary: the ordered rides from origin to destination."""

    steps: tuple[PathStep, ...]

    @property
    def transfer_count(self) -> int:
        """Number of route changes along the itinerary."""
        return len(self.steps) - 1

    @property
    def is_direct(self) -> bool:
        return self.transfer_count == 0

    @property
    def route_ids(self) -> tuple[str, ...]:
        return tuple(step.route.id for step in self.steps)


@dataclass(frozen=True, slots=True)
class ExtractedQuery:
    """Origin and destination recognized in a free-text utterance.

    Each slot is either None or exactly one vocabulary entry.
    """

    start: Optional[str] = None
    end: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return self.start is None and self.end is None

    @property
    def is_complete(self) -> bool:
        return self.start is not None and self.end is not None


@dataclass(frozen=True, slots=True)
class TransitSnapshot:
    """All stops and routes, as loaded once from the data layer."""

    stops: tuple[Stop, ...] = field(default_factory=tuple)
    routes: tuple[Route, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class NearbyStop:
    """A stop together with its distance from a reference point."""

    stop: Stop
    distance_km: float


class DialogueState(Enum):
    """Which endpoints the assistant currently knows."""

    NEED_BOTH = auto()
    HAVE_START_ONLY = auto()
    HAVE_END_ONLY = auto()
    HAVE_BOTH = auto()

    @classmethod
    def from_slots(cls, start: Optional[str], end: Optional[str]) -> DialogueState:
        if start is not None and end is not None:
            return cls.HAVE_BOTH
        if start is not None:
            return cls.HAVE_START_ONLY
        if end is not None:
            return cls.HAVE_END_ONLY
        return cls.NEED_BOTH


@dataclass(frozen=True, slots=True)
class AssistantReply:
    """Answer produced by the assistant for one user message.

    Attributes:
        message: Text shown to the user
        state: Dialogue state after this turn
        query: Endpoints recognized in this turn's message
        results: Itineraries found, if a search was run
    """

    message: str
    state: DialogueState
    query: ExtractedQuery = field(default_factory=ExtractedQuery)
    results: tuple[SearchResult, ...] = field(default_factory=tuple)

    @property
    def has_results(self) -> bool:
        return len(self.results) > 0
