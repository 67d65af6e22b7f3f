"""Transit service - Queries over one loaded network snapshot.

The snapshot is loaded once, asynchronously; every query afterwards is
synchronous and only reads immutable data, so independent queries may
run concurrently. To observe data changes, load a new service.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..config import AppConfig, get_config
from ..domain.models import (
    ExtractedQuery,
    NearbyStop,
    Route,
    SearchResult,
    TransitSnapshot,
)
from ..geo import nearest_stop, stops_within
from ..graph.index import TransitIndex
from ..ports.nlp import EndpointExtractorPort
from ..ports.transit import PathSearchPort, TransitRepositoryPort


@dataclass
class TransitService:
    """Search and extraction over a single network snapshot.

    Build it with ``await TransitService.load(...)``.

    Attributes:
        snapshot: The stops and routes this service answers about
        solver: Computes itineraries
        extractor: Recognizes stop names in text
        config: Application configuration
    """

    snapshot: TransitSnapshot
    solver: PathSearchPort
    extractor: EndpointExtractorPort
    config: AppConfig = field(default_factory=get_config)

    index: TransitIndex = field(init=False, repr=False)
    _vocabulary: Tuple[str, ...] = field(init=False, repr=False)
    _aliases: Dict[str, str] = field(init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self.index = TransitIndex(self.snapshot.routes, self.snapshot.stops)

        names = self.index.vocabulary()
        self._aliases = {}
        if self.config.nlp.match_english_names:
            known = set(names)
            self._aliases = {
                alias: name
                for alias, name in self.index.aliases().items()
                if alias not in known
            }
        self._vocabulary = tuple(names) + tuple(self._aliases)

    @classmethod
    async def load(
        cls,
        repository: TransitRepositoryPort,
        solver: PathSearchPort,
        extractor: EndpointExtractorPort,
        config: Optional[AppConfig] = None,
    ) -> TransitService:
        """Load the snapshot and build the service.

        Raises:
            DataUnavailableError: If the repository cannot load the data.
        """
        snapshot = await repository.load_snapshot()
        return cls(
            snapshot=snapshot,
            solver=solver,
            extractor=extractor,
            config=config or get_config(),
        )

    @property
    def vocabulary(self) -> Tuple[str, ...]:
        """Every stop name the extractor recognizes."""
        return self._vocabulary

    def canonical_name(self, name: str) -> str:
        """Return the name routes use for ``name`` (English names map to Burmese)."""
        return self._aliases.get(name, name)

    def search_paths(
        self,
        start: str,
        end: str,
        max_transfers: Optional[int] = None,
        max_results: Optional[int] = None,
    ) -> List[SearchResult]:
        """Itineraries from ``start`` to ``end``, fewest transfers first.

        Raises:
            InvalidQueryError: If both names denote the same stop.
        """
        return self.solver.search(
            self.index,
            self.canonical_name(start),
            self.canonical_name(end),
            max_transfers=max_transfers,
            max_results=max_results,
        )

    def extract_endpoints(self, text: str) -> ExtractedQuery:
        """Recognize origin and destination stops in ``text``."""
        query = self.extractor.extract(text, self._vocabulary)
        return ExtractedQuery(
            start=self.canonical_name(query.start) if query.start else None,
            end=self.canonical_name(query.end) if query.end else None,
        )

    def routes_through(self, stop_name: str) -> Tuple[Route, ...]:
        return self.index.routes_through(self.canonical_name(stop_name))

    def nearest_stop(self, lat: float, lon: float) -> Optional[NearbyStop]:
        return nearest_stop(self.snapshot.stops, lat, lon)

    def nearby_stops(
        self, lat: float, lon: float, radius_km: Optional[float] = None
    ) -> List[NearbyStop]:
        """Stops within ``radius_km`` (default from config), closest first."""
        if radius_km is None:
            radius_km = self.config.search.nearby_radius_km
        return stops_within(self.snapshot.stops, lat, lon, radius_km)
