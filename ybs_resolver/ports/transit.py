"""Transit ports - Abstractions for data loading and itinerary search.

These protocols define the contracts for obtaining the stop/route
snapshot and for computing itineraries over it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Protocol

if TYPE_CHECKING:
    from ..domain.models import SearchResult, TransitSnapshot
    from ..graph.index import TransitIndex


class TransitRepositoryPort(Protocol):
    """Port for loading the stop/route snapshot.

    Implementation: adapters/transit/json_repository.py

    Loading is the only suspension point of the system: callers await
    it once, then run any number of synchronous searches.
    """

    async def load_snapshot(self) -> TransitSnapshot:
        """Load every stop and route.

        Returns:
            The immutable snapshot of the network.

        Raises:
            DataUnavailableError: If the data cannot be read or parsed.
        """
        ...


class PathSearchPort(Protocol):
    """Port for itinerary computation.

    Implementation: adapters/transit/bfs_solver.py
    Wraps: graph/search.py (search_paths)
    """

    def search(
        self,
        index: TransitIndex,
        start: str,
        end: str,
        max_transfers: Optional[int] = None,
        max_results: Optional[int] = None,
    ) -> List[SearchResult]:
        """Find itineraries between two stop names.

        Args:
            index: Index over the network routes.
            start: Origin stop name.
            end: Destination stop name.
            max_transfers: Transfer cap, or the configured default.
            max_results: Result cap, or the configured default.

        Returns:
            Itineraries sorted by transfer count (possibly empty).
        """
        ...
