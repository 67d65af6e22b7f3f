"""Breadth-first path search adapter.

This adapter wraps the search in graph/search.py and adds:
- Default caps from configuration
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ...config import SearchConfig, get_config
from ...domain.models import SearchResult
from ...graph.index import TransitIndex
from ...graph.search import search_paths


@dataclass
class BreadthFirstPathSolver:
    """Itinerary solver using transfer-limited breadth-first search.

    This adapter implements PathSearchPort.

    Attributes:
        config: Search configuration (default caps)
    """

    config: SearchConfig = field(default_factory=lambda: get_config().search)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def search(
        self,
        index: TransitIndex,
        start: str,
        end: str,
        max_transfers: Optional[int] = None,
        max_results: Optional[int] = None,
    ) -> List[SearchResult]:
        """Find itineraries between two stops.

        Args:
            index: Index over the network routes.
            start: Origin stop name.
            end: Destination stop name.
            max_transfers: Transfer cap (defaults to config).
            max_results: Result cap (defaults to config).

        Returns:
            Itineraries sorted by transfer count, possibly empty.

        Raises:
            InvalidQueryError: If start equals end or a cap is invalid.
        """
        if max_transfers is None:
            max_transfers = self.config.max_transfers
        if max_results is None:
            max_results = self.config.max_results

        self._logger.debug(
            "Searching itineraries",
            extra={
                "start": start,
                "end": end,
                "max_transfers": max_transfers,
                "max_results": max_results,
            },
        )

        results = search_paths(index, start, end, max_transfers, max_results)

        if results:
            self._logger.info(
                "Itineraries found",
                extra={
                    "start": start,
                    "end": end,
                    "count": len(results),
                    "min_transfers": results[0].transfer_count,
                },
            )
        else:
            self._logger.info(
                "No itinerary found",
                extra={"start": start, "end": end},
            )
        return results
