"""Transfer-limited breadth-first itinerary search.

The search explores the network layer by layer: first every route
through the origin, then every route reachable with one transfer, and
so on up to ``max_transfers``. Results are returned with the fewest
transfers first.

A single visited-stop set is shared by all branches. Once any partial
itinerary reaches a stop, no other itinerary may pass through it. This
keeps the queue small but means some alternative itineraries through
an already-visited stop are never reported.
"""

from collections import deque
from typing import Deque, List, Set, Tuple

from ..domain.errors import InvalidQueryError
from ..domain.models import PathStep, SearchResult
from .index import TransitIndex

DEFAULT_MAX_TRANSFERS = 2
DEFAULT_MAX_RESULTS = 5

# (current stop, steps taken so far)
PartialPath = Tuple[str, Tuple[PathStep, ...]]


def search_paths(
    index: TransitIndex,
    start: str,
    end: str,
    max_transfers: int = DEFAULT_MAX_TRANSFERS,
    max_results: int = DEFAULT_MAX_RESULTS,
) -> List[SearchResult]:
    """Find up to ``max_results`` itineraries from ``start`` to ``end``.

    Parameters
    ----------
    index:
        Index over the routes of the network.
    start:
        Name of the origin stop.
    end:
        Name of the destination stop.
    max_transfers:
        Maximum number of route changes in one itinerary.
    max_results:
        Search stops as soon as this many itineraries were found.

    Returns
    -------
    list[SearchResult]
        Itineraries sorted by transfer count; ties keep discovery order.
        An empty list when no itinerary exists within the caps.

    Raises
    ------
    InvalidQueryError
        If ``start`` equals ``end`` or a cap is out of range.
    """
    if start == end:
        raise InvalidQueryError(
            f"Origin and destination are the same stop: {start}",
            start=start,
            end=end,
        )
    if max_transfers < 0:
        raise InvalidQueryError(
            f"max_transfers must be >= 0, got {max_transfers}", start=start, end=end
        )
    if max_results < 1:
        raise InvalidQueryError(
            f"max_results must be >= 1, got {max_results}", start=start, end=end
        )

    queue: Deque[PartialPath] = deque([(start, ())])
    visited: Set[str] = {start}
    results: List[SearchResult] = []

    while queue and len(results) < max_results:
        current, steps = queue.popleft()
        if len(steps) > max_transfers + 1:
            continue

        used_routes = {step.route.id for step in steps}
        for route in index.routes_through(current):
            if route.id in used_routes:
                continue

            if route.serves(end):
                results.append(
                    SearchResult(steps=steps + (PathStep(route, current, end),))
                )
                if len(results) >= max_results:
                    break

            if len(steps) < max_transfers:
                for next_stop in route.stops:
                    # Reaching the destination was reported just above.
                    if next_stop == end or next_stop in visited:
                        continue
                    visited.add(next_stop)
                    queue.append(
                        (next_stop, steps + (PathStep(route, current, next_stop),))
                    )

    return sorted(results, key=lambda result: result.transfer_count)
