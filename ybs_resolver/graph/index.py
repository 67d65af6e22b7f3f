"""In-memory index over the transit network.

The index answers "which routes pass through stop S" with a single
dictionary look-up instead of a scan over every route. It also carries
the route and stop look-ups used by browse and search pages.

An index is built for one immutable collection of routes and stops.
When the collection changes, build a new index.
"""

from typing import Dict, Iterable, List, Optional, Tuple

from ..domain.models import Route, Stop


class TransitIndex:
    """Stop-to-routes mapping plus route/stop look-ups.

    Parameters
    ----------
    routes:
        Every route of the network, in the order they were loaded.
    stops:
        Every known stop. Optional: the search engine only needs routes.
    """

    def __init__(self, routes: Iterable[Route], stops: Iterable[Stop] = ()) -> None:
        self._routes: Tuple[Route, ...] = tuple(routes)
        self._stops: Tuple[Stop, ...] = tuple(stops)

        by_stop: Dict[str, List[Route]] = {}
        for route in self._routes:
            for name in dict.fromkeys(route.stops):
                by_stop.setdefault(name, []).append(route)
        self._routes_by_stop: Dict[str, Tuple[Route, ...]] = {
            name: tuple(routes) for name, routes in by_stop.items()
        }

        self._routes_by_id: Dict[str, Route] = {}
        for route in self._routes:
            self._routes_by_id.setdefault(route.id, route)

        self._stops_by_name: Dict[str, Stop] = {}
        for stop in self._stops:
            self._stops_by_name.setdefault(stop.name_mm, stop)

    @property
    def routes(self) -> Tuple[Route, ...]:
        return self._routes

    @property
    def stops(self) -> Tuple[Stop, ...]:
        return self._stops

    def routes_through(self, stop_name: str) -> Tuple[Route, ...]:
        """Routes whose stop list contains ``stop_name``, in load order."""
        return self._routes_by_stop.get(stop_name, ())

    def get_route(self, route_id: str) -> Optional[Route]:
        return self._routes_by_id.get(route_id)

    def get_stop(self, name: str) -> Optional[Stop]:
        return self._stops_by_name.get(name)

    def vocabulary(self) -> List[str]:
        """All recognized stop names, first-seen order, no duplicates.

        Stop records come first, then names that only appear inside
        route definitions.
        """
        names: Dict[str, None] = {}
        for stop in self._stops:
            if stop.name_mm:
                names.setdefault(stop.name_mm, None)
        for route in self._routes:
            for name in route.stops:
                if name:
                    names.setdefault(name, None)
        return list(names)

    def aliases(self) -> Dict[str, str]:
        """Map English stop names to the Burmese names routes use."""
        aliases: Dict[str, str] = {}
        for stop in self._stops:
            if stop.name_en and stop.name_en != stop.name_mm:
                aliases.setdefault(stop.name_en, stop.name_mm)
        return aliases

    def filter_routes(self, term: str) -> List[Route]:
        """Routes matching ``term`` by id, terminal stop or terminal township."""
        term = term.lower()
        matches: List[Route] = []
        for route in self._routes:
            fields = [route.id]
            for name in (route.first_stop, route.last_stop):
                if name is None:
                    continue
                fields.append(name)
                stop = self._stops_by_name.get(name)
                if stop is not None:
                    fields.append(stop.township_mm)
            if any(term in value.lower() for value in fields):
                matches.append(route)
        return matches

    def search_stops(self, term: str) -> List[Stop]:
        """Stops whose Burmese name, English name or township contains ``term``."""
        if not term:
            return []
        lowered = term.lower()
        return [
            stop
            for stop in self._stops
            if term in stop.name_mm
            or lowered in stop.name_en.lower()
            or term in stop.township_mm
        ]

    def suggest_names(self, term: str, limit: int = 50) -> List[str]:
        """Vocabulary names containing ``term``, case-insensitively."""
        lowered = term.lower()
        suggestions = [name for name in self.vocabulary() if lowered in name.lower()]
        return suggestions[:limit]

