"""Tests for the transit index and the transfer-limited search."""

import random

import pytest

from ybs_resolver.domain.errors import InvalidQueryError
from ybs_resolver.domain.models import PathStep, Route, Stop
from ybs_resolver.graph.index import TransitIndex
from ybs_resolver.graph.search import search_paths

ROUTE_1 = Route(id="1", color="#e53935", stops=("X", "Y"))
ROUTE_2 = Route(id="2", color="#1e88e5", stops=("Y", "Z"))


def _random_network(seed: int, n_stops: int = 12, n_routes: int = 8) -> list[Route]:
    rng = random.Random(seed)
    names = [f"S{i}" for i in range(n_stops)]
    return [
        Route(id=f"R{i}", color="#000", stops=tuple(rng.sample(names, rng.randint(2, 5))))
        for i in range(n_routes)
    ]


def test_search_with_one_transfer():
    results = search_paths(TransitIndex([ROUTE_1, ROUTE_2]), "X", "Z")

    assert len(results) == 1
    assert results[0].steps == (
        PathStep(ROUTE_1, "X", "Y"),
        PathStep(ROUTE_2, "Y", "Z"),
    )
    assert results[0].transfer_count == 1


def test_search_direct_route():
    results = search_paths(TransitIndex([ROUTE_1, ROUTE_2]), "X", "Y")

    assert len(results) == 1
    assert results[0].steps == (PathStep(ROUTE_1, "X", "Y"),)
    assert results[0].transfer_count == 0
    assert results[0].is_direct


def test_search_unreachable_stop_returns_empty_list():
    index = TransitIndex([ROUTE_1, ROUTE_2])

    assert search_paths(index, "X", "W") == []
    assert search_paths(index, "W", "X") == []


def test_search_ignores_route_direction():
    reversed_route = Route(id="9", color="#000", stops=("Z", "Y", "X"))

    results = search_paths(TransitIndex([reversed_route]), "X", "Z")

    assert [r.steps for r in results] == [(PathStep(reversed_route, "X", "Z"),)]


def test_search_same_stop_is_rejected():
    with pytest.raises(InvalidQueryError) as excinfo:
        search_paths(TransitIndex([ROUTE_1]), "X", "X")

    assert excinfo.value.start == "X"
    assert excinfo.value.end == "X"


@pytest.mark.parametrize(
    "max_transfers,max_results",
    [(-1, 5), (2, 0)],
)
def test_search_invalid_caps_are_rejected(max_transfers, max_results):
    with pytest.raises(InvalidQueryError):
        search_paths(
            TransitIndex([ROUTE_1]), "X", "Y", max_transfers, max_results
        )


def test_search_stops_at_max_results():
    routes = [Route(id=f"r{i}", color="#000", stops=("S", "T")) for i in range(10)]

    results = search_paths(TransitIndex(routes), "S", "T", max_results=5)

    assert [r.route_ids for r in results] == [(f"r{i}",) for i in range(5)]


def test_search_respects_max_transfers():
    chain = [
        Route(id="AB", color="#000", stops=("A", "B")),
        Route(id="BC", color="#000", stops=("B", "C")),
        Route(id="CD", color="#000", stops=("C", "D")),
        Route(id="DE", color="#000", stops=("D", "E")),
    ]
    index = TransitIndex(chain)

    assert search_paths(index, "A", "E", max_transfers=2) == []

    results = search_paths(index, "A", "E", max_transfers=3)
    assert len(results) == 1
    assert results[0].route_ids == ("AB", "BC", "CD", "DE")
    assert results[0].transfer_count == 3


def test_search_shares_visited_stops_between_branches():
    first = Route(id="1", color="#000", stops=("A", "M"))
    second = Route(id="2", color="#000", stops=("M", "D"))
    parallel = Route(id="3", color="#000", stops=("A", "M"))

    results = search_paths(TransitIndex([first, second, parallel]), "A", "D")

    # M was reached through route 1 first, so route 3 never expands to it.
    assert [r.route_ids for r in results] == [("1", "2")]


def test_search_orders_by_transfer_count():
    routes = [
        Route(id="AB", color="#000", stops=("A", "B")),
        Route(id="BC", color="#000", stops=("B", "C")),
        Route(id="AC", color="#000", stops=("A", "C")),
    ]

    results = search_paths(TransitIndex(routes), "A", "C")

    assert [r.route_ids for r in results] == [("AC",), ("AB", "BC")]


@pytest.mark.parametrize("seed", range(20))
def test_search_result_properties(seed):
    routes = _random_network(seed)
    index = TransitIndex(routes)
    max_transfers, max_results = 2, 5

    for start in ("S0", "S1", "S2"):
        for end in ("S9", "S10", "S11"):
            results = search_paths(index, start, end, max_transfers, max_results)

            assert len(results) <= max_results
            counts = [r.transfer_count for r in results]
            assert counts == sorted(counts)
            for result in results:
                steps = result.steps
                assert result.transfer_count == len(steps) - 1 >= 0
                assert len(steps) <= max_transfers + 1
                assert len(set(result.route_ids)) == len(steps)
                assert steps[0].from_stop == start
                assert steps[-1].to_stop == end
                for step in steps:
                    assert step.route.serves(step.from_stop)
                    assert step.route.serves(step.to_stop)
                    assert step.from_stop != step.to_stop
                for before, after in zip(steps, steps[1:]):
                    assert before.to_stop == after.from_stop


@pytest.mark.parametrize("seed", range(5))
def test_index_matches_full_scan(seed):
    routes = _random_network(seed)
    index = TransitIndex(routes)

    for name in [f"S{i}" for i in range(14)]:
        expected = tuple(route for route in routes if name in route.stops)
        assert index.routes_through(name) == expected


def _stop(stop_id, name_mm, name_en, township_mm):
    return Stop(
        id=stop_id,
        lat=16.8,
        lng=96.1,
        name_mm=name_mm,
        name_en=name_en,
        township_mm=township_mm,
    )


STOPS = [
    _stop(1, "ဆူးလေ", "Sule", "ကျောက်တံတား"),
    _stop(2, "လှည်းတန်း", "Hledan", "ကမာရွတ်"),
    _stop(3, "ရန်ကင်း", "Yankin", "ရန်ကင်း"),
]
ROUTES = [
    Route(id="36", color="#000", stops=("ဆူးလေ", "လှည်းတန်း")),
    Route(id="61", color="#000", stops=("လှည်းတန်း", "ရန်ကင်း", "ထောက်ကြန့်")),
]


def test_index_lookups():
    index = TransitIndex(ROUTES, STOPS)

    assert index.get_route("61") is ROUTES[1]
    assert index.get_route("99") is None
    assert index.get_stop("ဆူးလေ") == STOPS[0]
    assert index.get_stop("Sule") is None
    assert index.routes_through("လှည်းတန်း") == tuple(ROUTES)
    assert index.routes_through("nowhere") == ()


def test_index_vocabulary_includes_route_only_names():
    index = TransitIndex(ROUTES, STOPS)

    assert index.vocabulary() == ["ဆူးလေ", "လှည်းတန်း", "ရန်ကင်း", "ထောက်ကြန့်"]
    assert index.aliases() == {
        "Sule": "ဆူးလေ",
        "Hledan": "လှည်းတန်း",
        "Yankin": "ရန်ကင်း",
    }


def test_index_filter_routes():
    index = TransitIndex(ROUTES, STOPS)

    assert index.filter_routes("") == ROUTES
    assert index.filter_routes("36") == [ROUTES[0]]
    # Matches the township of the first stop of route 36.
    assert index.filter_routes("ကျောက်တံတား") == [ROUTES[0]]
    # Matches the last stop of route 61, which has no stop record.
    assert index.filter_routes("ထောက်ကြန့်") == [ROUTES[1]]
    assert index.filter_routes("zzz") == []


def test_index_search_stops():
    index = TransitIndex(ROUTES, STOPS)

    assert index.search_stops("") == []
    assert index.search_stops("hledan") == [STOPS[1]]
    assert index.search_stops("ဆူး") == [STOPS[0]]
    assert index.search_stops("ကမာရွတ်") == [STOPS[1]]


def test_index_suggest_names():
    index = TransitIndex(ROUTES, STOPS)

    assert index.suggest_names("ရန်") == ["ရန်ကင်း"]
    assert index.suggest_names("", limit=2) == ["ဆူးလေ", "လှည်းတန်း"]
