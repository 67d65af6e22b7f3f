"""Tests for haversine distance and nearest-stop helpers."""

import pytest

from ybs_resolver import distance_km
from ybs_resolver.domain.models import Stop
from ybs_resolver.geo import nearest_stop, stops_within

SULE = Stop(id=1, lat=16.7746, lng=96.1588, name_mm="ဆူးလေ", name_en="Sule")
HLEDAN = Stop(id=4, lat=16.8237, lng=96.1296, name_mm="လှည်းတန်း", name_en="Hledan")
KAMAYUT = Stop(id=5, lat=16.8317, lng=96.1272, name_mm="ကမာရွတ်", name_en="Kamayut")


def test_distance_same_point_is_zero():
    assert distance_km(16.8, 96.1, 16.8, 96.1) == 0.0


def test_distance_one_degree_on_equator():
    assert distance_km(0.0, 0.0, 0.0, 1.0) == pytest.approx(111.195, abs=0.001)


def test_distance_is_symmetric():
    there = distance_km(SULE.lat, SULE.lng, HLEDAN.lat, HLEDAN.lng)
    back = distance_km(HLEDAN.lat, HLEDAN.lng, SULE.lat, SULE.lng)

    assert there == pytest.approx(back)
    assert 5.0 < there < 7.0


def test_nearest_stop():
    nearby = nearest_stop([SULE, HLEDAN, KAMAYUT], 16.8240, 96.1290)

    assert nearby is not None
    assert nearby.stop == HLEDAN
    assert nearby.distance_km < 0.1


def test_nearest_stop_without_stops():
    assert nearest_stop([], 16.8, 96.1) is None


def test_stops_within_radius_sorted_by_distance():
    found = stops_within([KAMAYUT, SULE, HLEDAN], HLEDAN.lat, HLEDAN.lng, radius_km=2.0)

    assert [item.stop for item in found] == [HLEDAN, KAMAYUT]
    assert found[0].distance_km == 0.0


def test_stops_within_small_radius():
    found = stops_within([KAMAYUT, SULE, HLEDAN], HLEDAN.lat, HLEDAN.lng, radius_km=0.5)

    assert [item.stop for item in found] == [HLEDAN]


def test_stop_rejects_invalid_coordinates():
    with pytest.raises(ValueError):
        Stop(id=99, lat=91.0, lng=96.1, name_mm="x")
