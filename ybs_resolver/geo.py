"""Great-circle distance and nearest-stop look-ups.

These helpers back the "stops near me" features of the surrounding
application. They are not used by the path search itself.
"""

import math
from typing import Iterable, List, Optional

from .domain.models import NearbyStop, Stop

EARTH_RADIUS_KM = 6371


def distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Calculate the distance in km between two GPS coordinates.

    Uses the Haversine formula for accurate distance on Earth's surface.
    """
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lat = math.radians(lat2 - lat1)
    delta_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(delta_lat / 2) ** 2
        + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(delta_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def nearest_stop(stops: Iterable[Stop], lat: float, lon: float) -> Optional[NearbyStop]:
    """Find the stop closest to the given GPS coordinates.

    Parameters
    ----------
    stops : Iterable[Stop]
        Candidate stops.
    lat : float
        Latitude of the location
    lon : float
        Longitude of the location

    Returns
    -------
    Optional[NearbyStop]
        The closest stop and its distance, or None if there are no stops.
        Ties keep the first stop encountered.
    """
    nearest: Optional[Stop] = None
    min_distance = float("inf")

    for stop in stops:
        distance = distance_km(lat, lon, stop.lat, stop.lng)
        if distance < min_distance:
            min_distance = distance
            nearest = stop

    if nearest is None:
        return None
    return NearbyStop(stop=nearest, distance_km=min_distance)


def stops_within(
    stops: Iterable[Stop], lat: float, lon: float, radius_km: float = 1.0
) -> List[NearbyStop]:
    """Return the stops within ``radius_km`` of a point, closest first."""
    found = [
        NearbyStop(stop=stop, distance_km=distance_km(lat, lon, stop.lat, stop.lng))
        for stop in stops
    ]
    found = [item for item in found if item.distance_km <= radius_km]
    found.sort(key=lambda item: item.distance_km)
    return found
