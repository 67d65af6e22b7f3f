"""Top-level package for the YBS resolver project.

This package finds bus itineraries between two stops of the Yangon Bus
Service network and recognizes those stops in free-form Burmese or
English text.

The core operations are available at package level:
- search_paths: transfer-limited itinerary search
- extract_endpoints: origin/destination recognition in text
- distance_km: haversine distance between two coordinates
"""

from .geo import distance_km
from .graph.search import search_paths
from .nlp.extract_endpoints import extract_endpoints

__all__ = ["search_paths", "extract_endpoints", "distance_km"]
