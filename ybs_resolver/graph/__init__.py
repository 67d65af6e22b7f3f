"""Transit network index and itinerary search.

This subpackage builds an in-memory index over the bus routes and runs
the transfer-limited breadth-first search on top of it.
"""

from .index import TransitIndex
from .search import search_paths

__all__ = ["TransitIndex", "search_paths"]
