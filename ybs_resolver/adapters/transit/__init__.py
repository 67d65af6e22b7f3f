"""Transit adapters - Implementations of transit-related ports.

Available implementations:
- JsonTransitRepository: Loads stops and routes from JSON files
- BreadthFirstPathSolver: Transfer-limited breadth-first itinerary search
"""

from .bfs_solver import BreadthFirstPathSolver
from .json_repository import JsonTransitRepository

__all__ = ["JsonTransitRepository", "BreadthFirstPathSolver"]
