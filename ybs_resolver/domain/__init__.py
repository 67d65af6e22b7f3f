"""Domain layer - Core business models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    DataUnavailableError,
    InvalidQueryError,
    YBSResolverError,
)
from .models import (
    AssistantReply,
    DialogueState,
    ExtractedQuery,
    NearbyStop,
    PathStep,
    Route,
    SearchResult,
    Stop,
    TransitSnapshot,
)

__all__ = [
    # Models
    "Stop",
    "Route",
    "PathStep",
    "SearchResult",
    "ExtractedQuery",
    "TransitSnapshot",
    "NearbyStop",
    "DialogueState",
    "AssistantReply",
    # Errors
    "YBSResolverError",
    "DataUnavailableError",
    "InvalidQueryError",
    "ConfigurationError",
]
