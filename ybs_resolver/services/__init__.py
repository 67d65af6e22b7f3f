"""Services layer - Application orchestration.

This module contains the application services that orchestrate
the flow of data through adapters to fulfill use cases.

Available services:
- TransitService: Search and extraction over one loaded network snapshot
- AssistantSession: Multi-turn dialogue asking for missing endpoints
"""

from .assistant import AssistantSession
from .transit_service import TransitService

__all__ = ["TransitService", "AssistantSession"]
