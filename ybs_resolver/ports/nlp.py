"""NLP ports - Abstractions for endpoint extraction.

This protocol defines the contract for recognizing origin and
destination stops in a user utterance, so the dialogue logic does not
depend on one particular matching strategy.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import ExtractedQuery


class EndpointExtractorPort(Protocol):
    """Port for origin/destination extraction from text.

    Implementation: adapters/nlp/rule_based.py
    Wraps: nlp/extract_endpoints.py (extract_endpoints)
    """

    def extract(self, text: str, vocabulary: Sequence[str]) -> ExtractedQuery:
        """Extract origin and destination stop names from text.

        Args:
            text: The user utterance.
            vocabulary: Every recognized stop name.

        Returns:
            ExtractedQuery with zero, one or two slots filled.
        """
        ...
