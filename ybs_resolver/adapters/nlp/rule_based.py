"""Rule-based endpoint extractor adapter.

This adapter wraps the longest-match extraction logic from
nlp/extract_endpoints.py with the EndpointExtractorPort interface,
using the marker words from configuration.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from ...config import NLPConfig, get_config
from ...domain.models import ExtractedQuery
from ...nlp.extract_endpoints import extract_endpoints


@dataclass
class RuleBasedEndpointExtractor:
    """Longest-match substring extractor with marker-word role rules.

    Attributes:
        config: NLP configuration (origin/destination markers)
    """

    config: NLPConfig = field(default_factory=lambda: get_config().nlp)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def extract(self, text: str, vocabulary: Sequence[str]) -> ExtractedQuery:
        """Extract origin and destination stop names from text.

        Args:
            text: The user utterance.
            vocabulary: Every recognized stop name.

        Returns:
            ExtractedQuery with zero, one or two slots filled.
        """
        result = extract_endpoints(
            text,
            vocabulary,
            origin_markers=self.config.origin_markers,
            destination_markers=self.config.destination_markers,
        )

        self._logger.debug(
            "Endpoint extraction (rule-based)",
            extra={
                "start": result.start,
                "end": result.end,
                "complete": result.is_complete,
            },
        )

        return result
