"""NLP adapters - Implementations of NLP-related ports.

Available implementations:
- RuleBasedEndpointExtractor: Longest-match substring extraction with
  marker-word role assignment
"""

from .rule_based import RuleBasedEndpointExtractor

__all__ = ["RuleBasedEndpointExtractor"]
