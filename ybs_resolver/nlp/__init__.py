"""Natural language processing components for the YBS resolver.

This subpackage groups modules related to understanding free-text
travel questions, such as recognizing the origin and destination stops.
"""

from .extract_endpoints import extract_endpoints, find_stop_mentions

__all__ = ["extract_endpoints", "find_stop_mentions"]
