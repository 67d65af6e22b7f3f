"""Origin/destination extraction from free-text travel questions.

Burmese is written without spaces between words, so stop names are
found by plain substring containment rather than by tokenizing. Longer
names take precedence: "မြေနီကုန်း" is matched before "ကုန်း", and a
shorter name inside an already matched one is ignored.

Roles are then assigned from position and a few marker words:
"ကနေ" / "မှ" follow an origin, "ကို" / "သို့" / "သွားချင်တာ" follow
a destination.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Sequence

from ..domain.models import ExtractedQuery

logger = logging.getLogger(__name__)

ORIGIN_MARKERS = ("ကနေ", "မှ")
DESTINATION_MARKERS = ("ကို", "သို့", "သွားချင်တာ")


@dataclass(frozen=True)
class StopMention:
    """A vocabulary entry found in the text at ``index``."""

    name: str
    index: int

    @property
    def end(self) -> int:
        return self.index + len(self.name)

    def overlaps(self, other: "StopMention") -> bool:
        return self.index < other.end and other.index < self.end


def find_stop_mentions(text: str, vocabulary: Iterable[str]) -> List[StopMention]:
    """Find non-overlapping stop names in ``text``, longest match first.

    Each name is looked up once, at its first occurrence. Names are
    tried in descending length (ties keep vocabulary order) and a match
    overlapping an already accepted one is dropped.

    Returns
    -------
    list[StopMention]
        Accepted mentions ordered left to right.
    """
    names = sorted((name for name in vocabulary if name), key=len, reverse=True)

    found: List[StopMention] = []
    for name in names:
        index = text.find(name)
        if index < 0:
            continue
        mention = StopMention(name=name, index=index)
        if any(mention.overlaps(accepted) for accepted in found):
            continue
        found.append(mention)

    found.sort(key=lambda mention: mention.index)
    return found


def _contains_any(text: str, markers: Sequence[str]) -> bool:
    return any(marker in text for marker in markers)


def extract_endpoints(
    text: str,
    vocabulary: Iterable[str],
    origin_markers: Sequence[str] = ORIGIN_MARKERS,
    destination_markers: Sequence[str] = DESTINATION_MARKERS,
) -> ExtractedQuery:
    """Recognize the origin and destination stops mentioned in ``text``.

    Parameters
    ----------
    text:
        The raw user utterance.
    vocabulary:
        Every recognized stop name.
    origin_markers, destination_markers:
        Keywords that follow an origin or a destination stop name.

    Returns
    -------
    ExtractedQuery
        - no stop found: both slots unset;
        - one stop: ``end`` if a destination marker follows it,
          otherwise ``start``;
        - two or more: the first two by position, as ``start`` then
          ``end``.
    """
    normalized = text.strip()
    mentions = find_stop_mentions(normalized, vocabulary)

    if not mentions:
        return ExtractedQuery()

    if len(mentions) == 1:
        mention = mentions[0]
        text_after = normalized[mention.end :]
        if _contains_any(text_after, destination_markers):
            return ExtractedQuery(end=mention.name)
        return ExtractedQuery(start=mention.name)

    first, second = mentions[0], mentions[1]
    between = normalized[first.end : second.index]
    has_origin_marker = _contains_any(between, origin_markers)
    logger.debug(
        "Two stops mentioned",
        extra={
            "first": first.name,
            "second": second.name,
            "origin_marker": has_origin_marker,
        },
    )
    # Both outcomes read the stops in spoken order.
    if has_origin_marker:
        return ExtractedQuery(start=first.name, end=second.name)
    return ExtractedQuery(start=first.name, end=second.name)
