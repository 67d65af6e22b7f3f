"""Assistant session - Multi-turn origin/destination dialogue.

The session remembers the endpoints recognized so far and asks for the
missing one. Its state is one of:

    NEED_BOTH ──one stop──> HAVE_START_ONLY / HAVE_END_ONLY
        │                          │
        └──two stops──> HAVE_BOTH <┘ (missing stop given)

Reaching HAVE_BOTH runs the search, answers, and returns to NEED_BOTH.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..domain.errors import InvalidQueryError
from ..domain.models import AssistantReply, DialogueState, ExtractedQuery
from .transit_service import TransitService

GREETING = (
    "မင်္ဂလာပါ။ YBS Assistant မှ ကြိုဆိုပါတယ်။ ဘယ်ကို သွားချင်ပါသလဲ? "
    'စာရိုက်ပြီး မေးနိုင်ပါတယ်။ ဥပမာ- "မြေနီကုန်းကနေ လှည်းတန်းကို ဘယ်လိုသွားရမလဲ"'
)
STOP_NOT_FOUND = (
    "တောင်းပန်ပါတယ်၊ သင်ပြောတဲ့ မှတ်တိုင်အမည်ကို ရှာမတွေ့ပါဘူး။ "
    "မှတ်တိုင်အမည်လေး ပြန်စစ်ပေးပါဦး။"
)
ASK_DESTINATION = "{start} ကနေ ဘယ်ကို သွားချင်တာလဲခင်ဗျာ?"
ASK_ORIGIN = "{end} ကို ဘယ်မှတ်တိုင်ကနေ လာမှာလဲခင်ဗျာ?"
ROUTES_FOUND = "{start} မှ {end} သို့ စီးရမည့် လမ်းကြောင်းများကို ရှာတွေ့ပါပြီ။"
NO_ROUTE = (
    "{start} မှ {end} သို့ တိုက်ရိုက် သို့မဟုတ် တစ်ဆင့်ပြောင်း "
    "လမ်းကြောင်း ရှာမတွေ့ပါဘူး။"
)
SAME_STOP = (
    "{start} သည် စတင်မည့်မှတ်တိုင်နှင့် ဆင်းမည့်မှတ်တိုင် တူညီနေပါသည်။ "
    "မတူညီသော မှတ်တိုင်နှစ်ခု ပြောပေးပါ။"
)


@dataclass
class AssistantSession:
    """Conversation with one user about one trip at a time.

    Attributes:
        service: Transit service used for extraction and search
    """

    service: TransitService

    start: Optional[str] = field(default=None, init=False)
    end: Optional[str] = field(default=None, init=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def state(self) -> DialogueState:
        return DialogueState.from_slots(self.start, self.end)

    def greet(self) -> AssistantReply:
        """Opening message of a conversation."""
        return AssistantReply(
            message=GREETING, state=self.state, query=ExtractedQuery()
        )

    def reset(self) -> None:
        """Forget both endpoints."""
        self.start = None
        self.end = None

    def handle(self, text: str) -> AssistantReply:
        """Process one user message and produce the assistant's answer.

        Args:
            text: The user message.

        Returns:
            AssistantReply with the reply text, the new state and any
            itineraries found.
        """
        query = self.service.extract_endpoints(text)
        self._logger.info(
            "Message handled",
            extra={
                "previous_state": self.state.name,
                "start": query.start,
                "end": query.end,
            },
        )

        if query.is_empty:
            return AssistantReply(message=STOP_NOT_FOUND, state=self.state, query=query)

        self._merge(query)
        state = self.state

        if state == DialogueState.HAVE_START_ONLY:
            return AssistantReply(
                message=ASK_DESTINATION.format(start=self.start),
                state=state,
                query=query,
            )
        if state == DialogueState.HAVE_END_ONLY:
            return AssistantReply(
                message=ASK_ORIGIN.format(end=self.end),
                state=state,
                query=query,
            )
        return self._answer(query)

    def _merge(self, query: ExtractedQuery) -> None:
        if query.is_complete:
            self.start, self.end = query.start, query.end
            return

        mentioned = query.start or query.end
        state = self.state
        if state == DialogueState.HAVE_START_ONLY:
            self.end = mentioned
        elif state == DialogueState.HAVE_END_ONLY:
            self.start = mentioned
        else:
            self.start, self.end = query.start, query.end

    def _answer(self, query: ExtractedQuery) -> AssistantReply:
        start, end = self.start, self.end
        assert start is not None and end is not None
        self.reset()

        try:
            results = self.service.search_paths(start, end)
        except InvalidQueryError as e:
            self._logger.info("Query rejected", extra={"reason": e.message})
            return AssistantReply(
                message=SAME_STOP.format(start=start),
                state=self.state,
                query=query,
            )

        template = ROUTES_FOUND if results else NO_ROUTE
        return AssistantReply(
            message=template.format(start=start, end=end),
            state=self.state,
            query=query,
            results=tuple(results),
        )
