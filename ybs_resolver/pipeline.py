"""High-level pipeline for single-shot travel questions.

The pipeline is organized in several stages:

1. Data loading (stops and routes, awaited once).
2. Endpoint extraction from the user's sentence.
3. Itinerary search between the extracted stops.
4. Formatting of the itineraries as plain text.

Multi-turn conversations go through services.AssistantSession instead.
"""

import asyncio
from typing import Optional, Sequence

from .container import get_container
from .domain.errors import InvalidQueryError
from .domain.models import SearchResult
from .monitoring import configure_logging
from .services import TransitService

DIRECT_LABEL = "တိုက်ရိုက်"
TRANSFER_LABEL = "{count} ဆင့်ပြောင်း"


def format_result(result: SearchResult) -> str:
    """Render one itinerary: a header line, then one line per ride."""
    if result.is_direct:
        header = DIRECT_LABEL
    else:
        header = TRANSFER_LABEL.format(count=result.transfer_count)
    lines = [header]
    for step in result.steps:
        lines.append(f"  YBS {step.route.id}: {step.from_stop} -> {step.to_stop}")
    return "\n".join(lines)


def format_results(results: Sequence[SearchResult]) -> str:
    return "\n\n".join(
        f"{position}. {format_result(result)}"
        for position, result in enumerate(results, start=1)
    )


def solve_query(sentence: str, service: TransitService) -> str:
    """Answer a travel question in one shot and return a message.

    This helper is designed to be reused from other front-ends
    (CLI, chat UI, tests, etc.).
    """
    query = service.extract_endpoints(sentence)

    if query.is_empty:
        return "Error: No known stop in input"
    if query.start is None or query.end is None:
        missing = "destination" if query.end is None else "origin"
        return f"Error: Missing {missing} stop"

    try:
        results = service.search_paths(query.start, query.end)
    except InvalidQueryError as e:
        return f"Error: {e.message}"

    if not results:
        return f"No route found between {query.start} and {query.end}."
    return format_results(results)


async def load_default_service() -> TransitService:
    return await get_container().load_transit_service()


def run_pipeline(sentence: Optional[str] = None) -> None:
    """Run the end-to-end pipeline on one sentence with the default data."""
    configure_logging()
    sentence = sentence or "မြေနီကုန်းကနေ လှည်းတန်းကို ဘယ်လိုသွားရမလဲ"
    print("Sentence:", sentence)

    service = asyncio.run(load_default_service())
    print(solve_query(sentence, service))


if __name__ == "__main__":
    run_pipeline()
