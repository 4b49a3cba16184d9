"""
Answer composition from ranked hits.
Pure formatting: hits in, answer text and source labels out.
"""

from dataclasses import dataclass, field
from typing import List, Sequence

from .config import get_business_csv_path, get_faq_csv_path
from ..vector.types import BusinessMeta, FaqMeta, Hit

ANSWER_HEADER = "Here's what I found:"
CLOSING_PROMPT = (
    "If you want, tell me what you're trying to do next "
    "(call, directions, booking, pricing)."
)
EXAMPLE_TERMS = ["hours", "address", "parking", "booking", "menu", "pricing"]
STATIC_REPLY = (
    "Ask about hours, location, pricing, or services. "
    "Toggle retrieval to search the business and FAQ tables."
)


@dataclass(frozen=True)
class Answer:
    answer: str
    sources: List[str] = field(default_factory=list)
    hits: List[Hit] = field(default_factory=list)


def fallback_answer(faq_source: str = None, business_source: str = None) -> Answer:
    """Answer used when no hit clears the relevance floor."""
    faq_source = faq_source or get_faq_csv_path()
    business_source = business_source or get_business_csv_path()
    terms = ", ".join(f'"{t}"' for t in EXAMPLE_TERMS)
    text = (
        "I didn't find a strong match in the tables.\n\n"
        f"Try:\n- {terms}\n"
        f"- or add more detail in {faq_source} and {business_source}."
    )
    return Answer(answer=text, sources=[])


def static_reply() -> Answer:
    """Reply used when retrieval is switched off or no index is available."""
    return Answer(answer=STATIC_REPLY, sources=[])


def render_hit(rank: int, hit: Hit) -> str:
    meta = hit.document.meta

    if isinstance(meta, FaqMeta):
        return f"{rank}) FAQ: {meta.topic} — {meta.content}"

    if isinstance(meta, BusinessMeta):
        line = f"{rank}) {meta.name} ({meta.category}) — {meta.summary}"
        if meta.image_url:
            line += f"\n   Image: {meta.image_url}"
        return line

    return f"{rank}) {hit.document.text}"


def compose_answer(query: str, hits: Sequence[Hit]) -> Answer:
    """
    Turn ranked hits into an answer and a parallel list of source labels.

    Args:
        query: The query the hits were ranked for
        hits: Hits in rank order

    Returns:
        Answer whose ``sources`` follow the order of ``hits``
    """
    if not hits:
        return fallback_answer()

    lines = [render_hit(i, hit) for i, hit in enumerate(hits, start=1)]
    text = f"{ANSWER_HEADER}\n\n" + "\n\n".join(lines) + f"\n\n{CLOSING_PROMPT}"

    return Answer(
        answer=text,
        sources=[hit.source_label for hit in hits],
        hits=list(hits),
    )
