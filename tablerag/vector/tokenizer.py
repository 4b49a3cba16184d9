"""
Term extraction for the TF-IDF index.
"""

import re
from typing import Iterator

NON_TERM_RE = re.compile(r"[^a-z0-9\s]")

STOP_TERMS = frozenset([
    "the", "a", "an", "and", "or", "but", "if", "then", "else",
    "when", "what", "how", "why", "to", "of", "in", "on", "for",
    "with", "at", "by", "from", "as", "is", "are", "was", "were",
    "be", "been", "being", "this", "that", "these", "those", "it",
    "its", "we", "you", "your", "our", "us", "do", "does", "did",
    "can",
])


def tokenize(text: str) -> Iterator[str]:
    """Yield lowercase alphanumeric terms longer than one character, skipping stop terms."""
    cleaned = NON_TERM_RE.sub(" ", str(text or "").lower())
    for token in cleaned.split():
        if len(token) > 1 and token not in STOP_TERMS:
            yield token
