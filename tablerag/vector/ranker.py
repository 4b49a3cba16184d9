"""
Query ranking against a built TF-IDF index.
"""

from typing import List, Optional

from .index import term_counts, weigh_terms
from .types import Hit, TermVector, TfidfIndex
from ..core.config import get_relevance_floor
from ..core.documents import source_label
from ..util.logging import logger


def vectorize_query(query: str, index: TfidfIndex) -> TermVector:
    """Weight a query with the corpus IDF table; unseen terms are dropped."""
    return weigh_terms(term_counts(query), index.idf)


def cosine_similarity(query_vec: TermVector, doc_vec: TermVector) -> float:
    """Cosine similarity, summing only over the query's terms."""
    dot = 0.0
    for term, wq in query_vec.weights.items():
        wd = doc_vec.weights.get(term)
        if wd:
            dot += wq * wd
    return dot / ((query_vec.norm or 1.0) * (doc_vec.norm or 1.0))


def rank(query: str, index: TfidfIndex, k: int = 3, min_score: Optional[float] = None) -> List[Hit]:
    """
    Rank indexed documents against a query.

    Scores every document, sorts by descending score (ties keep corpus order),
    keeps scores strictly above ``min_score`` and returns at most ``k`` hits.
    An empty or all stop-term query scores 0 everywhere and yields no hits.

    Args:
        query: Free text query
        index: Index built by ``build_index``
        k: Maximum number of hits, at least 1
        min_score: Relevance floor, defaults to the configured floor

    Returns:
        Hits in descending score order
    """
    if k < 1:
        raise ValueError(f"k must be >= 1, got {k}")
    if min_score is None:
        min_score = get_relevance_floor()

    query_vec = vectorize_query(query, index)

    scored = [
        (cosine_similarity(query_vec, entry.vector), position, entry.document)
        for position, entry in enumerate(index.entries)
    ]
    scored.sort(key=lambda x: (-x[0], x[1]))

    hits = [
        Hit(score=score, document=doc, source_label=source_label(doc))
        for score, _, doc in scored
        if score > min_score
    ][:k]

    logger.log_query(query, len(hits), hits[0].score if hits else 0.0)
    return hits
