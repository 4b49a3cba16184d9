"""
TF-IDF index construction.
Builds one weighted term vector per document and a smoothed IDF table, once, from a fixed corpus.
"""

import math
import time
from collections import Counter
from typing import Dict, List, Mapping, Sequence

import numpy as np

from .tokenizer import tokenize
from .types import Document, IndexEntry, TermVector, TfidfIndex
from ..util.logging import logger


def smoothed_idf(total_docs: int, doc_freq: int) -> float:
    """ln((N + 1) / (df + 1)) + 1, positive for any 0 <= df <= N."""
    return math.log((total_docs + 1) / (doc_freq + 1)) + 1


def term_counts(text: str) -> Counter:
    """Raw term frequencies of a text."""
    return Counter(tokenize(text))


def weigh_terms(tf: Mapping[str, int], idf: Mapping[str, float]) -> TermVector:
    """
    Weight term counts as (1 + ln(tf)) * idf.

    Terms missing from ``idf`` are dropped rather than stored with weight 0.
    The norm is floored at 1 so it is always safe as a divisor.
    """
    weights: Dict[str, float] = {}
    for term, count in tf.items():
        term_idf = idf.get(term)
        if not term_idf:
            continue
        weights[term] = (1 + math.log(count)) * term_idf

    norm = float(np.linalg.norm(np.fromiter(weights.values(), dtype=float, count=len(weights))))
    return TermVector(weights=weights, norm=norm or 1.0)


def build_index(docs: Sequence[Document]) -> TfidfIndex:
    """
    Build a TF-IDF index over a fixed document set.

    Document frequency counts presence, not magnitude. A document with no
    terms gets an empty vector with norm 1 and can never score above 0.

    Args:
        docs: Documents in corpus order

    Returns:
        Read-only index of (vector, document) entries and the IDF table
    """
    start = time.time()

    doc_tfs: List[Counter] = [term_counts(doc.text) for doc in docs]

    df: Counter = Counter()
    for tf in doc_tfs:
        df.update(tf.keys())

    total = len(docs)
    idf = {term: smoothed_idf(total, count) for term, count in df.items()}

    entries = [
        IndexEntry(vector=weigh_terms(tf, idf), document=doc)
        for tf, doc in zip(doc_tfs, docs)
    ]

    index = TfidfIndex(entries=tuple(entries), idf=idf)
    logger.log_index_build(index.document_count, index.term_count, start, time.time())
    return index
