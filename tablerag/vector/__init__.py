"""
TF-IDF vector index: tokenization, index construction and cosine ranking.
"""

from .tokenizer import STOP_TERMS, tokenize
from .types import (
    BusinessMeta,
    Document,
    FaqMeta,
    GenericMeta,
    Hit,
    IndexEntry,
    TermVector,
    TfidfIndex,
)
from .index import build_index, smoothed_idf, weigh_terms

__all__ = [
    'STOP_TERMS',
    'tokenize',
    'BusinessMeta',
    'Document',
    'FaqMeta',
    'GenericMeta',
    'Hit',
    'IndexEntry',
    'TermVector',
    'TfidfIndex',
    'build_index',
    'smoothed_idf',
    'weigh_terms',
]
