"""
tablerag - in-memory TF-IDF retrieval over business facts and FAQ tables.
No generation step: answers are assembled from the best matching records.
"""

from .core import (
    Answer,
    EmptyCorpusError,
    EmptyTableError,
    RetrievalService,
    SourceUnavailableError,
    parse_table,
)

__all__ = [
    'Answer',
    'EmptyCorpusError',
    'EmptyTableError',
    'RetrievalService',
    'SourceUnavailableError',
    'parse_table',
]
