"""
Table retrieval core: parsing, document derivation, answer composition and the retrieval service.
"""

from .table_parser import EmptyTableError, Record, parse_table
from .compose import Answer, compose_answer, static_reply
from .sources import SourceUnavailableError, load_tables, read_table_text
from .profile import BusinessProfile, primary_profile
from .search_service import EmptyCorpusError, RetrievalService

__all__ = [
    'EmptyTableError',
    'Record',
    'parse_table',
    'Answer',
    'compose_answer',
    'static_reply',
    'SourceUnavailableError',
    'load_tables',
    'read_table_text',
    'BusinessProfile',
    'primary_profile',
    'EmptyCorpusError',
    'RetrievalService',
]
