"""
Retrieval service over the business and FAQ tables.
Callers construct a service, which owns one read-only index; rebuilding means constructing a new one.
"""

from typing import List, Optional

from .compose import Answer, compose_answer
from .config import get_default_top_k, get_relevance_floor
from .documents import build_documents
from .profile import BusinessProfile, primary_profile
from .sources import PathLike, load_tables
from .table_parser import EmptyTableError, Record, parse_table
from ..vector.index import build_index
from ..vector.ranker import rank
from ..vector.types import Hit, TfidfIndex
from ..util.logging import logger


class EmptyCorpusError(ValueError):
    """Raised when neither table yields a single record to index."""
    pass


def parse_or_empty(text: str, source: str) -> List[Record]:
    """Parse a table, treating a table with no rows as holding no records."""
    try:
        records = parse_table(text)
    except EmptyTableError:
        logger.log_table_parse(source, 0, status="empty")
        return []

    logger.log_table_parse(source, len(records))
    return records


class RetrievalService:
    """
    Answers free text questions from a TF-IDF index over two tables.

    The index is built once in the constructor path and never mutated, so one
    service can serve concurrent queries without locking.
    """

    def __init__(
        self,
        index: TfidfIndex,
        business_records: Optional[List[Record]] = None,
        relevance_floor: Optional[float] = None,
        default_k: Optional[int] = None,
    ):
        self._index = index
        self._business_records = list(business_records or [])
        self.relevance_floor = relevance_floor if relevance_floor is not None else get_relevance_floor()
        self.default_k = default_k if default_k is not None else get_default_top_k()

    @classmethod
    def from_tables(
        cls,
        business_text: str,
        faq_text: str,
        *,
        relevance_floor: Optional[float] = None,
        default_k: Optional[int] = None,
    ) -> "RetrievalService":
        """
        Build a service from raw business and FAQ table text.

        Raises:
            EmptyCorpusError: If both tables are empty after parsing
        """
        business = parse_or_empty(business_text, "business")
        faq = parse_or_empty(faq_text, "faq")

        docs = build_documents(business, faq)
        if not docs:
            raise EmptyCorpusError("no records found in the business or FAQ tables")

        return cls(
            build_index(docs),
            business_records=business,
            relevance_floor=relevance_floor,
            default_k=default_k,
        )

    @classmethod
    def from_files(
        cls,
        business_path: PathLike = None,
        faq_path: PathLike = None,
        **kwargs,
    ) -> "RetrievalService":
        """Read both tables from disk and build a service from them."""
        business_text, faq_text = load_tables(business_path, faq_path)
        return cls.from_tables(business_text, faq_text, **kwargs)

    @property
    def index(self) -> TfidfIndex:
        return self._index

    def search(self, text: str, k: Optional[int] = None) -> List[Hit]:
        """Ranked hits above the relevance floor, at most ``k``."""
        return rank(text, self._index, k=self.default_k if k is None else k, min_score=self.relevance_floor)

    def query(self, text: str, k: Optional[int] = None) -> Answer:
        """Answer text plus source labels for a free text question."""
        return compose_answer(text, self.search(text, k))

    def profile(self) -> Optional[BusinessProfile]:
        """Contact profile of the first business record, if any."""
        return primary_profile(self._business_records)
