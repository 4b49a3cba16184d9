"""
Data types for the TF-IDF index.
Documents, term vectors, index entries and ranked hits are immutable once built.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple, Union


@dataclass(frozen=True)
class BusinessMeta:
    """Metadata for a document derived from a business facts row."""

    id: str = ""
    name: str = ""
    category: str = ""
    summary: str = ""
    offerings: str = ""
    keywords: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""
    phone: str = ""
    hours: str = ""
    website: str = ""
    image_url: str = ""
    kind: str = field(default="business", init=False)


@dataclass(frozen=True)
class FaqMeta:
    """Metadata for a document derived from an FAQ row."""

    id: str = ""
    topic: str = ""
    content: str = ""
    tags: str = ""
    kind: str = field(default="faq", init=False)


@dataclass(frozen=True)
class GenericMeta:
    """Metadata for any other source kind; rendered from the document text."""

    kind: str
    fields: Mapping[str, str] = field(default_factory=dict)


DocumentMeta = Union[BusinessMeta, FaqMeta, GenericMeta]


@dataclass(frozen=True)
class Document:
    """A searchable unit: derived text plus the metadata it came from."""

    id: str
    """Unique identifier within one index build"""

    text: str
    """Space-joined text of the selected record fields"""

    meta: DocumentMeta
    """Tagged metadata; ``meta.kind`` identifies the source table"""


@dataclass(frozen=True)
class TermVector:
    """Sparse term weights with a precomputed norm (never 0)."""

    weights: Mapping[str, float]
    norm: float = 1.0

    def __post_init__(self):
        if not isinstance(self.weights, MappingProxyType):
            object.__setattr__(self, "weights", MappingProxyType(dict(self.weights)))

    def __len__(self) -> int:
        return len(self.weights)


@dataclass(frozen=True)
class IndexEntry:
    vector: TermVector
    document: Document


@dataclass(frozen=True)
class TfidfIndex:
    """Document vectors in corpus order plus the corpus-wide IDF table."""

    entries: Tuple[IndexEntry, ...]
    idf: Mapping[str, float]

    def __post_init__(self):
        object.__setattr__(self, "entries", tuple(self.entries))
        if not isinstance(self.idf, MappingProxyType):
            object.__setattr__(self, "idf", MappingProxyType(dict(self.idf)))

    @property
    def document_count(self) -> int:
        return len(self.entries)

    @property
    def term_count(self) -> int:
        return len(self.idf)

    @property
    def documents(self) -> Tuple[Document, ...]:
        return tuple(entry.document for entry in self.entries)


@dataclass(frozen=True)
class Hit:
    """Represents a ranked search result."""

    score: float
    """Cosine similarity of the query and document vectors"""

    document: Document
    """The matching document"""

    source_label: str
    """Human readable label of the record the document came from"""
