"""
Record to document derivation for the business and FAQ tables.
"""

from dataclasses import fields
from typing import Dict, Iterable, List, Optional, Set

from .table_parser import Record
from ..vector.types import BusinessMeta, Document, FaqMeta

BUSINESS_TEXT_FIELDS = [
    "name", "category", "summary", "offerings", "keywords",
    "address", "city", "state", "zip",
]
# Indexed as "<label> <value>" so questions naming the fact reach the record
BUSINESS_LABELLED_FIELDS = ["hours", "phone"]
FAQ_TEXT_FIELDS = ["topic", "content", "tags"]


def _join(values: Iterable[str]) -> str:
    return " ".join(v for v in values if v)


def _meta_kwargs(meta_cls, record: Record) -> Dict[str, str]:
    names = {f.name for f in fields(meta_cls) if f.init}
    return {k: (v or "") for k, v in record.items() if k in names}


def _unique_id(base: str, seen: Set[str]) -> str:
    doc_id = base
    suffix = 2
    while doc_id in seen:
        doc_id = f"{base}_{suffix}"
        suffix += 1
    seen.add(doc_id)
    return doc_id


def business_document(record: Record, seen: Optional[Set[str]] = None) -> Document:
    meta = BusinessMeta(**_meta_kwargs(BusinessMeta, record))
    parts = [getattr(meta, name) for name in BUSINESS_TEXT_FIELDS]
    parts += [f"{name} {getattr(meta, name)}" for name in BUSINESS_LABELLED_FIELDS if getattr(meta, name)]
    base = f"biz_{meta.id or meta.name}"
    doc_id = _unique_id(base, seen) if seen is not None else base
    return Document(id=doc_id, text=_join(parts), meta=meta)


def faq_document(record: Record, seen: Optional[Set[str]] = None) -> Document:
    meta = FaqMeta(**_meta_kwargs(FaqMeta, record))
    base = f"faq_{meta.id or meta.topic}"
    doc_id = _unique_id(base, seen) if seen is not None else base
    return Document(id=doc_id, text=_join(getattr(meta, name) for name in FAQ_TEXT_FIELDS), meta=meta)


def build_documents(business: List[Record], faq: List[Record]) -> List[Document]:
    """Business documents first, then FAQ documents, with ids unique across both."""
    seen: Set[str] = set()
    docs = [business_document(r, seen) for r in business]
    docs += [faq_document(r, seen) for r in faq]
    return docs


def source_label(document: Document) -> str:
    """Human readable label naming the record a document came from."""
    meta = document.meta
    if isinstance(meta, FaqMeta):
        return f"FAQ: {meta.topic or 'entry'}"
    if isinstance(meta, BusinessMeta):
        return f"Biz: {meta.name or 'entry'}"
    return f"Doc: {document.id}"
