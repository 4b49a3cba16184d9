"""
Record to document derivation tests.
"""

from tablerag.core.documents import (
    build_documents,
    business_document,
    faq_document,
    source_label,
)
from tablerag.vector.types import BusinessMeta, Document, FaqMeta, GenericMeta


def test_business_text_joins_selected_fields_in_order():
    record = {
        "name": "Joe's Cafe",
        "category": "Cafe",
        "summary": "",
        "city": "Springfield",
        "hours": "9-5",
        "phone": "555-0100",
        "website": "https://joes.example.com",
    }

    doc = business_document(record)

    assert doc.text == "Joe's Cafe Cafe Springfield hours 9-5 phone 555-0100"
    assert isinstance(doc.meta, BusinessMeta)
    assert doc.meta.kind == "business"
    assert doc.meta.website == "https://joes.example.com"


def test_business_meta_ignores_unknown_columns():
    doc = business_document({"name": "Joe's Cafe", "owner": "Joe"})

    assert doc.meta == BusinessMeta(name="Joe's Cafe")


def test_faq_document():
    doc = faq_document({"id": "7", "topic": "parking", "content": "Free lot", "tags": ""})

    assert doc.id == "faq_7"
    assert doc.text == "parking Free lot"
    assert doc.meta == FaqMeta(id="7", topic="parking", content="Free lot")
    assert doc.meta.kind == "faq"


def test_document_ids_fall_back_to_name_and_topic():
    docs = build_documents([{"name": "Joe's Cafe"}], [{"topic": "parking"}])

    assert [d.id for d in docs] == ["biz_Joe's Cafe", "faq_parking"]


def test_document_ids_are_unique_within_build():
    docs = build_documents(
        [{"name": "Joe's Cafe"}, {"name": "Joe's Cafe"}],
        [{"topic": "parking"}, {"topic": "parking"}, {"topic": "parking"}],
    )

    ids = [d.id for d in docs]
    assert ids == ["biz_Joe's Cafe", "biz_Joe's Cafe_2", "faq_parking", "faq_parking_2", "faq_parking_3"]


def test_source_labels():
    assert source_label(business_document({"name": "Joe's Cafe"})) == "Biz: Joe's Cafe"
    assert source_label(business_document({})) == "Biz: entry"
    assert source_label(faq_document({"topic": "parking"})) == "FAQ: parking"
    assert source_label(faq_document({})) == "FAQ: entry"

    other = Document(id="evt_1", text="open mic", meta=GenericMeta(kind="event"))
    assert source_label(other) == "Doc: evt_1"
