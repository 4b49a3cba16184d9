"""
TF-IDF index construction tests.
"""

import math

import pytest
from tablerag.vector.index import build_index, smoothed_idf, weigh_terms
from tablerag.vector.types import Document, GenericMeta, TermVector


def make_doc(doc_id, text):
    return Document(id=doc_id, text=text, meta=GenericMeta(kind="note"))


@pytest.fixture
def corpus():
    return [
        make_doc("a", "coffee shop downtown"),
        make_doc("b", "coffee roaster coffee beans"),
        make_doc("c", "tea house"),
    ]


def test_idf_formula(corpus):
    """Test idf = ln((N + 1) / (df + 1)) + 1."""
    index = build_index(corpus)

    assert index.idf["coffee"] == pytest.approx(math.log(4 / 3) + 1)
    assert index.idf["tea"] == pytest.approx(math.log(4 / 2) + 1)


def test_idf_positive_when_term_in_every_document():
    index = build_index([make_doc("a", "open late"), make_doc("b", "open early")])

    assert index.idf["open"] == pytest.approx(1.0)
    assert smoothed_idf(5, 5) == pytest.approx(1.0)


def test_idf_monotonic_in_document_frequency(corpus):
    """Test a term in more documents never has a higher idf."""
    index = build_index(corpus)

    assert index.idf["coffee"] <= index.idf["tea"]
    assert index.idf["coffee"] <= index.idf["downtown"]


def test_document_weights_use_log_dampened_tf(corpus):
    index = build_index(corpus)
    vec = index.entries[1].vector

    assert vec.weights["coffee"] == pytest.approx((1 + math.log(2)) * index.idf["coffee"])
    assert vec.weights["beans"] == pytest.approx(index.idf["beans"])


def test_document_norm_is_euclidean(corpus):
    index = build_index(corpus)
    vec = index.entries[0].vector

    expected = math.sqrt(sum(w * w for w in vec.weights.values()))
    assert vec.norm == pytest.approx(expected)


def test_every_vector_term_is_in_idf(corpus):
    index = build_index(corpus)

    for entry in index.entries:
        assert set(entry.vector.weights) <= set(index.idf)
        assert all(w > 0 for w in entry.vector.weights.values())


def test_empty_document_has_unit_norm():
    """Test a document with no terms gets an empty vector and norm 1."""
    index = build_index([make_doc("empty", "the a is"), make_doc("b", "coffee")])
    vec = index.entries[0].vector

    assert len(vec) == 0
    assert vec.norm == 1.0


def test_entries_keep_corpus_order(corpus):
    index = build_index(corpus)

    assert [d.id for d in index.documents] == ["a", "b", "c"]
    assert index.document_count == 3
    assert index.term_count == len(index.idf)


def test_empty_corpus_builds_empty_index():
    index = build_index([])

    assert index.document_count == 0
    assert index.term_count == 0


def test_index_is_read_only(corpus):
    index = build_index(corpus)

    with pytest.raises(TypeError):
        index.idf["new"] = 1.0
    with pytest.raises(TypeError):
        index.entries[0].vector.weights["new"] = 1.0


def test_weigh_terms_drops_unknown_terms():
    vec = weigh_terms({"coffee": 1, "unknown": 3}, {"coffee": 2.0})

    assert dict(vec.weights) == {"coffee": 2.0}
    assert vec.norm == pytest.approx(2.0)


def test_weigh_terms_floors_zero_norm():
    vec = weigh_terms({}, {"coffee": 2.0})

    assert isinstance(vec, TermVector)
    assert vec.norm == 1.0
