"""
Table source tests.
"""

import pytest
from tablerag.core.sources import SourceUnavailableError, load_tables, read_table_text


def test_read_table_text_strips_bom(tmp_path):
    path = tmp_path / "business.csv"
    path.write_bytes("\ufeffname\nJoe".encode("utf-8"))

    assert read_table_text(path) == "name\nJoe"


def test_read_missing_table_raises(tmp_path):
    with pytest.raises(SourceUnavailableError) as exc_info:
        read_table_text(tmp_path / "missing.csv")

    assert isinstance(exc_info.value, OSError)
    assert isinstance(exc_info.value.__cause__, OSError)


def test_read_undecodable_table_raises(tmp_path):
    path = tmp_path / "latin.csv"
    path.write_bytes(b"name\n\xff\xfe\xfa")

    with pytest.raises(SourceUnavailableError):
        read_table_text(path)


def test_load_tables_uses_configured_paths(table_files, business_table, faq_table):
    assert load_tables() == (business_table, faq_table)


def test_load_tables_explicit_paths(tmp_path):
    (tmp_path / "b.csv").write_text("name\nA", encoding="utf-8")
    (tmp_path / "f.csv").write_text("topic\nB", encoding="utf-8")

    assert load_tables(tmp_path / "b.csv", tmp_path / "f.csv") == ("name\nA", "topic\nB")
