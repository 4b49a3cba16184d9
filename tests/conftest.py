"""
Shared fixtures for table retrieval tests.
"""

import pytest

BUSINESS_TABLE = "name,hours,city\nJoe's Cafe,9-5,Springfield\n"
FAQ_TABLE = "topic,content,tags\nparking,Free lot behind building,park\n"


@pytest.fixture
def business_table():
    return BUSINESS_TABLE


@pytest.fixture
def faq_table():
    return FAQ_TABLE


@pytest.fixture
def table_files(tmp_path, monkeypatch):
    """Write both tables to disk and point the configuration at them."""
    business_path = tmp_path / "business.csv"
    faq_path = tmp_path / "faq_kb.csv"
    business_path.write_text(BUSINESS_TABLE, encoding="utf-8")
    faq_path.write_text(FAQ_TABLE, encoding="utf-8")
    monkeypatch.setenv("BUSINESS_CSV_PATH", str(business_path))
    monkeypatch.setenv("FAQ_CSV_PATH", str(faq_path))
    return business_path, faq_path
