"""
Business profile tests.
"""

from tablerag.core.profile import (
    MAPS_SEARCH_URL,
    format_address,
    format_tel,
    format_website,
    primary_profile,
)


def test_primary_profile_uses_first_record():
    records = [
        {
            "name": "Harbor Street Dental",
            "address": "120 Harbor St",
            "city": "Springfield",
            "state": "IL",
            "zip": "62701",
            "phone": "(217) 555-0142",
            "hours": "Mon-Fri 8am-6pm",
            "website": "https://harborstreetdental.example.com/",
            "image_url": "images/front.jpg",
        },
        {"name": "Second Location"},
    ]

    profile = primary_profile(records)

    assert profile.name == "Harbor Street Dental"
    assert profile.address_line == "120 Harbor St, Springfield, IL 62701"
    assert profile.tel == "2175550142"
    assert profile.hours == "Mon-Fri 8am-6pm"
    assert profile.website_display == "harborstreetdental.example.com"
    assert profile.maps_url == MAPS_SEARCH_URL + "120%20Harbor%20St%2C%20Springfield%2C%20IL%2062701"
    assert profile.to_dict()["image_url"] == "images/front.jpg"


def test_primary_profile_empty_table():
    assert primary_profile([]) is None


def test_format_address_skips_missing_parts():
    assert format_address({"city": "Springfield", "state": "IL"}) == "Springfield, IL"
    assert format_address({"address": "  1  Main   St ", "zip": "62701"}) == "1 Main St, 62701"
    assert format_address({}) == ""


def test_format_tel_keeps_digits_and_plus():
    assert format_tel("+1 (555) 010-0199") == "+15550100199"
    assert format_tel("") == ""


def test_format_website():
    assert format_website("http://joes.example.com/") == "joes.example.com"
    assert format_website("joes.example.com/menu") == "joes.example.com/menu"
