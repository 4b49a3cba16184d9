"""
Primary business contact profile.
Derives display-ready contact facts from the first business record.
"""

import re
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional
from urllib.parse import quote

from .table_parser import Record

MAPS_SEARCH_URL = "https://www.google.com/maps/search/?api=1&query="


@dataclass(frozen=True)
class BusinessProfile:
    name: str
    address_line: str
    phone: str
    tel: str
    hours: str
    website: str
    website_display: str
    maps_url: str
    image_url: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _collapse(text: str) -> str:
    return re.sub(r"\s+", " ", text).strip()


def format_address(record: Record) -> str:
    """'address, city, state zip' with missing parts left out."""
    region = _collapse(f"{record.get('state', '')} {record.get('zip', '')}")
    parts = [record.get("address", ""), record.get("city", ""), region]
    return ", ".join(_collapse(p) for p in parts if p and p.strip())


def format_tel(phone: str) -> str:
    return re.sub(r"[^\d+]", "", phone or "")


def format_website(website: str) -> str:
    return re.sub(r"/$", "", re.sub(r"^https?://", "", website or ""))


def maps_url(record: Record) -> str:
    target = format_address(record) or _collapse(f"{record.get('city', '')} {record.get('state', '')}")
    return MAPS_SEARCH_URL + quote(target, safe="")


def primary_profile(records: List[Record]) -> Optional[BusinessProfile]:
    """Profile of the first business record, or None for an empty table."""
    if not records:
        return None

    b = records[0]
    return BusinessProfile(
        name=b.get("name", ""),
        address_line=format_address(b),
        phone=b.get("phone", ""),
        tel=format_tel(b.get("phone", "")),
        hours=b.get("hours", ""),
        website=b.get("website", ""),
        website_display=format_website(b.get("website", "")),
        maps_url=maps_url(b),
        image_url=b.get("image_url", ""),
    )
