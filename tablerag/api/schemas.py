"""
Request and response models for the retrieval API.
"""

from pydantic import BaseModel, field_validator
from typing import Optional, List, Dict


class QueryRequest(BaseModel):
    query: str
    k: Optional[int] = None
    use_retrieval: bool = True

    @field_validator('k')
    @classmethod
    def k_must_be_positive(cls, v):
        if v is not None and v < 1:
            raise ValueError('k must be >= 1')
        return v


class HitModel(BaseModel):
    doc_id: str
    kind: str
    score: float
    source: str


class QueryResponse(BaseModel):
    answer: str
    sources: List[str]
    hits: List[HitModel] = []
    retrieval_used: bool


class ParseRequest(BaseModel):
    text: str


class ParseResponse(BaseModel):
    records: List[Dict[str, str]]
    count: int


class HealthResponse(BaseModel):
    status: str
    version: str
    index_ready: bool
    document_count: int
    term_count: int
    config_issues: List[str] = []


class ProfileResponse(BaseModel):
    name: str
    address_line: str
    phone: str
    tel: str
    hours: str
    website: str
    website_display: str
    maps_url: str
    image_url: str


class ReindexResponse(BaseModel):
    success: bool
    document_count: int
    term_count: int
