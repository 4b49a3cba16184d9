"""
HTTP surface for table retrieval.
The service is built from the configured tables at startup and held on app.state.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from .schemas import (
    QueryRequest,
    QueryResponse,
    HitModel,
    ParseRequest,
    ParseResponse,
    HealthResponse,
    ProfileResponse,
    ReindexResponse,
)
from ..core.compose import static_reply
from ..core.config import VERSION, debug_enabled, retrieval_enabled, validate_config
from ..core.search_service import EmptyCorpusError, RetrievalService
from ..core.sources import SourceUnavailableError
from ..core.table_parser import EmptyTableError, parse_table
from ..util.logging import logger


async def load_service() -> Optional[RetrievalService]:
    """Build a service from the configured tables; None when they cannot be used."""
    try:
        return await asyncio.to_thread(RetrievalService.from_files)
    except (SourceUnavailableError, EmptyCorpusError, ValueError) as e:
        logger.warning(f"Retrieval index unavailable: {e}")
        return None


@asynccontextmanager
async def lifespan(app: FastAPI):
    for issue in validate_config():
        logger.warning(f"Config issue: {issue}")
    app.state.service = await load_service()
    yield
    app.state.service = None


# Initialize the FastAPI application
app = FastAPI(
    title="Table Retrieval API",
    version=VERSION,
    description="TF-IDF retrieval over business facts and FAQ tables",
    docs_url="/docs" if debug_enabled() else None,
    redoc_url="/redoc" if debug_enabled() else None,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _service(request: Request) -> Optional[RetrievalService]:
    return getattr(request.app.state, "service", None)


@app.get("/health", response_model=HealthResponse)
def health_endpoint(request: Request):
    """Report whether an index is loaded and how large it is."""
    service = _service(request)
    index = service.index if service else None

    return HealthResponse(
        status="healthy" if service else "degraded",
        version=VERSION,
        index_ready=service is not None,
        document_count=index.document_count if index else 0,
        term_count=index.term_count if index else 0,
        config_issues=validate_config(),
    )


@app.post("/query", response_model=QueryResponse)
def query_endpoint(request: Request, body: QueryRequest):
    """Answer a question from the tables, or with the static reply when retrieval is off."""
    service = _service(request)

    if not (body.use_retrieval and retrieval_enabled() and service):
        reply = static_reply()
        return QueryResponse(answer=reply.answer, sources=reply.sources, retrieval_used=False)

    result = service.query(body.query, k=body.k)
    return QueryResponse(
        answer=result.answer,
        sources=result.sources,
        hits=[
            HitModel(
                doc_id=hit.document.id,
                kind=hit.document.meta.kind,
                score=hit.score,
                source=hit.source_label,
            )
            for hit in result.hits
        ],
        retrieval_used=True,
    )


@app.post("/parse", response_model=ParseResponse)
def parse_endpoint(body: ParseRequest):
    """Parse raw table text into header-keyed records."""
    try:
        records = parse_table(body.text)
    except EmptyTableError as e:
        raise HTTPException(status_code=400, detail=f"Empty table: {e}")

    return ParseResponse(records=records, count=len(records))


@app.get("/profile", response_model=ProfileResponse)
def profile_endpoint(request: Request):
    """Contact profile of the primary business record."""
    service = _service(request)
    if not service:
        raise HTTPException(status_code=503, detail="Retrieval index not loaded")

    profile = service.profile()
    if not profile:
        raise HTTPException(status_code=404, detail="No business record found")

    return ProfileResponse(**profile.to_dict())


@app.post("/admin/reindex", response_model=ReindexResponse)
async def reindex_endpoint(request: Request):
    """Reload the tables and swap in a freshly built service."""
    try:
        service = await asyncio.to_thread(RetrievalService.from_files)
    except (SourceUnavailableError, EmptyCorpusError, ValueError) as e:
        logger.log_operation("index.reindex", "failed", {"error": str(e)})
        raise HTTPException(status_code=503, detail=f"Reindex failed: {e}")

    request.app.state.service = service
    logger.log_operation("index.reindex", "success", {"document_count": service.index.document_count})

    return ReindexResponse(
        success=True,
        document_count=service.index.document_count,
        term_count=service.index.term_count,
    )


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Handle all unhandled exceptions."""
    logging.error(f"Unhandled exception: {exc}")
    content = {"detail": "Internal server error"}
    if debug_enabled():
        content["debug"] = str(exc)
    return JSONResponse(
        status_code=500,
        content=content,
    )
