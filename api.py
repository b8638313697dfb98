from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from typing import List, Union
import uvicorn

from docsearch.application.highlighter import segment
from docsearch.application.search_session import SearchSession
from docsearch.application.tokenizer import tokenize
from docsearch.config import settings
from docsearch.domain.errors import (
    BackendError,
    EmptyQuery,
    NoResults,
    SearchError,
    TransportError,
)
from docsearch.domain.interfaces import SearchBackendPort
from docsearch.domain.state import Error, Results
from docsearch.infrastructure.http_backend import HttpSearchBackend

# ── Configuration ────────────────────────────────────────────────────────────
BACKEND_URL = settings.backend_url
REQUEST_TIMEOUT = settings.timeout

ERROR_STATUS = {
    EmptyQuery: 400,
    NoResults: 404,
    BackendError: 502,
    TransportError: 504,
}

# ── API Models ───────────────────────────────────────────────────────────────
class HighlightRequest(BaseModel):
    text: str
    query: str

class SegmentSchema(BaseModel):
    text: str
    matched: bool
    start: int
    end: int

class HighlightResponse(BaseModel):
    terms: List[str]
    segments: List[SegmentSchema]

class SearchRequest(BaseModel):
    query: str

class DocumentSchema(BaseModel):
    doc_id: Union[int, str]
    filename: str
    score: float
    text: str

class SearchResponse(BaseModel):
    query: str
    results: List[DocumentSchema]

# ── App Initialization ───────────────────────────────────────────────────────
app = FastAPI(
    title="Document Search API",
    description="Query-term highlighting over results from a remote search service.",
    version="1.0.0"
)

# ── CORS Middleware ──────────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173", "http://localhost:8080", "http://127.0.0.1:8080"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Shared backend client (global scope for singleton behavior)
search_backend = HttpSearchBackend(url=BACKEND_URL, timeout=REQUEST_TIMEOUT)


def get_search_backend() -> SearchBackendPort:
    return search_backend

# ── Endpoints ────────────────────────────────────────────────────────────────
@app.get("/")
def read_root():
    return {
        "message": "Document Search API is running.",
        "backend_url": BACKEND_URL,
    }

@app.post("/highlight", response_model=HighlightResponse)
def highlight(request: HighlightRequest):
    """Segment a document text into matched / plain spans for a raw query."""
    terms = tokenize(request.query)
    segments = [
        SegmentSchema(text=span.text, matched=span.matched, start=span.start, end=span.end)
        for span in segment(request.text, terms)
    ]
    return HighlightResponse(terms=terms, segments=segments)

@app.post("/search", response_model=SearchResponse)
async def search(
    request: SearchRequest,
    backend: SearchBackendPort = Depends(get_search_backend),
):
    # One session per request, so there is never a competing submission.
    session = SearchSession(backend)
    state = await session.submit(request.query)

    if isinstance(state, Error):
        status_code = _status_for(state.error)
        print(f"[API] Search for '{request.query}' failed ({status_code}): {state.message}")
        raise HTTPException(status_code=status_code, detail=state.message)

    if not isinstance(state, Results):
        raise HTTPException(status_code=500, detail="Search did not complete.")

    return SearchResponse(
        query=request.query,
        results=[
            DocumentSchema(
                doc_id=document.doc_id,
                filename=document.filename,
                score=document.score,
                text=document.text,
            )
            for document in state.documents
        ],
    )

def _status_for(error: SearchError) -> int:
    for error_type, status_code in ERROR_STATUS.items():
        if isinstance(error, error_type):
            return status_code
    return 500

if __name__ == "__main__":
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
