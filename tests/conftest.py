# tests/conftest.py

from typing import List

import pytest
from fastapi import FastAPI
from pydantic import BaseModel


CORPUS = [
    {
        "doc_id": 1,
        "filename": "ml_intro.txt",
        "text": "Machine Learning is a subset of AI.",
    },
    {
        "doc_id": 2,
        "filename": "cooking.txt",
        "text": "Slow-cooked beans with a pinch of salt.",
    },
    {
        "doc_id": 3,
        "filename": "deep_learning.txt",
        "text": "Deep learning stacks many layers; learning rates matter.",
    },
]


class _SearchRequest(BaseModel):
    query: str


def build_fake_backend(corpus: List[dict]) -> FastAPI:
    """
    Stand-in for the remote search service. Ranks by how many query
    words appear in each document.
    """
    app = FastAPI()

    @app.post("/search")
    def search(request: _SearchRequest):
        words = {word.lower() for word in request.query.split()}
        if not words:
            return {"error": "Query must not be empty."}

        hits = []
        for doc in corpus:
            doc_words = {word.strip(".,;").lower() for word in doc["text"].split()}
            overlap = len(words & doc_words)
            if overlap:
                hits.append({**doc, "score": overlap / len(words)})

        hits.sort(key=lambda hit: hit["score"], reverse=True)
        return {"results": hits}

    return app


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def fake_backend_app() -> FastAPI:
    return build_fake_backend(CORPUS)
