# tests/test_http_backend.py

import json

import httpx
import pytest

from docsearch.application.search_session import SearchSession
from docsearch.domain.errors import BackendError, TransportError
from docsearch.domain.models import Document
from docsearch.domain.state import Error
from docsearch.infrastructure.http_backend import HttpSearchBackend


BACKEND_URL = "http://backend.test/search"


async def _search_with(handler, query="machine learning"):
    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(transport=transport) as client:
        backend = HttpSearchBackend(url=BACKEND_URL, client=client)
        return await backend.search(query)


def _json_response(payload, status_code=200):
    return httpx.Response(
        status_code,
        headers={"Content-Type": "application/json"},
        content=json.dumps(payload).encode("utf-8"),
    )


@pytest.mark.anyio
async def test_posts_query_and_parses_results_in_order():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["url"] = str(request.url)
        seen["body"] = json.loads(request.content)
        return _json_response({"results": [
            {"doc_id": 7, "filename": "b.txt", "score": 0.9, "text": "second"},
            {"doc_id": 3, "filename": "a.txt", "score": 0.4, "text": "first"},
        ]})

    documents = await _search_with(handler)

    assert seen == {
        "method": "POST",
        "url": BACKEND_URL,
        "body": {"query": "machine learning"},
    }
    assert documents == [
        Document(7, "b.txt", 0.9, "second"),
        Document(3, "a.txt", 0.4, "first"),
    ]


@pytest.mark.anyio
async def test_empty_results_are_returned_as_empty_list():
    documents = await _search_with(lambda request: _json_response({"results": []}))
    assert documents == []


@pytest.mark.anyio
async def test_error_body_raises_backend_error():
    with pytest.raises(BackendError, match="index offline"):
        await _search_with(lambda request: _json_response({"error": "index offline"}))


@pytest.mark.anyio
async def test_error_body_wins_over_http_status():
    with pytest.raises(BackendError, match="bad query"):
        await _search_with(lambda request: _json_response({"error": "bad query"}, 400))


@pytest.mark.anyio
async def test_http_failure_without_error_body_is_transport_error():
    with pytest.raises(TransportError, match="HTTP 503"):
        await _search_with(lambda request: httpx.Response(503, content=b"<html>down</html>"))


@pytest.mark.anyio
async def test_non_json_body_is_transport_error():
    with pytest.raises(TransportError, match="unreadable"):
        await _search_with(lambda request: httpx.Response(200, content=b"not json"))


@pytest.mark.anyio
async def test_malformed_document_is_transport_error():
    payload = {"results": [{"doc_id": 1, "filename": "a.txt"}]}
    with pytest.raises(TransportError):
        await _search_with(lambda request: _json_response(payload))


@pytest.mark.anyio
async def test_missing_results_is_transport_error():
    with pytest.raises(TransportError, match="no results"):
        await _search_with(lambda request: _json_response({}))


@pytest.mark.anyio
async def test_connection_failure_is_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(TransportError, match="Could not reach"):
        await _search_with(handler)


@pytest.mark.anyio
async def test_invalid_backend_url_is_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return _json_response({"results": []})

    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(transport=transport) as client:
        backend = HttpSearchBackend(url="http://exa mple.com:abc/search", client=client)
        session = SearchSession(backend)
        state = await session.submit("machine")

    assert isinstance(state, Error)
    assert isinstance(state.error, TransportError)
    assert state.message.startswith("Could not reach")
