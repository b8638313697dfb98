# docsearch/infrastructure/http_backend.py

from typing import List, Optional, Union

import httpx
from pydantic import BaseModel, ValidationError

from docsearch.domain.errors import BackendError, TransportError
from docsearch.domain.interfaces import SearchBackendPort
from docsearch.domain.models import Document


# ── Wire models ───────────────────────────────────────────────────────────────

class DocumentPayload(BaseModel):
    doc_id: Union[int, str]
    filename: str
    score: float
    text: str

    def to_domain(self) -> Document:
        return Document(
            doc_id=self.doc_id,
            filename=self.filename,
            score=self.score,
            text=self.text,
        )


class SearchPayload(BaseModel):
    results: Optional[List[DocumentPayload]] = None
    error: Optional[str] = None


# ── Backend ───────────────────────────────────────────────────────────────────

class HttpSearchBackend(SearchBackendPort):
    """
    Talks to the remote search service:

        POST <url>  {"query": "..."}
        →  {"results": [{doc_id, filename, score, text}, ...]}
        or {"error": "..."}

    An explicit `error` in the body is a BackendError. Anything that stops
    us from reading a well-formed answer is a TransportError.
    """

    def __init__(
        self,
        url: str,
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._url = url
        self._timeout = timeout
        self._client = client

    @property
    def url(self) -> str:
        return self._url

    async def search(self, query: str) -> List[Document]:
        owns_client = self._client is None
        client = self._client or httpx.AsyncClient(timeout=self._timeout)
        try:
            response = await client.post(self._url, json={"query": query})
        except (httpx.HTTPError, httpx.InvalidURL) as error:
            print(f"[HttpBackend] Request to {self._url} failed: {error}")
            raise TransportError(f"Could not reach the search service: {error}") from error
        finally:
            if owns_client:
                await client.aclose()

        payload = self._parse(response)

        if payload.error:
            raise BackendError(payload.error)

        if response.status_code >= 400:
            raise TransportError(f"Search service returned HTTP {response.status_code}.")

        if payload.results is None:
            raise TransportError("Search service response has no results.")

        return [item.to_domain() for item in payload.results]

    def _parse(self, response: httpx.Response) -> SearchPayload:
        try:
            return SearchPayload.model_validate_json(response.content)
        except ValidationError as error:
            if response.status_code >= 400:
                raise TransportError(
                    f"Search service returned HTTP {response.status_code}."
                ) from error
            print(f"[HttpBackend] Unreadable response from {self._url}: {error}")
            raise TransportError("Search service returned an unreadable response.") from error
