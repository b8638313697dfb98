# docsearch/application/search_session.py

from typing import Iterable, Optional, Union

from docsearch.application.highlighter import segment
from docsearch.application.tokenizer import parse_query
from docsearch.domain.errors import EmptyQuery, NoResults, SearchError
from docsearch.domain.interfaces import SearchBackendPort
from docsearch.domain.models import Document, DocumentId, Query, Segmentation
from docsearch.domain.state import Error, Idle, Loading, Results, SessionState


class SearchSession:
    """
    Observable state of one user's search screen.

    Primary state is exactly one of Idle / Loading / Error / Results.
    The selected document (the open detail view) is tracked separately
    and can be cleared without touching the primary state.

    Every submission bumps a generation counter. A backend answer is
    applied only if it belongs to the latest generation, so responses
    arriving out of order never overwrite a newer submission's state.
    """

    def __init__(self, backend: SearchBackendPort):
        self._backend = backend
        self._state: SessionState = Idle()
        self._selected: Optional[Document] = None
        self._generation = 0

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def selected_document(self) -> Optional[Document]:
        return self._selected

    @property
    def generation(self) -> int:
        return self._generation

    # ─── Submission lifecycle ─────────────────────────────────────────────────

    def begin(self, raw_query: str) -> Optional[int]:
        """
        Start a submission. Returns its generation token, or None if the
        query was blank (state becomes Error, backend is not contacted).
        """
        query = parse_query(raw_query)
        self._selected = None

        if query.is_empty:
            # Blank input still supersedes any in-flight request.
            self._generation += 1
            self._fail(EmptyQuery())
            return None

        self._generation += 1
        self._state = Loading(query=query, generation=self._generation)
        print(f"[SearchSession] #{self._generation} searching for '{query.raw}'")
        return self._generation

    def apply_results(self, generation: int, documents: Iterable[Document]) -> bool:
        if not self._is_current(generation):
            return False

        documents = tuple(documents)
        if not documents:
            self._fail(NoResults())
            return True

        self._state = Results(documents=documents, query=self._state.query)
        print(f"[SearchSession] #{generation} received {len(documents)} documents")
        return True

    def apply_error(self, generation: int, error: SearchError) -> bool:
        if not self._is_current(generation):
            return False
        self._fail(error)
        return True

    async def submit(self, raw_query: str) -> SessionState:
        """Run one full submission against the backend and return the new state."""
        generation = self.begin(raw_query)
        if generation is None:
            return self._state

        try:
            documents = await self._backend.search(raw_query)
        except SearchError as error:
            self.apply_error(generation, error)
        else:
            self.apply_results(generation, documents)

        return self._state

    # ─── Detail view ──────────────────────────────────────────────────────────

    def select(self, document: Union[Document, DocumentId]) -> Document:
        """Open the detail view on a document of the current result set."""
        if not isinstance(self._state, Results):
            raise RuntimeError("No results to select from. Submit a query first.")

        for candidate in self._state.documents:
            if candidate == document or candidate.doc_id == document:
                self._selected = candidate
                return candidate

        raise ValueError(f"Document {document!r} is not part of the current results.")

    def clear_selection(self) -> None:
        self._selected = None

    def highlighted(self, document: Optional[Document] = None) -> Segmentation:
        """
        Segment a document's text against the terms of the query that
        produced the current results. Defaults to the selected document.
        """
        document = document or self._selected
        if document is None:
            raise RuntimeError("No document selected.")
        return segment(document.text, self.terms)

    @property
    def terms(self) -> tuple:
        query = self._current_query()
        return query.terms if query is not None else ()

    # ─── Internals ────────────────────────────────────────────────────────────

    def _is_current(self, generation: int) -> bool:
        if generation != self._generation or not isinstance(self._state, Loading):
            print(f"[SearchSession] Discarding stale response #{generation} "
                  f"(current: #{self._generation})")
            return False
        return True

    def _fail(self, error: SearchError) -> None:
        self._state = Error(message=error.message, error=error)
        print(f"[SearchSession] #{self._generation} failed: {error.message}")

    def _current_query(self) -> Optional[Query]:
        if isinstance(self._state, (Loading, Results)):
            return self._state.query
        return None
