# main.py

import asyncio

from docsearch.application.search_session import SearchSession
from docsearch.config import settings
from docsearch.domain.state import Error, Results
from docsearch.infrastructure.http_backend import HttpSearchBackend
from docsearch.interface.cli import (
    console,
    display_welcome_banner,
    prompt_for_query,
    display_results,
    prompt_for_selection,
    display_document,
    display_error,
    ask_continue,
)


BACKEND_URL = settings.backend_url
REQUEST_TIMEOUT = settings.timeout


async def main() -> None:
    display_welcome_banner()

    # ── 1. Initialize infrastructure ─────────────────────────────────────────
    backend = HttpSearchBackend(url=BACKEND_URL, timeout=REQUEST_TIMEOUT)
    session = SearchSession(backend)

    # ── 2. Interactive search loop ────────────────────────────────────────────
    while True:
        query = prompt_for_query()

        with console.status("[bold cyan]Searching...[/bold cyan]"):
            state = await session.submit(query)

        if isinstance(state, Error):
            display_error(state.message)
        elif isinstance(state, Results):
            _browse_results(session, state)

        if not ask_continue():
            break


def _browse_results(session: SearchSession, state: Results) -> None:
    """Let the user open documents from the result list until they skip."""
    while True:
        display_results(state.documents)
        index = prompt_for_selection(len(state.documents))
        if index is None:
            break

        document = session.select(state.documents[index])
        display_document(document, session.highlighted())
        session.clear_selection()


if __name__ == "__main__":
    asyncio.run(main())
