# docsearch/domain/errors.py

EMPTY_QUERY_MESSAGE = "empty query"
NO_RESULTS_MESSAGE = "no matching documents"


class SearchError(Exception):
    """
    Base class for every failure a single submission can end in.
    `message` is shown to the user verbatim.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EmptyQuery(SearchError):
    """Query was blank. Rejected locally, backend never contacted."""

    def __init__(self, message: str = EMPTY_QUERY_MESSAGE):
        super().__init__(message)


class NoResults(SearchError):
    """Backend answered successfully with zero documents."""

    def __init__(self, message: str = NO_RESULTS_MESSAGE):
        super().__init__(message)


class BackendError(SearchError):
    """Backend explicitly reported a failure in its response body."""


class TransportError(SearchError):
    """Backend could not be reached, or its answer could not be read."""
