# docsearch/domain/interfaces.py

from abc import ABC, abstractmethod
from typing import List

from .models import Document


class SearchBackendPort(ABC):
    """
    Port for the remote search service.

    Implementations return the ranked documents verbatim (possibly empty)
    and raise only BackendError or TransportError.
    """

    @abstractmethod
    async def search(self, query: str) -> List[Document]: ...
