# docsearch/domain/models.py

from dataclasses import dataclass, field
from typing import List, Tuple, Union


DocumentId = Union[int, str]


@dataclass(frozen=True)
class Document:
    """
    A ranked document as returned by the search backend.
    Immutable snapshot.
    """
    doc_id: DocumentId
    filename: str
    score: float
    text: str = field(repr=False)

    def __repr__(self) -> str:
        preview = self.text[:80].replace("\n", " ")
        return (
            f"Document(doc_id={self.doc_id!r}, score={self.score:.4f}, "
            f"filename='{self.filename}', preview='{preview}...')"
        )


ResultSet = Tuple[Document, ...]


@dataclass(frozen=True)
class Query:
    """
    A raw user query and the literal terms split out of it.
    Terms keep their original casing and order.
    """
    raw: str
    terms: Tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.raw.strip()


@dataclass(frozen=True)
class Span:
    """A contiguous run of document text, either matched or plain."""
    text: str
    matched: bool
    start: int = 0

    @property
    def end(self) -> int:
        return self.start + len(self.text)


Segmentation = List[Span]
