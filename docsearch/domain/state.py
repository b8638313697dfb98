# docsearch/domain/state.py

from dataclasses import dataclass
from typing import Optional, Union

from .errors import SearchError
from .models import Query, ResultSet


@dataclass(frozen=True)
class Idle:
    """Nothing submitted yet."""


@dataclass(frozen=True)
class Loading:
    query: Query
    generation: int


@dataclass(frozen=True)
class Error:
    message: str
    error: Optional[SearchError] = None


@dataclass(frozen=True)
class Results:
    documents: ResultSet
    query: Query


SessionState = Union[Idle, Loading, Error, Results]
