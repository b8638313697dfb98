# docsearch/application/tokenizer.py

from typing import List

from docsearch.domain.models import Query


def tokenize(raw: str) -> List[str]:
    """
    Split a raw query into literal terms on runs of whitespace.
    Never raises: blank input yields no terms.
    """
    return raw.split()


def parse_query(raw: str) -> Query:
    return Query(raw=raw, terms=tuple(tokenize(raw)))
