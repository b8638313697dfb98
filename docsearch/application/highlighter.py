# docsearch/application/highlighter.py

import re
from functools import lru_cache
from typing import List, Optional, Sequence, Tuple

from docsearch.application.tokenizer import tokenize
from docsearch.domain.models import Segmentation, Span


def _unique_terms(terms: Sequence[str]) -> Tuple[str, ...]:
    """
    Drop empty and duplicate terms, longest first.
    Alternation is leftmost-first, so ordering by length makes the
    longer term win when two terms match at the same position.
    """
    seen: set[str] = set()
    unique: List[str] = []
    for term in terms:
        if not term or term in seen:
            continue
        seen.add(term)
        unique.append(term)
    return tuple(sorted(unique, key=len, reverse=True))


@lru_cache(maxsize=256)
def _compile(terms: Tuple[str, ...]) -> re.Pattern:
    alternation = "|".join(re.escape(term) for term in terms)
    # Lookarounds instead of \b: a term may begin or end with punctuation.
    return re.compile(rf"(?<!\w)(?:{alternation})(?!\w)", re.IGNORECASE)


def build_matcher(terms: Sequence[str]) -> Optional[re.Pattern]:
    """
    Build one combined, case-insensitive, whole-word matcher for all terms.

    Every term is escaped, so user text is only ever matched literally.
    Returns None when there is nothing to match.
    """
    unique = _unique_terms(terms)
    if not unique:
        return None
    return _compile(unique)


def segment(text: str, terms: Sequence[str]) -> Segmentation:
    """
    Partition `text` into matched / plain spans.

    Concatenating the returned spans always reproduces `text` exactly:
    spans are contiguous, never overlap, and no span is zero-width
    (except the single plain span returned for empty text with no terms).
    """
    matcher = build_matcher(terms)
    if matcher is None:
        return [Span(text=text, matched=False, start=0)]

    folded_terms = {term.casefold() for term in terms if term}
    spans: Segmentation = []
    plain_start = 0

    for match in matcher.finditer(text):
        start, end = match.span()
        if start == end:
            continue
        if match.group(0).casefold() not in folded_terms:
            # re.IGNORECASE folds more loosely than str.casefold.
            continue
        if plain_start < start:
            spans.append(Span(text=text[plain_start:start], matched=False, start=plain_start))
        spans.append(Span(text=text[start:end], matched=True, start=start))
        plain_start = end

    if plain_start < len(text):
        spans.append(Span(text=text[plain_start:], matched=False, start=plain_start))

    return spans


def highlight(text: str, raw_query: str) -> Segmentation:
    """Tokenize a raw query and segment `text` against its terms."""
    return segment(text, tokenize(raw_query))
