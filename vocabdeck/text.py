"""
Text helpers for search queries, tag input and term suggestions.
"""

import re
from typing import Iterable, List, Tuple
from difflib import SequenceMatcher

_WHITESPACE = re.compile(r'\s+')


def normalize_query(query: str) -> str:
    """Trim, collapse inner whitespace and lower-case a search query."""
    if not query:
        return ''
    return _WHITESPACE.sub(' ', query).strip().lower()


def clean_field(value) -> str:
    """Trim a card field; None and non-strings become their trimmed text."""
    if value is None:
        return ''
    return str(value).strip()


def parse_tags(tags_csv: str) -> Tuple[str, ...]:
    """
    Parse comma-separated tag input.

    Tags are trimmed and empty entries dropped; duplicates are kept since a
    card's tags carry no uniqueness requirement.
    """
    if not tags_csv:
        return ()
    return tuple(t.strip() for t in str(tags_csv).split(',') if t.strip())


def clean_tags(tags: Iterable[str]) -> Tuple[str, ...]:
    """Accept either a comma-separated string or an iterable of tags."""
    if tags is None:
        return ()
    if isinstance(tags, str):
        return parse_tags(tags)
    return tuple(t.strip() for t in (str(t) for t in tags) if t.strip())


def find_similar_terms(query: str, terms: Iterable[str],
                       threshold: float = 0.6, limit: int = 5) -> List[Tuple[str, float]]:
    """
    Find terms that look like the given query.
    Returns list of (term, similarity_score) tuples, best first.
    """
    normalized = normalize_query(query)
    if not normalized:
        return []

    similar = []
    seen = set()
    for term in terms:
        if term in seen:
            continue
        seen.add(term)

        similarity = SequenceMatcher(None, normalized, term.lower()).ratio()
        if similarity >= threshold:
            similar.append((term, similarity))

    similar.sort(key=lambda x: x[1], reverse=True)
    return similar[:limit]
