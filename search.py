# search.py
# Fuzzy ranking of records against a free-text query (list search boxes)

from typing import Any, List, Optional, Sequence
import logging
import re

from rapidfuzz.distance import Levenshtein

from config import FUZZY_THRESHOLD
from helpers import resolve_key

logger = logging.getLogger(__name__)

# Higher is better; FUZZY is the floor and gets a closeness fraction added
CASE_SENSITIVE_EQUAL = 7
EQUAL = 6
STARTS_WITH = 5
WORD_STARTS_WITH = 4
CONTAINS = 3
ACRONYM = 2
FUZZY = 1
NO_MATCH = 0

_WORD_SPLIT = re.compile(r"[\s\-_]+")

def _acronym(value: str) -> str:
    return "".join(word[0] for word in _WORD_SPLIT.split(value) if word)

def _closeness(query: str, value: str) -> float:
    """Best Levenshtein similarity of the query against any same-length window of value."""
    n = len(query)
    if len(value) <= n:
        return Levenshtein.normalized_similarity(query, value)
    return max(
        Levenshtein.normalized_similarity(query, value[i:i + n])
        for i in range(len(value) - n + 1)
    )

def rank(value: Any, query: str) -> float:
    """How well a single field value matches the query."""
    if value is None:
        return NO_MATCH
    value = str(value)
    if value == query:
        return CASE_SENSITIVE_EQUAL
    lowered, q = value.lower(), query.lower()
    if lowered == q:
        return EQUAL
    if lowered.startswith(q):
        return STARTS_WITH
    if f" {q}" in lowered or any(word.startswith(q) for word in _WORD_SPLIT.split(lowered)):
        return WORD_STARTS_WITH
    if q in lowered:
        return CONTAINS
    if len(q) > 1 and q in _acronym(lowered):
        return ACRONYM
    closeness = _closeness(q, lowered)
    if closeness >= FUZZY_THRESHOLD:
        # stays below ACRONYM since closeness < 1 here
        return FUZZY + closeness
    return NO_MATCH

def search(items: Sequence[Any], query: Optional[str], keys: Sequence[str]) -> List[Any]:
    """
    Filter and rank items by how well any of `keys` matches `query`.
    Equally ranked items keep their input order, so an earlier sort survives.
    An empty query returns the items untouched.
    """
    if not query:
        return list(items)
    scored = []
    for index, item in enumerate(items):
        best = max((rank(resolve_key(item, key), query) for key in keys), default=NO_MATCH)
        if best > NO_MATCH:
            scored.append((best, index, item))
    scored.sort(key=lambda s: (-s[0], s[1]))
    logger.debug(f"Search {query!r}: {len(scored)} of {len(items)} matched")
    return [item for _, _, item in scored]
