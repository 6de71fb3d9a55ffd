"""
search.py
=========

Does: Filter saved comparisons by a free-text query over title/notes and by
      feedback. Exact substring hits win; otherwise a rapidfuzz partial ratio
      at or above the cutoff counts as a hit, so small typos still match.
Used By: CLI listing, front-end history views.
Returns: Matching records, newest first.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Literal

from rapidfuzz import fuzz

from chroma_compare.records.model import ComparisonRecord

__all__ = ["FeedbackFilter", "matches_query", "filter_records"]
__docformat__ = "google"

log = logging.getLogger(__name__)

FeedbackFilter = Literal["all", "liked", "disliked"]

DEFAULT_MIN_SCORE = 80.0


def matches_query(record: ComparisonRecord, query: str, min_score: float = DEFAULT_MIN_SCORE) -> bool:
    """Does: True when ``query`` is found in title or notes (case-insensitive, typo-tolerant)."""
    q = (query or "").strip().lower()
    if not q:
        return True
    fields = [(record.title or "").lower(), (record.notes or "").lower()]
    if any(q in f for f in fields):
        return True
    return any(f and fuzz.partial_ratio(q, f) >= min_score for f in fields)


def filter_records(
    records: Iterable[ComparisonRecord],
    query: str = "",
    feedback: FeedbackFilter = "all",
    min_score: float = DEFAULT_MIN_SCORE,
) -> list[ComparisonRecord]:
    """Does: Keep records matching both the text query and the feedback filter."""
    if feedback not in ("all", "liked", "disliked"):
        raise ValueError(f"Unknown feedback filter '{feedback}'")
    out = [
        r
        for r in records
        if (feedback == "all" or r.feedback == feedback) and matches_query(r, query, min_score)
    ]
    log.debug("filter_records(query=%r, feedback=%s) → %d hits", query, feedback, len(out))
    return sorted(out, key=lambda r: r.timestamp, reverse=True)
