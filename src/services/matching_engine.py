"""
Intent matching engine for the in-app assistant.

Ranks knowledge base entries for a free-text query. Pure and synchronous:
the caller hands in a snapshot of entries and gets back a fresh list of
``RankedResult`` objects, so concurrent callers never share state.

The engine never hides weak candidates; deciding what counts as a match is
up to the caller (see ``find_best_match`` and ``MATCH_THRESHOLD``).
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from models.knowledge import KnowledgeEntry, RankedResult
from services.keyword_scorer import score_keywords
from services.priority import priority_multiplier
from services.tokenizer import normalize, tokenize
from utils.logging_config import get_logger

logger = get_logger(__name__)

# Current tuning for "matched" in the live assistant and the test console.
MATCH_THRESHOLD = 8.0


def rank_entry(
    entry: KnowledgeEntry, normalized_query: str, query_words: Sequence[str]
) -> Optional[RankedResult]:
    """Score one entry; ``None`` when none of its keywords fired."""
    evidence = score_keywords(normalized_query, query_words, entry.keywords)
    if not evidence.has_evidence:
        return None

    multiplier = priority_multiplier(entry.priority)
    return RankedResult(
        entry=entry,
        matched_keywords=evidence.matched_keywords,
        base_score=evidence.base_score,
        priority_multiplier=multiplier,
        score=evidence.base_score * multiplier,
    )


def find_all_matches(query: str, entries: Iterable[KnowledgeEntry]) -> List[RankedResult]:
    """
    Return every active entry with keyword evidence, best score first.

    Inactive entries are dropped here even if the caller already filtered
    them. Ties keep the input order (``list.sort`` is stable), so
    identical inputs always give identical output.
    """
    normalized_query = normalize(query)
    if not normalized_query:
        return []
    query_words = tokenize(normalized_query)

    matches: List[RankedResult] = []
    for entry in entries:
        if not entry.active:
            continue
        result = rank_entry(entry, normalized_query, query_words)
        if result is not None:
            matches.append(result)

    matches.sort(key=lambda result: result.score, reverse=True)
    logger.debug("Ranked knowledge base", extra={"candidates": len(matches)})
    return matches


def is_matched(results: Sequence[RankedResult], threshold: float = MATCH_THRESHOLD) -> bool:
    """Caller-side decision on the top result."""
    return bool(results) and results[0].score >= threshold


def find_best_match(
    query: str,
    entries: Iterable[KnowledgeEntry],
    threshold: float = MATCH_THRESHOLD,
) -> Optional[RankedResult]:
    """Top-ranked entry if it clears ``threshold``, else ``None``."""
    results = find_all_matches(query, entries)
    if is_matched(results, threshold):
        return results[0]
    return None
