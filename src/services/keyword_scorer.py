"""
Keyword evidence for a single knowledge base entry.

Two ways a keyword can fire:
- phrase match: the whole keyword is a literal substring of the query
  (10 points, +3 for every extra word in a multi-word keyword)
- partial word match: otherwise, each keyword word that overlaps a query
  word (either contains the other) is worth 3 points

Substring containment is deliberate: "wallet?" still matches "wallet"
without a stemmer, at the cost of the odd false positive on short keywords.
No pattern is ever compiled from keyword or query text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence

PHRASE_BASE_SCORE = 10.0
PHRASE_WORD_BONUS = 3.0
PARTIAL_WORD_SCORE = 3.0


@dataclass(frozen=True)
class KeywordEvidence:
    """Keywords that fired for one entry and the raw score they add up to."""

    matched_keywords: List[str] = field(default_factory=list)
    base_score: float = 0.0

    @property
    def has_evidence(self) -> bool:
        return bool(self.matched_keywords)


def phrase_score(keyword: str) -> float:
    """Score for a keyword found verbatim in the query."""
    return PHRASE_BASE_SCORE + (len(keyword.split()) - 1) * PHRASE_WORD_BONUS


def partial_word_hits(keyword: str, query_words: Sequence[str]) -> int:
    """Count keyword words that overlap at least one query word."""
    return sum(
        1
        for kw in keyword.split()
        if any(kw in mw or mw in kw for mw in query_words)
    )


def score_keywords(
    normalized_query: str, query_words: Sequence[str], keywords: Iterable[str]
) -> KeywordEvidence:
    """
    Score an entry's keywords against an already-normalized query.

    Keywords are visited in declaration order and that order is kept in
    ``matched_keywords``. Blank keywords are skipped and a keyword repeated
    within the same entry (ignoring case) only counts once.
    """
    if not normalized_query:
        return KeywordEvidence()

    matched: List[str] = []
    base_score = 0.0
    seen = set()

    for keyword in keywords:
        keyword_lower = (keyword or "").lower().strip()
        if not keyword_lower or keyword_lower in seen:
            continue
        seen.add(keyword_lower)

        if keyword_lower in normalized_query:
            matched.append(keyword.strip())
            base_score += phrase_score(keyword_lower)
            continue

        hits = partial_word_hits(keyword_lower, query_words)
        if hits:
            matched.append(keyword.strip())
            base_score += hits * PARTIAL_WORD_SCORE

    return KeywordEvidence(matched_keywords=matched, base_score=base_score)
