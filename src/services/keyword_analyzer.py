"""
Keyword coverage diagnostics for the knowledge base.

Reads entries directly; it never runs the matcher. Flags keywords shared by
several intents (they split evidence between answers) and entries with too
few keywords to be reliably reachable.
"""

from __future__ import annotations

from typing import Dict, Iterable, List

from models.analysis import KeywordAnalysis, KeywordStat
from models.knowledge import KnowledgeEntry

LOW_COVERAGE_KEYWORDS = 3
TOP_KEYWORDS = 10
WEAK_KEYWORDS = 5


def keyword_stats(entries: Iterable[KnowledgeEntry]) -> List[KeywordStat]:
    """Per-keyword usage keyed by lower-cased text, in first-seen order."""
    stats: Dict[str, KeywordStat] = {}
    priority_totals: Dict[str, int] = {}

    for entry in entries:
        for keyword in entry.keywords:
            key = keyword.lower()
            stat = stats.get(key)
            if stat is None:
                stat = stats[key] = KeywordStat(keyword=keyword)
                priority_totals[key] = 0
            stat.intents.append(entry.intent)
            if entry.category not in stat.categories:
                stat.categories.append(entry.category)
            priority_totals[key] += entry.priority
            stat.count += 1

    for key, stat in stats.items():
        stat.avg_priority = priority_totals[key] / stat.count
    return list(stats.values())


def analyze_keywords(entries: Iterable[KnowledgeEntry]) -> KeywordAnalysis:
    """Build the keyword analyzer report."""
    snapshot = list(entries)
    stats = keyword_stats(snapshot)
    by_priority = sorted(stats, key=lambda stat: stat.avg_priority, reverse=True)

    category_distribution: Dict[str, int] = {}
    for entry in snapshot:
        category_distribution[entry.category] = category_distribution.get(entry.category, 0) + 1

    avg_keywords = (
        sum(len(entry.keywords) for entry in snapshot) / len(snapshot) if snapshot else 0.0
    )

    return KeywordAnalysis(
        top_keywords=by_priority[:TOP_KEYWORDS],
        weak_keywords=list(reversed(by_priority[-WEAK_KEYWORDS:])),
        duplicates=[stat for stat in stats if len(stat.intents) > 1],
        low_coverage_entries=[
            entry for entry in snapshot if len(entry.keywords) < LOW_COVERAGE_KEYWORDS
        ],
        avg_keywords_per_entry=round(avg_keywords, 1),
        total_unique_keywords=len(stats),
        category_distribution=category_distribution,
    )
