"""Assistant analytics computed from logged interactions."""

from __future__ import annotations

from collections import Counter
from typing import Iterable

from models.analysis import AssistantAnalyticsSummary, IntentCount, InteractionRecord


def summarize_interactions(
    records: Iterable[InteractionRecord],
    top_n: int = 5,
    recent_unmatched: int = 20,
) -> AssistantAnalyticsSummary:
    """Match rate, most common intents and the latest unmatched queries."""
    snapshot = list(records)
    matched = [record for record in snapshot if not record.is_unmatched]
    unmatched = [record for record in snapshot if record.is_unmatched]

    total = len(snapshot)
    match_rate = round(len(matched) / total * 100, 1) if total else 0.0

    intent_counts = Counter(record.matched_intent for record in matched if record.matched_intent)
    top_intents = [
        IntentCount(intent=intent, count=count)
        for intent, count in intent_counts.most_common(top_n)
    ]

    latest_unmatched = sorted(unmatched, key=lambda record: record.timestamp, reverse=True)

    return AssistantAnalyticsSummary(
        total_messages=total,
        matched_messages=len(matched),
        unmatched_messages=len(unmatched),
        match_rate=match_rate,
        top_intents=top_intents,
        unmatched_queries=latest_unmatched[:recent_unmatched],
    )
