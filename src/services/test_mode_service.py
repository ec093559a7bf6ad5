"""Admin test console: full score breakdowns for ad-hoc and sample queries."""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional

from config.sample_queries import DEFAULT_SAMPLE_QUERIES
from models.assistant import TestModeReport
from models.knowledge import KnowledgeEntry
from services.matching_engine import MATCH_THRESHOLD, find_all_matches, is_matched


class TestModeService:
    """Run queries against a knowledge base and classify the best candidate."""

    __test__ = False

    def __init__(
        self,
        threshold: float = MATCH_THRESHOLD,
        sample_queries: Optional[Mapping[str, List[str]]] = None,
    ):
        self.threshold = threshold
        self.sample_queries = dict(sample_queries or DEFAULT_SAMPLE_QUERIES)

    def evaluate(self, query: str, entries: Iterable[KnowledgeEntry]) -> TestModeReport:
        """Rank active entries for ``query``; near misses stay in ``other_candidates``."""
        active = [entry for entry in entries if entry.active]
        results = find_all_matches(query, active)
        return TestModeReport(
            query=query,
            threshold=self.threshold,
            best_match=results[0] if results else None,
            is_matched=is_matched(results, self.threshold),
            other_candidates=results[1:],
            total_candidates=len(results),
        )

    def run_samples(
        self,
        entries: Iterable[KnowledgeEntry],
        samples: Optional[Mapping[str, List[str]]] = None,
    ) -> Dict[str, List[TestModeReport]]:
        """Evaluate every sample query, grouped by its category."""
        snapshot = list(entries)
        library = samples if samples is not None else self.sample_queries
        return {
            category: [self.evaluate(query, snapshot) for query in queries]
            for category, queries in library.items()
        }
