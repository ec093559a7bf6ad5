"""
Matching engine tests: ranking laws, decision helpers and the wallet scenario.

Run with: pytest tests/unit/test_matching_engine.py -v
"""

import pytest

from models.knowledge import KnowledgeEntry
from services.matching_engine import (
    MATCH_THRESHOLD,
    find_all_matches,
    find_best_match,
    is_matched,
)

QUERIES = [
    "How do I check my wallet balance?",
    "What is risk management?",
    "where do I set my stop-loss",
    "losses",
    "Good morning! Where is the calculator for lot size?",
    "hello, what is position sizing and risk?",
]


def _entry(entry_id, keywords, priority=5, **kwargs):
    return KnowledgeEntry(
        id=entry_id,
        intent=kwargs.pop("intent", f"intent-{entry_id}"),
        keywords=keywords,
        priority=priority,
        **kwargs,
    )


class TestWalletScenario:
    """Keyword evidence beats a higher priority with less evidence."""

    def test_more_evidence_ranks_first(self):
        entries = [
            _entry("1", ["wallet", "balance"], priority=5),
            _entry("2", ["wallet"], priority=9),
        ]
        results = find_all_matches("How do I check my wallet balance?", entries)

        assert [r.entry.id for r in results] == ["1", "2"]
        assert results[0].matched_keywords == ["wallet", "balance"]
        assert results[1].matched_keywords == ["wallet"]
        assert results[0].base_score == 20
        assert results[0].priority_multiplier == pytest.approx(1.4)
        assert results[0].score == pytest.approx(28.0)
        assert results[1].base_score == 10
        assert results[1].priority_multiplier == pytest.approx(1.8)
        assert results[1].score == pytest.approx(18.0)


class TestRankingLaws:
    """Properties that must hold for any query."""

    @pytest.mark.parametrize("query", QUERIES)
    def test_deterministic(self, knowledge_base, query):
        first = find_all_matches(query, knowledge_base)
        second = find_all_matches(query, list(knowledge_base))
        assert [r.model_dump() for r in first] == [r.model_dump() for r in second]

    @pytest.mark.parametrize("query", QUERIES)
    def test_no_zero_evidence_results(self, knowledge_base, query):
        for result in find_all_matches(query, knowledge_base):
            assert result.matched_keywords
            assert result.base_score > 0

    @pytest.mark.parametrize("query", QUERIES)
    def test_score_decomposition(self, knowledge_base, query):
        for result in find_all_matches(query, knowledge_base):
            assert result.score == pytest.approx(result.base_score * result.priority_multiplier)

    @pytest.mark.parametrize("query", QUERIES)
    def test_sorted_descending(self, knowledge_base, query):
        scores = [r.score for r in find_all_matches(query, knowledge_base)]
        assert scores == sorted(scores, reverse=True)

    def test_priority_is_monotonic_for_equal_evidence(self):
        entries = [_entry(str(p), ["wallet"], priority=p) for p in range(1, 11)]
        results = find_all_matches("wallet", entries)
        by_priority = {r.entry.priority: r.score for r in results}
        for low in range(1, 10):
            assert by_priority[low + 1] > by_priority[low]

    def test_more_evidence_wins_at_equal_priority(self):
        entries = [
            _entry("few", ["wallet"], priority=6),
            _entry("many", ["wallet", "balance", "funds"], priority=6),
        ]
        results = find_all_matches("wallet balance and funds", entries)
        assert [r.entry.id for r in results] == ["many", "few"]

    def test_priority_does_not_override_double_evidence(self):
        entries = [
            _entry("max-priority", ["wallet"], priority=10),
            _entry("min-priority", ["wallet", "balance"], priority=1),
        ]
        results = find_all_matches("wallet balance", entries)
        assert results[0].entry.id == "min-priority"

    def test_ties_keep_input_order(self):
        entries = [_entry(name, ["wallet"], priority=4) for name in ("a", "b", "c")]
        assert [r.entry.id for r in find_all_matches("wallet", entries)] == ["a", "b", "c"]
        assert [r.entry.id for r in find_all_matches("wallet", entries[::-1])] == ["c", "b", "a"]


class TestFiltering:
    """Inactive, keyword-less and empty inputs."""

    def test_inactive_entries_are_skipped(self, knowledge_base):
        results = find_all_matches("promo wallet", knowledge_base)
        assert "kb-5" not in [r.entry.id for r in results]
        assert [r.entry.id for r in results] == ["kb-1"]

    def test_keywordless_entry_is_unreachable(self):
        entries = [_entry("empty", []), _entry("blank", ["", "  "])]
        assert find_all_matches("anything goes here", entries) == []

    def test_empty_query(self, knowledge_base):
        assert find_all_matches("", knowledge_base) == []
        assert find_all_matches("   ", knowledge_base) == []

    def test_empty_knowledge_base(self):
        assert find_all_matches("anything", []) == []

    def test_no_match(self, knowledge_base):
        assert find_all_matches("asdfghjkl", knowledge_base) == []

    @pytest.mark.parametrize("query", ["(((", "*+?", "[a-z]+$", "\\", "wallet)("])
    def test_never_raises_on_regex_characters(self, knowledge_base, query):
        assert isinstance(find_all_matches(query, knowledge_base), list)

    def test_generator_input(self, knowledge_base):
        results = find_all_matches("wallet", (entry for entry in knowledge_base))
        assert [r.entry.id for r in results] == ["kb-1"]


class TestDecision:
    """Caller-side threshold helpers."""

    def test_best_match_above_threshold(self, knowledge_base):
        best = find_best_match("How do I check my wallet balance?", knowledge_base)
        assert best is not None
        assert best.entry.id == "kb-1"
        assert best.score == pytest.approx(34.0)

    def test_near_miss_is_listed_but_not_matched(self, knowledge_base):
        results = find_all_matches("losses", knowledge_base)
        assert [r.entry.id for r in results] == ["kb-2"]
        assert results[0].score == pytest.approx(4.8)
        assert not is_matched(results)
        assert find_best_match("losses", knowledge_base) is None

    def test_partial_words_can_clear_threshold(self, knowledge_base):
        best = find_best_match("where do I set my stop-loss", knowledge_base)
        assert best.entry.id == "kb-2"
        assert best.score == pytest.approx(9.6)

    def test_threshold_does_not_change_ranking(self, knowledge_base):
        query = "hello, what is position sizing and risk?"
        results = find_all_matches(query, knowledge_base)
        before = [r.model_dump() for r in results]
        assert is_matched(results, threshold=1.0)
        assert not is_matched(results, threshold=1000.0)
        assert [r.model_dump() for r in find_all_matches(query, knowledge_base)] == before

    def test_is_matched_empty(self):
        assert is_matched([]) is False

    def test_default_threshold(self):
        assert MATCH_THRESHOLD == 8.0
