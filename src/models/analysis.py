"""Diagnostics and analytics models."""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from models.knowledge import KnowledgeEntry


class KeywordStat(BaseModel):
    """Usage of one (lower-cased) keyword across the knowledge base."""

    keyword: str
    intents: List[str] = Field(default_factory=list)
    categories: List[str] = Field(default_factory=list)
    avg_priority: float = 0.0
    count: int = 0


class KeywordAnalysis(BaseModel):
    """Coverage and overlap report shown in the keyword analyzer tab."""

    top_keywords: List[KeywordStat] = Field(default_factory=list)
    weak_keywords: List[KeywordStat] = Field(default_factory=list)
    duplicates: List[KeywordStat] = Field(default_factory=list)
    low_coverage_entries: List[KnowledgeEntry] = Field(default_factory=list)
    avg_keywords_per_entry: float = 0.0
    total_unique_keywords: int = 0
    category_distribution: Dict[str, int] = Field(default_factory=dict)


class InteractionRecord(BaseModel):
    """One assistant reply as logged by the chat handler."""

    session_id: str
    timestamp: datetime
    query: str
    matched_intent: Optional[str] = None
    is_unmatched: bool
    score: Optional[float] = None
    user_id: Optional[str] = None


class IntentCount(BaseModel):
    intent: str
    count: int


class AssistantAnalyticsSummary(BaseModel):
    """Aggregates for the assistant analytics view."""

    total_messages: int = 0
    matched_messages: int = 0
    unmatched_messages: int = 0
    match_rate: float = 0.0
    top_intents: List[IntentCount] = Field(default_factory=list)
    unmatched_queries: List[InteractionRecord] = Field(default_factory=list)
