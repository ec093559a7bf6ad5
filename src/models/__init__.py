"""Pydantic models for API payloads."""

from models.analysis import (  # noqa: F401
    AssistantAnalyticsSummary,
    IntentCount,
    InteractionRecord,
    KeywordAnalysis,
    KeywordStat,
)
from models.assistant import (  # noqa: F401
    AssistantQuery,
    AssistantReply,
    TestModeReport,
    TestModeRequest,
)
from models.knowledge import KnowledgeCategory, KnowledgeEntry, RankedResult  # noqa: F401
