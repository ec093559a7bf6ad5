"""Knowledge base models."""

from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class KnowledgeCategory(str, Enum):
    """Grouping used by the admin console; the scorer ignores it."""

    PLATFORM = "platform"
    TRADING = "trading"
    GENERAL = "general"
    EDGE = "edge"


class KnowledgeEntry(BaseModel):
    """One canned answer from the ai_knowledge_base table."""

    model_config = ConfigDict(frozen=True)

    id: str
    intent: str
    category: str = KnowledgeCategory.GENERAL.value
    keywords: List[str] = Field(default_factory=list)
    answer: str = ""
    priority: int = Field(default=5, ge=1, le=10)
    active: bool = True

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value) -> str:
        """Store ids as opaque strings (the store hands back uuids or ints)."""
        return str(value)


class RankedResult(BaseModel):
    """Score breakdown for one entry that matched a query."""

    entry: KnowledgeEntry
    matched_keywords: List[str] = Field(default_factory=list)
    base_score: float
    priority_multiplier: float
    score: float
