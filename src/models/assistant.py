"""Pydantic models for the assistant chat and test console."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from models.knowledge import KnowledgeEntry, RankedResult


class AssistantQuery(BaseModel):
    """Inbound chat message."""

    message: str
    session_id: Optional[str] = None
    user_id: Optional[str] = None

    @field_validator("message")
    @classmethod
    def validate_message(cls, value: str) -> str:
        """Reject blank messages before they reach the knowledge base."""
        cleaned = (value or "").strip()
        if not cleaned:
            raise ValueError("message must be provided")
        return cleaned


class AssistantReply(BaseModel):
    """What the chat widget renders for one user message."""

    response: str
    matched_intent: Optional[str] = None
    is_unmatched: bool
    score: Optional[float] = None


class TestModeRequest(BaseModel):
    """Admin console query, optionally against a draft knowledge base."""

    query: str = ""
    entries: Optional[List[KnowledgeEntry]] = None


class TestModeReport(BaseModel):
    """Full ranking for one test query plus the caller-side decision."""

    query: str
    threshold: float
    best_match: Optional[RankedResult] = None
    is_matched: bool = False
    other_candidates: List[RankedResult] = Field(default_factory=list)
    total_candidates: int = 0
