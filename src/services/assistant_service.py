"""
Live assistant replies.

Looks up the active knowledge base (cached across warm invocations), runs
the matching engine and turns the outcome into a chat reply. Anything that
goes wrong while reading the knowledge base degrades to a polite fallback so
the chat widget always gets an answer.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import List, Optional

from config.settings import AssistantSettings
from models.assistant import AssistantReply
from models.knowledge import KnowledgeEntry
from services.matching_engine import find_best_match
from utils.cache_service import LRUCache
from utils.logging_config import get_logger

logger = get_logger(__name__)

ACTIVE_SNAPSHOT_KEY = "kb:active"

EMPTY_KB_MESSAGE = (
    "I'm still learning! Our team is adding more information to help you better. "
    "In the meantime, contact {support_email} for assistance. 😊"
)
UNMATCHED_MESSAGE = (
    "I'm not sure I understand that question. Could you rephrase it? You can ask about:\n\n"
    "• Platform features (wallet, calculator, live room)\n"
    "• Trading education (risk management, position sizing)\n"
    "• General support\n\n"
    "Or contact {support_email} for personalized help. 😊"
)
ERROR_MESSAGE = (
    "Sorry, I'm experiencing technical difficulties. "
    "Please try again or contact {support_email}."
)


@dataclass
class AssistantService:
    """Answer chat messages from the knowledge base."""

    repository: object
    settings: AssistantSettings = field(default_factory=AssistantSettings.from_environment)
    cache: Optional[LRUCache] = None

    def __post_init__(self) -> None:
        if self.cache is None:
            self.cache = LRUCache(
                max_size=self.settings.cache_max_size,
                ttl_seconds=self.settings.cache_ttl_seconds,
            )

    def active_entries(self) -> List[KnowledgeEntry]:
        """Snapshot of active entries; tuples keep cached snapshots immutable."""
        return list(
            self.cache.get_or_load(
                ACTIVE_SNAPSHOT_KEY, lambda: tuple(self.repository.list_active())
            )
        )

    def refresh(self) -> None:
        """Drop the cached snapshot so the next message re-reads the store."""
        self.cache.delete(ACTIVE_SNAPSHOT_KEY)

    def get_response(self, message: str) -> AssistantReply:
        """Reply to one chat message."""
        support_email = self.settings.support_email
        start = time.perf_counter()
        try:
            entries = self.active_entries()
        except Exception as exc:
            logger.warning(
                "Knowledge base unavailable; sending fallback reply",
                extra={"error": str(exc)},
            )
            return AssistantReply(
                response=ERROR_MESSAGE.format(support_email=support_email),
                is_unmatched=True,
            )

        if not entries:
            return AssistantReply(
                response=EMPTY_KB_MESSAGE.format(support_email=support_email),
                is_unmatched=True,
            )

        match = find_best_match(message, entries, threshold=self.settings.match_threshold)
        logger.info(
            "Assistant reply computed",
            extra={
                "matched_intent": match.entry.intent if match else None,
                "kb_size": len(entries),
                "duration_ms": int((time.perf_counter() - start) * 1000),
            },
        )

        if match:
            return AssistantReply(
                response=match.entry.answer,
                matched_intent=match.entry.intent,
                is_unmatched=False,
                score=round(match.score, 2),
            )

        return AssistantReply(
            response=UNMATCHED_MESSAGE.format(support_email=support_email),
            is_unmatched=True,
        )
