"""
Live assistant handler for POST /assistant/chat.

Matches the message against the knowledge base and logs the outcome for
analytics. Logging the interaction is best effort: a DynamoDB failure must
not cost the user their answer.
"""

from __future__ import annotations

import json
import uuid
from datetime import datetime, timezone

from pydantic import ValidationError as PydanticValidationError

from handlers.dependencies import get_assistant_service, get_interaction_repository
from models.analysis import InteractionRecord
from models.assistant import AssistantQuery, AssistantReply
from utils.logging_config import get_logger

logger = get_logger(__name__)


def _record_interaction(query: AssistantQuery, reply: AssistantReply, correlation_id: str) -> None:
    record = InteractionRecord(
        session_id=query.session_id or correlation_id,
        timestamp=datetime.now(timezone.utc),
        query=query.message,
        matched_intent=reply.matched_intent,
        is_unmatched=reply.is_unmatched,
        score=reply.score,
        user_id=query.user_id,
    )
    try:
        get_interaction_repository().put(record)
    except Exception as exc:
        logger.warning(
            "Interaction log write failed",
            extra={"correlation_id": correlation_id, "error": str(exc)},
        )


def lambda_handler(event, context):
    """Handle POST /assistant/chat."""
    correlation_id = str(uuid.uuid4())
    try:
        payload = json.loads(event.get("body") or "{}")
        query = AssistantQuery.model_validate(payload)
    except (ValueError, PydanticValidationError) as exc:
        return {
            "statusCode": 422,
            "headers": {"Content-Type": "application/json"},
            "body": json.dumps(
                {
                    "message": "Invalid request",
                    "error": str(exc),
                    "correlation_id": correlation_id,
                }
            ),
        }

    reply = get_assistant_service().get_response(query.message)
    _record_interaction(query, reply, correlation_id)

    logger.info(
        "Assistant message answered",
        extra={
            "correlation_id": correlation_id,
            "matched_intent": reply.matched_intent,
            "is_unmatched": reply.is_unmatched,
        },
    )
    return {
        "statusCode": 200,
        "headers": {"Content-Type": "application/json"},
        "body": reply.model_dump_json(),
    }
