"""
Runtime settings read from the Lambda environment.

Defaults match the current production tuning of the assistant.
"""

from dataclasses import dataclass
import os
from typing import Optional

from utils.logging_config import get_logger

logger = get_logger(__name__)


def _env_number(name: str, default, cast):
    """Read a numeric variable, keeping the default when it is malformed."""
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        logger.warning("Ignoring malformed setting", extra={"setting": name, "value": raw})
        return default


@dataclass
class AssistantSettings:
    """Settings shared by the assistant handlers and services."""

    environment: str = "dev"

    # Score the top candidate must reach to be shown as an answer.
    match_threshold: float = 8.0

    # Knowledge base store (hosted Postgres).
    kb_table: str = "ai_knowledge_base"
    database_url: Optional[str] = None
    db_secret_arn: Optional[str] = None

    # Interaction log (DynamoDB).
    interactions_table: str = "assistant-interactions"
    interaction_ttl_days: int = 90

    # Snapshot cache (survives warm invocations).
    cache_ttl_seconds: int = 300
    cache_max_size: int = 16

    support_email: str = "support@arovaforex.com"

    @classmethod
    def from_environment(cls) -> "AssistantSettings":
        """Load settings from environment variables."""
        return cls(
            environment=os.environ.get("ENVIRONMENT", "dev"),
            match_threshold=_env_number("MATCH_THRESHOLD", 8.0, float),
            kb_table=os.environ.get("KB_TABLE", "ai_knowledge_base"),
            database_url=os.environ.get("DATABASE_URL") or None,
            db_secret_arn=os.environ.get("DB_SECRET_ARN") or None,
            interactions_table=os.environ.get("INTERACTIONS_TABLE", "assistant-interactions"),
            interaction_ttl_days=_env_number("INTERACTION_TTL_DAYS", 90, int),
            cache_ttl_seconds=_env_number("CACHE_TTL_SECONDS", 300, int),
            cache_max_size=_env_number("CACHE_MAX_SIZE", 16, int),
            support_email=os.environ.get("SUPPORT_EMAIL", "support@arovaforex.com"),
        )
