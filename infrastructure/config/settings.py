"""
Environment-specific deployment settings.

Cost-optimized defaults for development/testing.
"""

from dataclasses import dataclass
import os
from typing import Optional


@dataclass
class Settings:
    """Deployment settings for the assistant stack."""

    # Environment
    environment: str = "dev"
    aws_region: str = "eu-west-2"

    # Matching
    match_threshold: float = 8.0

    # Knowledge base store (hosted Postgres, credentials in Secrets Manager)
    kb_table: str = "ai_knowledge_base"
    db_secret_arn: Optional[str] = None

    # Lambda Configuration
    lambda_memory_mb: int = 256
    lambda_timeout_seconds: int = 10
    log_level: str = "INFO"

    # Snapshot cache
    cache_ttl_seconds: int = 300
    cache_max_size: int = 16

    # Interaction log retention
    interaction_ttl_days: int = 90

    @classmethod
    def from_environment(cls) -> "Settings":
        """Load settings from environment variables."""
        env = os.environ.get("ENVIRONMENT", "dev")
        common = dict(
            environment=env,
            aws_region=os.environ.get("AWS_REGION", "eu-west-2"),
            match_threshold=float(os.environ.get("MATCH_THRESHOLD", "8.0")),
            kb_table=os.environ.get("KB_TABLE", "ai_knowledge_base"),
            db_secret_arn=os.environ.get("DB_SECRET_ARN") or None,
        )

        # Production overrides
        if env == "prod":
            return cls(
                **common,
                lambda_memory_mb=512,
                lambda_timeout_seconds=15,
                log_level="WARNING",
                interaction_ttl_days=365,
            )

        return cls(**common)
