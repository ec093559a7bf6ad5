"""PostgreSQL repository for the assistant knowledge base (SQLAlchemy Core)."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

import boto3
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from models.knowledge import KnowledgeEntry
from services.priority import MAX_PRIORITY, MIN_PRIORITY
from utils.logging_config import get_logger

logger = get_logger(__name__)

# Connection pooling for Lambda reuse.
_engine: Optional[Engine] = None


def get_db_engine(database_url: Optional[str] = None, secret_arn: Optional[str] = None):
    """Get or create the pooled engine; ``None`` when no database is configured."""
    global _engine
    if _engine is None:
        db_url = database_url
        if not db_url and secret_arn:
            db_url = _secret_to_db_url(secret_arn)
        if not db_url:
            logger.warning("DATABASE_URL not set; knowledge base reads will return nothing")
            return None
        _engine = create_engine(
            db_url,
            poolclass=QueuePool,
            pool_size=1,
            max_overflow=2,
            pool_pre_ping=True,
            pool_recycle=300,
        )
    return _engine


def _secret_to_db_url(secret_arn: str) -> Optional[str]:
    """Build a SQLAlchemy URL from a Secrets Manager secret."""
    try:
        sm = boto3.client("secretsmanager")
        secret = json.loads(sm.get_secret_value(SecretId=secret_arn)["SecretString"])
        host = secret.get("host")
        port = secret.get("port", 5432)
        username = secret.get("username")
        password = secret.get("password")
        dbname = secret.get("dbname", "postgres")
        if not (host and username and password):
            return None
        return f"postgresql+psycopg2://{username}:{password}@{host}:{port}/{dbname}"
    except Exception as exc:
        logger.warning("Failed to load DB secret", extra={"error": str(exc)})
        return None


DEFAULT_PRIORITY = 5


def row_to_entry(row: Dict[str, Any]) -> KnowledgeEntry:
    """
    Map a table row onto a KnowledgeEntry (keywords may arrive as a JSON string).

    Priorities outside 1-10 are clamped; a missing priority becomes the default.
    """
    keywords = row.get("keywords") or []
    if isinstance(keywords, str):
        keywords = json.loads(keywords)
    priority = row.get("priority")
    if priority is None:
        priority = DEFAULT_PRIORITY
    else:
        priority = max(MIN_PRIORITY, min(MAX_PRIORITY, int(priority)))
    return KnowledgeEntry(
        id=row["id"],
        intent=row.get("intent") or "",
        category=row.get("category") or "general",
        keywords=list(keywords),
        answer=row.get("answer") or "",
        priority=priority,
        active=bool(row.get("active", True)),
    )


class KnowledgeBaseRepository:
    """Read-only access to the knowledge base table."""

    def __init__(self, engine: Optional[Engine], table_name: str = "ai_knowledge_base"):
        self.engine = engine
        self.table_name = table_name

    def _fetch_all(self, query: str, params: dict) -> List[dict]:
        """Execute a SELECT and return rows as dicts."""
        stmt = text(query)
        with self.engine.connect() as conn:
            return [dict(row._mapping) for row in conn.execute(stmt, params)]

    def list_active(self) -> List[KnowledgeEntry]:
        """Active entries, highest priority first (the order the admin UI shows)."""
        if self.engine is None:
            return []
        rows = self._fetch_all(
            f"SELECT id, intent, category, keywords, answer, priority, active "
            f"FROM {self.table_name} WHERE active = :active ORDER BY priority DESC",
            {"active": True},
        )
        return _to_entries(rows)

    def list_all(self) -> List[KnowledgeEntry]:
        """Every entry including archived ones (used by diagnostics)."""
        if self.engine is None:
            return []
        rows = self._fetch_all(
            f"SELECT id, intent, category, keywords, answer, priority, active "
            f"FROM {self.table_name} ORDER BY priority DESC",
            {},
        )
        return _to_entries(rows)


def _to_entries(rows: List[dict]) -> List[KnowledgeEntry]:
    """Convert rows, skipping any that cannot form a valid entry."""
    entries: List[KnowledgeEntry] = []
    for row in rows:
        try:
            entries.append(row_to_entry(row))
        except (KeyError, TypeError, ValueError) as exc:
            logger.warning(
                "Skipping malformed knowledge base row",
                extra={"row_id": str(row.get("id")), "error": str(exc)},
            )
    return entries
