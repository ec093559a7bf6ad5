"""
Lazy-loaded collaborators shared by the assistant handlers.

Nothing here touches the database or AWS at import time; the first
request in a cold Lambda builds what it needs and warm invocations reuse it.
"""

from __future__ import annotations

from typing import Optional

from config.settings import AssistantSettings

_settings: Optional[AssistantSettings] = None
_knowledge_repository = None
_interaction_repository = None
_assistant_service = None
_test_mode_service = None


def get_settings() -> AssistantSettings:
    """Settings read once per container."""
    global _settings
    if _settings is None:
        _settings = AssistantSettings.from_environment()
    return _settings


def get_knowledge_repository():
    """Lazy-load KnowledgeBaseRepository."""
    global _knowledge_repository
    if _knowledge_repository is None:
        from repositories.knowledge_repository import KnowledgeBaseRepository, get_db_engine

        settings = get_settings()
        engine = get_db_engine(settings.database_url, settings.db_secret_arn)
        _knowledge_repository = KnowledgeBaseRepository(engine, table_name=settings.kb_table)
    return _knowledge_repository


def get_interaction_repository():
    """Lazy-load InteractionLogRepository."""
    global _interaction_repository
    if _interaction_repository is None:
        from repositories.interaction_repository import InteractionLogRepository

        settings = get_settings()
        _interaction_repository = InteractionLogRepository(
            settings.interactions_table, ttl_days=settings.interaction_ttl_days
        )
    return _interaction_repository


def get_assistant_service():
    """Lazy-load AssistantService."""
    global _assistant_service
    if _assistant_service is None:
        from services.assistant_service import AssistantService

        _assistant_service = AssistantService(
            repository=get_knowledge_repository(), settings=get_settings()
        )
    return _assistant_service


def get_test_mode_service():
    """Lazy-load TestModeService."""
    global _test_mode_service
    if _test_mode_service is None:
        from services.test_mode_service import TestModeService

        _test_mode_service = TestModeService(threshold=get_settings().match_threshold)
    return _test_mode_service
