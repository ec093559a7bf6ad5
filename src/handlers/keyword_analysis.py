"""Handler for GET /assistant/keywords (keyword analyzer)."""

import json

from handlers.dependencies import get_knowledge_repository
from services.keyword_analyzer import analyze_keywords
from utils.logging_config import get_logger

logger = get_logger(__name__)


def lambda_handler(event, context):
    """Return coverage and duplicate-keyword diagnostics for the whole knowledge base."""
    try:
        entries = get_knowledge_repository().list_all()
    except Exception as exc:
        logger.exception("Keyword analysis failed")
        return {
            "statusCode": 500,
            "headers": {"Content-Type": "application/json"},
            "body": json.dumps({"message": "Keyword analysis failed", "error": str(exc)}),
        }

    analysis = analyze_keywords(entries)
    logger.info(
        "Keyword analysis served",
        extra={
            "entries": len(entries),
            "duplicates": len(analysis.duplicates),
            "low_coverage": len(analysis.low_coverage_entries),
        },
    )
    return {
        "statusCode": 200,
        "headers": {"Content-Type": "application/json"},
        "body": analysis.model_dump_json(),
    }
