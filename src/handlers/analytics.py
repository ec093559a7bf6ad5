"""Handler for GET /assistant/analytics."""

import json

from handlers.dependencies import get_interaction_repository
from services.analytics_service import summarize_interactions
from utils.logging_config import get_logger

logger = get_logger(__name__)


def lambda_handler(event, context):
    """Summarize recent assistant interactions."""
    query_params = event.get("queryStringParameters") or {}
    try:
        limit = int(query_params.get("limit", "500"))
    except ValueError:
        return {
            "statusCode": 400,
            "headers": {"Content-Type": "application/json"},
            "body": json.dumps({"message": "limit must be an integer"}),
        }
    if limit < 1:
        return {
            "statusCode": 400,
            "headers": {"Content-Type": "application/json"},
            "body": json.dumps({"message": "limit must be a positive integer"}),
        }

    try:
        records = get_interaction_repository().scan_recent(limit=limit)
    except Exception as exc:
        logger.exception("Analytics read failed")
        return {
            "statusCode": 500,
            "headers": {"Content-Type": "application/json"},
            "body": json.dumps({"message": "Analytics unavailable", "error": str(exc)}),
        }

    summary = summarize_interactions(records)
    return {
        "statusCode": 200,
        "headers": {"Content-Type": "application/json"},
        "body": summary.model_dump_json(),
    }
