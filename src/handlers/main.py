"""
Single entrypoint Lambda that routes HTTP API requests to thin handler modules.

One function keeps the knowledge base snapshot cache warm for every route.
"""

from typing import Callable, Dict, Tuple
import json

from . import analytics, assistant_chat, assistant_test, health_check, keyword_analysis


def _response(status: int, body: Dict) -> Dict:
    """Format a JSON API Gateway HTTP API response."""
    return {
        "statusCode": status,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }


def lambda_handler(event, context):
    """
    Entry point invoked by API Gateway HTTP API.

    Routes are matched on exact "METHOD /path" keys; trailing slashes are ignored.
    """
    method = event.get("requestContext", {}).get("http", {}).get("method", "")
    path = event.get("requestContext", {}).get("http", {}).get("path", "")
    route_key = f"{method.upper()} {path.rstrip('/') or '/'}"

    route_table: Tuple[Tuple[str, Callable], ...] = (
        ("GET /health", health_check.lambda_handler),
        ("POST /assistant/chat", assistant_chat.lambda_handler),
        ("POST /assistant/test/samples", assistant_test.samples_handler),
        ("POST /assistant/test", assistant_test.lambda_handler),
        ("GET /assistant/keywords", keyword_analysis.lambda_handler),
        ("GET /assistant/analytics", analytics.lambda_handler),
    )

    for key, handler in route_table:
        if route_key == key:
            return handler(event, context)

    return _response(404, {"message": "Route not found", "route": route_key})
