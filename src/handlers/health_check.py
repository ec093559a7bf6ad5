"""Lightweight health check handler."""

import json
import os
from datetime import datetime, timezone

from config.settings import AssistantSettings


def lambda_handler(event, context):
    """Return a simple 200 response to verify the assistant API is alive."""
    return {
        "statusCode": 200,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(
            {
                "status": "ok",
                "service": "arova-assistant",
                "environment": os.environ.get("ENVIRONMENT", "dev"),
                "match_threshold": AssistantSettings.from_environment().match_threshold,
                "timestamp": datetime.now(timezone.utc).isoformat(),
            }
        ),
    }
