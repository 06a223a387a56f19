"""Lightweight health check handler."""

import json
import os
from datetime import datetime, timezone

from config.settings import Settings
from utils.error_handling import ConfigurationError


def lambda_handler(event, context):
    """Return a simple 200 response to verify the stack is alive."""
    body = {
        "status": "ok",
        "environment": os.environ.get("ENVIRONMENT", "dev"),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
    try:
        settings = Settings.from_environment()
    except ConfigurationError as exc:
        body.update(status="degraded", error=str(exc))
    else:
        body["store"] = "database" if settings.store_configured else "demo"

    return {
        "statusCode": 200,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }
