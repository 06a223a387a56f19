"""JSON response helpers for API Gateway HTTP API."""

import base64
import json
from typing import Any, Dict, Optional


def json_response(status: int, body: Any) -> Dict:
    """Format a JSON API Gateway HTTP API response."""
    return {
        "statusCode": status,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }


def error_response(
    status: int,
    message: str,
    correlation_id: str,
    error: Optional[str] = None,
) -> Dict:
    body = {"message": message, "correlation_id": correlation_id}
    if error:
        body["error"] = error
    return json_response(status, body)


def parse_body(event: Dict) -> Dict:
    """Decode the request body; Step Functions style direct payloads are allowed."""
    raw = event.get("body")
    if not raw:
        return {}
    if event.get("isBase64Encoded"):
        raw = base64.b64decode(raw).decode("utf-8")
    payload = json.loads(raw)
    if not isinstance(payload, dict):
        raise ValueError("Request body must be a JSON object")
    return payload


def path_segment(event: Dict, index: int) -> Optional[str]:
    """Segment of the request path, e.g. index 1 of /tickets/{id}."""
    path = event.get("requestContext", {}).get("http", {}).get("path", "")
    segments = [s for s in path.split("/") if s]
    return segments[index] if len(segments) > index else None
