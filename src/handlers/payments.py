"""
Handler for POST /tickets/{id}/unlock.

Called when Stripe redirects back after checkout. The session id is a one-time
unlock token; the store decides whether it may unlock this ticket.
"""

from __future__ import annotations

import uuid

from handlers.dependencies import get_container
from handlers.responses import error_response, json_response, parse_body, path_segment
from models.results import UnlockOutcome
from utils.logging_config import get_logger

logger = get_logger(__name__)

STATUS_BY_OUTCOME = {
    UnlockOutcome.UNLOCKED: 200,
    UnlockOutcome.REPLAYED: 200,
    UnlockOutcome.ALREADY_UNLOCKED: 200,
    UnlockOutcome.SESSION_USED: 409,
    UnlockOutcome.NOT_FOUND: 404,
    UnlockOutcome.UNAVAILABLE: 503,
    UnlockOutcome.ERROR: 500,
}


def lambda_handler(event, context):
    """Mark a ticket paid with the Stripe checkout session id."""
    correlation_id = str(uuid.uuid4())
    if path_segment(event, 2) != "unlock" or path_segment(event, 3) is not None:
        return error_response(404, "Route not found", correlation_id)

    path_params = event.get("pathParameters") or {}
    ticket_id = path_params.get("id") or path_segment(event, 1)

    try:
        payload = parse_body(event)
    except ValueError as exc:
        return error_response(400, "Invalid request", correlation_id, str(exc))

    query_params = event.get("queryStringParameters") or {}
    session_id = payload.get("session_id") or query_params.get("session_id")
    if not ticket_id or not isinstance(session_id, str) or not session_id.strip():
        return error_response(400, "ticket id and session_id are required", correlation_id)

    result = get_container().ticket_store.mark_paid(ticket_id, session_id.strip())
    logger.info(
        "Unlock attempted",
        extra={
            "correlation_id": correlation_id,
            "ticket_id": ticket_id,
            "outcome": result.outcome.value,
        },
    )
    body = result.to_payload()
    body["correlation_id"] = correlation_id
    return json_response(STATUS_BY_OUTCOME[result.outcome], body)
