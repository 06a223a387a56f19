"""Handlers for GET /tickets/{id} and GET /tickets."""

import json
import uuid

from handlers.dependencies import get_container
from handlers.responses import error_response, json_response, path_segment
from utils.error_handling import NotFoundError, ValidationError, to_response
from utils.logging_config import get_logger
from utils.validators import parse_limit

logger = get_logger(__name__)


def lambda_handler(event, context):
    """Return one saved ticket."""
    correlation_id = str(uuid.uuid4())
    path_params = event.get("pathParameters") or {}
    ticket_id = path_params.get("id") or path_segment(event, 1)
    if not ticket_id:
        return error_response(400, "ticket id is required", correlation_id)

    ticket = get_container().ticket_store.get(ticket_id)
    if not ticket:
        return to_response(NotFoundError("Ticket not found"), correlation_id)

    logger.info("Ticket served", extra={"ticket_id": ticket_id, "is_paid": ticket.is_paid})
    return {
        "statusCode": 200,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(ticket.to_payload()),
    }


def recent_handler(event, context):
    """Return the most recently created tickets for the gallery."""
    container = get_container()
    query_params = event.get("queryStringParameters") or {}
    try:
        limit = parse_limit(query_params.get("limit"), container.settings.recent_tickets_limit)
    except ValidationError as exc:
        return error_response(400, "Invalid request", str(uuid.uuid4()), str(exc))

    tickets = container.ticket_store.list_recent(limit)
    return json_response(200, {"tickets": [t.to_payload() for t in tickets], "count": len(tickets)})
