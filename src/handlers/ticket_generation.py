"""
Ticket generation handlers.

POST /tickets runs the full generate, render and save flow.
POST /tickets/image re-renders a background from a prompt.
"""

from __future__ import annotations

import uuid

from pydantic import ValidationError as PayloadValidationError

from handlers.dependencies import get_container
from handlers.responses import error_response, json_response, parse_body
from models.ticket import TicketCreateRequest
from utils.error_handling import AppError, to_response
from utils.logging_config import get_logger

logger = get_logger(__name__)


def lambda_handler(event, context):
    """Handle POST /tickets."""
    correlation_id = str(uuid.uuid4())
    try:
        request = TicketCreateRequest.model_validate(parse_body(event))
    except (ValueError, PayloadValidationError) as exc:
        return error_response(400, "Invalid request", correlation_id, str(exc))

    try:
        created = get_container().creation_service.create(
            text=request.text,
            image_base64=request.image_base64,
            user_id=request.user_id,
        )
    except AppError as exc:
        logger.warning(
            "Ticket generation rejected",
            extra={"correlation_id": correlation_id, "error": str(exc)},
        )
        return to_response(exc, correlation_id)
    except Exception as exc:
        logger.exception("Ticket generation failed", extra={"correlation_id": correlation_id})
        return error_response(502, "Ticket generation failed", correlation_id, str(exc))

    logger.info(
        "Ticket generated",
        extra={"correlation_id": correlation_id, "ticket_id": created.ticket_id},
    )
    return json_response(201, created.to_payload())


def image_handler(event, context):
    """Handle POST /tickets/image."""
    correlation_id = str(uuid.uuid4())
    try:
        payload = parse_body(event)
    except ValueError as exc:
        return error_response(400, "Invalid request", correlation_id, str(exc))

    prompt = payload.get("prompt")
    if not isinstance(prompt, str) or not prompt.strip():
        return error_response(400, "prompt is required", correlation_id)

    result = get_container().creation_service.regenerate_image(prompt)
    return json_response(
        200,
        {"imageUrl": result.data_uri, "status": result.status.value, "correlation_id": correlation_id},
    )
