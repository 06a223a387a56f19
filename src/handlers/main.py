"""
Single entrypoint Lambda that routes HTTP API requests to thin handler modules.

One Lambda keeps the Bedrock client and database pool warm across routes.
"""

from typing import Callable, Tuple

from . import health_check, payments, ticket_generation, ticket_lookup
from .responses import json_response


def lambda_handler(event, context):
    """
    Entry point invoked by API Gateway HTTP API.

    The event contains the HTTP method and path; we route it to the correct
    handler. Order matters: more specific prefixes come first.
    """
    method = event.get("requestContext", {}).get("http", {}).get("method", "")
    path = event.get("requestContext", {}).get("http", {}).get("path", "")
    route_key = f"{method.upper()} {path.rstrip('/') or '/'}"

    route_table: Tuple[Tuple[str, Callable], ...] = (
        ("GET /health", health_check.lambda_handler),
        ("POST /tickets/image", ticket_generation.image_handler),
        ("POST /tickets/", payments.lambda_handler),  # /tickets/{id}/unlock
        ("POST /tickets", ticket_generation.lambda_handler),
        ("GET /tickets/", ticket_lookup.lambda_handler),
        ("GET /tickets", ticket_lookup.recent_handler),
    )

    for prefix, handler in route_table:
        if route_key.startswith(prefix):
            return handler(event, context)

    return json_response(404, {"message": "Route not found", "route": route_key})
