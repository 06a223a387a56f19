"""
Ticket metadata generation.

Sends the ticket text and/or screenshot to a Bedrock vision model together
with the TicketRecord schema and parses the JSON it returns. Unlike the image
path there is no fallback: a ticket without metadata cannot be rendered, so
every failure reaches the caller.
"""

from __future__ import annotations

import json
import time
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as SchemaValidationError

from config.settings import Settings
from models.schema import TICKET_SCHEMA
from models.ticket import TicketRecord
from services.prompts import (
    BRAND_SLOGANS,
    FALLBACK_TAGLINE,
    IMAGE_ONLY_TEXT,
    JSON_RESPONSE_INSTRUCTION,
    SYSTEM_INSTRUCTION,
)
from utils.error_handling import ConfigurationError, MalformedResponseError, ValidationError
from utils.logging_config import get_logger
from utils.validators import clean_text, split_image_payload

logger = get_logger(__name__)

ANTHROPIC_VERSION = "bedrock-2023-05-31"


class MetadataGenerator:
    """Turn raw ticket details into a validated TicketRecord."""

    def __init__(self, client: Optional[Any], settings: Settings):
        self.client = client
        self.settings = settings

    def generate(self, text: Optional[str] = None, image_base64: Optional[str] = None) -> TicketRecord:
        """Call the model once and return its record, or raise."""
        body = self.build_request(text, image_base64)
        if self.client is None:
            raise ConfigurationError(
                "Missing Bedrock credentials. Configure AWS credentials for the ticket generator."
            )

        start = time.perf_counter()
        try:
            response = self.client.invoke_model(
                modelId=self.settings.model_id,
                contentType="application/json",
                accept="application/json",
                body=json.dumps(body),
            )
            payload = json.loads(response["body"].read())
            record = self.parse_response(payload)
        except Exception as exc:
            logger.error(
                "Error generating ticket metadata",
                extra={"error": str(exc), "model_id": self.settings.model_id},
            )
            raise
        finally:
            logger.info(
                "Metadata generation latency captured",
                extra={"duration_ms": int((time.perf_counter() - start) * 1000)},
            )

        logger.info(
            "Ticket metadata generated",
            extra={"artist_or_event": record.event_details.artist_or_event},
        )
        return record

    def build_request(self, text: Optional[str], image_base64: Optional[str]) -> Dict[str, Any]:
        """Assemble the Anthropic messages body sent through invoke_model."""
        text = clean_text(text)
        image_base64 = clean_text(image_base64)
        if not text and not image_base64:
            raise ValidationError("Provide ticket text, a ticket image, or both")

        content: List[Dict[str, Any]] = []
        if image_base64:
            media_type, data = split_image_payload(image_base64)
            content.append(
                {
                    "type": "image",
                    "source": {"type": "base64", "media_type": media_type, "data": data},
                }
            )
            logger.debug(
                "Ticket image attached",
                extra={"media_type": media_type, "payload_chars": len(data)},
            )
        content.append({"type": "text", "text": text or IMAGE_ONLY_TEXT})

        return {
            "anthropic_version": ANTHROPIC_VERSION,
            "max_tokens": self.settings.max_tokens,
            "temperature": 0.7,
            "system": self.system_prompt(),
            "messages": [{"role": "user", "content": content}],
        }

    @staticmethod
    def system_prompt() -> str:
        return f"{SYSTEM_INSTRUCTION}\n\n{JSON_RESPONSE_INSTRUCTION}{json.dumps(TICKET_SCHEMA)}"

    def parse_response(self, payload: Dict[str, Any]) -> TicketRecord:
        """Extract the text part, decode it and validate it against the schema."""
        text = _first_text(payload)
        if not text:
            raise MalformedResponseError("No text response from model")

        try:
            parsed = json.loads(_strip_code_fence(text))
        except json.JSONDecodeError as exc:
            raise MalformedResponseError(f"Model returned non-JSON output: {exc}") from exc

        try:
            record = TicketRecord.model_validate(parsed)
        except SchemaValidationError as exc:
            raise MalformedResponseError(
                f"Model output does not match the ticket schema: {exc.error_count()} error(s)"
            ) from exc

        # The cached image is attached by the store, never taken from the model.
        if record.ai_prompts.cached_image_base64 is not None:
            ai_prompts = record.ai_prompts.model_copy(update={"cached_image_base64": None})
            record = record.model_copy(update={"ai_prompts": ai_prompts})

        return self._without_slogan_tagline(record)

    def _without_slogan_tagline(self, record: TicketRecord) -> TicketRecord:
        tagline = record.gift_copy.tagline.strip().lower().rstrip(".!")
        if tagline not in BRAND_SLOGANS:
            return record

        logger.warning(
            "Model used a marketing slogan as tagline; replacing",
            extra={"tagline": record.gift_copy.tagline},
        )
        gift_copy = record.gift_copy.model_copy(update={"tagline": FALLBACK_TAGLINE})
        return record.model_copy(update={"gift_copy": gift_copy})


def _first_text(payload: Dict[str, Any]) -> str:
    for part in payload.get("content") or []:
        if part.get("type") == "text" and part.get("text"):
            return part["text"]
    return ""


def _strip_code_fence(text: str) -> str:
    """Models occasionally wrap JSON in ```json fences despite instructions."""
    cleaned = text.strip()
    if cleaned.startswith("```"):
        cleaned = cleaned.split("\n", 1)[1] if "\n" in cleaned else ""
        if cleaned.rstrip().endswith("```"):
            cleaned = cleaned.rstrip()[:-3]
    return cleaned.strip()
