"""Generate, render and save a ticket in one call."""

from __future__ import annotations

import time
from typing import Optional

from models.results import CreatedTicket, ImageResult
from services.image_service import ImageGenerator
from services.metadata_service import MetadataGenerator
from services.ticket_service import TicketStore
from utils.logging_config import get_logger

logger = get_logger(__name__)


class TicketCreationService:
    """Run the generator, renderer and store in order."""

    def __init__(
        self,
        metadata_generator: MetadataGenerator,
        image_generator: ImageGenerator,
        store: TicketStore,
    ):
        self.metadata_generator = metadata_generator
        self.image_generator = image_generator
        self.store = store

    def create(
        self,
        text: Optional[str] = None,
        image_base64: Optional[str] = None,
        user_id: Optional[str] = None,
    ) -> CreatedTicket:
        """
        Metadata errors propagate; a failed background only leaves the ticket
        without an image, and a missing store only leaves it unsaved.
        """
        start = time.perf_counter()
        record = self.metadata_generator.generate(text, image_base64)
        image = self.image_generator.render(record.ai_prompts.background_prompt)
        if not image.succeeded:
            logger.warning(
                "Continuing without background image",
                extra={"image_status": image.status.value, "note": image.note},
            )
        ticket_id = self.store.save(record, image.data_uri, user_id=user_id)

        logger.info(
            "Ticket created",
            extra={
                "ticket_id": ticket_id,
                "image_status": image.status.value,
                "duration_ms": int((time.perf_counter() - start) * 1000),
            },
        )
        return CreatedTicket(ticket_id=ticket_id, ticket_data=record, image=image)

    def regenerate_image(self, prompt: str) -> ImageResult:
        return self.image_generator.render(prompt)
