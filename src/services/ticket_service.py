"""
Ticket store.

Persists generated tickets and owns the payment unlock. Without a configured
database every operation degrades to an empty result ("demo mode") so the
generator stays usable on its own.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import ValidationError as SchemaValidationError
from sqlalchemy.exc import IntegrityError

from models.results import UnlockOutcome, UnlockResult
from models.ticket import LayoutGuide, LoadedTicket, StoredTicket, TicketRecord
from repositories.ticket_repo import TicketRepository
from utils.logging_config import get_logger

logger = get_logger(__name__)

SESSION_USED_MESSAGE = "This payment has already been used."
VERIFICATION_FAILED_MESSAGE = "Verification failed. Please contact support."


class TicketStore:
    """Map tickets to and from the tickets table."""

    def __init__(self, repository: Optional[TicketRepository]):
        self.repository = repository

    @property
    def configured(self) -> bool:
        return self.repository is not None

    def save(
        self,
        record: TicketRecord,
        cached_image: str = "",
        user_id: Optional[str] = None,
    ) -> Optional[str]:
        """Insert a new unpaid ticket; None when the store is unavailable."""
        if not self.configured:
            logger.warning("Skipping DB save: ticket store not configured")
            return None

        ai_prompts = record.ai_prompts.model_copy(update={"cached_image_base64": cached_image})
        documents = {
            "event_details": record.event_details.to_document(),
            "visual_theme": record.visual_theme.to_document(),
            "gift_copy": record.gift_copy.to_document(),
            "ai_prompts": ai_prompts.to_document(),
        }
        try:
            ticket_id = self.repository.insert(documents, user_id=user_id)
        except Exception as exc:
            logger.error("Failed to save ticket to DB", extra={"error": str(exc)})
            return None

        logger.info("Ticket saved", extra={"ticket_id": ticket_id, "has_image": bool(cached_image)})
        return ticket_id

    def get(self, ticket_id: str) -> Optional[LoadedTicket]:
        """Load one ticket, or None if it is missing or unreadable."""
        if not self.configured:
            return None

        try:
            row = self.repository.fetch_by_id(ticket_id)
        except Exception as exc:
            logger.error("Failed to fetch ticket", extra={"ticket_id": ticket_id, "error": str(exc)})
            return None
        if not row:
            return None

        try:
            return map_row(row)
        except SchemaValidationError as exc:
            logger.warning("Stored ticket failed to map", extra={"ticket_id": ticket_id, "error": str(exc)})
            return None

    def list_recent(self, limit: int = 12) -> List[LoadedTicket]:
        """Newest tickets first; rows that fail to map are skipped."""
        if not self.configured or limit <= 0:
            return []

        try:
            rows = self.repository.fetch_recent(limit)
        except Exception as exc:
            logger.error("Failed to list recent tickets", extra={"error": str(exc)})
            return []

        loaded: List[LoadedTicket] = []
        for row in rows:
            try:
                loaded.append(map_row(row))
            except SchemaValidationError as exc:
                logger.warning("Skipping unmappable ticket", extra={"ticket_id": row.get("id"), "error": str(exc)})
        return loaded

    def mark_paid(self, ticket_id: str, session_id: str) -> UnlockResult:
        """
        Unlock a ticket with a payment session that may be used only once.

        1. Look for any ticket already holding session_id.
        2. If it is this ticket the call is a replay: success, no write.
           If it is another ticket the payment is being reused: failure.
        3. Otherwise attach the session to this ticket and mark it paid.

        The unique constraint on stripe_session_id settles concurrent unlocks
        that both pass step 1; the loser sees an IntegrityError and reports the
        session as used. Failures are returned, never raised.
        """
        if not self.configured:
            return UnlockResult(UnlockOutcome.UNAVAILABLE, "Database not connected")

        try:
            holders = self.repository.find_ids_by_session(session_id)
            if holders:
                if holders[0] == ticket_id:
                    return UnlockResult(UnlockOutcome.REPLAYED)
                logger.warning(
                    "Rejected reused payment session",
                    extra={"ticket_id": ticket_id, "holder_id": holders[0]},
                )
                return UnlockResult(UnlockOutcome.SESSION_USED, SESSION_USED_MESSAGE)

            try:
                updated = self.repository.mark_paid(ticket_id, session_id)
            except IntegrityError:
                logger.warning(
                    "Payment session claimed concurrently by another ticket",
                    extra={"ticket_id": ticket_id},
                )
                return UnlockResult(UnlockOutcome.SESSION_USED, SESSION_USED_MESSAGE)

            if updated:
                logger.info("Ticket unlocked", extra={"ticket_id": ticket_id})
                return UnlockResult(UnlockOutcome.UNLOCKED)
            return self._explain_no_update(ticket_id)
        except Exception as exc:
            logger.error("Payment verification failed", extra={"ticket_id": ticket_id, "error": str(exc)})
            return UnlockResult(UnlockOutcome.ERROR, VERIFICATION_FAILED_MESSAGE)

    def _explain_no_update(self, ticket_id: str) -> UnlockResult:
        row = self.repository.fetch_by_id(ticket_id)
        if not row:
            return UnlockResult(UnlockOutcome.NOT_FOUND, "Ticket not found.")
        # Paid with another session; that session stays attached.
        return UnlockResult(UnlockOutcome.ALREADY_UNLOCKED, "Ticket is already unlocked.")


def map_row(row: Dict[str, Any]) -> LoadedTicket:
    """Rebuild the frontend shape from a tickets row; layout is always standard."""
    stored = StoredTicket.model_validate(row)
    ticket_data = TicketRecord.model_validate(
        {
            "eventDetails": stored.event_details,
            "visualTheme": stored.visual_theme,
            "giftCopy": stored.gift_copy,
            "aiPrompts": stored.ai_prompts,
            "layoutGuide": LayoutGuide.standard().to_document(),
        }
    )
    return LoadedTicket(
        id=stored.id,
        ticket_data=ticket_data,
        image_url=stored.ai_prompts.get("cached_image_base64") or "",
        is_paid=stored.is_paid,
    )
