"""Outcome types for operations that report failure without raising."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from models.ticket import TicketRecord


class ImageStatus(str, Enum):
    """What happened when a background render was requested."""

    NOT_ATTEMPTED = "not_attempted"
    SUCCEEDED = "succeeded"
    DECLINED = "declined"
    FAILED = "failed"


@dataclass(frozen=True)
class ImageResult:
    """Background render outcome; data_uri is "" unless the render succeeded."""

    status: ImageStatus
    data_uri: str = ""
    note: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.status is ImageStatus.SUCCEEDED


class UnlockOutcome(str, Enum):
    """Result of presenting a payment session for a ticket."""

    UNLOCKED = "unlocked"
    REPLAYED = "replayed"
    ALREADY_UNLOCKED = "already_unlocked"
    SESSION_USED = "session_used"
    NOT_FOUND = "not_found"
    UNAVAILABLE = "unavailable"
    ERROR = "error"


_SUCCESSFUL_OUTCOMES = {
    UnlockOutcome.UNLOCKED,
    UnlockOutcome.REPLAYED,
    UnlockOutcome.ALREADY_UNLOCKED,
}


@dataclass(frozen=True)
class UnlockResult:
    outcome: UnlockOutcome
    message: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.outcome in _SUCCESSFUL_OUTCOMES

    def to_payload(self) -> dict:
        payload = {"success": self.success, "outcome": self.outcome.value}
        if self.message:
            payload["message"] = self.message
        return payload


@dataclass(frozen=True)
class CreatedTicket:
    """Everything the frontend needs right after generation."""

    ticket_id: Optional[str]
    ticket_data: TicketRecord
    image: ImageResult

    @property
    def image_url(self) -> str:
        return self.image.data_uri

    def to_payload(self) -> dict:
        return {
            "id": self.ticket_id,
            "ticketData": self.ticket_data.to_document(),
            "imageUrl": self.image_url,
            "imageStatus": self.image.status.value,
            "saved": self.ticket_id is not None,
        }
