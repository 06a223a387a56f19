"""Pydantic models for ticket records and API payloads."""

from models.results import (  # noqa: F401
    CreatedTicket,
    ImageResult,
    ImageStatus,
    UnlockOutcome,
    UnlockResult,
)
from models.schema import TICKET_SCHEMA  # noqa: F401
from models.ticket import (  # noqa: F401
    AiPrompts,
    EventDetails,
    FontWeights,
    GiftCopy,
    LayoutGuide,
    LoadedTicket,
    StoredTicket,
    TicketCreateRequest,
    TicketRecord,
    Typography,
    VisualTheme,
)
