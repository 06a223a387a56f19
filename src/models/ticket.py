"""
Ticket models.

TicketRecord is the structured output the model must produce. Attributes are
snake_case in Python; the documents exchanged with the model and stored in the
database use camelCase keys.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class TicketModel(BaseModel):
    """Base for the generated sub-documents: camelCase on the wire, frozen."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_document(self) -> dict:
        """Dump in the camelCase shape stored in the tickets table."""
        return self.model_dump(by_alias=True, exclude_none=True)


class EventDetails(TicketModel):
    """Facts lifted from the ticket text or screenshot."""

    artist_or_event: str
    venue: str
    date: str
    seat_info: str = ""
    personal_message: str = ""

    @field_validator("artist_or_event", "venue", "date")
    @classmethod
    def validate_required(cls, value: str) -> str:
        """An empty mandatory field means the extraction was incomplete."""
        cleaned = (value or "").strip()
        if not cleaned:
            raise ValueError("artistOrEvent, venue and date must be provided")
        return cleaned


class Typography(TicketModel):
    headline_font: str = ""
    body_font: str = ""


class VisualTheme(TicketModel):
    """Palette, textures and fonts suggested for the ticket design."""

    color_palette: List[str] = Field(default_factory=list)
    textures: List[str] = Field(default_factory=list)
    typography: Typography = Field(default_factory=Typography)
    mood_keywords: List[str] = Field(default_factory=list)
    icon_ideas: List[str] = Field(default_factory=list)


class AiPrompts(TicketModel):
    """Artwork prompts; the cached image is only attached when persisting."""

    background_prompt: str = ""
    ticket_art_prompt: str = ""
    cached_image_base64: Optional[str] = Field(default=None, alias="cached_image_base64")


class GiftCopy(TicketModel):
    ticket_title: str = ""
    tagline: str = ""
    emotional_description: str = ""
    gift_message: str = ""


class FontWeights(TicketModel):
    event_name: str = ""
    seat_info: str = ""
    extras: str = ""


class LayoutGuide(TicketModel):
    recommended_layout: str = ""
    hierarchy_notes: str = ""
    font_weights: FontWeights = Field(default_factory=FontWeights)

    @classmethod
    def standard(cls) -> "LayoutGuide":
        """Layout used for every ticket loaded back from the store."""
        return cls(
            recommended_layout="standard",
            hierarchy_notes="",
            font_weights=FontWeights(event_name="bold", seat_info="medium", extras="light"),
        )


class TicketRecord(TicketModel):
    """Complete design metadata for one ticket."""

    event_details: EventDetails
    visual_theme: VisualTheme = Field(default_factory=VisualTheme)
    ai_prompts: AiPrompts = Field(default_factory=AiPrompts)
    gift_copy: GiftCopy = Field(default_factory=GiftCopy)
    layout_guide: LayoutGuide = Field(default_factory=LayoutGuide)


class StoredTicket(BaseModel):
    """A row of the tickets table."""

    id: str
    created_at: datetime
    user_id: Optional[str] = None
    event_details: dict
    visual_theme: dict = Field(default_factory=dict)
    gift_copy: dict = Field(default_factory=dict)
    ai_prompts: dict = Field(default_factory=dict)
    is_paid: bool = False
    stripe_session_id: Optional[str] = None


class LoadedTicket(BaseModel):
    """A stored ticket mapped back into the shape the frontend renders."""

    id: str
    ticket_data: TicketRecord
    image_url: str = ""
    is_paid: bool = False

    def to_payload(self) -> dict:
        return {
            "id": self.id,
            "ticketData": self.ticket_data.to_document(),
            "imageUrl": self.image_url,
            "isPaid": self.is_paid,
        }


class TicketCreateRequest(BaseModel):
    """Inbound payload for POST /tickets."""

    text: Optional[str] = None
    image_base64: Optional[str] = None
    user_id: Optional[str] = None
