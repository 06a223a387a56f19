"""
Pytest configuration to ensure paths are set up correctly for tests.

This allows imports like `from handlers import main` to work when running
tests, simulating the Lambda environment where code is deployed from the
src/ directory.
"""

import json
import os
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest


def _ensure_paths_on_sys_path() -> None:
    """Add src/ to sys.path if missing, mirroring Code.from_asset("src")."""
    src_root = Path(__file__).resolve().parents[1] / "src"
    src_str = str(src_root)
    if src_str not in sys.path:
        sys.path.insert(0, src_str)


_ensure_paths_on_sys_path()

# Offline-friendly defaults so tests never reach AWS or a real database.
os.environ.setdefault("AWS_REGION", "us-east-1")
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
os.environ.setdefault("ENVIRONMENT", "dev")
os.environ.pop("DATABASE_URL", None)
os.environ.pop("DB_SECRET_ARN", None)

from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from config.settings import Settings  # noqa: E402
from repositories.ticket_repo import TicketRepository  # noqa: E402
from services.ticket_service import TicketStore  # noqa: E402


TAYLOR_SWIFT_RECORD = {
    "eventDetails": {
        "artistOrEvent": "Taylor Swift",
        "venue": "MetLife Stadium, East Rutherford NJ",
        "date": "08/15/2025",
        "seatInfo": "Sec 12 Row A",
        "personalMessage": "",
    },
    "visualTheme": {
        "colorPalette": ["blush pink", "lavender", "holographic silver"],
        "textures": ["glitter", "iridescent foil"],
        "typography": {"headlineFont": "Playfair Display", "bodyFont": "Inter"},
        "moodKeywords": ["dreamy", "glowing"],
        "iconIdeas": ["sparkles", "friendship bracelets"],
    },
    "aiPrompts": {
        "backgroundPrompt": "A shimmering stadium under a lavender sky with floating light particles",
        "ticketArtPrompt": "Holographic ribbon of stars framing the stage",
    },
    "giftCopy": {
        "ticketTitle": "Your Taylor Swift Keepsake",
        "tagline": "The Eras Tour",
        "emotionalDescription": "A memory to last a lifetime",
        "giftMessage": "Get ready to sing every word together!",
    },
    "layoutGuide": {
        "recommendedLayout": "hero-center",
        "hierarchyNotes": "Artist name dominates the top band",
        "fontWeights": {"eventName": "black", "seatInfo": "semibold", "extras": "regular"},
    },
}


def bedrock_body(payload: dict) -> dict:
    """Shape a payload like the invoke_model response streaming body."""
    return {"body": MagicMock(read=lambda: json.dumps(payload).encode())}


def text_completion(text: str) -> dict:
    return bedrock_body({"content": [{"type": "text", "text": text}], "stop_reason": "end_turn"})


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def record_payload():
    return json.loads(json.dumps(TAYLOR_SWIFT_RECORD))


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    engine.dispose()


@pytest.fixture
def repository(engine):
    repo = TicketRepository(engine)
    repo.create_schema()
    return repo


@pytest.fixture
def store(repository):
    return TicketStore(repository)


@pytest.fixture
def bedrock_client(record_payload):
    """Client answering metadata calls with the record and image calls with a PNG."""
    client = MagicMock()

    def invoke_model(modelId, **kwargs):
        if "nova" in modelId or "titan" in modelId:
            return bedrock_body({"images": ["iVBORw0KGgo="], "error": None})
        return text_completion(json.dumps(record_payload))

    client.invoke_model.side_effect = invoke_model
    return client


@pytest.fixture
def bedrock_reply():
    """Factory turning a payload into an invoke_model response."""
    return bedrock_body


@pytest.fixture
def text_reply():
    """Factory turning model text into an invoke_model response."""
    return text_completion
