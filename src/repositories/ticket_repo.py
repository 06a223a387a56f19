"""Tickets table and its repository, using SQLAlchemy Core."""

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    Index,
    MetaData,
    String,
    Table,
    UniqueConstraint,
    insert,
    select,
    update,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.engine import Engine

metadata = MetaData()

# JSONB on PostgreSQL, plain JSON elsewhere (SQLite in tests).
Document = JSON().with_variant(JSONB(), "postgresql")

tickets = Table(
    "tickets",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("user_id", String(64), nullable=True),
    Column("event_details", Document, nullable=False),
    Column("visual_theme", Document, nullable=False),
    Column("gift_copy", Document, nullable=False),
    Column("ai_prompts", Document, nullable=False),
    Column("is_paid", Boolean, nullable=False, default=False),
    Column("stripe_session_id", String(255), nullable=True),
    # A payment session unlocks exactly one ticket, even under concurrent callbacks.
    UniqueConstraint("stripe_session_id", name="uq_tickets_stripe_session_id"),
    Index("ix_tickets_created_at", "created_at"),
)


class TicketRepository:
    """Thin wrapper to keep SQL organized and parameterized."""

    def __init__(self, engine: Engine):
        self.engine = engine

    def create_schema(self) -> None:
        """Create the tickets table and its constraints if missing."""
        metadata.create_all(self.engine, tables=[tickets], checkfirst=True)

    def insert(
        self,
        documents: Dict[str, dict],
        user_id: Optional[str] = None,
        created_at: Optional[datetime] = None,
    ) -> str:
        """Insert an unpaid ticket and return its id."""
        ticket_id = str(uuid.uuid4())
        stmt = insert(tickets).values(
            id=ticket_id,
            created_at=created_at or datetime.now(timezone.utc),
            user_id=user_id,
            event_details=documents["event_details"],
            visual_theme=documents["visual_theme"],
            gift_copy=documents["gift_copy"],
            ai_prompts=documents["ai_prompts"],
            is_paid=False,
        )
        with self.engine.begin() as conn:
            conn.execute(stmt)
        return ticket_id

    def fetch_by_id(self, ticket_id: str) -> Optional[Dict[str, Any]]:
        """Return one row as dict."""
        stmt = select(tickets).where(tickets.c.id == ticket_id)
        with self.engine.connect() as conn:
            row = conn.execute(stmt).fetchone()
            return dict(row._mapping) if row else None

    def find_ids_by_session(self, session_id: str) -> List[str]:
        """Ids of every ticket already holding this payment session."""
        stmt = select(tickets.c.id).where(tickets.c.stripe_session_id == session_id)
        with self.engine.connect() as conn:
            return [row.id for row in conn.execute(stmt)]

    def mark_paid(self, ticket_id: str, session_id: str) -> int:
        """
        Attach the session and flip is_paid, only while no session is attached.

        Returns the number of rows updated. Raises IntegrityError when another
        ticket already holds the session.
        """
        stmt = (
            update(tickets)
            .where(tickets.c.id == ticket_id)
            .where(tickets.c.stripe_session_id.is_(None))
            .values(is_paid=True, stripe_session_id=session_id)
        )
        with self.engine.begin() as conn:
            return conn.execute(stmt).rowcount

    def fetch_recent(self, limit: int) -> List[Dict[str, Any]]:
        """Most recently created rows, newest first."""
        stmt = select(tickets).order_by(tickets.c.created_at.desc()).limit(limit)
        with self.engine.connect() as conn:
            return [dict(row._mapping) for row in conn.execute(stmt)]
