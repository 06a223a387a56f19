"""
Composition root.

Builds every service from one Settings object. Tests pass their own Bedrock
client and engine instead of relying on the environment.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

import boto3
from sqlalchemy.engine import Engine

from config.settings import Settings
from repositories.engine import create_db_engine
from repositories.ticket_repo import TicketRepository
from services.creation_service import TicketCreationService
from services.image_service import ImageGenerator
from services.metadata_service import MetadataGenerator
from services.ticket_service import TicketStore
from utils.logging_config import get_logger

logger = get_logger(__name__)

_UNSET: Any = object()


@dataclass
class ServiceContainer:
    settings: Settings
    metadata_generator: MetadataGenerator
    image_generator: ImageGenerator
    ticket_store: TicketStore
    creation_service: TicketCreationService


def create_bedrock_client(settings: Settings) -> Optional[Any]:
    """bedrock-runtime client, or None when no AWS credentials resolve."""
    session = boto3.session.Session(region_name=settings.aws_region)
    if session.get_credentials() is None:
        logger.warning("No AWS credentials found; ticket generation is disabled")
        return None
    return session.client("bedrock-runtime")


def build_container(
    settings: Optional[Settings] = None,
    bedrock_client: Any = _UNSET,
    engine: Any = _UNSET,
) -> ServiceContainer:
    """
    Wire the services together.

    Pass bedrock_client=None or engine=None explicitly to force the
    unconfigured behavior regardless of the environment.
    """
    settings = settings or Settings.from_environment()
    if bedrock_client is _UNSET:
        bedrock_client = create_bedrock_client(settings)
    if engine is _UNSET:
        engine = create_db_engine(settings)

    repository = _build_repository(engine, settings)
    metadata_generator = MetadataGenerator(bedrock_client, settings)
    image_generator = ImageGenerator(bedrock_client, settings)
    ticket_store = TicketStore(repository)

    logger.info(
        "Services built",
        extra={
            "environment": settings.environment,
            "ai_configured": bedrock_client is not None,
            "store_configured": repository is not None,
        },
    )
    return ServiceContainer(
        settings=settings,
        metadata_generator=metadata_generator,
        image_generator=image_generator,
        ticket_store=ticket_store,
        creation_service=TicketCreationService(metadata_generator, image_generator, ticket_store),
    )


def _build_repository(engine: Optional[Engine], settings: Settings) -> Optional[TicketRepository]:
    if engine is None:
        return None
    repository = TicketRepository(engine)
    if settings.db_auto_create:
        repository.create_schema()
    return repository
