"""
SQLAlchemy engine construction for the ticket store.

Returns None when no database is configured so the store can run in demo mode.
"""

from __future__ import annotations

import json
from typing import Optional

import boto3
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from config.settings import Settings
from utils.logging_config import get_logger

logger = get_logger(__name__)


def create_db_engine(settings: Settings) -> Optional[Engine]:
    """Create a pooled engine from DATABASE_URL or the RDS secret."""
    db_url = settings.database_url
    if not db_url and settings.db_secret_arn:
        db_url = _secret_to_db_url(settings.db_secret_arn, settings.aws_region)
    if not db_url:
        logger.warning(
            'Ticket store config missing; running in "demo mode" (no saving). '
            "Set DATABASE_URL or DB_SECRET_ARN to enable saving."
        )
        return None

    if db_url.startswith("sqlite"):
        return create_engine(db_url)

    # Small pool: one warm Lambda container serves one request at a time.
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=1,
        max_overflow=2,
        pool_pre_ping=True,
        pool_recycle=300,
    )


def _secret_to_db_url(secret_arn: str, region: str) -> Optional[str]:
    """Build a SQLAlchemy URL from an RDS secret."""
    try:
        sm = boto3.client("secretsmanager", region_name=region)
        secret = json.loads(sm.get_secret_value(SecretId=secret_arn)["SecretString"])
    except Exception as exc:
        logger.warning("Failed to load DB secret", extra={"error": str(exc)})
        return None

    host = secret.get("host")
    port = secret.get("port", 5432)
    username = secret.get("username")
    password = secret.get("password")
    dbname = secret.get("dbname", "postgres")
    if not (host and username and password):
        logger.warning("DB secret is missing host, username or password")
        return None
    return f"postgresql+psycopg2://{username}:{password}@{host}:{port}/{dbname}"
