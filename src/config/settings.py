"""
Environment-specific configuration settings.

Loaded and validated once at startup; services receive the resulting object
instead of reading the environment themselves.
"""

from dataclasses import dataclass
import os
from typing import Optional

from utils.error_handling import ConfigurationError

# Width/height pairs accepted by the Nova Canvas / Titan image models.
ASPECT_RATIO_DIMENSIONS = {
    "16:9": (1280, 720),
    "1:1": (1024, 1024),
    "4:3": (1152, 864),
    "3:2": (1152, 768),
    "21:9": (1344, 576),
}


@dataclass
class Settings:
    """Application settings with cost-optimized defaults."""

    # Environment
    environment: str = "dev"
    aws_region: str = "us-east-1"

    # Bedrock Configuration
    model_id: str = "anthropic.claude-3-haiku-20240307-v1:0"  # Vision capable, cheap
    image_model_id: str = "amazon.nova-canvas-v1:0"
    max_tokens: int = 4096
    image_aspect_ratio: str = "16:9"

    # Ticket store
    database_url: Optional[str] = None
    db_secret_arn: Optional[str] = None
    db_auto_create: bool = False
    recent_tickets_limit: int = 12

    log_level: str = "INFO"

    def __post_init__(self) -> None:
        self.validate()

    @property
    def store_configured(self) -> bool:
        """Whether any database location is known; otherwise demo mode."""
        return bool(self.database_url or self.db_secret_arn)

    @property
    def image_dimensions(self) -> tuple:
        """Width and height for the configured aspect ratio."""
        return ASPECT_RATIO_DIMENSIONS[self.image_aspect_ratio]

    def validate(self) -> None:
        """Reject values that would only fail later, deep inside a request."""
        if self.image_aspect_ratio not in ASPECT_RATIO_DIMENSIONS:
            supported = ", ".join(sorted(ASPECT_RATIO_DIMENSIONS))
            raise ConfigurationError(
                f"IMAGE_ASPECT_RATIO must be one of {supported}, got {self.image_aspect_ratio!r}"
            )
        if self.max_tokens <= 0:
            raise ConfigurationError("MAX_TOKENS must be positive")
        if self.recent_tickets_limit <= 0:
            raise ConfigurationError("RECENT_TICKETS_LIMIT must be positive")
        if not self.model_id or not self.image_model_id:
            raise ConfigurationError("MODEL_ID and IMAGE_MODEL_ID must not be empty")

    @classmethod
    def from_environment(cls) -> "Settings":
        """Load settings from environment variables."""
        region = (
            os.environ.get("BEDROCK_REGION")
            or os.environ.get("AWS_REGION")
            or cls.aws_region
        )
        return cls(
            environment=os.environ.get("ENVIRONMENT", "dev"),
            aws_region=region,
            model_id=os.environ.get("MODEL_ID", cls.model_id),
            image_model_id=os.environ.get("IMAGE_MODEL_ID", cls.image_model_id),
            max_tokens=_int_env("MAX_TOKENS", cls.max_tokens),
            image_aspect_ratio=os.environ.get("IMAGE_ASPECT_RATIO", cls.image_aspect_ratio),
            database_url=os.environ.get("DATABASE_URL") or None,
            db_secret_arn=os.environ.get("DB_SECRET_ARN") or None,
            db_auto_create=os.environ.get("DB_AUTO_CREATE", "false").lower() == "true",
            recent_tickets_limit=_int_env("RECENT_TICKETS_LIMIT", cls.recent_tickets_limit),
            log_level=os.environ.get("LOG_LEVEL", cls.log_level).upper(),
        )


def _int_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw in (None, ""):
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}")
