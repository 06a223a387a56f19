import os
from unittest.mock import patch

import pytest

from config.settings import Settings
from utils.error_handling import ConfigurationError


def test_defaults():
    settings = Settings()
    assert settings.model_id == "anthropic.claude-3-haiku-20240307-v1:0"
    assert settings.image_dimensions == (1280, 720)
    assert settings.recent_tickets_limit == 12
    assert settings.store_configured is False


def test_from_environment_reads_overrides():
    env = {
        "ENVIRONMENT": "prod",
        "BEDROCK_REGION": "eu-west-1",
        "MODEL_ID": "anthropic.claude-3-5-sonnet-20240620-v1:0",
        "IMAGE_ASPECT_RATIO": "21:9",
        "DATABASE_URL": "postgresql+psycopg2://u:p@db/tickets",
        "RECENT_TICKETS_LIMIT": "24",
        "DB_AUTO_CREATE": "true",
    }
    with patch.dict(os.environ, env):
        settings = Settings.from_environment()

    assert settings.environment == "prod"
    assert settings.aws_region == "eu-west-1"
    assert settings.model_id.startswith("anthropic.claude-3-5-sonnet")
    assert settings.image_dimensions == (1344, 576)
    assert settings.recent_tickets_limit == 24
    assert settings.db_auto_create is True
    assert settings.store_configured is True


def test_secret_arn_counts_as_store_config():
    assert Settings(db_secret_arn="arn:aws:secretsmanager:us-east-1:1:secret:db").store_configured


def test_unsupported_aspect_ratio_rejected():
    with pytest.raises(ConfigurationError, match="IMAGE_ASPECT_RATIO"):
        Settings(image_aspect_ratio="9:21")


def test_non_integer_env_rejected():
    with patch.dict(os.environ, {"MAX_TOKENS": "lots"}):
        with pytest.raises(ConfigurationError, match="MAX_TOKENS"):
            Settings.from_environment()


def test_non_positive_limit_rejected():
    with pytest.raises(ConfigurationError):
        Settings(recent_tickets_limit=0)
