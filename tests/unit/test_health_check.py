import json
import os
from unittest.mock import patch

from handlers import health_check


def test_health_check_returns_ok():
    resp = health_check.lambda_handler({}, None)
    assert resp["statusCode"] == 200
    assert "ok" in resp["body"]


def test_health_check_reports_store_mode():
    with patch.dict(os.environ, {"DATABASE_URL": "sqlite://", "ENVIRONMENT": "test"}):
        body = json.loads(health_check.lambda_handler({}, None)["body"])
    assert body["store"] == "database"
    assert body["environment"] == "test"

    body = json.loads(health_check.lambda_handler({}, None)["body"])
    assert body["store"] == "demo"


def test_health_check_reports_invalid_settings():
    with patch.dict(os.environ, {"IMAGE_ASPECT_RATIO": "9:21"}):
        resp = health_check.lambda_handler({}, None)

    body = json.loads(resp["body"])
    assert resp["statusCode"] == 200
    assert body["status"] == "degraded"
    assert "IMAGE_ASPECT_RATIO" in body["error"]
