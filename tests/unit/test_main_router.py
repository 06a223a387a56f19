import json

from handlers import main


def _event(method, path):
    return {"requestContext": {"http": {"method": method, "path": path}}}


def test_main_routes_health(monkeypatch):
    monkeypatch.setattr(main.health_check, "lambda_handler", lambda e, c: {"status": "ok"})
    resp = main.lambda_handler(_event("GET", "/health"), None)
    assert resp["status"] == "ok"


def test_main_routes_ticket_creation(monkeypatch):
    marker = {}

    def fake_handler(event, context):
        marker["called"] = True
        return {"statusCode": 201}

    monkeypatch.setattr(main.ticket_generation, "lambda_handler", fake_handler)
    resp = main.lambda_handler(_event("POST", "/tickets"), None)
    assert resp["statusCode"] == 201
    assert marker["called"] is True


def test_main_routes_image(monkeypatch):
    monkeypatch.setattr(main.ticket_generation, "image_handler", lambda e, c: {"image": True})
    resp = main.lambda_handler(_event("POST", "/tickets/image"), None)
    assert resp["image"] is True


def test_main_routes_unlock(monkeypatch):
    monkeypatch.setattr(main.payments, "lambda_handler", lambda e, c: {"unlock": True})
    resp = main.lambda_handler(_event("POST", "/tickets/123/unlock"), None)
    assert resp["unlock"] is True


def test_main_routes_ticket_lookup(monkeypatch):
    monkeypatch.setattr(main.ticket_lookup, "lambda_handler", lambda e, c: {"one": True})
    resp = main.lambda_handler(_event("GET", "/tickets/123"), None)
    assert resp["one"] is True


def test_main_routes_recent(monkeypatch):
    monkeypatch.setattr(main.ticket_lookup, "recent_handler", lambda e, c: {"recent": True})
    assert main.lambda_handler(_event("GET", "/tickets"), None)["recent"] is True
    assert main.lambda_handler(_event("GET", "/tickets/"), None)["recent"] is True


def test_main_unknown_route():
    resp = main.lambda_handler(_event("DELETE", "/tickets/123"), None)
    assert resp["statusCode"] == 404
    body = json.loads(resp["body"])
    assert body["message"] == "Route not found"


def test_main_unlock_prefix_rejects_other_actions():
    resp = main.lambda_handler(_event("POST", "/tickets/123/refund"), None)
    assert resp["statusCode"] == 404
