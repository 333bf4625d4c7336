"""
Error handling tests: status codes, error body shape and validation messages.
"""

from services.meal_service import MealService
from domain.schemas.validation import error_message, first_error_message
from test_fixtures import LUNCH, register_user


def test_unexpected_error_is_500_with_generic_body(client, monkeypatch):
    register_user(client)

    def boom(db, user_id):
        raise RuntimeError("database is on fire")

    monkeypatch.setattr(MealService, "list_meals", boom)
    response = client.get("/meals")

    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert body["error"]["code"] == "INTERNAL_SERVER_ERROR"
    assert "fire" not in body["error"]["message"]


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/nope")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "HTTP_404"


def test_invalid_json_body_is_400(client):
    register_user(client)

    response = client.post(
        "/meals", content=b"{not json", headers={"content-type": "application/json"}
    )

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Request body must be valid JSON"


def test_missing_body_is_400(client):
    response = client.post("/users")

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Request body is required"


def test_non_object_body_is_400(client):
    register_user(client)

    response = client.post("/meals", json=[LUNCH])

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


def test_responses_carry_request_id(client):
    response = client.get("/health-check")

    assert response.headers["X-Request-ID"]
    assert float(response.headers["X-Process-Time"]) >= 0


def test_error_message_fallbacks():
    assert first_error_message([]) == "Request validation failed"
    assert (
        error_message({"loc": ("body", "calories"), "type": "int_parsing", "msg": "bad int"})
        == "Calories: bad int"
    )
