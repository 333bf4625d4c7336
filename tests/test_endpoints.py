from app.config import settings


def test_health_check(client):
    r = client.get("/health-check")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert body["service"] == settings.app_name
    assert body["version"] == settings.app_version


def test_openapi_lists_routes(client):
    r = client.get("/openapi.json")
    assert r.status_code == 200
    paths = r.json()["paths"]
    assert set(paths) >= {"/users", "/meals", "/meals/{meal_id}", "/health-check"}
    assert set(paths["/meals/{meal_id}"]) == {"get", "put", "delete"}
