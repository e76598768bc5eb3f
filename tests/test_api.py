import pytest
from fastapi.testclient import TestClient

from factory_dashboard.api.main import create_app
from factory_dashboard.repositories.memory import MemoryStore

JAIPUR = "Jaipur Manufacturing Unit"


def _login(client, username="sanjay", password="password"):
    return client.post("/api/login", json={"username": username, "password": password})


def test_health(client):
    res = client.get("/api/health")
    assert res.status_code == 200
    assert res.json()["message"] == "Healthy"
    assert res.headers["X-Correlation-ID"]


def test_correlation_id_is_echoed(client):
    res = client.get("/api/health", headers={"X-Correlation-ID": "abc-123"})
    assert res.headers["X-Correlation-ID"] == "abc-123"


def test_seeded_factories_listed(client):
    res = client.get("/api/factories")
    assert res.status_code == 200
    assert [f["name"] for f in res.json()] == [
        "Jaipur Manufacturing Unit",
        "Pune Assembly Unit",
        "Coimbatore Production",
    ]


def test_create_factory_and_reject_duplicate(client):
    res = client.post("/api/factories", json={"name": "Nashik Plant", "location": "Nashik"})
    assert res.status_code == 201
    assert res.json()["id"] == 4

    dup = client.post("/api/factories", json={"name": "Nashik Plant", "location": "Again"})
    assert dup.status_code == 400
    assert dup.json()["error"]["type"] == "validation_error"


def test_dashboard_metrics_for_seeded_factory(client):
    res = client.get(f"/api/dashboard/{JAIPUR}")
    assert res.status_code == 200
    assert res.json() == {
        "productionEfficiency": 68,
        "activeLines": "4/6",
        "todaysOutput": 4223,
        "attendance": "52/60",
        "attendanceRate": 87,
    }


def test_dashboard_for_unknown_factory_is_zero(client):
    res = client.get("/api/dashboard/Nowhere")
    assert res.status_code == 200
    assert res.json()["activeLines"] == "0/0"
    assert res.json()["attendanceRate"] == 0


def test_production_list_uses_camel_case(client):
    res = client.get(f"/api/production/{JAIPUR}")
    assert res.status_code == 200
    lines = res.json()
    assert len(lines) == 6
    assert lines[0]["name"] == "Line 01"
    assert lines[0]["factoryId"] == JAIPUR
    assert "factory_id" not in lines[0]


def test_create_production_line(client):
    res = client.post(
        "/api/production",
        json={"name": "Line 07", "product": "Frames", "target": 800, "completed": 423, "factoryId": JAIPUR},
    )
    assert res.status_code == 201
    body = res.json()
    assert body["id"] == 7
    assert body["efficiency"] == 53
    assert body["status"] == "Active"


def test_create_production_line_for_unknown_factory(client):
    res = client.post(
        "/api/production",
        json={"name": "Line 07", "product": "Frames", "target": 800, "factoryId": "Ghost"},
    )
    assert res.status_code == 400
    assert res.json()["error"]["details"][0]["field"] == "factoryId"


def test_malformed_body_returns_400_with_field_cause(client):
    res = client.post("/api/production", json={"name": "Line 07", "product": "Frames", "factoryId": JAIPUR})
    assert res.status_code == 400
    body = res.json()
    assert body["status"] == 400
    assert "target" in body["message"]
    assert body["error"]["type"] == "validation_error"
    assert body["error"]["details"]


def test_patch_production_completion(client):
    res = client.patch("/api/production/3", json={"completed": 800})
    assert res.status_code == 200
    assert res.json()["status"] == "Completed"
    assert res.json()["efficiency"] == 100


def test_patch_unknown_field_is_rejected(client):
    res = client.patch("/api/production/1", json={"factoryId": "Pune Assembly Unit"})
    assert res.status_code == 400
    assert client.get(f"/api/production/{JAIPUR}").json()[0]["factoryId"] == JAIPUR


def test_patch_null_for_required_field_is_rejected(client):
    res = client.patch("/api/production/1", json={"target": None})
    assert res.status_code == 400


def test_patch_unknown_id_returns_404(client):
    res = client.patch("/api/production/999", json={"completed": 1})
    assert res.status_code == 404
    assert res.json()["message"] == "Production line not found"


def test_patch_non_numeric_id_returns_400(client):
    res = client.patch("/api/production/abc", json={"completed": 1})
    assert res.status_code == 400


def test_patch_out_of_range_id_returns_400(client):
    res = client.patch("/api/production/99999999999999999999999", json={"completed": 1})
    assert res.status_code == 400
    assert res.json()["error"]["type"] == "validation_error"
    assert client.get("/api/users/0").status_code == 400


def test_derived_efficiency_is_an_integer_percent(client):
    line = client.get(f"/api/production/{JAIPUR}").json()[2]
    assert line["efficiency"] == 53
    assert isinstance(line["efficiency"], int)


NEW_LINE = {"name": "Line 07", "product": "Frames", "target": 800, "factoryId": JAIPUR}
NEW_ITEM = {"material": "Rubber Seals", "currentStock": 10, "unit": "units", "minRequired": 100, "factoryId": JAIPUR}


@pytest.mark.parametrize("value", ["Infinity", "-Infinity", "NaN"])
def test_non_finite_efficiency_is_rejected(client, value):
    created = client.post("/api/production", json={**NEW_LINE, "efficiency": value})
    assert created.status_code == 400
    patched = client.patch("/api/production/1", json={"efficiency": value})
    assert patched.status_code == 400

    assert client.get(f"/api/dashboard/{JAIPUR}").status_code == 200
    assert len(client.get(f"/api/production/{JAIPUR}").json()) == 6


@pytest.mark.parametrize("field", ["currentStock", "minRequired"])
def test_non_finite_stock_figures_are_rejected(client, field):
    created = client.post("/api/inventory", json={**NEW_ITEM, field: "Infinity"})
    assert created.status_code == 400
    assert field in created.json()["message"]
    patched = client.patch("/api/inventory/1", json={field: "Infinity"})
    assert patched.status_code == 400

    items = client.get(f"/api/inventory/{JAIPUR}").json()
    assert len(items) == 5
    assert all(item[field] is not None for item in items)


def test_inventory_status_recomputed_on_patch(client):
    items = client.get(f"/api/inventory/{JAIPUR}").json()
    copper = next(item for item in items if item["material"] == "Copper Wire")
    assert copper["status"] == "Low Stock"

    res = client.patch(f"/api/inventory/{copper['id']}", json={"currentStock": 30})
    assert res.status_code == 200
    assert res.json()["status"] == "Critical"


def test_create_inventory_item_ignores_client_status(client):
    res = client.post(
        "/api/inventory",
        json={
            "material": "Rubber Seals", "currentStock": 10, "unit": "units",
            "minRequired": 100, "status": "Adequate", "factoryId": JAIPUR,
        },
    )
    assert res.status_code == 201
    assert res.json()["status"] == "Critical"


def test_workforce_create_rejects_inconsistent_headcount(client):
    res = client.post(
        "/api/workforce",
        json={"department": "Stores", "total": 10, "present": 5, "onLeave": 1, "absent": 1, "factoryId": JAIPUR},
    )
    assert res.status_code == 400


def test_workforce_patch_updates_attendance(client):
    res = client.patch("/api/workforce/3", json={"present": 7, "onLeave": 0})
    assert res.status_code == 200
    assert client.get(f"/api/dashboard/{JAIPUR}").json()["attendance"] == "53/60"


def test_workforce_patch_inconsistent_headcount(client):
    res = client.patch("/api/workforce/1", json={"absent": 5})
    assert res.status_code == 400
    assert res.json()["error"]["type"] == "validation_error"


def test_alerts_unread_first_after_marking_read(client):
    first = client.get(f"/api/alerts/{JAIPUR}").json()[0]
    assert first["read"] is False

    res = client.patch(f"/api/alerts/{first['id']}", json={"read": True})
    assert res.status_code == 200

    alerts = client.get(f"/api/alerts/{JAIPUR}").json()
    assert alerts[-1]["id"] == first["id"]
    assert [a["read"] for a in alerts] == [False, False, False, True]


def test_create_alert(client):
    res = client.post(
        "/api/alerts",
        json={"type": "info", "title": "Shift change", "message": "B shift started", "time": "just now", "factoryId": JAIPUR},
    )
    assert res.status_code == 201
    assert res.json()["read"] is False


def test_users_create_and_get(client):
    res = client.post(
        "/api/users",
        json={"username": "meera", "password": "pw", "name": "Meera", "role": "Planner", "factory": JAIPUR},
    )
    assert res.status_code == 201
    body = res.json()
    assert "password" not in body

    fetched = client.get(f"/api/users/{body['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["username"] == "meera"

    assert client.get("/api/users/999").status_code == 404


def test_user_for_unknown_factory_is_rejected(client):
    res = client.post(
        "/api/users",
        json={"username": "ravi", "password": "pw", "name": "Ravi", "role": "Planner", "factory": "No Such Factory"},
    )
    assert res.status_code == 400
    assert res.json()["error"]["details"][0]["field"] == "factory"


def test_login_current_user_and_logout(client):
    assert client.get("/api/auth/current-user").status_code == 401

    res = _login(client)
    assert res.status_code == 200
    assert res.json()["success"] is True
    assert res.json()["user"]["username"] == "sanjay"
    assert "password" not in res.json()["user"]

    me = client.get("/api/auth/current-user")
    assert me.status_code == 200
    assert me.json()["name"] == "Sanjay Kumar"

    out = client.post("/api/logout")
    assert out.json() == {"success": True}
    assert client.get("/api/auth/current-user").status_code == 401


def test_login_with_wrong_password(client):
    res = _login(client, password="nope")
    assert res.status_code == 401
    assert res.json()["error"]["type"] == "auth_error"


def test_tampered_session_cookie_is_rejected(client, app_settings):
    cookie = f"{app_settings.SESSION_COOKIE_NAME}=not-a-token"
    res = client.get("/api/auth/current-user", headers={"Cookie": cookie})
    assert res.status_code == 401


def test_unseeded_app_starts_empty(app_settings):
    settings = app_settings.model_copy(update={"AUTO_SEED": False})
    with TestClient(create_app(settings, store=MemoryStore())) as client:
        assert client.get("/api/factories").json() == []


def test_websocket_subscription_accepts_ping(client):
    with client.websocket_connect(f"/ws/updates/{JAIPUR}") as ws:
        ws.send_text("ping")
        assert ws.receive_text() == "pong"


def test_openapi_documents_routes_and_websocket(app_settings):
    from factory_dashboard.api.generate_openapi import build_openapi

    schema = build_openapi(create_app(app_settings, store=MemoryStore()))
    assert "/api/dashboard/{factory_id}" in schema["paths"]
    assert "/api/production/{line_id}" in schema["paths"]
    assert schema["x-websocket-endpoints"][0]["path"] == "/ws/updates/{factoryId}"
