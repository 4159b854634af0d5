"""HTTP boundary tests: routing, request validation and error-kind → status mapping."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from fastapi.testclient import TestClient
from app.main import app


@pytest.fixture
def client(db):
    return TestClient(app)


@pytest.fixture
def urls(plan):
    floor = f"/api/v1/offices/{plan.office_id}/floors/{plan.floor1}"
    return {
        "stock": f"{floor}/inventory",
        "zone_a": f"{floor}/zones/{plan.zone_a}",
        "zone_b": f"{floor}/zones/{plan.zone_b}",
    }


def create_chairs(client, urls, count=5):
    resp = client.post(urls["stock"], json={"catalog_id": "chair", "count": count})
    assert resp.status_code == 201
    return resp.json()


class TestCatalogAndHealth:
    def test_health(self, client):
        resp = client.get("/api/v1/health")
        assert resp.status_code == 200
        assert resp.json()["database"] == "ok"
        assert resp.json()["catalog_items"] == 0
        assert resp.json()["status"] == "degraded"

    def test_health_with_seeded_catalog(self, client, plan):
        body = client.get("/api/v1/health").json()
        assert body["status"] == "ok"
        assert body["catalog_items"] > 0
        assert body["open_alerts"] == 0

    def test_catalog_listing(self, client, plan):
        resp = client.get("/api/v1/inventory/catalog")
        assert resp.status_code == 200
        ids = {item["id"] for item in resp.json()}
        assert {"chair", "printer", "fire"} <= ids

    def test_catalog_item(self, client, plan):
        assert client.get("/api/v1/inventory/catalog/printer").json()["display_name"] == "Printer"
        resp = client.get("/api/v1/inventory/catalog/spaceship")
        assert resp.status_code == 404
        assert resp.json()["error"] == "NotFound"


class TestFloorInventoryApi:
    def test_create_and_list_with_usage(self, client, urls):
        stock = create_chairs(client, urls)
        assert stock["catalog"]["display_name"] == "Chair"

        resp = client.get(f"{urls['stock']}/with-usage")
        assert resp.status_code == 200
        row = resp.json()[0]
        assert (row["count"], row["used"], row["available"]) == (5, 0, 5)

    def test_duplicate_is_409(self, client, urls):
        create_chairs(client, urls)
        resp = client.post(urls["stock"], json={"catalog_id": "chair", "count": 1})
        assert resp.status_code == 409
        assert resp.json()["error"] == "Conflict"

    def test_unknown_catalog_is_400(self, client, urls):
        resp = client.post(urls["stock"], json={"catalog_id": "spaceship", "count": 1})
        assert resp.status_code == 400
        assert resp.json()["error"] == "InvalidReference"

    @pytest.mark.parametrize("body", [
        {"catalog_id": "chair", "count": -1},
        {"catalog_id": "chair", "count": 1.5},
        {"catalog_id": "chair", "count": "3"},
        {"catalog_id": "   ", "count": 1},
        {"count": 1},
    ])
    def test_malformed_body_is_400(self, client, urls, body):
        resp = client.post(urls["stock"], json=body)
        assert resp.status_code == 400
        assert resp.json()["error"] == "BadRequest"

    def test_update_missing_is_404(self, client, urls):
        resp = client.patch(f"{urls['stock']}/9999", json={"count": 1})
        assert resp.status_code == 404
        assert resp.json()["error"] == "NotFound"

    def test_delete_is_204(self, client, urls):
        stock = create_chairs(client, urls)
        resp = client.delete(f"{urls['stock']}/{stock['id']}")
        assert resp.status_code == 204
        assert client.get(urls["stock"]).json() == []


class TestZoneInventoryApi:
    def test_capacity_exceeded_reports_available(self, client, urls):
        stock = create_chairs(client, urls)
        resp = client.post(f"{urls['zone_a']}/inventory", json={"floor_stock_id": stock["id"], "quantity": 3})
        assert resp.status_code == 201

        resp = client.post(f"{urls['zone_b']}/inventory", json={"floor_stock_id": stock["id"], "quantity": 3})
        assert resp.status_code == 409
        assert resp.json() == {"error": "CapacityExceeded", "detail": "Not enough available. left=2",
                               "available": 2}

        usage = client.get(f"{urls['stock']}/{stock['id']}/usage").json()
        assert (usage["used"], usage["available"]) == (3, 2)

    def test_patch_and_list(self, client, urls):
        stock = create_chairs(client, urls)
        alloc = client.post(f"{urls['zone_a']}/inventory",
                            json={"floor_stock_id": stock["id"], "quantity": 3}).json()

        resp = client.patch(f"{urls['zone_a']}/inventory/{alloc['id']}", json={"quantity": 1})
        assert resp.status_code == 200
        assert resp.json()["quantity"] == 1

        rows = client.get(f"{urls['zone_a']}/inventory").json()
        assert rows[0]["catalog"]["id"] == "chair"
        assert (rows[0]["quantity"], rows[0]["placed"], rows[0]["remaining"]) == (1, 0, 1)

    def test_patch_through_wrong_zone_is_400(self, client, urls):
        stock = create_chairs(client, urls)
        alloc = client.post(f"{urls['zone_a']}/inventory",
                            json={"floor_stock_id": stock["id"], "quantity": 1}).json()
        resp = client.patch(f"{urls['zone_b']}/inventory/{alloc['id']}", json={"quantity": 2})
        assert resp.status_code == 400
        assert resp.json()["error"] == "InvalidReference"


class TestZoneObjectsApi:
    def test_place_move_remove(self, client, urls):
        stock = create_chairs(client, urls)
        alloc = client.post(f"{urls['zone_a']}/inventory",
                            json={"floor_stock_id": stock["id"], "quantity": 1}).json()

        resp = client.post(f"{urls['zone_a']}/objects", json={"zone_allocation_id": alloc["id"], "x": 1.0, "y": 2.5})
        assert resp.status_code == 201
        obj = resp.json()
        assert obj["rotation"] == 0.0

        resp = client.post(f"{urls['zone_a']}/objects", json={"zone_allocation_id": alloc["id"], "x": 3.0, "y": 3.0})
        assert resp.status_code == 409
        assert resp.json()["available"] == 0

        resp = client.patch(f"{urls['zone_a']}/objects/{obj['id']}", json={"rotation": 90.0})
        assert resp.status_code == 200
        assert (resp.json()["x"], resp.json()["rotation"]) == (1.0, 90.0)

        listed = client.get(f"{urls['zone_a']}/objects").json()
        assert listed[0]["catalog"]["id"] == "chair"

        assert client.delete(f"{urls['zone_a']}/objects/{obj['id']}").status_code == 204
        assert client.get(f"{urls['zone_a']}/objects").json() == []

    def test_empty_patch_is_400(self, client, urls):
        stock = create_chairs(client, urls)
        alloc = client.post(f"{urls['zone_a']}/inventory",
                            json={"floor_stock_id": stock["id"], "quantity": 1}).json()
        obj = client.post(f"{urls['zone_a']}/objects",
                          json={"zone_allocation_id": alloc["id"], "x": 1.0, "y": 1.0}).json()
        resp = client.patch(f"{urls['zone_a']}/objects/{obj['id']}", json={})
        assert resp.status_code == 400
        assert resp.json()["error"] == "BadRequest"

    def test_non_numeric_coordinate_is_400(self, client, urls):
        resp = client.post(f"{urls['zone_a']}/objects", json={"zone_allocation_id": 1, "x": "left", "y": 1.0})
        assert resp.status_code == 400


class TestAlertsApi:
    def test_overcommit_alert_listed_and_resolved(self, client, urls):
        stock = create_chairs(client, urls)
        client.post(f"{urls['zone_a']}/inventory", json={"floor_stock_id": stock["id"], "quantity": 4})
        client.patch(f"{urls['stock']}/{stock['id']}", json={"count": 1})

        alerts = client.get("/api/v1/alerts", params={"alert_type": "stock_overcommitted"}).json()
        assert len(alerts) == 1

        resp = client.put(f"/api/v1/alerts/{alerts[0]['id']}/resolve")
        assert resp.status_code == 200
        assert resp.json()["is_resolved"] == 1
        assert client.get("/api/v1/alerts", params={"is_resolved": 0}).json() == []
