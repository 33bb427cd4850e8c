"""Tests for the workspace HTTP API."""

import pytest
from fastapi.testclient import TestClient

from archmodel.main import create_app


@pytest.fixture
def client():
    return TestClient(create_app())


@pytest.fixture
def workspace_id(client):
    response = client.post("/workspaces", json={"name": "Shop", "description": "Online shop"})
    assert response.status_code == 201
    return response.json()["id"]


def _post(client, path, **body):
    response = client.post(path, json=body)
    assert response.status_code == 200, response.text
    return response.json()


def test_build_and_read_workspace(client, workspace_id):
    base = f"/workspaces/{workspace_id}"
    customer = _post(client, f"{base}/people", name="Customer", location="External")
    shop = _post(client, f"{base}/software-systems", name="Shop")
    api = _post(client, f"{base}/software-systems/{shop['id']}/containers", name="API", technology="FastAPI")
    orders = _post(client, f"{base}/containers/{api['id']}/components", name="Orders")
    _post(
        client,
        f"{base}/relationships",
        source_id=customer["id"],
        destination_id=orders["id"],
        description="Places orders",
    )

    assert orders["canonical_name"] == "/Shop/API/Orders"

    response = client.get(base)
    assert response.status_code == 200
    body = response.json()
    assert len(body["digest"]) == 32

    model = body["workspace"]["model"]
    assert model["people"][0]["location"] == "External"
    assert model["people"][0]["relationships"][0]["destinationId"] == orders["id"]
    container = model["softwareSystems"][0]["containers"][0]
    assert container["components"][0]["name"] == "Orders"


def test_duplicate_container_returns_same_id(client, workspace_id):
    base = f"/workspaces/{workspace_id}"
    shop = _post(client, f"{base}/software-systems", name="Shop")
    first = _post(client, f"{base}/software-systems/{shop['id']}/containers", name="C1")
    second = _post(client, f"{base}/software-systems/{shop['id']}/containers", name="C1", description="again")
    assert first["id"] == second["id"]


def test_delete_cascades_and_is_idempotent(client, workspace_id):
    base = f"/workspaces/{workspace_id}"
    shop = _post(client, f"{base}/software-systems", name="Shop")
    c1 = _post(client, f"{base}/software-systems/{shop['id']}/containers", name="C1")
    c2 = _post(client, f"{base}/software-systems/{shop['id']}/containers", name="C2")
    _post(client, f"{base}/relationships", source_id=c2["id"], destination_id=c1["id"], description="Uses")

    digest_before = client.get(base).json()["digest"]

    assert client.delete(f"{base}/elements/{c1['id']}").status_code == 204
    assert client.delete(f"{base}/elements/{c1['id']}").status_code == 204

    body = client.get(base).json()
    containers = body["workspace"]["model"]["softwareSystems"][0]["containers"]
    assert [c["name"] for c in containers] == ["C2"]
    assert containers[0]["relationships"] == []
    assert body["digest"] != digest_before


def test_unknown_workspace_and_parent(client, workspace_id):
    assert client.get("/workspaces/nope").status_code == 404

    base = f"/workspaces/{workspace_id}"
    person = _post(client, f"{base}/people", name="Customer")
    response = client.post(f"{base}/containers/{person['id']}/components", json={"name": "X"})
    assert response.status_code == 404


def test_blank_name_is_rejected(client, workspace_id):
    response = client.post(f"/workspaces/{workspace_id}/people", json={"name": "  "})
    assert response.status_code == 422


def test_validation_endpoint(client, workspace_id):
    base = f"/workspaces/{workspace_id}"
    _post(client, f"{base}/software-systems", name="Shop")
    report = client.get(f"{base}/validation").json()
    assert report["is_valid"] is True
    assert report["stats"]["software_systems"] == 1
