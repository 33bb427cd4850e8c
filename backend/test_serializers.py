"""Tests for workspace serialization and its digest."""

import json

import pytest

from archmodel.api.serializers import by_id, serialize_workspace, workspace_to_json
from archmodel.client.digest import Md5Digest
from archmodel.model import InteractionStyle, Location, Workspace


def build_workspace() -> Workspace:
    workspace = Workspace(name="Shop", description="Online shop")
    model = workspace.model

    customer = model.add_person("Customer", "Buys things", Location.EXTERNAL)
    shop = model.add_software_system("Shop", "Sells things", Location.INTERNAL)
    api = shop.add_container("API", "Backend", "FastAPI")
    db = shop.add_container("DB", "Storage", "PostgreSQL")
    orders = api.add_component("Orders", "Order handling", "Python", type="shop.orders.Service")
    orders.properties["owner"] = "team-orders"

    customer.uses(api, "Places orders", "HTTPS")
    orders.uses(db, "Writes to", "SQL", InteractionStyle.ASYNCHRONOUS)
    return workspace


@pytest.fixture
def document():
    return json.loads(workspace_to_json(build_workspace()))


def test_top_level_layout(document):
    assert document["name"] == "Shop"
    assert [p["name"] for p in document["model"]["people"]] == ["Customer"]
    assert [s["name"] for s in document["model"]["softwareSystems"]] == ["Shop"]


def test_nesting_and_tags(document):
    shop = document["model"]["softwareSystems"][0]
    assert shop["tags"] == "Element,Software System"
    assert shop["location"] == "Internal"

    api, db = shop["containers"]
    assert api["name"] == "API" and db["name"] == "DB"
    assert api["technology"] == "FastAPI"
    assert api["tags"] == "Element,Container"

    orders = api["components"][0]
    assert orders["type"] == "shop.orders.Service"
    assert orders["properties"] == {"owner": "team-orders"}
    assert orders["tags"] == "Element,Component"


def test_relationships_are_nested_under_source(document):
    customer = document["model"]["people"][0]
    (rel,) = customer["relationships"]
    assert rel["description"] == "Places orders"
    assert rel["tags"] == "Relationship,Synchronous"
    assert rel["sourceId"] == customer["id"]

    orders = document["model"]["softwareSystems"][0]["containers"][0]["components"][0]
    assert orders["relationships"][0]["interactionStyle"] == "Asynchronous"


def test_none_values_are_omitted(document):
    shop = document["model"]["softwareSystems"][0]
    assert "url" not in shop
    assert "size" not in shop["containers"][0]["components"][0]


def test_deleted_elements_disappear_from_output():
    workspace = build_workspace()
    shop = workspace.model.get_software_system_with_name("Shop")
    shop.remove_container(shop.get_container_with_name("API"))

    document = serialize_workspace(workspace).model_dump()
    system = document["model"]["software_systems"][0]
    assert [c["name"] for c in system["containers"]] == ["DB"]
    assert document["model"]["people"][0]["relationships"] == []


def test_same_structure_gives_same_json_and_digest():
    md5 = Md5Digest()
    first = workspace_to_json(build_workspace())
    second = workspace_to_json(build_workspace())
    assert first == second
    assert md5.generate(first) == md5.generate(second)


def test_by_id_orders_numerically():
    workspace = Workspace(name="w")
    system = workspace.model.add_software_system("S")
    containers = [system.add_container(f"C{i}") for i in range(12)]
    assert by_id(reversed(containers)) == containers
