import pytest

from pockit.items_server import AppState, create_app


@pytest.fixture
def state():
    return AppState()


@pytest.fixture
def client(state):
    return create_app(state).test_client()


def test_get_empty_items(client):
    response = client.get("/items")
    assert response.status_code == 200
    assert response.get_json() == {"items": []}


def test_post_and_get_items(client):
    response = client.post("/items", json={"value": "gabriel"})
    assert response.status_code == 200

    response = client.get("/items")
    assert response.get_json() == {"items": ["gabriel"]}


def test_post_returns_all_items_in_order(client):
    client.post("/items", json={"value": "first"})
    response = client.post("/items", json={"value": "second"})
    assert response.get_json() == {"items": ["first", "second"]}


def test_post_updates_shared_state(client, state):
    client.post("/items", json={"value": "kept"})
    assert state.snapshot() == ["kept"]


def test_post_without_json_content_type_is_rejected(client):
    response = client.post("/items", data='{"value":"x"}')
    assert response.status_code == 415


def test_post_with_missing_value_is_rejected(client, state):
    response = client.post("/items", json={"other": "x"})
    assert response.status_code == 422
    assert state.snapshot() == []


def test_post_with_non_string_value_is_rejected(client):
    response = client.post("/items", json={"value": 5})
    assert response.status_code == 422


def test_post_with_malformed_json_is_rejected(client):
    response = client.post("/items", data="{not json", content_type="application/json")
    assert response.status_code == 400


def test_apps_sharing_state_see_same_items(state):
    first = create_app(state).test_client()
    second = create_app(state).test_client()
    first.post("/items", json={"value": "shared"})
    assert second.get("/items").get_json() == {"items": ["shared"]}