import pytest

from tripboard.config.settings import Settings
from tripboard.ui.constants import MAX_INPUT_BYTES
from tripboard.ui.server import UIServer


@pytest.fixture
def events():
    return []


@pytest.fixture
def client(events):
    ui = UIServer(settings=Settings(), on_event=events.append)
    ui.app.config["TESTING"] = True
    return ui.app.test_client()


def test_state(client):
    data = client.get("/api/state").get_json()
    assert data == {"marker": "◆", "placeholder": "名無し", "trip_length": 10}


def test_identity_with_trip(client, events):
    resp = client.post("/api/identity", json={"name": "Alice#abc"})
    assert resp.status_code == 200
    assert resp.get_json() == {
        "ok": True,
        "name": "Alice",
        "trip": "◆qZk+NkcGgW",
        "display": "Alice ◆qZk+NkcGgW",
        "author": "Alice◆qZk+NkcGgW",
    }
    assert events == ["Derived trip ◆qZk+NkcGgW for Alice"]


@pytest.mark.parametrize("body", [{}, {"name": ""}, {"name": "#"}, {"name": None}])
def test_identity_placeholder(client, events, body):
    data = client.post("/api/identity", json=body).get_json()
    assert data["name"] == "名無し"
    assert data["trip"] == ""
    assert events == []


def test_identity_rejects_non_string(client):
    resp = client.post("/api/identity", json={"name": 42})
    assert resp.status_code == 400


def test_identity_rejects_lone_surrogate(client):
    resp = client.post(
        "/api/identity",
        data='{"name": "A#\\ud800"}',
        content_type="application/json",
    )
    assert resp.status_code == 400
    assert "UTF-8" in resp.get_json()["error"]


def test_tripcode_rejects_lone_surrogate(client):
    resp = client.post(
        "/api/tripcode",
        data='{"seed": "\\udfff"}',
        content_type="application/json",
    )
    assert resp.status_code == 400


def test_identity_ignores_non_object_body(client):
    resp = client.post("/api/identity", json=["Alice#abc"])
    assert resp.status_code == 200
    assert resp.get_json()["name"] == "名無し"


def test_tripcode(client):
    resp = client.post("/api/tripcode", json={"seed": "  abc \n"})
    assert resp.get_json() == {"ok": True, "trip": "◆qZk+NkcGgW"}


def test_tripcode_empty_seed(client):
    resp = client.post("/api/tripcode", json={"seed": "  "})
    assert resp.status_code == 400


def test_digest(client):
    data = client.post("/api/digest", json={"text": "abc"}).get_json()
    assert data["hex"] == "a9993e364706816aba3e25717850c26c9cd0d89d"
    assert data["base64"] == "qZk+NkcGgWq6PiVxeFDCbJzQ2J0="


def test_custom_marker():
    ui = UIServer(settings=Settings(marker="!", placeholder="anon"))
    client = ui.app.test_client()
    data = client.post("/api/identity", json={"name": "#abc"}).get_json()
    assert data["name"] == "anon"
    assert data["trip"] == "!qZk+NkcGgW"


def test_body_too_large(client):
    resp = client.post(
        "/api/identity",
        data="x" * (MAX_INPUT_BYTES + 1),
        content_type="application/json",
    )
    assert resp.status_code == 413
    assert "too large" in resp.get_json()["error"]
