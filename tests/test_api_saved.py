# tests/test_api_saved.py
from tests.fixtures.auth import ALICE, BOB


def test_save_and_list(client):
    r = client.post("/api/saved", json={"propertyId": "3"}, headers=ALICE)
    assert r.status_code == 201
    assert r.json()["userId"] == "mock_user_alice"

    # saving twice does not duplicate
    client.post("/api/saved", json={"propertyId": "3"}, headers=ALICE)
    saved = client.get("/api/saved/mock_user_alice", headers=ALICE).json()
    assert [s["propertyId"] for s in saved] == ["3"]


def test_saved_lists_are_private(client):
    assert client.get("/api/saved/mock_user_alice").status_code == 401
    assert client.get("/api/saved/mock_user_alice", headers=BOB).status_code == 403

    r = client.post("/api/saved", json={"propertyId": "3", "userId": "mock_user_alice"}, headers=BOB)
    assert r.status_code == 403


def test_save_unknown_property_is_404(client):
    r = client.post("/api/saved", json={"propertyId": "nope"}, headers=ALICE)
    assert r.status_code == 404


def test_unsave(client):
    client.post("/api/saved", json={"propertyId": "5"}, headers=ALICE)

    r = client.delete("/api/saved/mock_user_alice/5", headers=ALICE)
    assert r.status_code == 204
    r = client.delete("/api/saved/mock_user_alice/5", headers=ALICE)
    assert r.status_code == 404
    assert client.delete("/api/saved/mock_user_alice/5", headers=BOB).status_code == 403
