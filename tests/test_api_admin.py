# tests/test_api_admin.py
from tests.fixtures.auth import ADMIN, ALICE
from tests.fixtures.ads import ad_payload


def test_admin_routes_require_admin(client):
    assert client.get("/api/admin/stats").status_code == 401
    assert client.get("/api/admin/stats", headers=ALICE).status_code == 403
    assert client.get("/api/admin/ads", headers=ALICE).status_code == 403


def test_stats_count_fixture_and_created_ads(client):
    client.post("/api/ads", json=ad_payload(published=False), headers=ALICE)

    stats = client.get("/api/admin/stats", headers=ADMIN).json()
    assert stats == {"total": 21, "published": 20, "drafts": 1, "verified": 16}


def test_admin_search(client):
    r = client.get("/api/admin/ads", params={"q": "khobar"}, headers=ADMIN)
    assert [a["id"] for a in r.json()] == [10]


def test_verify_created_ad(client):
    ad = client.post("/api/ads", json=ad_payload(), headers=ALICE).json()

    r = client.patch(f"/api/admin/ads/{ad['id']}/verification", json={"verified": True}, headers=ADMIN)
    assert r.status_code == 200
    assert r.json()["verified"] is True

    prop = client.get(f"/api/properties/{ad['id']}").json()
    assert prop["isVerified"] is True


def test_verify_fixture_or_missing_ad(client):
    r = client.patch("/api/admin/ads/1/verification", json={"verified": False}, headers=ADMIN)
    assert r.status_code == 409

    r = client.patch("/api/admin/ads/9999/verification", json={"verified": True}, headers=ADMIN)
    assert r.status_code == 404
