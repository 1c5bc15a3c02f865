# tests/test_api_visits_bookings.py
from tests.fixtures.auth import ADMIN, ALICE, BOB
from tests.fixtures.ads import ad_payload


def _visit_body(**overrides):
    body = {
        "propertyId": "1",
        "visitorName": "Sara",
        "visitorEmail": "sara@example.com",
        "visitorPhone": "0500000000",
        "visitDate": "2024-06-01",
        "visitTime": "10:00",
    }
    body.update(overrides)
    return body


def _booking_body(**overrides):
    body = {
        "propertyId": "17",
        "customerName": "Omar",
        "customerEmail": "omar@example.com",
        "customerPhone": "0500000001",
        "startDate": "2024-03-01",
        "endDate": "2024-03-04",
    }
    body.update(overrides)
    return body


# -----------------------------
# Visits
# -----------------------------

def test_guest_can_schedule_visit(client):
    r = client.post("/api/visits", json=_visit_body())
    assert r.status_code == 201

    visit = r.json()
    assert visit["status"] == "pending"
    assert visit["userId"] is None
    assert visit["visitDate"] == "2024-06-01"


def test_visit_takes_user_from_token(client):
    r = client.post("/api/visits", json=_visit_body(userId="someone-else"), headers=ALICE)
    assert r.json()["userId"] == "mock_user_alice"


def test_visit_for_unknown_property_is_404(client):
    r = client.post("/api/visits", json=_visit_body(propertyId="404404"))
    assert r.status_code == 404


def test_visit_missing_fields_is_400(client):
    body = _visit_body()
    del body["visitorEmail"]
    assert client.post("/api/visits", json=body).status_code == 400


def test_visit_listing_is_scoped_to_caller(client):
    client.post("/api/visits", json=_visit_body(), headers=ALICE)
    client.post("/api/visits", json=_visit_body(), headers=BOB)

    assert client.get("/api/visits").status_code == 401
    assert len(client.get("/api/visits", headers=ALICE).json()) == 1
    assert len(client.get("/api/visits", headers=ADMIN).json()) == 2


def test_visit_state_machine(client):
    visit = client.post("/api/visits", json=_visit_body(), headers=ALICE).json()
    url = f"/api/visits/{visit['id']}"

    r = client.patch(url, json={"status": "completed"}, headers=ALICE)
    assert r.status_code == 400

    r = client.patch(url, json={"status": "confirmed"}, headers=ALICE)
    assert r.status_code == 200
    assert r.json()["status"] == "confirmed"

    r = client.patch(url, json={"status": "cancelled"}, headers=ALICE)
    assert r.json()["status"] == "cancelled"

    r = client.patch(url, json={"status": "confirmed"}, headers=ALICE)
    assert r.status_code == 400


def test_landlord_can_confirm_visit_on_own_listing(client):
    ad = client.post("/api/ads", json=ad_payload(), headers=ALICE).json()
    visit = client.post("/api/visits", json=_visit_body(propertyId=str(ad["id"])), headers=BOB).json()

    r = client.patch(f"/api/visits/{visit['id']}", json={"status": "confirmed"}, headers=ALICE)
    assert r.status_code == 200

    landlord_view = client.get("/api/visits", params={"propertyId": str(ad["id"])}, headers=ALICE).json()
    assert [v["id"] for v in landlord_view] == [visit["id"]]


def test_stranger_cannot_touch_visit(client):
    visit = client.post("/api/visits", json=_visit_body(), headers=ALICE).json()

    assert client.get(f"/api/visits/{visit['id']}", headers=BOB).status_code == 403
    assert client.patch(f"/api/visits/{visit['id']}", json={"status": "cancelled"}, headers=BOB).status_code == 403
    assert client.get("/api/visits/missing", headers=ALICE).status_code == 404


# -----------------------------
# Bookings
# -----------------------------

def test_quote(client):
    r = client.post("/api/bookings/quote", json={"propertyId": "17", "startDate": "2024-03-01", "endDate": "2024-03-04"})
    assert r.status_code == 200
    assert r.json() == {"days": 3, "basePrice": 7500, "platformFee": 375, "totalPrice": 7875}


def test_quote_rejects_empty_range(client):
    r = client.post("/api/bookings/quote", json={"propertyId": "17", "startDate": "2024-03-04", "endDate": "2024-03-04"})
    assert r.status_code == 400


def test_booking_prices_filled_from_quote(client):
    r = client.post("/api/bookings", json=_booking_body(), headers=ALICE)
    assert r.status_code == 201

    booking = r.json()
    assert booking["totalPrice"] == 7875
    assert booking["platformFee"] == 375
    assert booking["status"] == "pending"
    assert booking["paymentStatus"] == "unpaid"
    assert booking["userId"] == "mock_user_alice"


def test_booking_keeps_client_prices(client):
    r = client.post("/api/bookings", json=_booking_body(totalPrice=8000, platformFee=400))
    assert r.json()["totalPrice"] == 8000
    assert r.json()["platformFee"] == 400


def test_booking_bad_dates(client):
    r = client.post("/api/bookings", json=_booking_body(endDate="2024-02-01"))
    assert r.status_code == 400

    r = client.post("/api/bookings", json=_booking_body(startDate="not-a-date"))
    assert r.status_code == 400


def test_booking_state_and_payment_axes(client):
    booking = client.post("/api/bookings", json=_booking_body(), headers=ALICE).json()
    url = f"/api/bookings/{booking['id']}"

    assert client.patch(url, json={"status": "active"}, headers=ALICE).status_code == 400
    assert client.patch(url, json={"status": "confirmed"}, headers=ALICE).json()["status"] == "confirmed"
    assert client.patch(url, json={"status": "active"}, headers=ALICE).json()["status"] == "active"

    r = client.patch(url, json={"paymentStatus": "paid"}, headers=ALICE)
    assert r.json()["paymentStatus"] == "paid"
    assert r.json()["status"] == "active"

    assert client.patch(url, json={"paymentStatus": "unpaid"}, headers=ALICE).status_code == 400
    assert client.patch(url, json={"status": "completed"}, headers=ALICE).json()["status"] == "completed"


def test_booking_access(client):
    booking = client.post("/api/bookings", json=_booking_body(), headers=ALICE).json()

    assert client.get(f"/api/bookings/{booking['id']}", headers=ALICE).status_code == 200
    assert client.get(f"/api/bookings/{booking['id']}", headers=BOB).status_code == 403
    assert client.get(f"/api/bookings/{booking['id']}", headers=ADMIN).status_code == 200
    assert client.get("/api/bookings/nope", headers=ADMIN).status_code == 404
    assert [b["id"] for b in client.get("/api/bookings", headers=ALICE).json()] == [booking["id"]]
    assert client.get("/api/bookings", headers=BOB).json() == []


def test_null_on_required_update_fields_is_400(client):
    visit = client.post("/api/visits", json=_visit_body(), headers=ALICE).json()
    visit_url = f"/api/visits/{visit['id']}"
    for field in ("visitDate", "visitTime", "status"):
        assert client.patch(visit_url, json={field: None}, headers=ALICE).status_code == 400, field
    assert client.patch(visit_url, json={"notes": None}, headers=ALICE).status_code == 200

    booking = client.post("/api/bookings", json=_booking_body(), headers=ALICE).json()
    booking_url = f"/api/bookings/{booking['id']}"
    for field in ("status", "paymentStatus"):
        assert client.patch(booking_url, json={field: None}, headers=ALICE).status_code == 400, field
    assert client.get(booking_url, headers=ALICE).json()["status"] == "pending"
