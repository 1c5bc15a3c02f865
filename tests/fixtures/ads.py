# tests/fixtures/ads.py
from datetime import datetime, timezone

from sirdab.domain.listing import Ad


def make_ad(**overrides) -> Ad:
    """
    Minimal published warehouse ad. Only override what the test is about.
    """
    base = dict(
        id=101,
        user_id="mock_user_alice",
        created_at=datetime(2024, 5, 1, tzinfo=timezone.utc),
        slug="abcdefghij0123456789k",
        title="Riyadh Dry Warehouse",
        description="Dry storage close to the ring road.",
        images=["https://img.example/1.jpg", "https://img.example/2.jpg"],
        city="Riyadh",
        district="Al Sulay",
        address="-",
        price="120000",
        payment_term="yearly",
        area_in_m2="200",
        type="Dry warehouse",
    )
    base.update(overrides)
    return Ad(**base)


def ad_payload(**overrides) -> dict:
    """camelCase body for POST /api/ads."""
    body = {
        "title": "Jeddah Workshop",
        "description": "Auto workshop near the port.",
        "images": ["https://img.example/w.jpg"],
        "city": "Jeddah",
        "district": "Al Khumra",
        "price": 60000,
        "paymentTerm": "monthly",
        "areaInM2": 350,
        "type": "Auto Workshop",
        "municipalityLicense": True,
        "slug": "abc",
    }
    body.update(overrides)
    return body
