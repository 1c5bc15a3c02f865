# src/sirdab/domain/reconcile.py
"""
Ad <-> Property mapping.

`ad_to_property` runs over legacy and partially populated rows, so it never
raises: every parse failure degrades to 0, None or False.
"""
from __future__ import annotations

import hashlib
import math
import re
from datetime import datetime, timezone
from typing import Any

from pydantic import TypeAdapter, ValidationError

from sirdab.domain.listing import (
    FALLBACK_IMAGE_URL,
    MISSING_COUNTRY_CODE,
    MISSING_PHONE,
    MISSING_TEXT,
    Ad,
    Category,
    PriceUnit,
    Property,
    Purpose,
    TypeAttributes,
    tag_type_attributes,
)

DAYS_PER_YEAR = 365
MONTHS_PER_YEAR = 12

NIL_USER_ID = "00000000-0000-0000-0000-000000000000"

# Checked in order; first hit wins.
_CATEGORY_KEYWORDS: list[tuple[Category, tuple[str, ...]]] = [
    ("workshop", ("workshop", "ورشة")),
    ("storage", ("storage", "تخزين")),
    ("storefront", ("storefront", "محل", "retail")),
]

# (Ad field, amenity label) in display order
_FLAG_AMENITIES: list[tuple[str, str]] = [
    ("municipality_license", "Municipality License"),
    ("civil_defense_license", "Civil Defense License"),
    ("sfda_food_license", "SFDA Food License"),
    ("sfda_cosmetics_license", "SFDA Cosmetics License"),
    ("sfda_medical_equipment_license", "SFDA Medical Equipment License"),
    ("sfda_pharma_license", "SFDA Pharma License"),
    ("sfda_pet_food_license", "SFDA Pet Food License"),
    ("sfda_pesticides_license", "SFDA Pesticides License"),
    ("security_cameras", "Security Cameras"),
    ("manual_ramp", "Manual Ramp"),
    ("automatic_ramp", "Automatic Ramp"),
    ("has_electricity", "Electricity"),
    ("has_water", "Water"),
    ("has_sewage", "Sewage"),
]

_NEGATIVE_TEXT = {"", "no", "none", "false", "0", "n/a"}

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

_type_attributes_adapter: TypeAdapter[Any] = TypeAdapter(TypeAttributes)


def parse_int(raw: Any) -> int:
    """Leading-integer parse ("1200 sqm" -> 1200); anything unparseable is 0."""
    if raw is None or isinstance(raw, bool):
        return 0
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return 0 if math.isnan(raw) or math.isinf(raw) else int(raw)
    m = _LEADING_INT.match(str(raw))
    return int(m.group(1)) if m else 0


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def infer_category(raw_type: str | None) -> Category:
    t = (raw_type or "").lower()
    for category, keywords in _CATEGORY_KEYWORDS:
        if any(k in t for k in keywords):
            return category
    return "warehouse"


def purpose_and_unit(payment_term: str | None) -> tuple[Purpose, PriceUnit]:
    term = (payment_term or "").strip().lower()
    if term == "daily":
        return "daily_rent", "day"
    if term == "monthly":
        return "rent", "month"
    return "rent", "year"


def unit_price(annual_price: int, unit: PriceUnit) -> int:
    if unit == "month":
        return round_half_up(annual_price / MONTHS_PER_YEAR)
    if unit == "day":
        return round_half_up(annual_price / DAYS_PER_YEAR)
    return annual_price


def annualize(price: int, unit: PriceUnit) -> int:
    if unit == "month":
        return price * MONTHS_PER_YEAR
    if unit == "day":
        return price * DAYS_PER_YEAR
    return price


def build_amenities(ad: Ad) -> list[str]:
    out: list[str] = []
    for field, label in _FLAG_AMENITIES:
        if getattr(ad, field, None):
            out.append(label)

    forklift = (ad.forklift_availability or "").strip().lower()
    if forklift not in _NEGATIVE_TEXT:
        out.append("Forklift Available")
    if ad.racking_system:
        out.append(f"Racking: {ad.racking_system}")
    if ad.temperature_settings:
        out.append(f"Temp: {ad.temperature_settings}")
    return out


def _coordinate(value: Any) -> float | None:
    if value is None:
        return None
    try:
        f = float(value)
    except (TypeError, ValueError):
        return None
    return None if math.isnan(f) else f


def _present(value: str | None) -> bool:
    return bool(value) and value != MISSING_TEXT


def _owner_phone(ad: Ad) -> str | None:
    if not ad.phone_number or ad.phone_number == MISSING_PHONE:
        return None
    code = ad.phone_country_code or ""
    if code == MISSING_COUNTRY_CODE:
        code = ""
    return f"{code}{ad.phone_number}"


def parse_type_attributes(bag: Any, category: Category) -> Any:
    """Typed view of the untyped attribute bag; None if it does not fit."""
    if not isinstance(bag, dict) or not bag:
        return None
    try:
        return _type_attributes_adapter.validate_python(tag_type_attributes(bag, category))
    except ValidationError:
        return None


def _lease_transfer(bag: Any) -> bool:
    if not isinstance(bag, dict):
        return False
    return bag.get("forLeaseTransfer") is True


def ad_to_property(ad: Ad) -> Property:
    images = list(ad.images or [])
    category = infer_category(ad.type)
    purpose, unit = purpose_and_unit(ad.payment_term)

    annual_price = parse_int(ad.price)
    city = ad.city if _present(ad.city) else "Unknown"
    district = ad.district if _present(ad.district) else "Unknown"
    location = ad.address if _present(ad.address) else f"{ad.district}, {ad.city}"

    for_daily_rent = ad.for_daily_rent if ad.for_daily_rent is not None else purpose == "daily_rent"
    for_rent = ad.for_rent if ad.for_rent is not None else purpose == "rent"

    return Property(
        id=str(ad.id),
        title=ad.title,
        description=ad.description,
        category=category,
        sub_type=ad.type or "General",
        purpose=purpose,
        for_rent=bool(for_rent),
        for_sale=bool(ad.for_sale),
        for_daily_rent=bool(for_daily_rent),
        for_lease_transfer=_lease_transfer(ad.type_attributes),
        price=unit_price(annual_price, unit),
        price_unit=unit,
        annual_price=annual_price,
        size=parse_int(ad.area_in_m2),
        location=location,
        city=city,
        district=district,
        latitude=_coordinate(ad.lat),
        longitude=_coordinate(ad.lng),
        image_url=images[0] if images else FALLBACK_IMAGE_URL,
        images=images,
        amenities=build_amenities(ad),
        is_verified=bool(ad.verified),
        is_available=ad.is_public,
        available_from=ad.available_date_from.isoformat() if ad.available_date_from else None,
        owner_phone=_owner_phone(ad),
        type_attributes=parse_type_attributes(ad.type_attributes, category),
    )


_UNIT_TO_TERM = {"day": "daily", "month": "monthly", "year": "yearly"}


def fixture_slug(property_id: str) -> str:
    """Stable 21-char lowercase slug for a fixture listing."""
    return hashlib.sha1(f"property-{property_id}".encode("utf-8")).hexdigest()[:21]


def property_to_ad(prop: Property, *, user_id: str = NIL_USER_ID) -> Ad:
    """Expose a fixture Property through the Ad-shaped public endpoints."""
    labels = set(prop.amenities)
    phone = prop.owner_phone or ""
    code = ""
    if phone.startswith("+966"):
        code, phone = "+966", phone[4:]

    bag: dict[str, Any] | None = None
    if prop.type_attributes is not None:
        bag = prop.type_attributes.model_dump(by_alias=True, exclude_none=True)
    if prop.for_lease_transfer:
        bag = {**(bag or {}), "forLeaseTransfer": True}

    return Ad(
        id=parse_int(prop.id),
        user_id=user_id,
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        slug=fixture_slug(prop.id),
        title=prop.title,
        description=prop.description,
        images=list(prop.images),
        phone_number=phone or MISSING_PHONE,
        phone_country_code=code or MISSING_COUNTRY_CODE,
        city=prop.city,
        country="Saudi Arabia",
        district=prop.district,
        address=prop.location,
        municipality_license="Municipality License" in labels,
        civil_defense_license="Civil Defense License" in labels,
        sfda_food_license="SFDA Food License" in labels,
        price=str(prop.annual_price),
        payment_term=_UNIT_TO_TERM[prop.price_unit],
        available_date_from=prop.available_from,
        type=prop.sub_type,
        forklift_availability="yes" if "Forklift Available" in labels else None,
        area_in_m2=str(prop.size),
        security_cameras="Security Cameras" in labels,
        manual_ramp="Manual Ramp" in labels,
        automatic_ramp="Automatic Ramp" in labels,
        has_electricity="Electricity" in labels,
        has_water="Water" in labels,
        has_sewage="Sewage" in labels,
        published=prop.is_available,
        deleted=False,
        verified=prop.is_verified,
        lat=prop.latitude,
        lng=prop.longitude,
        for_rent=prop.for_rent,
        for_sale=prop.for_sale,
        for_daily_rent=prop.for_daily_rent,
        type_attributes=bag,
    )
