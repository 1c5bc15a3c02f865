# src/sirdab/api/schemas.py
from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from sirdab.domain.lifecycle import BookingStatus, PaymentStatus, VisitStatus
from sirdab.domain.listing import MISSING_COUNTRY_CODE, MISSING_PHONE, MISSING_TEXT, CamelModel, Property
from sirdab.services.listings import validate_type_attributes

# Stored as text; clients may send numbers.
NUMERIC_TEXT_FIELDS = (
    "price",
    "area_in_m2",
    "number_of_streets",
    "number_of_doors",
    "number_of_walls",
    "length",
    "width",
    "street_width",
    "property_age",
)

# Non-nullable on Ad; a partial update may omit them but not null them.
AD_REQUIRED_FIELDS = (
    "title",
    "description",
    "slug",
    "images",
    "phone_number",
    "city",
    "country",
    "district",
    "address",
    "price",
    "published",
)


def _reject_nulls(model: CamelModel, fields: tuple[str, ...]) -> None:
    # fields that were sent explicitly as null but are required on the record
    for name in fields:
        if name in model.model_fields_set and getattr(model, name) is None:
            raise ValueError(f"{to_camel(name)} cannot be null")


def _numeric_to_text(v: Any) -> Any:
    if v is None or isinstance(v, str):
        return v
    if isinstance(v, bool):
        raise ValueError("expected a number or numeric text")
    if isinstance(v, float) and v.is_integer():
        return str(int(v))
    if isinstance(v, (int, float)):
        return str(v)
    return v


# --------------------------------------------
# Ads
# --------------------------------------------

class _AdFields(CamelModel):
    """Owner-editable ad fields. `verified` and `deleted` are not settable here."""

    images: list[str] | None = None

    phone_number: str | None = None
    phone_country_code: str | None = None
    city: str | None = None
    country: str | None = None
    district: str | None = None
    address: str | None = None

    municipality_license: bool | None = None
    civil_defense_license: bool | None = None
    sfda_food_license: bool | None = None
    sfda_cosmetics_license: bool | None = None
    sfda_medical_equipment_license: bool | None = None
    sfda_pharma_license: bool | None = None
    sfda_pet_food_license: bool | None = None
    sfda_pesticides_license: bool | None = None

    price: str | None = None
    payment_term: str | None = None
    available_date_from: date | None = None
    available_date_to: date | None = None

    type: str | None = None
    temperature_settings: str | None = None
    hazard_level: str | None = None
    flooring: str | None = None
    forklift_availability: str | None = None
    racking_system: str | None = None
    number_of_streets: str | None = None
    number_of_doors: str | None = None
    number_of_walls: str | None = None
    area_in_m2: str | None = None
    length: str | None = None
    width: str | None = None
    street_width: str | None = None
    property_age: str | None = None
    facade: str | None = None

    security_cameras: bool | None = None
    manual_ramp: bool | None = None
    automatic_ramp: bool | None = None
    has_electricity: bool | None = None
    has_water: bool | None = None
    has_sewage: bool | None = None

    published: bool | None = None

    lat: float | None = None
    lng: float | None = None
    meeting_url: str | None = None

    for_rent: bool | None = None
    for_sale: bool | None = None
    for_daily_rent: bool | None = None

    type_attributes: dict[str, Any] | None = None

    @field_validator(*NUMERIC_TEXT_FIELDS, mode="before")
    @classmethod
    def _numeric_as_text(cls, v: Any) -> Any:
        return _numeric_to_text(v)


class AdCreate(_AdFields):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    slug: str | None = None

    price: str = "0"
    payment_term: str | None = "monthly"
    published: bool = True

    @model_validator(mode="after")
    def _check_type_attributes(self) -> AdCreate:
        self.type_attributes = validate_type_attributes(self.type_attributes, self.type)
        return self

    def to_record(self) -> dict[str, Any]:
        data = self.model_dump(exclude_none=True)
        # sentinels instead of NULLs for contact/location text
        data.setdefault("phone_number", MISSING_PHONE)
        data.setdefault("phone_country_code", MISSING_COUNTRY_CODE)
        for key in ("city", "country", "district", "address"):
            data.setdefault(key, MISSING_TEXT)
        return data


class AdUpdate(_AdFields):
    """Partial update: only fields present in the body are applied."""
    title: str | None = Field(default=None, min_length=1)
    description: str | None = Field(default=None, min_length=1)
    slug: str | None = None

    @model_validator(mode="after")
    def _required_not_null(self) -> AdUpdate:
        _reject_nulls(self, AD_REQUIRED_FIELDS)
        return self

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class VerificationUpdate(CamelModel):
    verified: bool


class AdminStats(CamelModel):
    total: int
    published: int
    drafts: int
    verified: int


# --------------------------------------------
# Properties
# --------------------------------------------

class SearchPage(CamelModel):
    items: list[Property]
    total: int
    page: int
    page_size: int
    pages: int


class CategoryItem(CamelModel):
    id: str
    label: str
    label_ar: str
    description: str
    sub_types: list[str]


class MapMarkerItem(CamelModel):
    id: str
    title: str
    city: str
    latitude: float
    longitude: float


# --------------------------------------------
# Visits & bookings
# --------------------------------------------

class VisitCreate(CamelModel):
    property_id: str = Field(min_length=1)
    user_id: str | None = None

    visitor_name: str = Field(min_length=1)
    visitor_email: str = Field(min_length=3)
    visitor_phone: str = Field(min_length=1)
    visit_date: date
    visit_time: str = Field(min_length=1)

    status: VisitStatus = "pending"
    notes: str | None = None


class VisitUpdate(CamelModel):
    visit_date: date | None = None
    visit_time: str | None = None
    status: VisitStatus | None = None
    notes: str | None = None

    @model_validator(mode="after")
    def _required_not_null(self) -> VisitUpdate:
        _reject_nulls(self, ("visit_date", "visit_time", "status"))
        return self


class BookingCreate(CamelModel):
    property_id: str = Field(min_length=1)
    user_id: str | None = None

    customer_name: str = Field(min_length=1)
    customer_email: str = Field(min_length=3)
    customer_phone: str = Field(min_length=1)
    start_date: date
    end_date: date

    # filled from the quote when omitted
    total_price: int | None = Field(default=None, ge=0)
    platform_fee: int | None = Field(default=None, ge=0)

    status: BookingStatus = "pending"
    payment_status: PaymentStatus = "unpaid"
    notes: str | None = None


class BookingUpdate(CamelModel):
    status: BookingStatus | None = None
    payment_status: PaymentStatus | None = None
    notes: str | None = None

    @model_validator(mode="after")
    def _required_not_null(self) -> BookingUpdate:
        _reject_nulls(self, ("status", "payment_status"))
        return self


class BookingQuoteRequest(CamelModel):
    property_id: str = Field(min_length=1)
    start_date: date
    end_date: date


class BookingQuoteOut(CamelModel):
    days: int
    base_price: int
    platform_fee: int
    total_price: int


# --------------------------------------------
# Saved properties
# --------------------------------------------

class SavedCreate(CamelModel):
    property_id: str = Field(min_length=1)
    user_id: str | None = None
