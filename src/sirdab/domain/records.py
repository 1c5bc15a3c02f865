# src/sirdab/domain/records.py
from __future__ import annotations

from sirdab.domain.lifecycle import BookingStatus, PaymentStatus, VisitStatus
from sirdab.domain.listing import CamelModel


class Visit(CamelModel):
    id: str
    property_id: str
    user_id: str | None = None  # guests may schedule visits

    visitor_name: str
    visitor_email: str
    visitor_phone: str
    visit_date: str
    visit_time: str

    status: VisitStatus = "pending"
    notes: str | None = None


class Booking(CamelModel):
    id: str
    property_id: str
    user_id: str | None = None

    customer_name: str
    customer_email: str
    customer_phone: str
    start_date: str
    end_date: str

    total_price: int
    platform_fee: int

    status: BookingStatus = "pending"
    payment_status: PaymentStatus = "unpaid"
    notes: str | None = None


class SavedProperty(CamelModel):
    id: str
    user_id: str
    property_id: str


class City(CamelModel):
    id: int
    name_en: str
    name_ar: str
    latitude: str
    longitude: str
    is_active: bool = True
    country_id: int = 1
    slug: str
