# src/sirdab/services/scheduling.py
from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from datetime import date
from typing import Any

from sirdab.domain.lifecycle import (
    BOOKING_TRANSITIONS,
    PAYMENT_TRANSITIONS,
    VISIT_TRANSITIONS,
    ensure_transition,
)
from sirdab.domain.listing import Property
from sirdab.domain.records import Booking, Visit
from sirdab.domain.reconcile import round_half_up

DEFAULT_FEE_RATE = 0.05

# billing period length per price unit
_PERIOD_DAYS = {"month": 30, "year": 365}


class InvalidBookingRange(ValueError):
    pass


@dataclass(frozen=True)
class BookingQuote:
    days: int
    base_price: int
    platform_fee: int
    total_price: int

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


def booked_days(start: date, end: date) -> int:
    days = (end - start).days
    if days <= 0:
        raise InvalidBookingRange("endDate must be after startDate")
    return days


def quote_booking(prop: Property, start: date, end: date, fee_rate: float = DEFAULT_FEE_RATE) -> BookingQuote:
    """
    Daily listings bill per day. Monthly and yearly listings bill whole
    periods, rounded up (31 days on a monthly listing = 2 months).
    """
    days = booked_days(start, end)
    period = _PERIOD_DAYS.get(prop.price_unit)
    if period is None:
        base = prop.price * days
    else:
        base = prop.price * math.ceil(days / period)

    fee = round_half_up(base * fee_rate)
    return BookingQuote(days=days, base_price=base, platform_fee=fee, total_price=base + fee)


# ---------- status updates ----------

def check_visit_update(visit: Visit, changes: dict[str, Any]) -> dict[str, Any]:
    if "status" in changes and changes["status"] is not None:
        ensure_transition(VISIT_TRANSITIONS, visit.status, changes["status"])
    return changes


def check_booking_update(booking: Booking, changes: dict[str, Any]) -> dict[str, Any]:
    if "status" in changes and changes["status"] is not None:
        ensure_transition(BOOKING_TRANSITIONS, booking.status, changes["status"])
    if "payment_status" in changes and changes["payment_status"] is not None:
        ensure_transition(
            PAYMENT_TRANSITIONS,
            booking.payment_status,
            changes["payment_status"],
            field="paymentStatus",
        )
    return changes

