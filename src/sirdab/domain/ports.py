# src/sirdab/domain/ports.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from sirdab.domain.filters import PropertyFilters
from sirdab.domain.listing import Ad, Property
from sirdab.domain.records import Booking, City, SavedProperty, Visit


# ----------------------------
# Listing storage
# ----------------------------

class ListingGateway(Protocol):
    """
    CRUD + filtered queries over ads, visits, bookings and saved properties.

    Single-record lookups return None when missing. No ownership checks
    happen here; the HTTP layer enforces them.
    """

    # properties (derived views)
    def list_properties(self) -> list[Property]:
        ...

    def get_property(self, property_id: str) -> Property | None:
        ...

    def search_properties(self, filters: PropertyFilters) -> list[Property]:
        ...

    # ads
    def get_ad(self, ad_id: int) -> Ad | None:
        ...

    def list_ads(self) -> list[Ad]:
        ...

    def list_ads_by_user(self, user_id: str) -> list[Ad]:
        ...

    def list_public_ads(self) -> list[Ad]:
        ...

    def create_ad(self, user_id: str, data: dict[str, Any]) -> Ad:
        ...

    def update_ad(self, ad_id: int, changes: dict[str, Any]) -> Ad | None:
        ...

    # visits
    def list_visits(self) -> list[Visit]:
        ...

    def get_visit(self, visit_id: str) -> Visit | None:
        ...

    def list_visits_by_property(self, property_id: str) -> list[Visit]:
        ...

    def list_visits_by_user(self, user_id: str) -> list[Visit]:
        ...

    def create_visit(self, data: dict[str, Any]) -> Visit:
        ...

    def update_visit(self, visit_id: str, changes: dict[str, Any]) -> Visit | None:
        ...

    # bookings
    def list_bookings(self) -> list[Booking]:
        ...

    def get_booking(self, booking_id: str) -> Booking | None:
        ...

    def list_bookings_by_property(self, property_id: str) -> list[Booking]:
        ...

    def list_bookings_by_user(self, user_id: str) -> list[Booking]:
        ...

    def create_booking(self, data: dict[str, Any]) -> Booking:
        ...

    def update_booking(self, booking_id: str, changes: dict[str, Any]) -> Booking | None:
        ...

    # saved properties
    def list_saved(self, user_id: str) -> list[SavedProperty]:
        ...

    def save_property(self, user_id: str, property_id: str) -> SavedProperty:
        ...

    def unsave_property(self, user_id: str, property_id: str) -> bool:
        ...

    # cities (read-only)
    def list_cities(self) -> list[City]:
        ...


# ----------------------------
# Identity
# ----------------------------

@dataclass(frozen=True)
class AuthUser:
    id: str
    email: str | None = None
    phone: str | None = None


class IdentityProvider(Protocol):
    def verify(self, token: str) -> AuthUser | None:
        ...
