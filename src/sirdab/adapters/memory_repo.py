# src/sirdab/adapters/memory_repo.py
"""
Fixture-backed gateway for development, demos and tests.

State lives on the instance, so every app/test gets its own store. Not safe
for multi-process deployments.
"""
from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, Iterable

from sirdab.adapters import fixtures
from sirdab.domain.filters import PropertyFilters, apply_filters
from sirdab.domain.listing import Ad, Property
from sirdab.domain.ports import ListingGateway
from sirdab.domain.reconcile import ad_to_property, parse_int, property_to_ad
from sirdab.domain.records import Booking, City, SavedProperty, Visit


class InMemoryListingGateway(ListingGateway):
    def __init__(
        self,
        properties: Iterable[Property] | None = None,
        cities: Iterable[City] | None = None,
    ) -> None:
        self._properties: list[Property] = list(fixtures.load_properties() if properties is None else properties)
        self._cities: list[City] = list(fixtures.load_cities() if cities is None else cities)

        self._ads: dict[int, Ad] = {}
        self._visits: dict[str, Visit] = {}
        self._bookings: dict[str, Booking] = {}
        self._saved: dict[str, SavedProperty] = {}

        # ad ids start above every fixture id
        highest = max((parse_int(p.id) for p in self._properties), default=0)
        self._next_ad_id = highest + 1

    # ---------- properties ----------

    def list_properties(self) -> list[Property]:
        derived = [ad_to_property(a) for a in self._ads.values() if a.is_public]
        return self._properties + derived

    def get_property(self, property_id: str) -> Property | None:
        for p in self._properties:
            if p.id == property_id:
                return p
        if property_id.isdigit():
            ad = self._ads.get(int(property_id))
            if ad is not None and ad.is_public:
                return ad_to_property(ad)
        return None

    def search_properties(self, filters: PropertyFilters) -> list[Property]:
        return apply_filters(self.list_properties(), filters)

    # ---------- ads ----------

    def _fixture_ads(self) -> list[Ad]:
        return [property_to_ad(p) for p in self._properties]

    def get_ad(self, ad_id: int) -> Ad | None:
        if ad_id in self._ads:
            return self._ads[ad_id]
        for p in self._properties:
            if parse_int(p.id) == ad_id:
                return property_to_ad(p)
        return None

    def list_ads(self) -> list[Ad]:
        return self._fixture_ads() + list(self._ads.values())

    def list_ads_by_user(self, user_id: str) -> list[Ad]:
        return [a for a in self._ads.values() if a.user_id == user_id]

    def list_public_ads(self) -> list[Ad]:
        return [a for a in self.list_ads() if a.is_public]

    def create_ad(self, user_id: str, data: dict[str, Any]) -> Ad:
        ad_id = self._next_ad_id
        self._next_ad_id += 1
        ad = Ad.model_validate(
            {
                **data,
                "id": ad_id,
                "user_id": user_id,
                "created_at": datetime.now(timezone.utc),
            }
        )
        self._ads[ad_id] = ad
        return ad

    def update_ad(self, ad_id: int, changes: dict[str, Any]) -> Ad | None:
        # fixture ads are read-only
        ad = self._ads.get(ad_id)
        if ad is None:
            return None
        updated = Ad.model_validate({**ad.model_dump(), **changes, "id": ad.id, "user_id": ad.user_id})
        self._ads[ad_id] = updated
        return updated

    # ---------- visits ----------

    def list_visits(self) -> list[Visit]:
        return list(self._visits.values())

    def get_visit(self, visit_id: str) -> Visit | None:
        return self._visits.get(visit_id)

    def list_visits_by_property(self, property_id: str) -> list[Visit]:
        return [v for v in self._visits.values() if v.property_id == property_id]

    def list_visits_by_user(self, user_id: str) -> list[Visit]:
        return [v for v in self._visits.values() if v.user_id == user_id]

    def create_visit(self, data: dict[str, Any]) -> Visit:
        visit = Visit.model_validate({**data, "id": str(uuid.uuid4())})
        self._visits[visit.id] = visit
        return visit

    def update_visit(self, visit_id: str, changes: dict[str, Any]) -> Visit | None:
        visit = self._visits.get(visit_id)
        if visit is None:
            return None
        updated = Visit.model_validate({**visit.model_dump(), **changes, "id": visit.id})
        self._visits[visit_id] = updated
        return updated

    # ---------- bookings ----------

    def list_bookings(self) -> list[Booking]:
        return list(self._bookings.values())

    def get_booking(self, booking_id: str) -> Booking | None:
        return self._bookings.get(booking_id)

    def list_bookings_by_property(self, property_id: str) -> list[Booking]:
        return [b for b in self._bookings.values() if b.property_id == property_id]

    def list_bookings_by_user(self, user_id: str) -> list[Booking]:
        return [b for b in self._bookings.values() if b.user_id == user_id]

    def create_booking(self, data: dict[str, Any]) -> Booking:
        booking = Booking.model_validate({**data, "id": str(uuid.uuid4())})
        self._bookings[booking.id] = booking
        return booking

    def update_booking(self, booking_id: str, changes: dict[str, Any]) -> Booking | None:
        booking = self._bookings.get(booking_id)
        if booking is None:
            return None
        updated = Booking.model_validate({**booking.model_dump(), **changes, "id": booking.id})
        self._bookings[booking_id] = updated
        return updated

    # ---------- saved properties ----------

    def list_saved(self, user_id: str) -> list[SavedProperty]:
        return [s for s in self._saved.values() if s.user_id == user_id]

    def save_property(self, user_id: str, property_id: str) -> SavedProperty:
        for s in self._saved.values():
            if s.user_id == user_id and s.property_id == property_id:
                return s
        saved = SavedProperty(id=str(uuid.uuid4()), user_id=user_id, property_id=property_id)
        self._saved[saved.id] = saved
        return saved

    def unsave_property(self, user_id: str, property_id: str) -> bool:
        for key, s in list(self._saved.items()):
            if s.user_id == user_id and s.property_id == property_id:
                del self._saved[key]
                return True
        return False

    # ---------- cities ----------

    def list_cities(self) -> list[City]:
        return list(self._cities)
