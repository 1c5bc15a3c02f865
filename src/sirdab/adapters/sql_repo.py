# src/sirdab/adapters/sql_repo.py
from __future__ import annotations

import uuid
from datetime import date, datetime, timezone
from typing import Any, Iterable

from sqlalchemy.exc import IntegrityError
from sqlmodel import JSON, Column, Field, Session, SQLModel, UniqueConstraint, create_engine, select

from sirdab.adapters import fixtures
from sirdab.adapters.logging_utils import get_logger
from sirdab.domain.filters import PropertyFilters, apply_filters
from sirdab.domain.listing import MISSING_COUNTRY_CODE, MISSING_PHONE, MISSING_TEXT, Ad, Property
from sirdab.domain.ports import ListingGateway
from sirdab.domain.reconcile import ad_to_property
from sirdab.domain.records import Booking, City, SavedProperty, Visit

log = get_logger("sirdab.sql")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid.uuid4())


# ---------- Ads ----------

class AdRow(SQLModel, table=True):
    __tablename__ = "ads"

    id: int | None = Field(default=None, primary_key=True)
    user_id: str = Field(index=True)
    created_at: datetime = Field(default_factory=_utcnow, index=True)
    slug: str = Field(index=True)

    title: str
    description: str
    images: list[str] = Field(default_factory=list, sa_column=Column(JSON))

    phone_number: str = MISSING_PHONE
    phone_country_code: str | None = MISSING_COUNTRY_CODE
    city: str = Field(default=MISSING_TEXT, index=True)
    country: str = MISSING_TEXT
    district: str = MISSING_TEXT
    address: str = MISSING_TEXT

    municipality_license: bool | None = False
    civil_defense_license: bool | None = None
    sfda_food_license: bool | None = False
    sfda_cosmetics_license: bool | None = False
    sfda_medical_equipment_license: bool | None = False
    sfda_pharma_license: bool | None = False
    sfda_pet_food_license: bool | None = False
    sfda_pesticides_license: bool | None = False

    price: str = "0"
    payment_term: str | None = "monthly"
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

    published: bool = Field(default=True, index=True)
    deleted: bool = Field(default=False, index=True)
    verified: bool = False

    lat: float | None = None
    lng: float | None = None
    meeting_url: str | None = None

    for_rent: bool | None = None
    for_sale: bool | None = None
    for_daily_rent: bool | None = None

    type_attributes: dict[str, Any] | None = Field(default=None, sa_column=Column(JSON))


# ---------- Visits / bookings ----------

class VisitRow(SQLModel, table=True):
    __tablename__ = "visits"

    id: str = Field(default_factory=_new_id, primary_key=True)
    property_id: str = Field(index=True)
    user_id: str | None = Field(default=None, index=True)

    visitor_name: str
    visitor_email: str
    visitor_phone: str
    visit_date: str
    visit_time: str

    status: str = "pending"
    notes: str | None = None


class BookingRow(SQLModel, table=True):
    __tablename__ = "bookings"

    id: str = Field(default_factory=_new_id, primary_key=True)
    property_id: str = Field(index=True)
    user_id: str | None = Field(default=None, index=True)

    customer_name: str
    customer_email: str
    customer_phone: str
    start_date: str
    end_date: str

    total_price: int
    platform_fee: int

    status: str = "pending"
    payment_status: str = "unpaid"
    notes: str | None = None


# ---------- Saved properties / cities ----------

class SavedPropertyRow(SQLModel, table=True):
    __tablename__ = "saved_properties"
    __table_args__ = (UniqueConstraint("user_id", "property_id", name="uq_saved_user_property"),)

    id: str = Field(default_factory=_new_id, primary_key=True)
    user_id: str = Field(index=True)
    property_id: str


class CityRow(SQLModel, table=True):
    __tablename__ = "cities"

    id: int | None = Field(default=None, primary_key=True)
    name_en: str
    name_ar: str
    latitude: str
    longitude: str
    is_active: bool = True
    country_id: int = 1
    slug: str = Field(index=True, unique=True)


def _to_ad(row: AdRow) -> Ad:
    return Ad.model_validate(row.model_dump())


def _apply(row: SQLModel, changes: dict[str, Any]) -> None:
    fields = type(row).model_fields
    for key, value in changes.items():
        if key in fields and key != "id":
            setattr(row, key, value)


class SqlListingGateway(ListingGateway):
    """
    SQLModel-backed gateway (SQLite for dev/tests, Postgres in production).

    Properties are derived on read from published, non-deleted ads; the
    filter pipeline then runs in Python so both backends share semantics.
    """

    def __init__(self, uri: str = "sqlite:///sirdab.db", echo: bool = False):
        self.engine = create_engine(uri, echo=echo)
        SQLModel.metadata.create_all(self.engine)
        self._seed_cities()

    def _seed_cities(self) -> None:
        with Session(self.engine) as session:
            if session.exec(select(CityRow)).first() is not None:
                return
            for c in fixtures.FIXTURE_CITIES:
                session.add(CityRow.model_validate(c))
            session.commit()
        log.info("seeded cities", extra={"context": {"count": len(fixtures.FIXTURE_CITIES)}})

    # ---------- properties ----------

    def list_properties(self) -> list[Property]:
        with Session(self.engine) as session:
            stmt = (
                select(AdRow)
                .where(AdRow.published == True, AdRow.deleted == False)  # noqa: E712
                .order_by(AdRow.id)
            )
            return [ad_to_property(_to_ad(r)) for r in session.exec(stmt)]

    def get_property(self, property_id: str) -> Property | None:
        if not property_id.isdigit():
            return None
        ad = self.get_ad(int(property_id))
        if ad is None or not ad.is_public:
            return None
        return ad_to_property(ad)

    def search_properties(self, filters: PropertyFilters) -> list[Property]:
        return apply_filters(self.list_properties(), filters)

    # ---------- ads ----------

    def get_ad(self, ad_id: int) -> Ad | None:
        with Session(self.engine) as session:
            row = session.get(AdRow, ad_id)
            return _to_ad(row) if row else None

    def list_ads(self) -> list[Ad]:
        with Session(self.engine) as session:
            return [_to_ad(r) for r in session.exec(select(AdRow).order_by(AdRow.id))]

    def list_ads_by_user(self, user_id: str) -> list[Ad]:
        with Session(self.engine) as session:
            stmt = select(AdRow).where(AdRow.user_id == user_id).order_by(AdRow.id)
            return [_to_ad(r) for r in session.exec(stmt)]

    def list_public_ads(self) -> list[Ad]:
        with Session(self.engine) as session:
            stmt = (
                select(AdRow)
                .where(AdRow.published == True, AdRow.deleted == False)  # noqa: E712
                .order_by(AdRow.id)
            )
            return [_to_ad(r) for r in session.exec(stmt)]

    def create_ad(self, user_id: str, data: dict[str, Any]) -> Ad:
        row = AdRow.model_validate({**data, "user_id": user_id})
        row.id = None
        with Session(self.engine) as session:
            session.add(row)
            session.commit()
            session.refresh(row)
            return _to_ad(row)

    def update_ad(self, ad_id: int, changes: dict[str, Any]) -> Ad | None:
        with Session(self.engine) as session:
            row = session.get(AdRow, ad_id)
            if row is None:
                return None
            _apply(row, {k: v for k, v in changes.items() if k != "user_id"})
            session.add(row)
            session.commit()
            session.refresh(row)
            return _to_ad(row)

    def import_ads(self, ads: Iterable[Ad]) -> int:
        """Insert ads keeping their ids; ids already present are skipped."""
        written = 0
        with Session(self.engine) as session:
            for ad in ads:
                if session.get(AdRow, ad.id) is not None:
                    continue
                session.add(AdRow.model_validate(ad.model_dump()))
                written += 1
            session.commit()
        return written

    # ---------- visits ----------

    def list_visits(self) -> list[Visit]:
        with Session(self.engine) as session:
            return [Visit.model_validate(r.model_dump()) for r in session.exec(select(VisitRow))]

    def get_visit(self, visit_id: str) -> Visit | None:
        with Session(self.engine) as session:
            row = session.get(VisitRow, visit_id)
            return Visit.model_validate(row.model_dump()) if row else None

    def list_visits_by_property(self, property_id: str) -> list[Visit]:
        with Session(self.engine) as session:
            stmt = select(VisitRow).where(VisitRow.property_id == property_id)
            return [Visit.model_validate(r.model_dump()) for r in session.exec(stmt)]

    def list_visits_by_user(self, user_id: str) -> list[Visit]:
        with Session(self.engine) as session:
            stmt = select(VisitRow).where(VisitRow.user_id == user_id)
            return [Visit.model_validate(r.model_dump()) for r in session.exec(stmt)]

    def create_visit(self, data: dict[str, Any]) -> Visit:
        row = VisitRow.model_validate({k: v for k, v in data.items() if k != "id"})
        with Session(self.engine) as session:
            session.add(row)
            session.commit()
            session.refresh(row)
            return Visit.model_validate(row.model_dump())

    def update_visit(self, visit_id: str, changes: dict[str, Any]) -> Visit | None:
        with Session(self.engine) as session:
            row = session.get(VisitRow, visit_id)
            if row is None:
                return None
            _apply(row, changes)
            session.add(row)
            session.commit()
            session.refresh(row)
            return Visit.model_validate(row.model_dump())

    # ---------- bookings ----------

    def list_bookings(self) -> list[Booking]:
        with Session(self.engine) as session:
            return [Booking.model_validate(r.model_dump()) for r in session.exec(select(BookingRow))]

    def get_booking(self, booking_id: str) -> Booking | None:
        with Session(self.engine) as session:
            row = session.get(BookingRow, booking_id)
            return Booking.model_validate(row.model_dump()) if row else None

    def list_bookings_by_property(self, property_id: str) -> list[Booking]:
        with Session(self.engine) as session:
            stmt = select(BookingRow).where(BookingRow.property_id == property_id)
            return [Booking.model_validate(r.model_dump()) for r in session.exec(stmt)]

    def list_bookings_by_user(self, user_id: str) -> list[Booking]:
        with Session(self.engine) as session:
            stmt = select(BookingRow).where(BookingRow.user_id == user_id)
            return [Booking.model_validate(r.model_dump()) for r in session.exec(stmt)]

    def create_booking(self, data: dict[str, Any]) -> Booking:
        row = BookingRow.model_validate({k: v for k, v in data.items() if k != "id"})
        with Session(self.engine) as session:
            session.add(row)
            session.commit()
            session.refresh(row)
            return Booking.model_validate(row.model_dump())

    def update_booking(self, booking_id: str, changes: dict[str, Any]) -> Booking | None:
        with Session(self.engine) as session:
            row = session.get(BookingRow, booking_id)
            if row is None:
                return None
            _apply(row, changes)
            session.add(row)
            session.commit()
            session.refresh(row)
            return Booking.model_validate(row.model_dump())

    # ---------- saved properties ----------

    def _find_saved(self, session: Session, user_id: str, property_id: str) -> SavedPropertyRow | None:
        stmt = select(SavedPropertyRow).where(
            SavedPropertyRow.user_id == user_id,
            SavedPropertyRow.property_id == property_id,
        )
        return session.exec(stmt).first()

    def list_saved(self, user_id: str) -> list[SavedProperty]:
        with Session(self.engine) as session:
            stmt = select(SavedPropertyRow).where(SavedPropertyRow.user_id == user_id)
            return [SavedProperty.model_validate(r.model_dump()) for r in session.exec(stmt)]

    def save_property(self, user_id: str, property_id: str) -> SavedProperty:
        with Session(self.engine) as session:
            existing = self._find_saved(session, user_id, property_id)
            if existing is not None:
                return SavedProperty.model_validate(existing.model_dump())

            row = SavedPropertyRow(user_id=user_id, property_id=property_id)
            session.add(row)
            try:
                session.commit()
            except IntegrityError:
                # concurrent save of the same pair
                session.rollback()
                existing = self._find_saved(session, user_id, property_id)
                if existing is None:
                    raise
                return SavedProperty.model_validate(existing.model_dump())
            session.refresh(row)
            return SavedProperty.model_validate(row.model_dump())

    def unsave_property(self, user_id: str, property_id: str) -> bool:
        with Session(self.engine) as session:
            row = self._find_saved(session, user_id, property_id)
            if row is None:
                return False
            session.delete(row)
            session.commit()
            return True

    # ---------- cities ----------

    def list_cities(self) -> list[City]:
        with Session(self.engine) as session:
            stmt = select(CityRow).order_by(CityRow.id)
            return [City.model_validate(r.model_dump()) for r in session.exec(stmt)]
