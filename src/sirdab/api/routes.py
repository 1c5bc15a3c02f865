# src/sirdab/api/routes.py
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from sirdab.adapters.config import AppConfig
from sirdab.adapters.geo import map_markers
from sirdab.adapters.logging_utils import get_logger
from sirdab.api.deps import (
    current_user,
    get_config,
    get_gateway,
    is_admin,
    optional_user,
    property_filters,
    require_admin,
)
from sirdab.api.schemas import (
    AdCreate,
    AdminStats,
    AdUpdate,
    BookingCreate,
    BookingQuoteOut,
    BookingQuoteRequest,
    BookingUpdate,
    CategoryItem,
    MapMarkerItem,
    SavedCreate,
    SearchPage,
    VerificationUpdate,
    VisitCreate,
    VisitUpdate,
)
from sirdab.domain.filters import BROWSE_PAGE_SIZE, PropertyFilters, SortOption
from sirdab.domain.lifecycle import InvalidTransition
from sirdab.domain.listing import CATEGORIES, CATEGORY_LABELS, SUB_TYPES, Ad, Property
from sirdab.domain.ports import AuthUser, ListingGateway
from sirdab.domain.records import Booking, City, SavedProperty, Visit
from sirdab.services import listings
from sirdab.services.scheduling import (
    InvalidBookingRange,
    check_booking_update,
    check_visit_update,
    quote_booking,
)

log = get_logger("sirdab.api")

router = APIRouter(prefix="/api")


def _require_property(gateway: ListingGateway, property_id: str) -> Property:
    prop = gateway.get_property(property_id)
    if prop is None:
        raise HTTPException(status_code=404, detail="property not found")
    return prop


def _owns_property(gateway: ListingGateway, user: AuthUser, property_id: str) -> bool:
    if not property_id.isdigit():
        return False
    ad = gateway.get_ad(int(property_id))
    return ad is not None and ad.user_id == user.id


def _can_manage(gateway: ListingGateway, user: AuthUser, cfg: AppConfig, record: Visit | Booking) -> bool:
    """Admins, the requester, or the landlord behind the property."""
    if is_admin(user, cfg):
        return True
    if record.user_id is not None and record.user_id == user.id:
        return True
    return _owns_property(gateway, user, record.property_id)


def _owned_ad(gateway: ListingGateway, user: AuthUser, ad_id: int) -> Ad:
    ad = gateway.get_ad(ad_id)
    if ad is None or ad.deleted:
        raise HTTPException(status_code=404, detail="ad not found")
    if ad.user_id != user.id:
        raise HTTPException(status_code=403, detail="not the owner of this ad")
    return ad


# -----------------------------
# Properties
# -----------------------------

@router.get("/properties", response_model=list[Property])
def list_properties(
    filters: PropertyFilters = Depends(property_filters),
    gateway: ListingGateway = Depends(get_gateway),
) -> list[Property]:
    if filters.is_empty():
        return gateway.list_properties()
    return gateway.search_properties(filters)


@router.get("/properties/search", response_model=SearchPage)
def search_properties(
    filters: PropertyFilters = Depends(property_filters),
    sort: SortOption = Query("newest"),
    page: int = Query(1, ge=1),
    page_size: int = Query(BROWSE_PAGE_SIZE, ge=1, alias="pageSize"),
    gateway: ListingGateway = Depends(get_gateway),
    cfg: AppConfig = Depends(get_config),
) -> SearchPage:
    size = min(page_size, cfg.MAX_PAGE_SIZE)
    result = listings.search_page(gateway, filters, sort=sort, page=page, page_size=size)
    return SearchPage(**result)


@router.get("/properties/featured", response_model=list[Property])
def featured_properties(gateway: ListingGateway = Depends(get_gateway)) -> list[Property]:
    return listings.featured(gateway.list_properties())


@router.get("/properties/map", response_model=list[MapMarkerItem])
def property_map(
    filters: PropertyFilters = Depends(property_filters),
    gateway: ListingGateway = Depends(get_gateway),
) -> list[MapMarkerItem]:
    props = gateway.list_properties() if filters.is_empty() else gateway.search_properties(filters)
    return [MapMarkerItem(**m) for m in map_markers(props, gateway.list_cities())]


@router.get("/properties/{property_id}", response_model=Property)
def get_property(property_id: str, gateway: ListingGateway = Depends(get_gateway)) -> Property:
    return _require_property(gateway, property_id)


@router.get("/categories", response_model=list[CategoryItem])
def list_categories() -> list[CategoryItem]:
    return [
        CategoryItem(
            id=c,
            label=CATEGORY_LABELS[c]["en"],
            label_ar=CATEGORY_LABELS[c]["ar"],
            description=CATEGORY_LABELS[c]["description"],
            sub_types=SUB_TYPES[c],
        )
        for c in CATEGORIES
    ]


@router.get("/cities", response_model=list[City])
def list_cities(gateway: ListingGateway = Depends(get_gateway)) -> list[City]:
    return [c for c in gateway.list_cities() if c.is_active]


# -----------------------------
# Public ads
# -----------------------------

@router.get("/public/ads/region/{country}/{city}", response_model=list[Ad])
def region_ads(country: str, city: str, gateway: ListingGateway = Depends(get_gateway)) -> list[Ad]:
    return listings.ads_in_region(gateway, country, city)


@router.get("/public/ads/{ad_id}", response_model=Ad)
def public_ad(ad_id: int, gateway: ListingGateway = Depends(get_gateway)) -> Ad:
    ad = gateway.get_ad(ad_id)
    if ad is None or not ad.is_public:
        raise HTTPException(status_code=404, detail="ad not found")
    return ad


# -----------------------------
# Owner ads
# -----------------------------

@router.get("/my-ads", response_model=list[Ad])
def my_ads(
    user: AuthUser = Depends(current_user),
    gateway: ListingGateway = Depends(get_gateway),
) -> list[Ad]:
    return [a for a in gateway.list_ads_by_user(user.id) if not a.deleted]


@router.get("/ads/{ad_id}", response_model=Ad)
def get_own_ad(
    ad_id: int,
    user: AuthUser = Depends(current_user),
    gateway: ListingGateway = Depends(get_gateway),
) -> Ad:
    return _owned_ad(gateway, user, ad_id)


@router.post("/ads", response_model=Ad, status_code=201)
def create_ad(
    body: AdCreate,
    user: AuthUser = Depends(current_user),
    gateway: ListingGateway = Depends(get_gateway),
) -> Ad:
    data = body.to_record()
    data["slug"] = listings.normalize_slug(body.slug)
    ad = gateway.create_ad(user.id, data)
    log.info("ad created", extra={"context": {"ad_id": ad.id, "user_id": user.id}})
    return ad


@router.patch("/ads/{ad_id}", response_model=Ad)
def update_ad(
    ad_id: int,
    body: AdUpdate,
    user: AuthUser = Depends(current_user),
    gateway: ListingGateway = Depends(get_gateway),
) -> Ad:
    ad = _owned_ad(gateway, user, ad_id)
    changes = body.changes()

    if "slug" in changes:
        changes["slug"] = listings.normalize_slug(changes["slug"])
    # a new type re-keys the stored bag unless the body brings its own
    bag = changes["type_attributes"] if "type_attributes" in changes else ad.type_attributes
    if bag is not None and ("type_attributes" in changes or "type" in changes):
        try:
            changes["type_attributes"] = listings.validate_type_attributes(bag, changes.get("type", ad.type))
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e)) from e

    updated = gateway.update_ad(ad_id, changes)
    if updated is None:
        raise HTTPException(status_code=404, detail="ad not found")
    return updated


@router.delete("/ads/{ad_id}", status_code=204)
def delete_ad(
    ad_id: int,
    user: AuthUser = Depends(current_user),
    gateway: ListingGateway = Depends(get_gateway),
) -> Response:
    _owned_ad(gateway, user, ad_id)
    if gateway.update_ad(ad_id, {"deleted": True}) is None:
        raise HTTPException(status_code=404, detail="ad not found")
    log.info("ad soft-deleted", extra={"context": {"ad_id": ad_id, "user_id": user.id}})
    return Response(status_code=204)


# -----------------------------
# Admin
# -----------------------------

@router.get("/admin/ads", response_model=list[Ad])
def admin_ads(
    q: str | None = Query(None),
    _: AuthUser = Depends(require_admin),
    gateway: ListingGateway = Depends(get_gateway),
) -> list[Ad]:
    return listings.filter_ads(gateway.list_ads(), q)


@router.get("/admin/stats", response_model=AdminStats)
def admin_stats(
    _: AuthUser = Depends(require_admin),
    gateway: ListingGateway = Depends(get_gateway),
) -> AdminStats:
    return AdminStats(**listings.admin_stats(gateway.list_ads()))


@router.patch("/admin/ads/{ad_id}/verification", response_model=Ad)
def set_verification(
    ad_id: int,
    body: VerificationUpdate,
    admin: AuthUser = Depends(require_admin),
    gateway: ListingGateway = Depends(get_gateway),
) -> Ad:
    if gateway.get_ad(ad_id) is None:
        raise HTTPException(status_code=404, detail="ad not found")
    updated = gateway.update_ad(ad_id, {"verified": body.verified})
    if updated is None:
        raise HTTPException(status_code=409, detail="ad is read-only")
    log.info(
        "ad verification changed",
        extra={"context": {"ad_id": ad_id, "verified": body.verified, "admin_id": admin.id}},
    )
    return updated


# -----------------------------
# Visits
# -----------------------------

@router.get("/visits", response_model=list[Visit])
def list_visits(
    property_id: str | None = Query(None, alias="propertyId"),
    user: AuthUser = Depends(current_user),
    gateway: ListingGateway = Depends(get_gateway),
    cfg: AppConfig = Depends(get_config),
) -> list[Visit]:
    if property_id is not None:
        if not (is_admin(user, cfg) or _owns_property(gateway, user, property_id)):
            return [v for v in gateway.list_visits_by_user(user.id) if v.property_id == property_id]
        return gateway.list_visits_by_property(property_id)
    if is_admin(user, cfg):
        return gateway.list_visits()
    return gateway.list_visits_by_user(user.id)


@router.get("/visits/{visit_id}", response_model=Visit)
def get_visit(
    visit_id: str,
    user: AuthUser = Depends(current_user),
    gateway: ListingGateway = Depends(get_gateway),
    cfg: AppConfig = Depends(get_config),
) -> Visit:
    visit = gateway.get_visit(visit_id)
    if visit is None:
        raise HTTPException(status_code=404, detail="visit not found")
    if not _can_manage(gateway, user, cfg, visit):
        raise HTTPException(status_code=403, detail="not allowed to view this visit")
    return visit


@router.post("/visits", response_model=Visit, status_code=201)
def create_visit(
    body: VisitCreate,
    user: AuthUser | None = Depends(optional_user),
    gateway: ListingGateway = Depends(get_gateway),
) -> Visit:
    _require_property(gateway, body.property_id)
    data: dict[str, Any] = body.model_dump(mode="json")
    if user is not None:
        data["user_id"] = user.id
    return gateway.create_visit(data)


@router.patch("/visits/{visit_id}", response_model=Visit)
def update_visit(
    visit_id: str,
    body: VisitUpdate,
    user: AuthUser = Depends(current_user),
    gateway: ListingGateway = Depends(get_gateway),
    cfg: AppConfig = Depends(get_config),
) -> Visit:
    visit = gateway.get_visit(visit_id)
    if visit is None:
        raise HTTPException(status_code=404, detail="visit not found")
    if not _can_manage(gateway, user, cfg, visit):
        raise HTTPException(status_code=403, detail="not allowed to change this visit")

    changes = body.model_dump(mode="json", exclude_unset=True)
    try:
        check_visit_update(visit, changes)
    except InvalidTransition as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    updated = gateway.update_visit(visit_id, changes)
    if updated is None:
        raise HTTPException(status_code=404, detail="visit not found")
    return updated


# -----------------------------
# Bookings
# -----------------------------

@router.get("/bookings", response_model=list[Booking])
def list_bookings(
    property_id: str | None = Query(None, alias="propertyId"),
    user: AuthUser = Depends(current_user),
    gateway: ListingGateway = Depends(get_gateway),
    cfg: AppConfig = Depends(get_config),
) -> list[Booking]:
    if property_id is not None:
        if not (is_admin(user, cfg) or _owns_property(gateway, user, property_id)):
            return [b for b in gateway.list_bookings_by_user(user.id) if b.property_id == property_id]
        return gateway.list_bookings_by_property(property_id)
    if is_admin(user, cfg):
        return gateway.list_bookings()
    return gateway.list_bookings_by_user(user.id)


@router.post("/bookings/quote", response_model=BookingQuoteOut)
def booking_quote(
    body: BookingQuoteRequest,
    gateway: ListingGateway = Depends(get_gateway),
    cfg: AppConfig = Depends(get_config),
) -> BookingQuoteOut:
    prop = _require_property(gateway, body.property_id)
    try:
        quote = quote_booking(prop, body.start_date, body.end_date, cfg.PLATFORM_FEE_RATE)
    except InvalidBookingRange as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return BookingQuoteOut(**quote.to_dict())


@router.get("/bookings/{booking_id}", response_model=Booking)
def get_booking(
    booking_id: str,
    user: AuthUser = Depends(current_user),
    gateway: ListingGateway = Depends(get_gateway),
    cfg: AppConfig = Depends(get_config),
) -> Booking:
    booking = gateway.get_booking(booking_id)
    if booking is None:
        raise HTTPException(status_code=404, detail="booking not found")
    if not _can_manage(gateway, user, cfg, booking):
        raise HTTPException(status_code=403, detail="not allowed to view this booking")
    return booking


@router.post("/bookings", response_model=Booking, status_code=201)
def create_booking(
    body: BookingCreate,
    user: AuthUser | None = Depends(optional_user),
    gateway: ListingGateway = Depends(get_gateway),
    cfg: AppConfig = Depends(get_config),
) -> Booking:
    prop = _require_property(gateway, body.property_id)
    try:
        quote = quote_booking(prop, body.start_date, body.end_date, cfg.PLATFORM_FEE_RATE)
    except InvalidBookingRange as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    data: dict[str, Any] = body.model_dump(mode="json")
    if data.get("total_price") is None:
        data["total_price"] = quote.total_price
    if data.get("platform_fee") is None:
        data["platform_fee"] = quote.platform_fee
    if user is not None:
        data["user_id"] = user.id

    booking = gateway.create_booking(data)
    log.info(
        "booking requested",
        extra={"context": {"booking_id": booking.id, "property_id": booking.property_id, "days": quote.days}},
    )
    return booking


@router.patch("/bookings/{booking_id}", response_model=Booking)
def update_booking(
    booking_id: str,
    body: BookingUpdate,
    user: AuthUser = Depends(current_user),
    gateway: ListingGateway = Depends(get_gateway),
    cfg: AppConfig = Depends(get_config),
) -> Booking:
    booking = gateway.get_booking(booking_id)
    if booking is None:
        raise HTTPException(status_code=404, detail="booking not found")
    if not _can_manage(gateway, user, cfg, booking):
        raise HTTPException(status_code=403, detail="not allowed to change this booking")

    changes = body.model_dump(mode="json", exclude_unset=True)
    try:
        check_booking_update(booking, changes)
    except InvalidTransition as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    updated = gateway.update_booking(booking_id, changes)
    if updated is None:
        raise HTTPException(status_code=404, detail="booking not found")
    return updated


# -----------------------------
# Saved properties
# -----------------------------

def _same_user(user: AuthUser, user_id: str) -> None:
    if user.id != user_id:
        raise HTTPException(status_code=403, detail="cannot access another user's saved properties")


@router.get("/saved/{user_id}", response_model=list[SavedProperty])
def list_saved(
    user_id: str,
    user: AuthUser = Depends(current_user),
    gateway: ListingGateway = Depends(get_gateway),
) -> list[SavedProperty]:
    _same_user(user, user_id)
    return gateway.list_saved(user_id)


@router.post("/saved", response_model=SavedProperty, status_code=201)
def save_property(
    body: SavedCreate,
    user: AuthUser = Depends(current_user),
    gateway: ListingGateway = Depends(get_gateway),
) -> SavedProperty:
    if body.user_id is not None:
        _same_user(user, body.user_id)
    _require_property(gateway, body.property_id)
    return gateway.save_property(user.id, body.property_id)


@router.delete("/saved/{user_id}/{property_id}", status_code=204)
def unsave_property(
    user_id: str,
    property_id: str,
    user: AuthUser = Depends(current_user),
    gateway: ListingGateway = Depends(get_gateway),
) -> Response:
    _same_user(user, user_id)
    if not gateway.unsave_property(user_id, property_id):
        raise HTTPException(status_code=404, detail="saved property not found")
    return Response(status_code=204)
