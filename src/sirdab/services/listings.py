# src/sirdab/services/listings.py
from __future__ import annotations

import re
import secrets
import string
from dataclasses import dataclass, field, replace
from typing import Any, Iterable

from pydantic import TypeAdapter, ValidationError

from sirdab.domain.filters import (
    BROWSE_PAGE_SIZE,
    LANDING_PAGE_SIZE,
    PropertyFilters,
    SortOption,
    page_count,
    paginate,
    sort_properties,
)
from sirdab.domain.listing import Ad, Property, TypeAttributes, tag_type_attributes
from sirdab.domain.ports import ListingGateway
from sirdab.domain.reconcile import infer_category
from sirdab.domain.records import City

SLUG_LENGTH = 21
SLUG_ALPHABET = string.ascii_lowercase + string.digits
SLUG_PATTERN = re.compile(rf"^[a-z0-9]{{{SLUG_LENGTH}}}$")

# only Saudi Arabia is served for now
SUPPORTED_COUNTRIES = {"sa"}


# ---------- slugs ----------

def generate_slug() -> str:
    return "".join(secrets.choice(SLUG_ALPHABET) for _ in range(SLUG_LENGTH))


def normalize_slug(candidate: str | None) -> str:
    """Keep a well-formed client slug, otherwise mint a fresh one."""
    if candidate and SLUG_PATTERN.match(candidate):
        return candidate
    return generate_slug()


# ---------- browsing ----------

def search_page(
    gateway: ListingGateway,
    filters: PropertyFilters | None,
    *,
    sort: SortOption = "newest",
    page: int = 1,
    page_size: int = BROWSE_PAGE_SIZE,
) -> dict[str, Any]:
    """
    Filter -> sort -> paginate. Pages past the end come back empty rather
    than failing.
    """
    if filters is None or filters.is_empty():
        matched = gateway.list_properties()
    else:
        matched = gateway.search_properties(filters)

    ordered = sort_properties(matched, sort)
    return {
        "items": paginate(ordered, page, page_size),
        "total": len(ordered),
        "page": page,
        "page_size": page_size,
        "pages": page_count(len(ordered), page_size),
    }


@dataclass(frozen=True)
class BrowseState:
    """Filter/sort/page selection of a browse session."""
    filters: PropertyFilters = field(default_factory=PropertyFilters)
    sort: SortOption = "newest"
    page: int = 1

    def with_filters(self, filters: PropertyFilters) -> BrowseState:
        return replace(self, filters=filters, page=1)

    def with_sort(self, sort: SortOption) -> BrowseState:
        if sort == self.sort:
            return self
        return replace(self, sort=sort, page=1)

    def with_page(self, page: int) -> BrowseState:
        if page < 1:
            raise ValueError("page must be >= 1")
        return replace(self, page=page)


# ---------- regions ----------

def city_slug(name: str) -> str:
    return re.sub(r"\s+", "-", name.strip().lower())


def _city_names_for_slug(slug: str, cities: Iterable[City]) -> set[str]:
    names = {slug.replace("-", " ")}
    for c in cities:
        if c.slug == slug or city_slug(c.name_en) == slug:
            names.add(c.name_en.lower())
            names.add(c.name_ar.strip())
    return names


def ads_in_region(gateway: ListingGateway, country: str, city: str) -> list[Ad]:
    if country.lower() not in SUPPORTED_COUNTRIES:
        return []
    slug = city.strip().lower()
    names = _city_names_for_slug(slug, gateway.list_cities())
    out: list[Ad] = []
    for ad in gateway.list_public_ads():
        ad_city = (ad.city or "").strip()
        if city_slug(ad_city) == slug or ad_city.lower() in names:
            out.append(ad)
    return out


# ---------- admin ----------

def admin_stats(ads: Iterable[Ad]) -> dict[str, int]:
    items = list(ads)
    return {
        "total": len(items),
        "published": sum(1 for a in items if a.published and not a.deleted),
        "drafts": sum(1 for a in items if not a.published and not a.deleted),
        "verified": sum(1 for a in items if a.verified),
    }


def filter_ads(ads: Iterable[Ad], query: str | None) -> list[Ad]:
    items = list(ads)
    if not query:
        return items
    q = query.lower()
    return [
        a for a in items
        if q in a.title.lower() or q in (a.city or "").lower() or q in (a.district or "").lower()
    ]


def featured(properties: Iterable[Property], limit: int = LANDING_PAGE_SIZE) -> list[Property]:
    return [p for p in properties if p.is_verified][:limit]


# ---------- type attributes ----------

_type_attributes_adapter: TypeAdapter[Any] = TypeAdapter(TypeAttributes)


def validate_type_attributes(bag: dict[str, Any] | None, ad_type: str | None) -> dict[str, Any] | None:
    """
    Check a client attribute bag against the category union and return it in
    stored (camelCase) form. The category tag always comes from the ad type;
    a tag sent by the client is replaced. Raises ValueError on a bad bag.
    """
    if bag is None:
        return None
    try:
        typed = _type_attributes_adapter.validate_python(tag_type_attributes(bag, infer_category(ad_type)))
    except ValidationError as e:
        raise ValueError(f"invalid typeAttributes: {e.errors(include_url=False)}") from e
    return typed.model_dump(by_alias=True, exclude_none=True)
