# src/sirdab/domain/filters.py
from __future__ import annotations

import math
from typing import Callable, Iterable, Literal, Sequence, TypeVar

from sirdab.domain.listing import CamelModel, Category, Property, Purpose

T = TypeVar("T")

SortOption = Literal["newest", "price-low", "price-high", "size"]

LANDING_PAGE_SIZE = 6
BROWSE_PAGE_SIZE = 12


class PropertyFilters(CamelModel):
    """
    All criteria are optional and combine with AND.

    Price bounds apply to the unit-denominated `price`, not `annual_price`.
    """
    category: Category | None = None
    sub_type: str | None = None
    purpose: Purpose | None = None
    city: str | None = None
    district: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    min_size: float | None = None
    max_size: float | None = None
    is_verified: bool | None = None
    search_query: str | None = None

    def is_empty(self) -> bool:
        return not self.model_dump(exclude_none=True)


def _contains_query(p: Property, query: str) -> bool:
    q = query.lower()
    return any(q in (field or "").lower() for field in (p.title, p.description, p.location, p.city, p.district))


def _predicates(f: PropertyFilters) -> list[Callable[[Property], bool]]:
    preds: list[Callable[[Property], bool]] = []

    if f.category:
        preds.append(lambda p: p.category == f.category)
    if f.sub_type:
        preds.append(lambda p: p.sub_type == f.sub_type)
    if f.purpose:
        preds.append(lambda p: p.purpose == f.purpose)
    if f.city:
        city = f.city.lower()
        preds.append(lambda p: p.city.lower() == city)
    if f.district:
        district = f.district.lower()
        preds.append(lambda p: p.district.lower() == district)
    if f.min_price is not None:
        preds.append(lambda p: p.price >= f.min_price)
    if f.max_price is not None:
        preds.append(lambda p: p.price <= f.max_price)
    if f.min_size is not None:
        preds.append(lambda p: p.size >= f.min_size)
    if f.max_size is not None:
        preds.append(lambda p: p.size <= f.max_size)
    if f.is_verified:
        preds.append(lambda p: p.is_verified)
    if f.search_query:
        query = f.search_query
        preds.append(lambda p: _contains_query(p, query))

    return preds


def apply_filters(properties: Iterable[Property], filters: PropertyFilters | None) -> list[Property]:
    items = list(properties)
    if filters is None:
        return items
    preds = _predicates(filters)
    return [p for p in items if all(pred(p) for pred in preds)]


def sort_properties(properties: Sequence[Property], sort: SortOption = "newest") -> list[Property]:
    # sorted() is stable, so ties keep insertion order
    if sort == "price-low":
        return sorted(properties, key=lambda p: p.price)
    if sort == "price-high":
        return sorted(properties, key=lambda p: p.price, reverse=True)
    if sort == "size":
        return sorted(properties, key=lambda p: p.size, reverse=True)
    return list(properties)


def paginate(items: Sequence[T], page: int, page_size: int) -> list[T]:
    if page < 1 or page_size < 1:
        raise ValueError("page and page_size must be >= 1")
    start = (page - 1) * page_size
    return list(items[start:start + page_size])


def page_count(total: int, page_size: int) -> int:
    if page_size < 1:
        raise ValueError("page_size must be >= 1")
    return math.ceil(total / page_size)
