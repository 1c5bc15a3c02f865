# src/sirdab/adapters/geo.py
"""
Approximate map markers.

Listings are placed near their city centre with a small deterministic jitter
derived from the listing id, so markers in the same city don't stack and stay
put between requests. Stored lat/lng are not used here.
"""
from __future__ import annotations

import math
from typing import Iterable, TypedDict

from sirdab.domain.listing import Property
from sirdab.domain.records import City

DEFAULT_CENTER: tuple[float, float] = (24.7136, 46.6753)  # Riyadh

_INT32 = 1 << 32


class MapMarker(TypedDict):
    id: str
    title: str
    city: str
    latitude: float
    longitude: float


def _to_int32(n: int) -> int:
    n &= _INT32 - 1
    return n - _INT32 if n >= (1 << 31) else n


def hash_code(text: str) -> int:
    """32-bit string hash over UTF-16 code units (h = h*31 + c, wrapping)."""
    h = 0
    raw = text.encode("utf-16-le")
    for i in range(0, len(raw), 2):
        unit = raw[i] | (raw[i + 1] << 8)
        h = _to_int32((h << 5) - h + unit)
    return h


def _trunc_mod(n: int, m: int) -> int:
    # remainder takes the sign of the dividend
    return int(math.fmod(n, m))


def city_centres(cities: Iterable[City]) -> dict[str, tuple[float, float]]:
    out: dict[str, tuple[float, float]] = {}
    for c in cities:
        try:
            out[c.name_en.lower()] = (float(c.latitude), float(c.longitude))
        except ValueError:
            continue
    return out


def map_position(property_id: str, city: str, centres: dict[str, tuple[float, float]]) -> tuple[float, float]:
    centre = centres.get((city or "").lower())
    if centre is None:
        return DEFAULT_CENTER
    h = hash_code(property_id)
    lat_offset = _trunc_mod(h, 1000) / 10000 - 0.05
    lng_offset = _trunc_mod(h >> 10, 1000) / 10000 - 0.05
    return centre[0] + lat_offset, centre[1] + lng_offset


def map_markers(properties: Iterable[Property], cities: Iterable[City]) -> list[MapMarker]:
    centres = city_centres(cities)
    markers: list[MapMarker] = []
    for p in properties:
        lat, lng = map_position(p.id, p.city, centres)
        markers.append({"id": p.id, "title": p.title, "city": p.city, "latitude": lat, "longitude": lng})
    return markers
