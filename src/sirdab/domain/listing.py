# src/sirdab/domain/listing.py
from __future__ import annotations

from datetime import date, datetime
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

# Placeholders used instead of NULL by legacy rows; display code checks for them.
MISSING_TEXT = "-"
MISSING_PHONE = "000000000"
MISSING_COUNTRY_CODE = "000"

FALLBACK_IMAGE_URL = "https://images.unsplash.com/photo-1586528116311-ad8dd3c8310d?w=800&q=80"

Category = Literal["warehouse", "workshop", "storage", "storefront"]
Purpose = Literal["buy", "rent", "daily_rent"]
PriceUnit = Literal["day", "month", "year"]
PaymentTerm = Literal["daily", "monthly", "yearly"]

CATEGORIES: tuple[Category, ...] = ("warehouse", "workshop", "storage", "storefront")

CATEGORY_LABELS: dict[str, dict[str, str]] = {
    "warehouse": {
        "en": "Warehouses",
        "ar": "مستودعات",
        "description": "Dry, cold, cross-dock & industrial storage",
    },
    "workshop": {
        "en": "Workshops",
        "ar": "ورش",
        "description": "Auto, manufacturing & light industrial",
    },
    "storage": {
        "en": "Self-Storage",
        "ar": "تخزين ذاتي",
        "description": "SME inventory & personal storage",
    },
    "storefront": {
        "en": "Storefronts",
        "ar": "محلات",
        "description": "Showrooms, retail & service spaces",
    },
}

SUB_TYPES: dict[str, list[str]] = {
    "warehouse": ["Dry / Ambient", "Cold & Chilled", "Cross-dock", "Industrial Storage"],
    "workshop": ["Auto Workshop", "Light Manufacturing", "Carpentry / Metal", "Small Industrial"],
    "storage": ["SME Inventory", "Personal Storage", "Overflow / Seasonal"],
    "storefront": ["Dark Store", "Showroom", "SME Retail", "Service Business", "Pop-up Space"],
}


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --------------------------------------------
# Category type attributes
# --------------------------------------------

class _TypeAttributesBase(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    for_lease_transfer: bool = False


class WarehouseAttributes(_TypeAttributesBase):
    category: Literal["warehouse"] = "warehouse"

    temperature_settings: Literal["dry", "cold", "frozen", "climate-controlled"] | None = None
    hazard_level: Literal["low", "medium", "high"] | None = None
    flooring: Literal["concrete", "epoxy", "tiles"] | None = None
    forklift_availability: Literal["24/7", "day", "none"] | None = None
    ceiling_height: str | None = None
    loading_docks: int | None = None
    cross_docking: bool | None = None


class WorkshopAttributes(_TypeAttributesBase):
    category: Literal["workshop"] = "workshop"

    power_capacity: str | None = None
    ventilation: Literal["natural", "mechanical", "both"] | None = None
    equipment_included: bool | None = None
    three_phase_electric: bool | None = None
    pit_available: bool | None = None
    crane_available: bool | None = None


class StorageAttributes(_TypeAttributesBase):
    category: Literal["storage"] = "storage"

    unit_size: Literal["small", "medium", "large", "extra-large"] | None = None
    climate_controlled: bool | None = None
    access_hours: Literal["business", "extended", "24/7"] | None = None
    security_level: Literal["basic", "standard", "premium"] | None = None


class StorefrontAttributes(_TypeAttributesBase):
    category: Literal["storefront"] = "storefront"

    facade_type: Literal["glass", "solid", "mixed"] | None = None
    display_windows: int | None = None
    foot_traffic: Literal["low", "medium", "high"] | None = None
    parking_spots: int | None = None
    street_level: bool | None = None
    mall_location: bool | None = None


TypeAttributes = Annotated[
    Union[WarehouseAttributes, WorkshopAttributes, StorageAttributes, StorefrontAttributes],
    Field(discriminator="category"),
]


def tag_type_attributes(bag: Any, category: str) -> Any:
    """Stamp the listing's category as the union tag; a client-sent tag never wins."""
    if isinstance(bag, dict):
        return {**bag, "category": category}
    return bag


# --------------------------------------------
# Ad (persisted row shape)
# --------------------------------------------

class Ad(CamelModel):
    id: int
    user_id: str
    created_at: datetime
    slug: str

    title: str
    description: str
    images: list[str] = Field(default_factory=list)

    phone_number: str = MISSING_PHONE
    phone_country_code: str | None = MISSING_COUNTRY_CODE
    city: str = MISSING_TEXT
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

    # numeric-as-text: legacy rows hold partially parsed values
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

    published: bool = True
    deleted: bool = False
    verified: bool = False

    lat: float | None = None
    lng: float | None = None
    meeting_url: str | None = None

    for_rent: bool | None = None
    for_sale: bool | None = None
    for_daily_rent: bool | None = None

    # shape depends on category, not enforced at the row level
    type_attributes: dict[str, Any] | None = None

    @property
    def is_public(self) -> bool:
        return self.published and not self.deleted


# --------------------------------------------
# Property (presentation view)
# --------------------------------------------

class Property(CamelModel):
    id: str
    title: str
    description: str

    category: Category
    sub_type: str
    purpose: Purpose

    for_rent: bool = False
    for_sale: bool = False
    for_daily_rent: bool = False
    for_lease_transfer: bool = False

    price: int
    price_unit: PriceUnit
    annual_price: int
    size: int

    location: str
    city: str
    district: str
    latitude: float | None = None
    longitude: float | None = None

    image_url: str = FALLBACK_IMAGE_URL
    images: list[str] = Field(default_factory=list)
    amenities: list[str] = Field(default_factory=list)

    is_verified: bool = False
    is_available: bool = True
    available_from: str | None = None
    min_duration: int | None = None
    max_duration: int | None = None
    owner_name: str | None = None
    owner_phone: str | None = None

    type_attributes: TypeAttributes | None = None

    @model_validator(mode="before")
    @classmethod
    def _tag_attributes(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        category = data.get("category")
        for key in ("type_attributes", "typeAttributes"):
            if key in data and category:
                data = {**data, key: tag_type_attributes(data[key], category)}
        return data
