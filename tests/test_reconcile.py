# tests/test_reconcile.py
import math

from hypothesis import given
from hypothesis import strategies as st

from sirdab.adapters.fixtures import load_properties
from sirdab.domain.listing import FALLBACK_IMAGE_URL, WarehouseAttributes
from sirdab.domain.reconcile import (
    ad_to_property,
    annualize,
    infer_category,
    parse_int,
    property_to_ad,
    purpose_and_unit,
    round_half_up,
)
from tests.fixtures.ads import make_ad


def test_yearly_ad_keeps_price_and_size():
    p = ad_to_property(make_ad(price="120000", payment_term="yearly", area_in_m2="200"))

    assert p.price == 120000
    assert p.annual_price == 120000
    assert p.size == 200
    assert p.price_unit == "year"
    assert p.purpose == "rent"


@given(st.integers(min_value=0, max_value=50_000_000))
def test_monthly_price_is_rounded_twelfth_of_annual(annual):
    p = ad_to_property(make_ad(price=str(annual), payment_term="monthly"))

    assert p.annual_price == annual
    assert p.price == round_half_up(annual / 12)
    assert p.price_unit == "month"


def test_daily_term_maps_to_daily_rent():
    p = ad_to_property(make_ad(price="36500", payment_term="daily"))

    assert p.purpose == "daily_rent"
    assert p.price_unit == "day"
    assert p.price == 100
    assert p.for_daily_rent is True


def test_unknown_or_missing_payment_term_falls_back_to_year():
    assert purpose_and_unit(None) == ("rent", "year")
    assert purpose_and_unit("weekly") == ("rent", "year")
    assert purpose_and_unit("Monthly") == ("rent", "month")


def test_round_half_up_breaks_ties_upward():
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(2.4999) == 2


def test_parse_int_takes_leading_integer_or_zero():
    assert parse_int("1200 sqm") == 1200
    assert parse_int("  42") == 42
    assert parse_int("abc") == 0
    assert parse_int("") == 0
    assert parse_int(None) == 0
    assert parse_int(float("nan")) == 0


def test_category_inference_by_keyword():
    assert infer_category("Auto Workshop") == "workshop"
    assert infer_category("ورشة سيارات") == "workshop"
    assert infer_category("Self Storage") == "storage"
    assert infer_category("Retail corner") == "storefront"
    assert infer_category("محل تجاري") == "storefront"
    assert infer_category("Something else") == "warehouse"
    assert infer_category(None) == "warehouse"


def test_unparseable_price_degrades_to_zero():
    p = ad_to_property(make_ad(price="call us", payment_term="monthly", area_in_m2="n/a"))

    assert p.price == 0
    assert p.annual_price == 0
    assert p.size == 0


def test_image_url_is_first_image_or_fallback():
    assert ad_to_property(make_ad()).image_url == "https://img.example/1.jpg"
    assert ad_to_property(make_ad(images=[])).image_url == FALLBACK_IMAGE_URL


def test_is_available_requires_published_and_not_deleted():
    assert ad_to_property(make_ad(published=True, deleted=False)).is_available is True
    assert ad_to_property(make_ad(published=False, deleted=False)).is_available is False
    assert ad_to_property(make_ad(published=True, deleted=True)).is_available is False


def test_amenities_only_for_true_flags():
    ad = make_ad(
        municipality_license=True,
        civil_defense_license=None,
        sfda_food_license=False,
        has_water=True,
        forklift_availability="24/7",
        racking_system="selective",
        temperature_settings="cold",
    )
    amenities = ad_to_property(ad).amenities

    assert "Municipality License" in amenities
    assert "Water" in amenities
    assert "Civil Defense License" not in amenities
    assert "SFDA Food License" not in amenities
    assert "Forklift Available" in amenities
    assert "Racking: selective" in amenities
    assert "Temp: cold" in amenities


def test_negative_forklift_text_is_not_an_amenity():
    for value in ("no", "None", "", None):
        assert "Forklift Available" not in ad_to_property(make_ad(forklift_availability=value)).amenities


def test_coordinates_pass_through_unless_nan():
    p = ad_to_property(make_ad(lat=24.7, lng=46.6))
    assert (p.latitude, p.longitude) == (24.7, 46.6)

    p = ad_to_property(make_ad(lat=math.nan, lng=None))
    assert p.latitude is None
    assert p.longitude is None


def test_location_falls_back_to_district_and_city():
    p = ad_to_property(make_ad(address="-"))
    assert p.location == "Al Sulay, Riyadh"

    p = ad_to_property(make_ad(address="King Fahd Rd"))
    assert p.location == "King Fahd Rd"


def test_sentinel_phone_has_no_owner_phone():
    assert ad_to_property(make_ad()).owner_phone is None

    p = ad_to_property(make_ad(phone_number="501234567", phone_country_code="+966"))
    assert p.owner_phone == "+966501234567"


def test_lease_transfer_read_from_attribute_bag():
    assert ad_to_property(make_ad(type_attributes={"forLeaseTransfer": True})).for_lease_transfer is True
    assert ad_to_property(make_ad(type_attributes={"forLeaseTransfer": "yes"})).for_lease_transfer is False
    assert ad_to_property(make_ad(type_attributes=None)).for_lease_transfer is False


def test_type_attributes_parsed_for_inferred_category():
    p = ad_to_property(
        make_ad(type="Auto Workshop", type_attributes={"ventilation": "both", "pitAvailable": True})
    )

    assert p.category == "workshop"
    assert p.type_attributes is not None
    assert p.type_attributes.category == "workshop"
    assert p.type_attributes.pit_available is True


def test_stored_tag_yields_to_category_of_ad_type():
    p = ad_to_property(
        make_ad(
            type="Dry warehouse",
            type_attributes={"category": "workshop", "ventilation": "both", "temperatureSettings": "cold"},
        )
    )

    assert p.category == "warehouse"
    assert isinstance(p.type_attributes, WarehouseAttributes)
    assert p.type_attributes.temperature_settings == "cold"


def test_bad_type_attributes_become_none():
    p = ad_to_property(make_ad(type_attributes={"temperatureSettings": "lukewarm"}))
    assert p.type_attributes is None


def test_fixture_round_trip_keeps_pricing():
    for prop in load_properties():
        back = ad_to_property(property_to_ad(prop))

        assert back.id == prop.id
        assert back.annual_price == prop.annual_price
        assert back.price_unit == prop.price_unit
        assert back.price == prop.price
        assert back.is_verified == prop.is_verified


@given(
    st.integers(min_value=0, max_value=10_000_000),
    st.sampled_from(["daily", "monthly", "yearly"]),
)
def test_annual_price_matches_unit_price_within_rounding(annual, term):
    p = ad_to_property(make_ad(price=str(annual), payment_term=term))
    per_year = {"day": 365, "month": 12, "year": 1}[p.price_unit]

    assert abs(annualize(p.price, p.price_unit) - p.annual_price) <= per_year / 2
