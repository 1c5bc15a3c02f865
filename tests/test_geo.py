# tests/test_geo.py
from hypothesis import given
from hypothesis import strategies as st

from sirdab.adapters.fixtures import load_cities
from sirdab.adapters.geo import DEFAULT_CENTER, city_centres, hash_code, map_position

CENTRES = city_centres(load_cities())


def test_hash_code_matches_31_multiplier():
    assert hash_code("") == 0
    assert hash_code("a") == 97
    assert hash_code("ab") == 97 * 31 + 98
    assert hash_code("12") == 49 * 31 + 50


def test_hash_code_wraps_to_signed_32_bits():
    h = hash_code("a much longer property identifier")
    assert -(2**31) <= h < 2**31


def test_unknown_city_uses_default_centre():
    assert map_position("1", "Atlantis", CENTRES) == DEFAULT_CENTER


@given(st.text(min_size=1, max_size=40))
def test_position_is_deterministic_and_near_city(property_id):
    first = map_position(property_id, "Jeddah", CENTRES)
    second = map_position(property_id, "jeddah", CENTRES)

    assert first == second
    lat, lng = first
    assert abs(lat - 21.4858) < 0.15
    assert abs(lng - 39.1925) < 0.15
