# tests/test_gateway_contract.py
import pytest

from sirdab.adapters.memory_repo import InMemoryListingGateway
from sirdab.adapters.sql_repo import SqlListingGateway
from sirdab.domain.ports import ListingGateway


@pytest.fixture(params=["memory", "sql"])
def gateway(request, tmp_path):
    if request.param == "memory":
        return InMemoryListingGateway()
    return SqlListingGateway(f"sqlite:///{tmp_path}/contract.db")


def _ad_data(title):
    return {
        "slug": "c" * 21,
        "title": title,
        "description": "Contract test listing.",
        "city": "Riyadh",
        "price": "90000",
        "payment_term": "yearly",
        "area_in_m2": "150",
        "type": "Dry warehouse",
    }


def test_both_backends_implement_the_port(gateway):
    assert ListingGateway in type(gateway).__mro__


def test_ads_by_user_come_back_in_creation_order(gateway):
    titles = ["First", "Second", "Third"]
    for t in titles:
        gateway.create_ad("owner-1", _ad_data(t))
    gateway.create_ad("owner-2", _ad_data("Other"))

    ads = gateway.list_ads_by_user("owner-1")

    assert [a.title for a in ads] == titles
    assert [a.id for a in ads] == sorted(a.id for a in ads)
