# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from sirdab.adapters.config import AppConfig
from sirdab.adapters.identity import MockIdentityProvider
from sirdab.adapters.memory_repo import InMemoryListingGateway
from sirdab.api.http import create_app


@pytest.fixture
def app_config():
    return AppConfig(ADMIN_USER_IDS="mock_user_admin", PLATFORM_FEE_RATE=0.05, SITE_URL="https://sirdab.test/")


@pytest.fixture
def gateway():
    return InMemoryListingGateway()


@pytest.fixture
def client(gateway, app_config):
    # fresh store per test; ads/visits/bookings are mutable state
    app = create_app(gateway=gateway, identity=MockIdentityProvider(), cfg=app_config)
    return TestClient(app)
