# tests/test_api_errors.py
from fastapi.testclient import TestClient

from sirdab.adapters.identity import IdentityProviderError
from sirdab.adapters.memory_repo import InMemoryListingGateway
from sirdab.api.http import create_app


class _BrokenGateway(InMemoryListingGateway):
    def list_properties(self):
        raise RuntimeError("db exploded")


class _DownIdentity:
    def verify(self, token):
        raise IdentityProviderError("identity provider HTTP 503")


def test_unexpected_error_is_generic_500(app_config):
    app = create_app(gateway=_BrokenGateway(), identity=_DownIdentity(), cfg=app_config)
    client = TestClient(app, raise_server_exceptions=False)

    r = client.get("/api/properties")
    assert r.status_code == 500
    assert r.json() == {"detail": "Internal Server Error"}
    assert "exploded" not in r.text


def test_identity_outage_is_500_not_401(app_config):
    app = create_app(gateway=InMemoryListingGateway(), identity=_DownIdentity(), cfg=app_config)
    client = TestClient(app, raise_server_exceptions=False)

    r = client.get("/api/my-ads", headers={"Authorization": "Bearer anything"})
    assert r.status_code == 500


def test_validation_errors_are_400(client):
    r = client.get("/api/public/ads/not-a-number")
    assert r.status_code == 400
    assert isinstance(r.json()["detail"], list)
