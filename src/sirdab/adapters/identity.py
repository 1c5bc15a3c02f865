# src/sirdab/adapters/identity.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import requests

from sirdab.adapters.config import AppConfig
from sirdab.adapters.logging_utils import get_logger
from sirdab.domain.ports import AuthUser, IdentityProvider

log = get_logger("sirdab.identity")

MOCK_TOKEN_PREFIX = "mock_token_"


class IdentityProviderError(RuntimeError):
    pass


class MockIdentityProvider:
    """
    Dev/test provider: `mock_token_<anything>` authenticates as
    `mock_user_<first 9 chars of anything>`. Everything else is rejected.
    """

    def verify(self, token: str) -> AuthUser | None:
        if not token or not token.startswith(MOCK_TOKEN_PREFIX):
            return None
        suffix = token[len(MOCK_TOKEN_PREFIX):]
        if not suffix:
            return None
        return AuthUser(id=f"mock_user_{suffix[:9]}", email=f"{suffix[:9]}@example.com")


@dataclass(frozen=True)
class SupabaseIdentityProvider:
    base_url: str
    api_key: str
    timeout_s: float = 10.0

    def verify(self, token: str) -> AuthUser | None:
        if not token:
            return None

        url = self.base_url.rstrip("/") + "/auth/v1/user"
        headers = {
            "Accept": "application/json",
            "Authorization": f"Bearer {token}",
            "apikey": self.api_key,
        }

        try:
            resp = requests.get(url, headers=headers, timeout=self.timeout_s)
        except requests.RequestException as e:
            raise IdentityProviderError(f"identity provider unreachable: {e!r}") from e

        # expired / forged tokens
        if resp.status_code in (401, 403):
            return None
        if resp.status_code >= 400:
            raise IdentityProviderError(f"identity provider HTTP {resp.status_code}: {resp.text}")

        data: dict[str, Any] = resp.json() or {}
        user_id = data.get("id")
        if not user_id:
            log.warning("identity provider returned no user id")
            return None
        return AuthUser(id=str(user_id), email=data.get("email"), phone=data.get("phone"))


def build_identity_provider(cfg: AppConfig) -> IdentityProvider:
    if cfg.IDENTITY_PROVIDER == "supabase":
        if not cfg.SUPABASE_URL or not cfg.SUPABASE_ANON_KEY:
            raise RuntimeError("SIRDAB_SUPABASE_URL and SIRDAB_SUPABASE_ANON_KEY are required for the supabase provider")
        return SupabaseIdentityProvider(
            base_url=cfg.SUPABASE_URL,
            api_key=cfg.SUPABASE_ANON_KEY,
            timeout_s=cfg.IDENTITY_TIMEOUT_S,
        )
    return MockIdentityProvider()
