# tests/test_config.py
import pytest
from pydantic import ValidationError

from sirdab.adapters.config import AppConfig


def test_fee_rate_accepts_percent_like_values():
    assert AppConfig(PLATFORM_FEE_RATE="5%").PLATFORM_FEE_RATE == pytest.approx(0.05)
    assert AppConfig(PLATFORM_FEE_RATE=7.5).PLATFORM_FEE_RATE == pytest.approx(0.075)
    assert AppConfig(PLATFORM_FEE_RATE="0.1").PLATFORM_FEE_RATE == pytest.approx(0.1)


def test_fee_rate_rejects_garbage():
    with pytest.raises(ValidationError):
        AppConfig(PLATFORM_FEE_RATE="cheap")
    with pytest.raises(ValidationError):
        AppConfig(PLATFORM_FEE_RATE=-0.1)


def test_env_prefix(monkeypatch):
    monkeypatch.setenv("SIRDAB_STORAGE_BACKEND", "sql")
    monkeypatch.setenv("SIRDAB_ADMIN_USER_IDS", "a, b ,,c")

    cfg = AppConfig()
    assert cfg.STORAGE_BACKEND == "sql"
    assert cfg.admin_ids() == {"a", "b", "c"}


def test_list_settings_split_on_commas():
    cfg = AppConfig(CORS_ALLOW_ORIGINS="https://a.sa, https://b.sa", SITE_URL="https://sirdab.co/")
    assert cfg.cors_origins() == ["https://a.sa", "https://b.sa"]
    assert cfg.SITE_URL == "https://sirdab.co"


def test_page_size_must_be_positive():
    with pytest.raises(ValidationError):
        AppConfig(MAX_PAGE_SIZE=0)
