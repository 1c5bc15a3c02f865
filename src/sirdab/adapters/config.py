# src/sirdab/adapters/config.py
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    # App & logging
    ENV: str = Field(default="dev")
    LOG_LEVEL: str = Field(default="INFO")

    # persistence
    STORAGE_BACKEND: Literal["memory", "sql"] = Field(default="memory")
    DB_URI: str = Field(default="sqlite:///sirdab.db")
    DB_ECHO: bool = Field(default=False)

    # -----------------------------
    # Identity provider
    # -----------------------------
    IDENTITY_PROVIDER: Literal["mock", "supabase"] = Field(default="mock")
    SUPABASE_URL: str | None = Field(default=None)
    SUPABASE_ANON_KEY: str | None = Field(default=None)
    IDENTITY_TIMEOUT_S: float = Field(default=10.0)

    # comma-separated user ids allowed on /api/admin
    ADMIN_USER_IDS: str = Field(default="")

    # -----------------------------
    # Public site / SEO
    # -----------------------------
    SITE_URL: str = Field(default="https://sirdab.co")
    CORS_ALLOW_ORIGINS: str = Field(default="*")

    # -----------------------------
    # Bookings & browsing
    # -----------------------------
    PLATFORM_FEE_RATE: float = Field(default=0.05)
    MAX_PAGE_SIZE: int = Field(default=100)

    model_config = SettingsConfigDict(
        env_prefix="SIRDAB_",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("PLATFORM_FEE_RATE", mode="before")
    @classmethod
    def _to_non_negative_fraction(cls, v: Any) -> Any:
        if v is None:
            return v
        if isinstance(v, str):
            v = v.strip().replace("%", "")
        try:
            f = float(v)
        except Exception as err:
            raise ValueError("rate must be numeric or percent-like") from err
        if f > 1.0:
            f = f / 100.0
        if f < 0:
            raise ValueError("rate must be non-negative")
        return f

    @field_validator("MAX_PAGE_SIZE", mode="before")
    @classmethod
    def _page_size_positive(cls, v: Any) -> Any:
        n = int(v)
        if n <= 0:
            raise ValueError("MAX_PAGE_SIZE must be > 0")
        return n

    @field_validator("SITE_URL", mode="after")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    def admin_ids(self) -> set[str]:
        return {s.strip() for s in self.ADMIN_USER_IDS.split(",") if s.strip()}

    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ALLOW_ORIGINS.split(",") if o.strip()]


config = AppConfig()
