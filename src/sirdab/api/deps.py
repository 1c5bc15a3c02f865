# src/sirdab/api/deps.py
from __future__ import annotations

from fastapi import Depends, HTTPException, Query, Request

from sirdab.adapters.config import AppConfig
from sirdab.domain.filters import PropertyFilters
from sirdab.domain.listing import Category, Purpose
from sirdab.domain.ports import AuthUser, IdentityProvider, ListingGateway


def get_gateway(request: Request) -> ListingGateway:
    return request.app.state.gateway


def get_identity(request: Request) -> IdentityProvider:
    return request.app.state.identity


def get_config(request: Request) -> AppConfig:
    return request.app.state.config


def _bearer_token(request: Request) -> str | None:
    header = request.headers.get("Authorization") or ""
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def optional_user(
    request: Request,
    identity: IdentityProvider = Depends(get_identity),
) -> AuthUser | None:
    token = _bearer_token(request)
    if token is None:
        return None
    return identity.verify(token)


def current_user(
    request: Request,
    identity: IdentityProvider = Depends(get_identity),
) -> AuthUser:
    token = _bearer_token(request)
    if token is None:
        raise HTTPException(status_code=401, detail="missing bearer token")
    user = identity.verify(token)
    if user is None:
        raise HTTPException(status_code=401, detail="invalid or expired token")
    return user


def is_admin(user: AuthUser | None, cfg: AppConfig) -> bool:
    return user is not None and user.id in cfg.admin_ids()


def require_admin(
    user: AuthUser = Depends(current_user),
    cfg: AppConfig = Depends(get_config),
) -> AuthUser:
    if not is_admin(user, cfg):
        raise HTTPException(status_code=403, detail="admin access required")
    return user


def property_filters(
    category: Category | None = Query(None),
    sub_type: str | None = Query(None, alias="subType"),
    purpose: Purpose | None = Query(None),
    city: str | None = Query(None),
    district: str | None = Query(None),
    min_price: float | None = Query(None, alias="minPrice"),
    max_price: float | None = Query(None, alias="maxPrice"),
    min_size: float | None = Query(None, alias="minSize"),
    max_size: float | None = Query(None, alias="maxSize"),
    verified: bool | None = Query(None),
    q: str | None = Query(None, description="free-text search"),
) -> PropertyFilters:
    return PropertyFilters(
        category=category,
        sub_type=sub_type or None,
        purpose=purpose,
        city=city or None,
        district=district or None,
        min_price=min_price,
        max_price=max_price,
        min_size=min_size,
        max_size=max_size,
        # only "verified=true" narrows the result
        is_verified=True if verified else None,
        search_query=q or None,
    )
