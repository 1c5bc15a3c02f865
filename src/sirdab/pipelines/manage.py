# src/sirdab/pipelines/manage.py
"""Operator tasks behind `entrypoints/cli/manage.py`."""
from __future__ import annotations

from pathlib import Path

from loguru import logger

from sirdab.adapters import fixtures
from sirdab.adapters.sql_repo import SqlListingGateway
from sirdab.domain.records import City
from sirdab.domain.reconcile import property_to_ad
from sirdab.services import seo


def init_db(db_uri: str) -> SqlListingGateway:
    """Create tables (idempotent) and seed the city list when empty."""
    gateway = SqlListingGateway(db_uri)
    logger.info("Database ready", db_uri=db_uri.split("@")[-1], cities=len(gateway.list_cities()))
    return gateway


def seed_fixtures(db_uri: str, owner_id: str | None = None) -> int:
    """
    Copy the fixture listings into the ads table, keeping their ids.
    Re-running skips rows that already exist.
    """
    gateway = init_db(db_uri)
    props = fixtures.load_properties()
    ads = [property_to_ad(p, user_id=owner_id) if owner_id else property_to_ad(p) for p in props]
    written = gateway.import_ads(ads)
    logger.info("Fixture ads seeded", written=written, skipped=len(ads) - written)
    return written


def export_sitemap(db_uri: str, site_url: str, out_dir: Path) -> list[Path]:
    """Write robots.txt, sitemap.xml and sitemap-0.xml for static hosting."""
    gateway = SqlListingGateway(db_uri)
    out_dir.mkdir(parents=True, exist_ok=True)

    files = {
        "robots.txt": seo.robots_txt(site_url),
        "sitemap.xml": seo.sitemap_index(site_url),
        "sitemap-0.xml": seo.sitemap_urls(site_url, gateway.list_public_ads(), gateway.list_cities()),
    }
    written: list[Path] = []
    for name, body in files.items():
        path = out_dir / name
        path.write_text(body, encoding="utf-8")
        written.append(path)

    logger.info("Sitemap exported", out_dir=str(out_dir), files=[p.name for p in written])
    return written


def list_cities(db_uri: str | None = None) -> list[City]:
    if db_uri is None:
        return fixtures.load_cities()
    return SqlListingGateway(db_uri).list_cities()
