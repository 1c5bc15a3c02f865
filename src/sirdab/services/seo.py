# src/sirdab/services/seo.py
"""robots.txt and XML sitemaps for the public site."""
from __future__ import annotations

from datetime import date
from typing import Iterable
from xml.sax.saxutils import escape

from sirdab.domain.listing import Ad
from sirdab.domain.records import City

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"

# (path, changefreq, priority)
STATIC_PAGES: list[tuple[str, str, str]] = [
    ("/", "daily", "1.0"),
    ("/properties", "daily", "0.9"),
    ("/privacy", "yearly", "0.3"),
    ("/terms", "yearly", "0.3"),
]

DISALLOWED_PATHS = ["/api/", "/admin", "/dashboard", "/my-ads", "/ads/new", "/auth"]


def robots_txt(site_url: str) -> str:
    lines = ["User-agent: *", "Allow: /"]
    lines += [f"Disallow: {p}" for p in DISALLOWED_PATHS]
    lines += ["", f"Sitemap: {site_url}/sitemap.xml", ""]
    return "\n".join(lines)


def sitemap_index(site_url: str, today: date | None = None) -> str:
    lastmod = (today or date.today()).isoformat()
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<sitemapindex xmlns="{SITEMAP_NS}">\n'
        f"  <sitemap><loc>{escape(site_url)}/sitemap-0.xml</loc><lastmod>{lastmod}</lastmod></sitemap>\n"
        "</sitemapindex>\n"
    )


def _url(loc: str, changefreq: str, priority: str, lastmod: str | None = None) -> str:
    parts = [f"<loc>{escape(loc)}</loc>"]
    if lastmod:
        parts.append(f"<lastmod>{lastmod}</lastmod>")
    parts.append(f"<changefreq>{changefreq}</changefreq>")
    parts.append(f"<priority>{priority}</priority>")
    return "  <url>" + "".join(parts) + "</url>"


def sitemap_urls(site_url: str, ads: Iterable[Ad], cities: Iterable[City]) -> str:
    """Static pages, one entry per public ad, one per active city region page."""
    entries = [_url(f"{site_url}{path}", freq, prio) for path, freq, prio in STATIC_PAGES]

    for ad in ads:
        if not ad.is_public:
            continue
        entries.append(_url(f"{site_url}/property/{ad.id}", "weekly", "0.8", ad.created_at.date().isoformat()))

    for c in cities:
        if c.is_active:
            entries.append(_url(f"{site_url}/ads/sa/{c.slug}", "daily", "0.7"))

    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<urlset xmlns="{SITEMAP_NS}">\n'
        + "\n".join(entries)
        + "\n</urlset>\n"
    )
