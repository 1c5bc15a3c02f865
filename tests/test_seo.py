# tests/test_seo.py
from xml.etree import ElementTree

from sirdab.services.seo import SITEMAP_NS, robots_txt
from tests.fixtures.auth import ALICE
from tests.fixtures.ads import ad_payload

NS = {"sm": SITEMAP_NS}


def test_robots_points_at_sitemap():
    text = robots_txt("https://sirdab.test")
    assert "User-agent: *" in text
    assert "Disallow: /api/" in text
    assert "Sitemap: https://sirdab.test/sitemap.xml" in text


def test_robots_endpoint_uses_site_url(client):
    r = client.get("/robots.txt")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/plain")
    # trailing slash stripped by config
    assert "Sitemap: https://sirdab.test/sitemap.xml" in r.text


def test_sitemap_index(client):
    r = client.get("/sitemap.xml")
    assert r.status_code == 200
    assert "xml" in r.headers["content-type"]

    root = ElementTree.fromstring(r.content)
    locs = [e.text for e in root.findall("sm:sitemap/sm:loc", NS)]
    assert locs == ["https://sirdab.test/sitemap-0.xml"]


def test_sitemap_lists_public_ads_and_regions(client):
    draft = client.post("/api/ads", json=ad_payload(published=False), headers=ALICE).json()

    r = client.get("/sitemap-0.xml")
    root = ElementTree.fromstring(r.content)
    locs = {e.text for e in root.findall("sm:url/sm:loc", NS)}

    assert "https://sirdab.test/" in locs
    assert "https://sirdab.test/property/1" in locs
    assert "https://sirdab.test/ads/sa/khamis-mushait" in locs
    assert f"https://sirdab.test/property/{draft['id']}" not in locs
