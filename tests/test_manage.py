# tests/test_manage.py
from sirdab.adapters.sql_repo import SqlListingGateway
from sirdab.pipelines.manage import export_sitemap, list_cities, seed_fixtures
from sirdab.services.listings import SLUG_PATTERN


def test_seed_fixtures_is_rerunnable(tmp_path):
    uri = f"sqlite:///{tmp_path}/seed.db"

    assert seed_fixtures(uri) == 20
    assert seed_fixtures(uri) == 0

    repo = SqlListingGateway(uri)
    assert len(repo.list_properties()) == 20
    assert repo.get_property("1").annual_price == 300000


def test_seeded_slugs_are_well_formed_and_stable(tmp_path):
    first = f"sqlite:///{tmp_path}/a.db"
    second = f"sqlite:///{tmp_path}/b.db"
    seed_fixtures(first)
    seed_fixtures(second)

    slugs = {a.id: a.slug for a in SqlListingGateway(first).list_ads()}
    assert all(SLUG_PATTERN.match(s) for s in slugs.values())
    assert len(set(slugs.values())) == 20
    assert slugs == {a.id: a.slug for a in SqlListingGateway(second).list_ads()}


def test_seed_fixtures_with_owner(tmp_path):
    uri = f"sqlite:///{tmp_path}/owned.db"
    seed_fixtures(uri, owner_id="landlord-1")

    assert len(SqlListingGateway(uri).list_ads_by_user("landlord-1")) == 20


def test_export_sitemap_writes_files(tmp_path):
    uri = f"sqlite:///{tmp_path}/site.db"
    seed_fixtures(uri)

    paths = export_sitemap(uri, "https://sirdab.test", tmp_path / "public")

    assert sorted(p.name for p in paths) == ["robots.txt", "sitemap-0.xml", "sitemap.xml"]
    assert "https://sirdab.test/property/20" in (tmp_path / "public" / "sitemap-0.xml").read_text(encoding="utf-8")


def test_list_cities_without_database():
    assert [c.slug for c in list_cities()][:2] == ["riyadh", "jeddah"]
