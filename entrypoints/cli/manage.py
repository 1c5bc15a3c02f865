from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from sirdab.adapters.config import config
from sirdab.pipelines.manage import export_sitemap, init_db, list_cities, seed_fixtures

app = typer.Typer(help="Sirdab operator tasks (database, fixtures, SEO artifacts).")


@app.command("init-db")
def init_db_cmd(
    db_uri: str = typer.Option(config.DB_URI, help="SQLAlchemy database URI"),
) -> None:
    """
    Create tables and seed the city list.
    """
    init_db(db_uri)


@app.command("seed-fixtures")
def seed_fixtures_cmd(
    db_uri: str = typer.Option(config.DB_URI, help="SQLAlchemy database URI"),
    owner_id: Optional[str] = typer.Option(None, help="User id to own the seeded ads (default: nil UUID)"),
) -> None:
    """
    Load the demo listings into the ads table.
    """
    written = seed_fixtures(db_uri, owner_id=owner_id)
    typer.echo(f"seeded {written} ads")


@app.command("export-sitemap")
def export_sitemap_cmd(
    out_dir: Path = typer.Option(Path("dist/public"), help="Directory to write robots.txt and sitemaps into"),
    db_uri: str = typer.Option(config.DB_URI, help="SQLAlchemy database URI"),
    site_url: str = typer.Option(config.SITE_URL, help="Public site origin"),
) -> None:
    """
    Write robots.txt, sitemap.xml and sitemap-0.xml.
    """
    for path in export_sitemap(db_uri, site_url.rstrip("/"), out_dir):
        typer.echo(str(path))


@app.command("list-cities")
def list_cities_cmd(
    db_uri: Optional[str] = typer.Option(None, help="Read from this database instead of the built-in list"),
) -> None:
    for c in list_cities(db_uri):
        typer.echo(f"{c.id:>3}  {c.slug:<16} {c.name_en:<16} {c.name_ar}")


if __name__ == "__main__":
    app()
