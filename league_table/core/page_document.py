"""HTML page helpers: load the page template and locate its table."""

from pathlib import Path
from typing import Optional

from bs4 import BeautifulSoup, Tag

from league_table.core.errors import RenderTargetMissing

TEMPLATE_PATH = Path(__file__).resolve().parent.parent / "templates" / "index.html"


def load_template(path: Optional[Path] = None) -> str:
    return (path or TEMPLATE_PATH).read_text(encoding="utf-8")


def parse_document(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "lxml")


def find_table(document: BeautifulSoup, table_id: Optional[str] = None) -> Tag:
    """Find the page's first ``<table>`` (or ``<table id="...">``)."""
    if table_id:
        table = document.find("table", id=table_id)
    else:
        table = document.find("table")

    if table is None:
        where = f" with id='{table_id}'" if table_id else ""
        raise RenderTargetMissing(f"Could not find table{where} in page")

    assert isinstance(table, Tag)
    return table
