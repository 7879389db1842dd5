"""
Shared test fixtures for league-table.

Provides:
- table_payload: two-team OpenLigaDB response body
- fetcher: SeasonFetcher with a fixed test endpoint
- client: FastAPI TestClient with the fetcher dependency overridden
"""

import os

# Keep tests off the real API and quiet; must be set before any league_table imports.
os.environ["API_BASE_URL"] = "https://api.test/getbltable/bl1/"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest

from league_table.services.standings_service import FetcherConfig, SeasonFetcher

TABLE_PAYLOAD = [
    {
        "TeamInfoId": 40,
        "TeamName": "A",
        "ShortName": "A",
        "TeamIconUrl": "a.png",
        "Points": 32,
        "OpponentGoals": 20,
        "Goals": 40,
        "Matches": 15,
        "Won": 10,
        "Lost": 3,
        "Draw": 2,
        "GoalDiff": 20,
    },
    {
        "TeamInfoId": 7,
        "TeamName": "B",
        "ShortName": "B",
        "TeamIconUrl": "b.png",
        "Points": 28,
        "OpponentGoals": 25,
        "Goals": 35,
        "Matches": 15,
        "Won": 8,
        "Lost": 3,
        "Draw": 4,
        "GoalDiff": 10,
    },
]

PAGE_HTML = """
<html>
<body>
<table>
  <thead><tr><th>Platz</th></tr></thead>
  <tbody><tr><td>stale</td></tr></tbody>
</table>
</body>
</html>
"""


@pytest.fixture
def table_payload():
    return [dict(record) for record in TABLE_PAYLOAD]


@pytest.fixture
def fetcher():
    return SeasonFetcher(FetcherConfig(base_url="https://api.test/table/", timeout=5))


@pytest.fixture
def client(fetcher):
    """FastAPI TestClient with the fetcher dependency overridden."""
    from fastapi.testclient import TestClient
    from league_table.main import app
    from league_table.services.standings_service import get_fetcher

    app.dependency_overrides[get_fetcher] = lambda: fetcher
    with TestClient(app, raise_server_exceptions=False) as tc:
        yield tc
    app.dependency_overrides.clear()


@pytest.fixture
def page_html():
    return PAGE_HTML
